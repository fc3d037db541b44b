"""
Release version value type.

Versions are `major.minor.revision` with an optional pre-release
qualifier (`6.3.0-SNAPSHOT`, `7.0.0-beta1`). A qualified version sorts
before its release, but `before()`/`on_or_after()` only compare the
numeric part, so a snapshot of a release is treated as that release when
checking compatibility floors.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from .errors import InvalidVersionError


_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)(?:-([0-9A-Za-z.\-]+))?$")


@functools.total_ordering
@dataclass(slots=True, frozen=True)
class Version:
    major: int
    minor: int
    revision: int
    qualifier: str | None = None

    @classmethod
    def parse(cls, value: str | Version) -> Version:
        if isinstance(value, Version):
            return value

        if not isinstance(value, str):
            raise InvalidVersionError(f"Cannot parse version from {value!r}")

        match = _VERSION_PATTERN.match(value)
        if match is None:
            raise InvalidVersionError(f"Invalid version '{value}'")

        major, minor, revision, qualifier = match.groups()

        return cls(
            major=int(major),
            minor=int(minor),
            revision=int(revision),
            qualifier=qualifier,
        )

    @property
    def is_snapshot(self) -> bool:
        return self.qualifier is not None and self.qualifier.endswith("SNAPSHOT")

    @property
    def numeric(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.revision)

    def without_qualifier(self) -> Version:
        return Version(
            major=self.major,
            minor=self.minor,
            revision=self.revision,
        )

    def before(self, other: str | Version) -> bool:
        return self.numeric < Version.parse(other).numeric

    def on_or_after(self, other: str | Version) -> bool:
        return not self.before(other)

    def _sort_key(self):
        # Release sorts after any of its pre-releases.
        return (
            self.numeric,
            self.qualifier is None,
            self.qualifier or "",
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.revision}"
        if self.qualifier:
            return f"{version}-{self.qualifier}"

        return version
