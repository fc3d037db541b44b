"""
Log event expectations.

Each variant carries its own match predicate and pass condition. Matched
state is a latch backed by threading.Event, so producers on any thread
can set it and the asserting thread observes it without extra locking.
"""

import re
import threading
from dataclasses import InitVar, dataclass, field

from bwcqa.logging.models import LogLevel

from .errors import MalformedExpectationError
from .logger_names import qualify_logger_name
from .models import (
    ExpectationKind,
    ExpectationViolation,
    LogEvent,
    ViolationReason,
)
from .simple_match import match_message


def _validate(name: str, logger: str, level: LogLevel, message: str):
    if not isinstance(name, str) or not name:
        raise MalformedExpectationError("Expectation requires a name")

    if not isinstance(logger, str) or not logger:
        raise MalformedExpectationError(
            f"Expectation '{name}' requires a logger name"
        )

    if not isinstance(level, LogLevel):
        raise MalformedExpectationError(
            f"Expectation '{name}' requires a LogLevel, got {level!r}"
        )

    if not isinstance(message, str):
        raise MalformedExpectationError(
            f"Expectation '{name}' requires a message pattern string"
        )


def _matches_event(
    logger: str,
    level: LogLevel,
    message: str,
    event: LogEvent,
) -> bool:
    return (
        event.level == level
        and event.logger_name == logger
        and match_message(message, event.formatted_message)
    )


class _Latch:
    __slots__ = ()

    @property
    def saw(self) -> bool:
        return self._saw.is_set()

    def match(self, event: LogEvent) -> bool:
        if self.matches(event):
            self._saw.set()
            return True

        return False


@dataclass(slots=True, eq=False)
class SeenExpectation(_Latch):
    name: str
    logger: str
    level: LogLevel
    message: str
    common_prefix: InitVar[str | None] = None
    root_prefix: InitVar[str | None] = None
    kind: ExpectationKind = field(default=ExpectationKind.SEEN, init=False)
    _saw: threading.Event = field(default_factory=threading.Event, init=False, repr=False)

    def __post_init__(self, common_prefix: str | None, root_prefix: str | None):
        _validate(self.name, self.logger, self.level, self.message)
        self.logger = qualify_logger_name(
            self.logger,
            root_prefix=root_prefix,
            common_prefix=common_prefix,
        )

    def matches(self, event: LogEvent) -> bool:
        return _matches_event(self.logger, self.level, self.message, event)

    def violation(self) -> ExpectationViolation | None:
        if self.saw:
            return None

        return ExpectationViolation(
            name=self.name,
            kind=self.kind,
            reason=ViolationReason.MISSING,
        )


@dataclass(slots=True, eq=False)
class UnseenExpectation(_Latch):
    name: str
    logger: str
    level: LogLevel
    message: str
    common_prefix: InitVar[str | None] = None
    root_prefix: InitVar[str | None] = None
    kind: ExpectationKind = field(default=ExpectationKind.UNSEEN, init=False)
    _saw: threading.Event = field(default_factory=threading.Event, init=False, repr=False)

    def __post_init__(self, common_prefix: str | None, root_prefix: str | None):
        _validate(self.name, self.logger, self.level, self.message)
        self.logger = qualify_logger_name(
            self.logger,
            root_prefix=root_prefix,
            common_prefix=common_prefix,
        )

    def matches(self, event: LogEvent) -> bool:
        return _matches_event(self.logger, self.level, self.message, event)

    def violation(self) -> ExpectationViolation | None:
        if not self.saw:
            return None

        return ExpectationViolation(
            name=self.name,
            kind=self.kind,
            reason=ViolationReason.UNEXPECTED,
        )


@dataclass(slots=True, eq=False)
class ExceptionSeenExpectation(_Latch):
    name: str
    logger: str
    level: LogLevel
    message: str
    exception_kind: str | type[BaseException]
    exception_message: str
    common_prefix: InitVar[str | None] = None
    root_prefix: InitVar[str | None] = None
    kind: ExpectationKind = field(default=ExpectationKind.EXCEPTION_SEEN, init=False)
    _saw: threading.Event = field(default_factory=threading.Event, init=False, repr=False)

    def __post_init__(self, common_prefix: str | None, root_prefix: str | None):
        _validate(self.name, self.logger, self.level, self.message)

        if isinstance(self.exception_kind, type) and issubclass(
            self.exception_kind, BaseException
        ):
            self.exception_kind = self.exception_kind.__name__

        if not isinstance(self.exception_kind, str) or not self.exception_kind:
            raise MalformedExpectationError(
                f"Expectation '{self.name}' requires an exception kind"
            )

        if not isinstance(self.exception_message, str):
            raise MalformedExpectationError(
                f"Expectation '{self.name}' requires an exception message string"
            )

        self.logger = qualify_logger_name(
            self.logger,
            root_prefix=root_prefix,
            common_prefix=common_prefix,
        )

    def matches(self, event: LogEvent) -> bool:
        thrown = event.thrown

        return (
            thrown is not None
            and thrown.kind == self.exception_kind
            and thrown.message == self.exception_message
            and _matches_event(self.logger, self.level, self.message, event)
        )

    def violation(self) -> ExpectationViolation | None:
        if self.saw:
            return None

        return ExpectationViolation(
            name=self.name,
            kind=self.kind,
            reason=ViolationReason.MISSING,
        )


@dataclass(slots=True, eq=False)
class PatternSeenExpectation(_Latch):
    name: str
    logger: str
    level: LogLevel
    pattern: str
    kind: ExpectationKind = field(default=ExpectationKind.PATTERN_SEEN, init=False)
    _compiled: re.Pattern = field(init=False, repr=False)
    _saw: threading.Event = field(default_factory=threading.Event, init=False, repr=False)

    def __post_init__(self):
        _validate(self.name, self.logger, self.level, self.pattern)

        try:
            self._compiled = re.compile(self.pattern)

        except re.error as err:
            raise MalformedExpectationError(
                f"Expectation '{self.name}' has an invalid pattern '{self.pattern}': {err}"
            ) from err

    def matches(self, event: LogEvent) -> bool:
        return (
            event.level == self.level
            and event.logger_name == self.logger
            and self._compiled.fullmatch(event.formatted_message) is not None
        )

    def violation(self) -> ExpectationViolation | None:
        if self.saw:
            return None

        return ExpectationViolation(
            name=self.name,
            kind=self.kind,
            reason=ViolationReason.MISSING,
        )


Expectation = (
    SeenExpectation
    | UnseenExpectation
    | ExceptionSeenExpectation
    | PatternSeenExpectation
)

EXPECTATION_TYPES = (
    SeenExpectation,
    UnseenExpectation,
    ExceptionSeenExpectation,
    PatternSeenExpectation,
)
