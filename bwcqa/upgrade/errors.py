from __future__ import annotations

from dataclasses import dataclass
from typing import List


class InvalidVersionError(ValueError):
    pass


class UpgradeGraphError(ValueError):
    pass


@dataclass(slots=True, frozen=True)
class StepFailure:
    version: str
    task_name: str
    error: str


class UpgradeStepError(AssertionError):
    """Raised with every (version, step) pair that failed in a run."""

    def __init__(self, failures: List[StepFailure]) -> None:
        self.failures = failures

        details = "\n".join(
            f"  - {failure.task_name} (version {failure.version}): {failure.error}"
            for failure in failures
        )

        super().__init__(
            f"{len(failures)} rolling upgrade step(s) failed:\n{details}"
        )
