from typing import List

from .models import ExpectationViolation


class ExpectationError(Exception):
    pass


class MalformedExpectationError(ExpectationError, ValueError):
    pass


class ExpectationsNotMatchedError(AssertionError):
    """Raised once with every violated expectation of a scenario."""

    def __init__(self, violations: List[ExpectationViolation]) -> None:
        self.violations = violations

        details = "\n".join(
            f"  - {violation.describe()}" for violation in violations
        )

        super().__init__(
            f"{len(violations)} log expectation(s) not matched:\n{details}"
        )

    @property
    def names(self) -> List[str]:
        return [violation.name for violation in self.violations]
