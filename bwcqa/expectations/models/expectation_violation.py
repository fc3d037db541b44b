from dataclasses import dataclass
from enum import Enum

from .expectation_kind import ExpectationKind


class ViolationReason(Enum):
    MISSING = "MISSING"
    UNEXPECTED = "UNEXPECTED"


@dataclass(slots=True, frozen=True)
class ExpectationViolation:
    name: str
    kind: ExpectationKind
    reason: ViolationReason

    def describe(self) -> str:
        if self.reason == ViolationReason.UNEXPECTED:
            return f"expected not to see {self.name} but did"

        return f"expected to see {self.name} but did not"
