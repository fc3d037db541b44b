from .expectation_kind import ExpectationKind
from .expectation_violation import ExpectationViolation, ViolationReason
from .log_event import LogEvent
from .thrown import Thrown

__all__ = [
    "ExpectationKind",
    "ExpectationViolation",
    "ViolationReason",
    "LogEvent",
    "Thrown",
]
