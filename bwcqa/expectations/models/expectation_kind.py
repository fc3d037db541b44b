from enum import Enum


class ExpectationKind(Enum):
    SEEN = "SEEN"
    UNSEEN = "UNSEEN"
    EXCEPTION_SEEN = "EXCEPTION_SEEN"
    PATTERN_SEEN = "PATTERN_SEEN"
