"""
Log event expectations.

Register expectations that a class of log event was (or was not) emitted
during a scenario, feed every observed event through the registry, then
assert all of them at the end of the scenario:

    registry = ExpectationRegistry.create_started()
    registry.register(
        SeenExpectation("joined", "cluster.coordination", LogLevel.INFO, "node-* joined")
    )

    with registry.capture(stream):
        ...

    registry.assert_all_expectations_matched()
"""

from .errors import (
    ExpectationError as ExpectationError,
    ExpectationsNotMatchedError as ExpectationsNotMatchedError,
    MalformedExpectationError as MalformedExpectationError,
)
from .expectations import (
    EXPECTATION_TYPES as EXPECTATION_TYPES,
    Expectation as Expectation,
    ExceptionSeenExpectation as ExceptionSeenExpectation,
    PatternSeenExpectation as PatternSeenExpectation,
    SeenExpectation as SeenExpectation,
    UnseenExpectation as UnseenExpectation,
)
from .logger_names import qualify_logger_name as qualify_logger_name
from .models import (
    ExpectationKind as ExpectationKind,
    ExpectationViolation as ExpectationViolation,
    LogEvent as LogEvent,
    Thrown as Thrown,
    ViolationReason as ViolationReason,
)
from .registry import (
    ExpectationHandler as ExpectationHandler,
    ExpectationRegistry as ExpectationRegistry,
)
from .simple_match import (
    is_simple_match_pattern as is_simple_match_pattern,
    match_message as match_message,
    simple_match as simple_match,
)
