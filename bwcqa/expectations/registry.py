from __future__ import annotations

import contextlib
import logging
import threading
from typing import Iterator, List, Tuple

from bwcqa.logging.models import Log
from bwcqa.logging.streams import LoggerStream

from .errors import ExpectationsNotMatchedError, MalformedExpectationError
from .expectations import EXPECTATION_TYPES, Expectation
from .models import ExpectationViolation, LogEvent


class ExpectationRegistry:
    """
    Collects log event expectations and matches every ingested event
    against all of them.

    Registration swaps in a new tuple under a lock while ingestion walks
    whichever tuple it loaded, so expectations can be added while events
    are being delivered from other threads. An expectation registered
    after an ingest call started is not applied to that event.
    """

    def __init__(self) -> None:
        self._expectations: Tuple[Expectation, ...] = ()
        self._register_lock = threading.Lock()
        self._started = threading.Event()

    @classmethod
    def create_started(cls) -> ExpectationRegistry:
        registry = cls()
        registry.start()
        return registry

    @property
    def started(self) -> bool:
        return self._started.is_set()

    @property
    def expectations(self) -> Tuple[Expectation, ...]:
        return self._expectations

    def start(self):
        self._started.set()

    def stop(self):
        self._started.clear()

    def register(self, expectation: Expectation):
        if not isinstance(expectation, EXPECTATION_TYPES):
            raise MalformedExpectationError(
                f"Cannot register {type(expectation).__name__} as a log expectation"
            )

        with self._register_lock:
            self._expectations = (*self._expectations, expectation)

    add_expectation = register

    def ingest(self, event: LogEvent):
        for expectation in self._expectations:
            expectation.match(event)

    def append(self, log: Log, logger_name: str):
        if not self._started.is_set():
            return

        self.ingest(LogEvent.from_log(log, logger_name))

    def attach(self, stream: LoggerStream):
        stream.add_appender(self)

    def detach(self, stream: LoggerStream):
        stream.remove_appender(self)

    @contextlib.contextmanager
    def capture(self, *streams: LoggerStream) -> Iterator[ExpectationRegistry]:
        self.start()

        for stream in streams:
            self.attach(stream)

        try:
            yield self

        finally:
            for stream in streams:
                self.detach(stream)

            self.stop()

    def handler(self, level: int = logging.NOTSET) -> ExpectationHandler:
        return ExpectationHandler(self, level=level)

    def violations(self) -> List[ExpectationViolation]:
        violations: List[ExpectationViolation] = []

        for expectation in self._expectations:
            if violation := expectation.violation():
                violations.append(violation)

        return violations

    def assert_all(self):
        violations = self.violations()
        if violations:
            raise ExpectationsNotMatchedError(violations)

    assert_all_expectations_matched = assert_all


class ExpectationHandler(logging.Handler):
    """Feeds standard library log records into an ExpectationRegistry."""

    def __init__(
        self,
        registry: ExpectationRegistry,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level=level)
        self.registry = registry

    def emit(self, record: logging.LogRecord):
        if not self.registry.started:
            return

        try:
            self.registry.ingest(LogEvent.from_record(record))

        except Exception:
            self.handleError(record)
