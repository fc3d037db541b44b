import logging

import pytest

from bwcqa.expectations import (
    ExceptionSeenExpectation,
    ExpectationRegistry,
    ExpectationsNotMatchedError,
    LogEvent,
    SeenExpectation,
    UnseenExpectation,
)
from bwcqa.logging import LogLevel


@pytest.fixture
def stdlib_logger():
    logger = logging.getLogger("bwcqa.cluster.coordination")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    logger.handlers.clear()
    logger.propagate = True


class TestLogEventFromRecord:
    @pytest.mark.parametrize(
        "levelno,level",
        [
            (logging.CRITICAL, LogLevel.CRITICAL),
            (logging.ERROR, LogLevel.ERROR),
            (logging.WARNING, LogLevel.WARN),
            (logging.INFO, LogLevel.INFO),
            (logging.DEBUG, LogLevel.DEBUG),
            (5, LogLevel.TRACE),
        ],
    )
    def test_levels(self, levelno: int, level: LogLevel):
        record = logging.LogRecord(
            "bwcqa.cluster", levelno, __file__, 1, "node %s joined", ("node-1",), None
        )

        event = LogEvent.from_record(record)

        assert event.level == level
        assert event.logger_name == "bwcqa.cluster"
        assert event.formatted_message == "node node-1 joined"
        assert event.thrown is None

    def test_exc_info_becomes_thrown(self):
        try:
            raise KeyError("shard")

        except KeyError:
            import sys

            record = logging.LogRecord(
                "bwcqa.cluster", logging.ERROR, __file__, 1, "lookup failed", (), sys.exc_info()
            )

        event = LogEvent.from_record(record)

        assert event.thrown is not None
        assert event.thrown.kind == "KeyError"
        assert event.thrown.message == "'shard'"


class TestExpectationHandler:
    def test_feeds_registry(self, stdlib_logger: logging.Logger):
        registry = ExpectationRegistry.create_started()
        registry.register(
            SeenExpectation("joined", "cluster.coordination", LogLevel.INFO, "node-* joined")
        )
        registry.register(
            UnseenExpectation("no errors", "cluster.coordination", LogLevel.ERROR, "*")
        )

        stdlib_logger.addHandler(registry.handler())
        stdlib_logger.info("node-%d joined", 3)

        registry.assert_all()

    def test_reports_unexpected(self, stdlib_logger: logging.Logger):
        registry = ExpectationRegistry.create_started()
        registry.register(
            UnseenExpectation("no errors", "cluster.coordination", LogLevel.ERROR, "*")
        )

        stdlib_logger.addHandler(registry.handler())
        stdlib_logger.error("election failed")

        with pytest.raises(ExpectationsNotMatchedError) as raised:
            registry.assert_all()

        assert raised.value.names == ["no errors"]

    def test_exception_logging(self, stdlib_logger: logging.Logger):
        registry = ExpectationRegistry.create_started()
        registry.register(
            ExceptionSeenExpectation(
                "bad state",
                "cluster.coordination",
                LogLevel.ERROR,
                "publication failed",
                RuntimeError,
                "term mismatch",
            )
        )

        stdlib_logger.addHandler(registry.handler())

        try:
            raise RuntimeError("term mismatch")

        except RuntimeError:
            stdlib_logger.exception("publication failed")

        registry.assert_all()

    def test_handler_level(self, stdlib_logger: logging.Logger):
        registry = ExpectationRegistry.create_started()
        expectation = SeenExpectation(
            "debug", "cluster.coordination", LogLevel.DEBUG, "*"
        )
        registry.register(expectation)

        stdlib_logger.addHandler(registry.handler(level=logging.INFO))
        stdlib_logger.debug("ignored")

        assert expectation.saw is False

    def test_stopped_registry_ignores_records(self, stdlib_logger: logging.Logger):
        registry = ExpectationRegistry()
        expectation = SeenExpectation(
            "joined", "cluster.coordination", LogLevel.INFO, "*"
        )
        registry.register(expectation)

        stdlib_logger.addHandler(registry.handler())
        stdlib_logger.info("node-1 joined")

        assert expectation.saw is False

    def test_records_from_many_threads(self, stdlib_logger: logging.Logger):
        from concurrent.futures import ThreadPoolExecutor

        registry = ExpectationRegistry.create_started()
        expectations = [
            SeenExpectation(
                f"node-{index}", "cluster.coordination", LogLevel.INFO, f"node-{index} joined"
            )
            for index in range(8)
        ]
        for expectation in expectations:
            registry.register(expectation)

        handler = registry.handler()
        assert handler.lock is not None

        stdlib_logger.addHandler(handler)

        with ThreadPoolExecutor(max_workers=4) as executor:
            list(
                executor.map(
                    lambda index: stdlib_logger.info("node-%d joined", index),
                    range(8),
                )
            )

        registry.assert_all()
