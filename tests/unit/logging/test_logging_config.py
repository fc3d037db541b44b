import pytest

from bwcqa.env import Env
from bwcqa.logging import LoggingConfig, LogLevel
from bwcqa.logging.config import StreamType


class TestLoggingConfig:
    def test_threshold(self):
        config = LoggingConfig()
        config.update(log_level="warn")

        assert config.level == LogLevel.WARN
        assert config.enabled("bwcqa.index", LogLevel.INFO) is False
        assert config.enabled("bwcqa.index", LogLevel.WARN) is True
        assert config.enabled("bwcqa.index", LogLevel.FATAL) is True

    def test_warning_alias(self):
        config = LoggingConfig()
        config.update(log_level="warning")

        assert config.level == LogLevel.WARN

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            LoggingConfig().update(log_level="loud")

    def test_disable_and_enable(self):
        config = LoggingConfig()
        config.disable("bwcqa.noisy")

        assert config.enabled("bwcqa.noisy", LogLevel.FATAL) is False

        config.enable("bwcqa.noisy")
        assert config.enabled("bwcqa.noisy", LogLevel.FATAL) is True

    def test_update_from_env(self):
        config = LoggingConfig()
        config.update(
            **Env(
                BWCQA_LOG_LEVEL="debug",
                BWCQA_LOG_OUTPUT="stdout",
            ).get_logging_config()
        )

        assert config.level == LogLevel.DEBUG
        assert config.output == StreamType.STDOUT

        config.update(log_output="stderr")
        assert config.output == StreamType.STDERR


class TestLogLevel:
    def test_severity_order(self):
        assert [level.severity for level in LogLevel] == list(range(len(LogLevel)))
        assert LogLevel.TRACE.severity < LogLevel.WARN.severity < LogLevel.FATAL.severity

    @pytest.mark.parametrize(
        "name,level",
        [
            ("trace", LogLevel.TRACE),
            ("Info", LogLevel.INFO),
            ("WARNING", LogLevel.WARN),
            ("fatal", LogLevel.FATAL),
        ],
    )
    def test_to_level(self, name: str, level: LogLevel):
        assert LogLevel.to_level(name) == level

    def test_unknown_name(self):
        assert LogLevel.to_level("verbose") is None
