from __future__ import annotations

import logging
from enum import Enum
from typing import Literal

LogLevelName = Literal[
    'trace',
    'debug',
    'info',
    'warn',
    'warning',
    'error',
    'critical',
    'fatal',
]


class LogLevel(Enum):
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    FATAL = "FATAL"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @classmethod
    def to_level(cls, level_name: LogLevelName | str) -> LogLevel | None:
        name = level_name.upper()
        if name == "WARNING":
            return LogLevel.WARN

        return cls.__members__.get(name)

    @classmethod
    def from_levelno(cls, levelno: int) -> LogLevel:
        """Map a standard library numeric level onto the nearest LogLevel at or below it."""
        if levelno >= logging.CRITICAL:
            return LogLevel.CRITICAL

        elif levelno >= logging.ERROR:
            return LogLevel.ERROR

        elif levelno >= logging.WARNING:
            return LogLevel.WARN

        elif levelno >= logging.INFO:
            return LogLevel.INFO

        elif levelno >= logging.DEBUG:
            return LogLevel.DEBUG

        return LogLevel.TRACE


_SEVERITY = {
    level: severity for severity, level in enumerate(LogLevel)
}
