from .models import Entry, Log, LogLevel, LogLevelName
from .config import LoggingConfig
from .streams import LogAppender, Logger, LoggerStream

__all__ = [
    "Entry",
    "Log",
    "LogLevel",
    "LogLevelName",
    "LoggingConfig",
    "LogAppender",
    "Logger",
    "LoggerStream",
]
