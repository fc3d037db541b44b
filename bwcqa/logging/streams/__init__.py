from .log_appender import LogAppender
from .logger import Logger
from .logger_context import LoggerContext
from .logger_stream import LoggerStream

__all__ = [
    "LogAppender",
    "Logger",
    "LoggerContext",
    "LoggerStream",
]
