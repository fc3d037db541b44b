from typing import Protocol

from bwcqa.logging.models import Log


class LogAppender(Protocol):
    """Receives every Log put through a LoggerStream it is attached to."""

    def append(self, log: Log, logger_name: str) -> None:
        ...
