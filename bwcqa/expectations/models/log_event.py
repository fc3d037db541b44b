from __future__ import annotations

import logging

import msgspec

from bwcqa.logging.models import Log, LogLevel

from .thrown import Thrown


class LogEvent(msgspec.Struct, frozen=True, kw_only=True):
    """
    A single diagnostic event observed from the system under test.

    Events are never mutated once built. `thrown` is only present when
    an exception triggered the log line.
    """

    logger_name: str
    level: LogLevel
    formatted_message: str
    thrown: Thrown | None = None

    @classmethod
    def from_log(cls, log: Log, logger_name: str) -> LogEvent:
        thrown: Thrown | None = None
        if log.error_kind is not None:
            thrown = Thrown(
                kind=log.error_kind,
                message=log.error or "",
            )

        return cls(
            logger_name=logger_name,
            level=log.entry.level,
            formatted_message=log.entry.message or "",
            thrown=thrown,
        )

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> LogEvent:
        thrown: Thrown | None = None
        if record.exc_info and record.exc_info[1] is not None:
            thrown = Thrown.from_exception(record.exc_info[1])

        return cls(
            logger_name=record.name,
            level=LogLevel.from_levelno(record.levelno),
            formatted_message=record.getMessage(),
            thrown=thrown,
        )
