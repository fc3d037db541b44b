from __future__ import annotations

import asyncio
import datetime
import pathlib
import sys
import threading
from typing import (
    Dict,
    TypeVar,
)

from bwcqa.logging.models import Entry, Log

from .log_appender import LogAppender
from .logger_context import LoggerContext
from .logger_stream import LoggerStream

T = TypeVar('T', bound=Entry)


def _split_path(path: str | None) -> tuple[str | None, str | None]:
    if not path:
        return None, None

    logfile_path = pathlib.Path(path)
    if logfile_path.suffix:
        return logfile_path.name, str(logfile_path.parent.absolute())

    return None, str(logfile_path.absolute())


class Logger:
    """
    Named registry of logger contexts. Each name maps to one
    LoggerStream, so appenders added to a name see everything logged
    under it regardless of which component did the logging.
    """

    def __init__(self) -> None:
        self._contexts: Dict[str, LoggerContext] = {}

    def get_stream(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
    ) -> LoggerStream:
        if name is None:
            name = 'default'

        if self._contexts.get(name) is None:
            self.configure(
                name=name,
                template=template,
                path=path,
            )

        return self._contexts[name].stream

    def configure(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
    ):
        if name is None:
            name = 'default'

        filename, directory = _split_path(path)

        appenders = ()
        if existing := self._contexts.get(name):
            appenders = existing.stream.appenders

        self._contexts[name] = LoggerContext(
            name=name,
            template=template,
            filename=filename,
            directory=directory,
            appenders=appenders,
        )

    def add_appender(self, appender: LogAppender, name: str | None = None):
        self.get_stream(name).add_appender(appender)

    def remove_appender(self, appender: LogAppender, name: str | None = None):
        if name is None:
            name = 'default'

        if context := self._contexts.get(name):
            context.stream.remove_appender(appender)

    def context(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
        nested: bool = False,
    ) -> LoggerContext:
        if name is None:
            name = 'default'

        filename, directory = _split_path(path)

        context = self._contexts.get(name)
        if context is None:
            context = LoggerContext(
                name=name,
                template=template,
                filename=filename,
                directory=directory,
                nested=nested,
            )

            self._contexts[name] = context

        else:
            context.template = template or context.template
            context.filename = filename or context.filename
            context.directory = directory or context.directory
            context.nested = nested

        return context

    async def log(
        self,
        entry: T,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
        error: BaseException | None = None,
    ):
        if name is None:
            name = 'default'

        caller = sys._getframe(1)

        log = Log(
            entry=entry,
            filename=caller.f_code.co_filename,
            function_name=caller.f_code.co_name,
            line_number=caller.f_lineno,
            error=str(error) if error is not None else None,
            error_kind=type(error).__name__ if error is not None else None,
            thread_id=threading.get_native_id(),
            timestamp=datetime.datetime.now(datetime.UTC).isoformat(),
        )

        async with self.context(
            name=name,
            nested=True,
        ) as stream:
            await stream.log(
                log,
                template=template,
                path=path,
            )

    async def close(self):
        if self._contexts:
            await asyncio.gather(*[
                context.stream.close() for context in self._contexts.values()
            ])
