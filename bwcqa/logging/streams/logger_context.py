from typing import Iterable

from .log_appender import LogAppender
from .logger_stream import LoggerStream


class LoggerContext:
    """
    Owns the LoggerStream for one logger name. Entering the context
    opens the stream's default logfile. Leaving it closes the stream
    unless the context is nested inside a longer-lived one.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
        nested: bool = False,
        appenders: Iterable[LogAppender] | None = None,
    ) -> None:
        self.name = name
        self.template = template
        self.filename = filename
        self.directory = directory
        self.nested = nested

        self.stream = LoggerStream(
            name=name,
            template=template,
            filename=filename,
            directory=directory,
        )

        for appender in appenders or ():
            self.stream.add_appender(appender)

    async def __aenter__(self) -> LoggerStream:
        await self.stream.initialize()

        if self.filename:
            await self.stream.open_file(
                self.filename,
                directory=self.directory,
            )

        return self.stream

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if not self.nested:
            await self.stream.close()
