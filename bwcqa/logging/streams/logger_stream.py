import asyncio
import datetime
import io
import os
import pathlib
import sys
import threading
from collections import defaultdict
from typing import (
    Dict,
    TextIO,
    Tuple,
    TypeVar,
)

import msgspec

from bwcqa.logging.config import LoggingConfig, StreamType
from bwcqa.logging.models import Entry, Log

from .log_appender import LogAppender

T = TypeVar('T', bound=Entry)


class LoggerStream:
    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template
        self._default_logfile = filename
        self._default_log_directory = directory

        self._init_lock = asyncio.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None

        self._files: Dict[str, io.BufferedWriter] = {}
        self._file_locks: Dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
        self._cwd: str | None = None

        # Swapped wholesale on change so log() can iterate without locking.
        self._appenders: Tuple[LogAppender, ...] = ()
        self._appenders_lock = threading.Lock()

        self._config = LoggingConfig()
        self._initialized: bool = False

    @property
    def name(self):
        return self._name

    @property
    def appenders(self) -> Tuple[LogAppender, ...]:
        return self._appenders

    @property
    def has_appenders(self):
        return len(self._appenders) > 0

    def add_appender(self, appender: LogAppender):
        with self._appenders_lock:
            if appender not in self._appenders:
                self._appenders = (*self._appenders, appender)

    def remove_appender(self, appender: LogAppender):
        with self._appenders_lock:
            self._appenders = tuple(
                existing for existing in self._appenders if existing is not appender
            )

    async def initialize(self):
        async with self._init_lock:
            if self._initialized:
                return

            if self._loop is None:
                self._loop = asyncio.get_event_loop()

            if self._cwd is None:
                self._cwd = await self._loop.run_in_executor(
                    None,
                    os.getcwd,
                )

            self._initialized = True

    async def open_file(
        self,
        filename: str,
        directory: str | None = None,
    ):
        logfile_path = self._to_logfile_path(filename, directory=directory)

        file_lock = self._file_locks[logfile_path]
        async with file_lock:
            if (
                logfile := self._files.get(logfile_path)
            ) and logfile.closed is False:
                return logfile_path

            self._files[logfile_path] = await self._loop.run_in_executor(
                None,
                self._open_file,
                logfile_path,
            )

        return logfile_path

    def _open_file(self, logfile_path: str):
        resolved_path = pathlib.Path(logfile_path).absolute().resolve()
        resolved_path.parent.mkdir(parents=True, exist_ok=True)

        return open(resolved_path, 'ab+')

    async def close(self):
        await asyncio.gather(
            *[self._close_file(logfile_path) for logfile_path in self._files]
        )

        self._files.clear()
        self._initialized = False

    async def _close_file(self, logfile_path: str):
        async with self._file_locks[logfile_path]:
            await self._loop.run_in_executor(
                None,
                self._close_file_at_path,
                logfile_path,
            )

    def _close_file_at_path(self, logfile_path: str):
        if (
            logfile := self._files.get(logfile_path)
        ) and logfile.closed is False:
            logfile.close()

    def _to_logfile_path(
        self,
        filename: str,
        directory: str | None = None,
    ):
        filename_path = pathlib.Path(filename)

        assert (
            filename_path.suffix == ".json"
        ), "Err. - file must be JSON file for logs."

        if self._config.directory:
            directory = self._config.directory

        elif directory is None:
            directory: str = os.path.join(self._cwd)

        return os.path.join(directory, filename_path)

    async def log(
        self,
        entry: T | Log[T],
        template: str | None = None,
        path: str | None = None,
        error: BaseException | None = None,
    ):
        if not self._initialized:
            await self.initialize()

        filename: str | None = None
        directory: str | None = None

        if path:
            logfile_path = pathlib.Path(path)
            is_logfile = len(logfile_path.suffix) > 0

            filename = logfile_path.name if is_logfile else None
            directory = str(logfile_path.parent.absolute()) if is_logfile else str(logfile_path.absolute())

        if template is None:
            template = self._default_template

        if filename is None:
            filename = self._default_logfile

        if directory is None:
            directory = self._default_log_directory

        log = self._to_log(entry, error=error)

        for appender in self._appenders:
            appender.append(log, self._name)

        if self._config.enabled(self._name, log.entry.level) is False:
            return

        if filename or directory:
            await self._log_to_file(
                log,
                filename=filename,
                directory=directory,
            )

        else:
            await self._log(
                log,
                template=template,
            )

    def _to_log(
        self,
        entry_or_log: T | Log[T],
        error: BaseException | None = None,
    ) -> Log[T]:
        if isinstance(entry_or_log, Log):
            return entry_or_log

        log_file, line_number, function_name = self._find_caller()

        return Log(
            entry=entry_or_log,
            filename=log_file,
            function_name=function_name,
            line_number=line_number,
            error=str(error) if error is not None else None,
            error_kind=type(error).__name__ if error is not None else None,
            thread_id=threading.get_native_id(),
            timestamp=datetime.datetime.now(datetime.UTC).isoformat(),
        )

    async def _log(
        self,
        log: Log[T],
        template: str | None = None,
    ):
        if template is None:
            template = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"

        stream = sys.stdout if self._config.output == StreamType.STDOUT else sys.stderr

        line = log.entry.to_template(
            template,
            context={
                "filename": log.filename,
                "function_name": log.function_name,
                "line_number": log.line_number,
                "thread_id": log.thread_id,
                "timestamp": log.timestamp,
            },
        )

        if log.error:
            line = f"{line} - {log.error_kind}: {log.error}"

        await self._loop.run_in_executor(
            None,
            self._write_to_stream,
            stream,
            line,
        )

    def _write_to_stream(self, stream: TextIO, line: str):
        stream.write(line + "\n")
        stream.flush()

    async def _log_to_file(
        self,
        log: Log[T],
        filename: str | None = None,
        directory: str | None = None,
    ):
        if filename is None:
            filename = "logs.json"

        if directory is None:
            directory = os.path.join(self._cwd, "logs")

        logfile_path = self._to_logfile_path(
            filename,
            directory=directory,
        )

        if self._files.get(logfile_path) is None or self._files[logfile_path].closed:
            await self.open_file(
                filename,
                directory=directory,
            )

        try:
            async with self._file_locks[logfile_path]:
                await self._loop.run_in_executor(
                    None,
                    self._write_to_file,
                    log,
                    logfile_path,
                )

        except OSError as err:
            error_template = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"

            await self._loop.run_in_executor(
                None,
                self._write_to_stream,
                sys.stderr,
                log.entry.to_template(
                    error_template,
                    context={
                        "filename": log.filename,
                        "function_name": log.function_name,
                        "line_number": log.line_number,
                        "error": str(err),
                        "thread_id": log.thread_id,
                        "timestamp": log.timestamp,
                    },
                ),
            )

    def _write_to_file(
        self,
        log: Log,
        logfile_path: str,
    ):
        if (
            logfile := self._files.get(logfile_path)
        ) and (
            logfile.closed is False
        ):
            logfile.write(msgspec.json.encode(log) + b"\n")
            logfile.flush()

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(3)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
