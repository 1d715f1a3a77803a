"""httplog – Logger and RequestLogMiddleware.

A :class:`Logger` records a series of HTTP requests, writing one text line
per request to an output stream.  It serializes access to that stream, so
lines coming from concurrent requests never interleave.

Usage::

    from beaver.httplog import Logger

    log = Logger().set_output_file("http.log").set_prefix("my-app")
    app = log.middleware(app)

or, with Starlette / FastAPI::

    app.add_middleware(RequestLogMiddleware, logger=log)
"""
from __future__ import annotations

import io
import os
import sys
import threading
import time
from datetime import datetime
from typing import TYPE_CHECKING, Any

from starlette.datastructures import Headers

from beaver.config.validation import InvalidSinkError, LogFileError
from beaver.httplog.panic import PanicHandler, default_panic_handler, recover
from beaver.httplog.recorder import ResponseRecorder
from beaver.observability.logging import get_logger

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

    from beaver.httplog.settings import HttpLogSettings

#: ``strftime`` layouts for :meth:`Logger.set_time_format`.
RFC1123 = "%a, %d %b %Y %H:%M:%S %Z"
RFC3339 = "%Y-%m-%dT%H:%M:%S%z"

FILE_MODE = 0o644

_log = get_logger(__name__)


def format_duration(nanoseconds: int) -> str:
    """Render an elapsed time with the largest unit that keeps it above 1.

    ``format_duration(1_500_000) == "1.5ms"``
    """
    if nanoseconds < 1_000:
        return f"{nanoseconds}ns"
    if nanoseconds < 1_000_000:
        value, digits, unit = nanoseconds / 1_000, 3, "µs"
    elif nanoseconds < 1_000_000_000:
        value, digits, unit = nanoseconds / 1_000_000, 6, "ms"
    else:
        value, digits, unit = nanoseconds / 1_000_000_000, 9, "s"
    text = f"{value:.{digits}f}".rstrip("0").rstrip(".")
    return text + unit


def _client_ip(scope: "Scope") -> str:
    client = scope.get("client")
    if client:
        return str(client[0])
    return ""


def _is_console(stream: Any) -> bool:
    return any(stream is s for s in (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__))


def _open_append(path: str, flags: int) -> int:
    return os.open(path, flags, FILE_MODE)


class Logger:
    """Request logger shared by every request flowing through its middleware.

    Parameters
    ----------
    output:
        Destination of the log lines.  Text streams receive ``str``; binary
        streams receive UTF-8 bytes.  ``None`` selects ``sys.stdout``.

    All ``set_*`` methods return the logger itself so calls can be chained.
    """

    def __init__(self, output: Any = None) -> None:
        self._out: Any = sys.stdout if output is None else output
        self._time_format: str | None = None
        self._prefix: tuple[str, ...] = ()
        self._panic_handler: PanicHandler | None = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, name: str | os.PathLike[str]) -> "Logger":
        """Return a new logger appending to the named file."""
        return cls().set_output_file(name)

    @classmethod
    def from_settings(cls, settings: "HttpLogSettings") -> "Logger":
        """Build a logger from :class:`~beaver.httplog.settings.HttpLogSettings`."""
        logger = cls()
        if settings.file:
            logger.set_output_file(settings.file)
        logger.set_prefix(settings.prefix)
        if settings.time_format:
            logger.set_time_format(settings.time_format)
        if settings.recover:
            logger.set_panic_handler()
        return logger

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def output(self) -> Any:
        return self._out

    @property
    def prefix(self) -> tuple[str, ...]:
        return self._prefix

    @property
    def time_format(self) -> str | None:
        return self._time_format

    @property
    def panic_handler(self) -> PanicHandler | None:
        return self._panic_handler

    def set_output_file(self, name: str | os.PathLike[str]) -> "Logger":
        """Append to the named file, creating it with mode 0644 if absent.

        Raises :class:`~beaver.config.LogFileError` when the file can not be
        opened; the current output is kept in that case.
        """
        path = os.fspath(name)
        try:
            stream = open(path, "a", encoding="utf-8", opener=_open_append)  # noqa: SIM115
        except OSError as exc:
            raise LogFileError(path, cause=exc) from exc
        return self.set_output(stream)

    def set_output(self, writer: Any) -> "Logger":
        """Replace the output destination, closing the previous one.

        Console streams are never closed.  Raises
        :class:`~beaver.config.InvalidSinkError` when *writer* is ``None``.
        """
        if writer is None:
            raise InvalidSinkError()
        with self._lock:
            old, self._out = self._out, writer
            if old is not writer and not _is_console(old):
                self._close(old)
        return self

    def set_prefix(self, prefix: str) -> "Logger":
        """Set the leading field of every line; ``""`` removes it."""
        with self._lock:
            self._prefix = (prefix,) if prefix else ()
        return self

    def set_time_format(self, layout: str | None) -> "Logger":
        """Set the ``strftime`` layout of the timestamp; ``None`` restores ISO-8601."""
        with self._lock:
            self._time_format = layout
        return self

    def set_panic_handler(self, handler: PanicHandler | None = None) -> "Logger":
        """Recover from exceptions raised by the wrapped application.

        *handler* defaults to :func:`~beaver.httplog.panic.default_panic_handler`.
        Once set, recovery can be changed but not switched off.
        """
        with self._lock:
            self._panic_handler = handler or default_panic_handler
        return self

    def close(self) -> None:
        """Close the current output unless it is a console stream."""
        with self._lock:
            if not _is_console(self._out):
                self._close(self._out)

    # ------------------------------------------------------------------
    # Middleware
    # ------------------------------------------------------------------

    def middleware(self, app: "ASGIApp") -> "RequestLogMiddleware":
        """Wrap *app* so that every HTTP request it serves is logged."""
        return RequestLogMiddleware(app, logger=self)

    def log_request(
        self,
        scope: "Scope",
        started_at: datetime,
        elapsed_ns: int,
        status_code: int,
    ) -> None:
        """Write the line describing one finished request."""
        headers = Headers(raw=list(scope.get("headers", [])))
        request_fields = (
            format_duration(elapsed_ns),
            _client_ip(scope),
            str(status_code),
            scope.get("method", ""),
            scope.get("path", ""),
            headers.get("referer", ""),
            headers.get("user-agent", ""),
        )
        try:
            with self._lock:
                if self._time_format is None:
                    timestamp = started_at.isoformat(timespec="microseconds")
                else:
                    timestamp = started_at.strftime(self._time_format)
                self._write(" ".join((*self._prefix, timestamp, *request_fields)) + "\n")
        except Exception as exc:
            # logging never fails the request it describes
            _log.warning("httplog.write_failed", error=str(exc))

    def _write(self, line: str) -> None:
        out = self._out
        if isinstance(out, (io.RawIOBase, io.BufferedIOBase)):
            out.write(line.encode("utf-8"))
        else:
            out.write(line)
        flush = getattr(out, "flush", None)
        if flush is not None:
            flush()

    @staticmethod
    def _close(stream: Any) -> None:
        close = getattr(stream, "close", None)
        if close is None:
            return
        try:
            close()
        except Exception as exc:
            _log.warning("httplog.sink_close_failed", error=str(exc))


class RequestLogMiddleware:
    """ASGI middleware writing one :class:`Logger` line per HTTP request.

    Non-HTTP scopes (``lifespan``, ``websocket``) are passed through.
    """

    def __init__(self, app: "ASGIApp", logger: Logger | None = None) -> None:
        self.app = app
        self.logger = logger if logger is not None else Logger()

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started_at = datetime.now().astimezone()
        start = time.perf_counter_ns()
        recorder = ResponseRecorder(send)

        handler = self.logger.panic_handler
        app = self.app if handler is None else recover(self.app, handler)
        await app(scope, receive, recorder)

        elapsed = time.perf_counter_ns() - start
        self.logger.log_request(scope, started_at, elapsed, recorder.status_code)


__all__ = [
    "FILE_MODE",
    "RFC1123",
    "RFC3339",
    "Logger",
    "RequestLogMiddleware",
    "format_duration",
]
