"""httplog – HTTP request-logging middleware.

One line per request is written to the logger's output::

    [prefix] <timestamp> <duration> <client-ip> <status> <method> <path> <referer> <user-agent>
"""
from beaver.httplog.logger import (
    FILE_MODE,
    RFC1123,
    RFC3339,
    Logger,
    RequestLogMiddleware,
    format_duration,
)
from beaver.httplog.panic import PanicHandler, default_panic_handler, recover
from beaver.httplog.recorder import UNSET_STATUS, ResponseRecorder
from beaver.httplog.settings import HttpLogSettings

__all__ = [
    "FILE_MODE",
    "RFC1123",
    "RFC3339",
    "UNSET_STATUS",
    "HttpLogSettings",
    "Logger",
    "PanicHandler",
    "RequestLogMiddleware",
    "ResponseRecorder",
    "default_panic_handler",
    "format_duration",
    "recover",
]
