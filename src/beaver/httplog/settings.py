"""httplog – environment-driven settings."""
from __future__ import annotations

import dataclasses

from beaver.config.settings import Settings


@dataclasses.dataclass
class HttpLogSettings(Settings):
    """Settings read from ``HTTPLOG_*`` environment variables.

    ``HTTPLOG_FILE``
        Log file to append to; empty keeps standard output.
    ``HTTPLOG_PREFIX``
        Leading field of every line.
    ``HTTPLOG_TIME_FORMAT``
        ``strftime`` layout; empty keeps ISO-8601.
    ``HTTPLOG_RECOVER``
        Install the default panic handler.
    """

    _prefix = "HTTPLOG"

    file: str = ""
    prefix: str = ""
    time_format: str = ""
    recover: bool = False


__all__ = ["HttpLogSettings"]
