"""Leveled application logger.

Debug, info and warn messages go to the standard output; error and fatal
messages go to the error output.  Each output is a plain stdlib
:class:`logging.Logger` with a single stream handler, so lines are written
atomically by the handler's own lock.
"""
from __future__ import annotations

import dataclasses
import enum
import itertools
import logging
import sys
from typing import Any, TextIO

from beaver.config.validation import InvalidSinkError

DEFAULT_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

_ids = itertools.count()


class Level(enum.IntFlag):
    """Bit set of the levels a :class:`LeveledLogger` writes."""

    NONE = 0
    FATAL = 1
    ERROR = 2
    WARN = 4
    INFO = 8
    DEBUG = 16
    ALL = FATAL | ERROR | WARN | INFO | DEBUG


@dataclasses.dataclass(frozen=True)
class LevelTags:
    """Text placed before the message of each level."""

    fatal: str = ""
    error: str = ""
    warn: str = ""
    info: str = ""
    debug: str = ""


DEFAULT_TAGS = LevelTags(
    fatal="FATAL: ",
    error="ERROR: ",
    warn="WARN : ",
    info="INFO : ",
    debug="DEBUG: ",
)


def _join(args: tuple[Any, ...]) -> str:
    """Concatenate ``str()`` of *args*, with a space between two non-strings."""
    parts: list[str] = []
    for i, arg in enumerate(args):
        if i and not isinstance(arg, str) and not isinstance(args[i - 1], str):
            parts.append(" ")
        parts.append(str(arg))
    return "".join(parts)


def _stream_logger(stream: TextIO) -> logging.Logger:
    # standalone logger: not registered with the logging manager, no root propagation
    logger = logging.Logger(f"beaver.leveled.{next(_ids)}", logging.DEBUG)
    logger.propagate = False
    logger.addHandler(logging.StreamHandler(stream))
    return logger


class LeveledLogger:
    """Logger writing at the levels enabled by :meth:`set_level`.

    By default every level is enabled, standard output is ``sys.stdout`` and
    error output is ``sys.stderr``.
    """

    def __init__(self) -> None:
        self._out = _stream_logger(sys.stdout)
        self._err = _stream_logger(sys.stderr)
        self._level = Level.ALL
        self._tags = DEFAULT_TAGS
        self._prefix = ""
        self._date_format = DEFAULT_DATE_FORMAT
        self._apply_format()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def level(self) -> Level:
        return self._level

    def set_level(self, level: Level | int) -> "LeveledLogger":
        self._level = Level(level)
        return self

    def set_tags(self, tags: LevelTags) -> "LeveledLogger":
        """Replace the level tags; ``LevelTags()`` omits them."""
        self._tags = tags
        return self

    def set_prefix(self, prefix: str) -> "LeveledLogger":
        self._prefix = prefix
        self._apply_format()
        return self

    def set_date_format(self, date_format: str) -> "LeveledLogger":
        """Set the ``strftime`` layout of the timestamp; ``""`` omits it."""
        self._date_format = date_format
        self._apply_format()
        return self

    def set_output(self, out: TextIO, err: TextIO | None = None) -> "LeveledLogger":
        """Set both destinations; *err* defaults to *out*.

        Raises :class:`~beaver.config.InvalidSinkError` when *out* is ``None``.
        """
        if out is None:
            raise InvalidSinkError()
        self._handler(self._out).setStream(out)
        self._handler(self._err).setStream(err if err is not None else out)
        return self

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def fatal(self, *args: Any) -> None:
        """Write *args* to the error output, then exit with status 1."""
        self._emit(self._err, Level.FATAL, self._tags.fatal, args)
        sys.exit(1)

    def error(self, *args: Any) -> None:
        self._emit(self._err, Level.ERROR, self._tags.error, args)

    def warn(self, *args: Any) -> None:
        self._emit(self._out, Level.WARN, self._tags.warn, args)

    def info(self, *args: Any) -> None:
        self._emit(self._out, Level.INFO, self._tags.info, args)

    def debug(self, *args: Any) -> None:
        self._emit(self._out, Level.DEBUG, self._tags.debug, args)

    def _emit(self, target: logging.Logger, level: Level, tag: str, args: tuple[Any, ...]) -> None:
        if self._level & level:
            target.info("%s%s", tag, _join(args))

    def _apply_format(self) -> None:
        prefix = self._prefix.replace("%", "%%")
        if self._date_format:
            formatter = logging.Formatter(f"{prefix}%(asctime)s %(message)s", self._date_format)
        else:
            formatter = logging.Formatter(f"{prefix}%(message)s")
        for logger in (self._out, self._err):
            self._handler(logger).setFormatter(formatter)

    @staticmethod
    def _handler(logger: logging.Logger) -> logging.StreamHandler[Any]:
        return logger.handlers[0]  # type: ignore[return-value]


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_TAGS",
    "Level",
    "LevelTags",
    "LeveledLogger",
]
