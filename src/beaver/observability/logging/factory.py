"""Observability – LoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog


class LoggerFactory:
    """Route structlog output through the stdlib root logger.

    Library code only emits events; applications call :meth:`configure`
    once at start-up to decide how they are rendered.
    """

    @staticmethod
    def configure(level: int = logging.INFO, json: bool = True, cache: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=cache,
        )
        renderers: list[Any] = (
            [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
            if json
            else [structlog.dev.ConsoleRenderer(colors=False)]
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *renderers,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["LoggerFactory"]
