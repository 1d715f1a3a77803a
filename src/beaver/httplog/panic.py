"""httplog – panic boundary.

Converts an exception escaping the wrapped ASGI application into a
response, so the request still completes and gets logged.
"""
from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, Awaitable, Callable

from starlette.requests import Request
from starlette.responses import PlainTextResponse

from beaver.observability.logging import get_logger

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

PanicHandler = Callable[["Send", Request, Exception], Awaitable[None]]

_log = get_logger(__name__)


async def default_panic_handler(send: "Send", request: Request, exc: Exception) -> None:  # noqa: ARG001
    """Answer with ``500 Internal Server Error`` as plain text.

    Nothing is sent when the response has already started.
    """
    if getattr(send, "started", False):
        return
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    response = PlainTextResponse(status.phrase, status_code=status.value)
    await response(request.scope, request.receive, send)


def recover(app: "ASGIApp", handler: PanicHandler) -> "ASGIApp":
    """Wrap *app* so that exceptions are passed to *handler* instead of raised."""

    async def guarded(scope: "Scope", receive: "Receive", send: "Send") -> None:
        try:
            await app(scope, receive, send)
        except Exception as exc:
            _log.error(
                "httplog.handler_failed",
                method=scope.get("method", ""),
                path=scope.get("path", ""),
                exc_info=exc,
            )
            await handler(send, Request(scope, receive), exc)

    return guarded


__all__ = ["PanicHandler", "default_panic_handler", "recover"]
