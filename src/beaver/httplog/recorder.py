"""httplog – ResponseRecorder.

Wraps the ASGI ``send`` callable of a single request and remembers the
status code announced by the ``http.response.start`` message.  Messages
are forwarded unchanged.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.datastructures import Headers

if TYPE_CHECKING:
    from starlette.types import Message, Send

#: Status recorded until the application sends ``http.response.start``.
UNSET_STATUS = 0


class ResponseRecorder:
    """Pass-through ``send`` wrapper recording the response status.

    The recorder is itself a valid ASGI ``send`` callable, so it can be
    handed to the wrapped application in place of the server's one.
    """

    __slots__ = ("_send", "_raw_headers", "_started", "status_code")

    def __init__(self, send: "Send") -> None:
        self._send = send
        self._raw_headers: list[tuple[bytes, bytes]] = []
        self._started = False
        self.status_code = UNSET_STATUS

    @property
    def started(self) -> bool:
        """Whether the response start message has been forwarded."""
        return self._started

    @property
    def headers(self) -> Headers:
        """Headers announced by the response start message."""
        return Headers(raw=self._raw_headers)

    async def __call__(self, message: "Message") -> None:
        await self._send(message)
        if message["type"] == "http.response.start":
            self.status_code = int(message["status"])
            self._raw_headers = list(message.get("headers", []))
            self._started = True


__all__ = ["UNSET_STATUS", "ResponseRecorder"]
