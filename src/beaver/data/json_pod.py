"""Data – JSONPod.

A :class:`JSONPod` carries one JSON-serialisable value and moves it between
HTTP endpoints, files, streams and Starlette responses.
"""
from __future__ import annotations

import json
import os
from typing import Any, TextIO

import httpx
from starlette.responses import Response

from beaver.data.files import write_file
from beaver.kernel.errors import ExternalServiceError, SerializationError

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


class JSONPod:
    """Holder of a JSON value.

    Decoding methods (:meth:`get`, :meth:`open`) replace :attr:`value` and
    return it; encoding methods leave it untouched.

    Parameters
    ----------
    value:
        The value to encode, or ``None`` when the pod is about to be filled
        by a decoding method.
    timeout:
        Timeout in seconds applied to HTTP requests.
    """

    def __init__(self, value: Any = None, *, timeout: float = 10.0) -> None:
        self.value = value
        self._timeout = timeout

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    async def get(self, url: str, headers: dict[str, str] | None = None) -> Any:
        """GET *url* and decode its JSON body.

        ``application/json`` is added to the ``Accept`` header.
        """
        request_headers = httpx.Headers(headers)
        accept = request_headers.get("accept")
        request_headers["accept"] = f"{accept}, application/json" if accept else "application/json"

        response = await self._request("GET", url, headers=request_headers)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service=url,
                message=f"HTTP {response.status_code} from GET {url}",
                status_code=response.status_code,
            ) from exc
        try:
            self.value = response.json()
        except ValueError as exc:
            raise SerializationError(
                f"Response of GET {url} is not valid JSON",
                payload_type=response.headers.get("content-type"),
                cause=exc,
            ) from exc
        return self.value

    def open(self, path: str | os.PathLike[str]) -> Any:
        """Decode the JSON file at *path*."""
        with open(path, encoding="utf-8") as fh:
            try:
                self.value = json.load(fh)
            except ValueError as exc:
                raise SerializationError(f"File '{os.fspath(path)}' is not valid JSON", cause=exc) from exc
        return self.value

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    async def send(self, method: str, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        """Issue *method* to *url* with the encoded value as body.

        The response status is not checked.
        """
        request_headers = httpx.Headers(headers)
        request_headers["content-type"] = JSON_MEDIA_TYPE
        return await self._request(method, url, headers=request_headers, content=self._encode())

    async def post(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        return await self.send("POST", url, headers)

    async def put(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        return await self.send("PUT", url, headers)

    def serve(self, status_code: int = 200, headers: dict[str, str] | None = None) -> Response:
        """Return a Starlette response carrying the encoded value."""
        return Response(
            content=self._encode(),
            status_code=status_code,
            headers=headers,
            media_type=JSON_MEDIA_TYPE,
        )

    def write(self, stream: TextIO) -> None:
        """Write the encoded value and a newline to *stream*."""
        stream.write(self._encode().decode("utf-8"))

    def write_file(self, path: str | os.PathLike[str]) -> str:
        """Write the value, tab-indented, to *path*.

        ``.json`` is appended when *path* does not already end with it.
        Returns the path actually written.
        """
        path = os.fspath(path)
        if not path.endswith(".json"):
            path += ".json"
        try:
            body = json.dumps(self.value, indent="\t", ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc), payload_type=type(self.value).__name__, cause=exc) from exc
        write_file(path, body)
        return path

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _encode(self) -> bytes:
        try:
            return (json.dumps(self.value, ensure_ascii=False) + "\n").encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc), payload_type=type(self.value).__name__, cause=exc) from exc

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                return await client.request(method, url, **kwargs)
            except httpx.TimeoutException as exc:
                raise ExternalServiceError(
                    service=url, message=f"HTTP request timed out: {method} {url}"
                ) from exc
            except httpx.HTTPError as exc:
                raise ExternalServiceError(service=url, message=str(exc)) from exc


__all__ = ["JSON_MEDIA_TYPE", "JSONPod"]
