"""Data – file helpers."""
from __future__ import annotations

import os
from typing import Any

import httpx

from beaver.kernel.errors import ExternalServiceError


def write_file(path: str | os.PathLike[str], body: bytes | str) -> int:
    """Write *body* to *path*, truncating an existing file.

    Text is encoded as UTF-8.  Returns the number of bytes written.
    """
    data = body.encode("utf-8") if isinstance(body, str) else body
    with open(path, "wb") as fh:
        return fh.write(data)


async def download(
    url: str,
    path: str | os.PathLike[str],
    headers: dict[str, str] | None = None,
    *,
    timeout: float = 10.0,
    **client_kwargs: Any,
) -> int:
    """Fetch *url* and save the body to *path*.

    The file is truncated if it exists.  A non-2xx response raises
    :class:`~beaver.kernel.errors.ExternalServiceError` and leaves *path*
    untouched.  Returns the number of bytes written.
    """
    async with httpx.AsyncClient(timeout=timeout, **client_kwargs) as client:
        try:
            async with client.stream("GET", url, headers=headers) as response:
                if not response.is_success:
                    raise ExternalServiceError(
                        service=url,
                        message=(
                            f"Server responded with status: "
                            f"{response.status_code} {response.reason_phrase}"
                        ),
                        status_code=response.status_code,
                    )
                written = 0
                with open(path, "wb") as fh:
                    async for chunk in response.aiter_bytes():
                        written += fh.write(chunk)
                return written
        except httpx.TimeoutException as exc:
            raise ExternalServiceError(service=url, message=f"HTTP request timed out: GET {url}") from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=url, message=str(exc)) from exc


__all__ = ["download", "write_file"]
