"""Unit tests for data file helpers."""
from __future__ import annotations

import asyncio
import pathlib

import httpx
import pytest
import respx

from beaver.data import download, write_file
from beaver.kernel.errors import ExternalServiceError


class TestWriteFile:
    def test_writes_bytes(self, tmp_path: pathlib.Path) -> None:
        path = tmp_path / "out.bin"
        assert write_file(path, b"\x00\x01") == 2
        assert path.read_bytes() == b"\x00\x01"

    def test_writes_text_as_utf8(self, tmp_path: pathlib.Path) -> None:
        path = tmp_path / "out.txt"
        write_file(path, "héllo")
        assert path.read_bytes() == "héllo".encode("utf-8")

    def test_truncates_existing(self, tmp_path: pathlib.Path) -> None:
        path = tmp_path / "out.txt"
        path.write_text("a much longer original body")
        write_file(path, "short")
        assert path.read_text() == "short"


class TestDownload:
    @respx.mock
    def test_saves_body(self, tmp_path: pathlib.Path) -> None:
        route = respx.get("http://files/report.csv").mock(
            return_value=httpx.Response(200, content=b"a,b\n1,2\n")
        )
        path = tmp_path / "report.csv"

        written = asyncio.run(download("http://files/report.csv", path, {"Authorization": "Bearer t"}))

        assert written == 8
        assert path.read_bytes() == b"a,b\n1,2\n"
        assert route.calls.last.request.headers["authorization"] == "Bearer t"

    @respx.mock
    def test_non_2xx_raises_and_creates_nothing(self, tmp_path: pathlib.Path) -> None:
        respx.get("http://files/missing").mock(return_value=httpx.Response(404))
        path = tmp_path / "missing"

        with pytest.raises(ExternalServiceError) as exc_info:
            asyncio.run(download("http://files/missing", path))

        assert exc_info.value.status_code == 404
        assert "404" in exc_info.value.message
        assert not path.exists()

    @respx.mock
    def test_transport_error_wrapped(self, tmp_path: pathlib.Path) -> None:
        respx.get("http://files/down").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(ExternalServiceError) as exc_info:
            asyncio.run(download("http://files/down", tmp_path / "down"))
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_timeout_wrapped(self, tmp_path: pathlib.Path) -> None:
        respx.get("http://files/slow").mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(ExternalServiceError, match="timed out"):
            asyncio.run(download("http://files/slow", tmp_path / "slow"))
