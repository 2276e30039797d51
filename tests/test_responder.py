"""Tests for filehost.responder — reading files into responses."""

import logging
from pathlib import Path

import pytest

from filehost.responder import (
    METHOD_NOT_SUPPORTED_BODY,
    NOT_FOUND_BODY,
    method_not_supported,
    not_found,
    serve_file,
)


class TestServeFile:
    async def test_serves_exact_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "hello.txt"
        path.write_bytes(b"hello")

        response = await serve_file(path)

        assert response.status == 200
        assert response.body == b"hello"
        assert response.content_type is None

    async def test_binary_contents_untouched(self, tmp_path: Path) -> None:
        data = bytes(range(256)) * 4
        path = tmp_path / "blob.bin"
        path.write_bytes(data)

        response = await serve_file(path)

        assert response.body == data

    async def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")

        response = await serve_file(path)

        assert response.body == b""

    async def test_absent_path(self) -> None:
        response = await serve_file(None)

        assert response.status == 200
        assert response.text == NOT_FOUND_BODY

    async def test_missing_file(self, tmp_path: Path) -> None:
        response = await serve_file(tmp_path / "missing.txt")

        assert response.status == 200
        assert response.body_bytes == b"404 File not found"

    async def test_directory_is_not_found(self, tmp_path: Path) -> None:
        response = await serve_file(tmp_path)

        assert response.text == NOT_FOUND_BODY

    async def test_missing_favicon_is_empty(self, tmp_path: Path) -> None:
        response = await serve_file(tmp_path / "favicon.ico")

        assert response.status == 200
        assert response.body_bytes == b""

    async def test_nested_missing_favicon_is_empty(self, tmp_path: Path) -> None:
        response = await serve_file(tmp_path / "assets" / "favicon.ico")

        assert response.body_bytes == b""

    async def test_existing_favicon_is_served(self, tmp_path: Path) -> None:
        (tmp_path / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")

        response = await serve_file(tmp_path / "favicon.ico")

        assert response.body == b"\x00\x00\x01\x00"

    async def test_similar_name_is_not_favicon(self, tmp_path: Path) -> None:
        response = await serve_file(tmp_path / "my-favicon.ico")

        assert response.text == NOT_FOUND_BODY

    async def test_nul_byte_in_path_is_not_found(self, tmp_path: Path) -> None:
        response = await serve_file(tmp_path / "a\x00b.txt")

        assert response.status == 200
        assert response.text == NOT_FOUND_BODY

    async def test_nul_byte_in_favicon_path_is_empty(self, tmp_path: Path) -> None:
        response = await serve_file(tmp_path / "a\x00b" / "favicon.ico")

        assert response.body_bytes == b""

    async def test_strict_status(self, tmp_path: Path) -> None:
        response = await serve_file(tmp_path / "missing.txt", strict_status=True)

        assert response.status == 404
        assert response.text == NOT_FOUND_BODY

    async def test_strict_status_absent_path(self) -> None:
        response = await serve_file(None, strict_status=True)

        assert response.status == 404


class TestServeFileLogging:
    async def test_logs_served_path(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="filehost")
        path = tmp_path / "a.txt"
        path.write_bytes(b"a")

        await serve_file(path)

        assert any("Served file" in r.message and str(path) in r.message for r in caplog.records)

    async def test_logs_read_error(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="filehost")
        path = tmp_path / "missing.txt"

        await serve_file(path)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Error serving file" in warnings[0].message
        assert str(path) in warnings[0].message

    async def test_favicon_not_logged_as_error(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="filehost")

        await serve_file(tmp_path / "favicon.ico")

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestFixedResponses:
    def test_not_found_default(self) -> None:
        response = not_found()
        assert response.status == 200
        assert response.text == "404 File not found"

    def test_method_not_supported_default(self) -> None:
        response = method_not_supported()
        assert response.status == 200
        assert response.headers == ()
        assert response.text == METHOD_NOT_SUPPORTED_BODY

    def test_method_not_supported_strict(self) -> None:
        response = method_not_supported(strict_status=True)
        assert response.status == 405
        assert ("Allow", "GET") in response.headers
        assert response.text == "Only GET-requests supported"
