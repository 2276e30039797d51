"""Shared fixtures for filehost tests."""

from pathlib import Path

import pytest


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A root directory with a few files to serve."""
    root = tmp_path / "data"
    root.mkdir()

    (root / "hello.txt").write_bytes(b"hello")
    (root / "image.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "my page.html").write_bytes(b"<h1>page</h1>")

    sub = root / "docs"
    sub.mkdir()
    (sub / "guide.md").write_bytes(b"# Guide")

    return root
