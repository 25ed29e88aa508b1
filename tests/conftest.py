# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture()
def list_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes exact file contents to a temporary file."""

    def _make(content: str | bytes, name: str = "list") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _make
