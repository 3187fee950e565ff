"""Shared fixtures: documents written to disk and the ijson backends under test."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import ijson
import pytest


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[..., Path]:
    """Return a callable that writes a document into ``tmp_path``."""

    def _write(content: bytes | str, name: str = "doc.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def sample_file(write_json: Callable[..., Path]) -> Path:
    """``{"a":1,"b":{"c":2}}`` on disk."""
    return write_json(b'{"a":1,"b":{"c":2}}')


@pytest.fixture(params=["yajl2_c", "python"])
def ijson_backend(request: pytest.FixtureRequest) -> Any:
    """Each ijson backend the tests cover; skipped when not installed."""
    try:
        return ijson.get_backend(request.param)
    except ImportError:
        pytest.skip(f"ijson backend {request.param!r} is not available")
