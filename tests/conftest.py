"""Shared pytest fixtures for the extramacros test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


_ENV_KEYS = (
    "EXTRAMACROS_BASE_DIR",
    "EXTRAMACROS_ENCODING",
    "EXTRAMACROS_COMMENT_PREFIXES",
    "EXTRAMACROS_CONFINE_TO_BASE_DIR",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer `EXTRAMACROS_*` variables out of tests."""

    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_lines(tmp_path: Path) -> Callable[..., Path]:
    """Provide a factory writing lines to a UTF-8 file under `tmp_path`."""

    def _write(*lines: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write
