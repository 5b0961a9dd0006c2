"""Shared test fixtures for quire tests."""

import io
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest
from rich.console import Console
from structlog.typing import FilteringBoundLogger

from quire.utils import create_logger

WriteFile = Callable[..., Path]


@dataclass(frozen=True, slots=True)
class CapturedLogger:
    """A text logger writing to an in-memory stream."""

    logger: FilteringBoundLogger
    stream: io.StringIO

    @property
    def text(self) -> str:
        return self.stream.getvalue()


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture
def captured_logger(monkeypatch: pytest.MonkeyPatch) -> CapturedLogger:
    """Create a debug-level text logger whose output can be inspected."""
    monkeypatch.delenv("QUIRE_DEBUG", raising=False)
    stream = io.StringIO()
    logger = create_logger("debug", stream=stream)
    return CapturedLogger(logger=logger, stream=stream)


@pytest.fixture
def write_file(tmp_path: Path) -> WriteFile:
    """Return a function that writes a file below tmp_path.

    The function takes a relative path and content, and optionally an
    mtime in seconds that is applied with os.utime.
    """

    def _write(
        relative: str,
        content: str | bytes = "",
        *,
        mtime: float | None = None,
    ) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            _ = path.write_bytes(content)
        else:
            _ = path.write_text(content, encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write
