"""Non-fatal diagnostics collected while loading files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A recoverable problem encountered while processing one input.

    Attributes:
        path: The file, directory, or pattern the problem relates to.
        message: Human-readable description of what was skipped and why.
    """

    path: Path | str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"
