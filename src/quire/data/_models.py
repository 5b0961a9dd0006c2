"""Data containers produced by the data loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from quire.diagnostics import Diagnostic

# Decoded content of one data file
type KeyedData = dict[str, Any]  # pyright: ignore[reportExplicitAny]

DEFAULT_DATA_KEY = "data"


class DataKeyCollisionPolicy(StrEnum):
    """What to do when the data key is already defined by global data."""

    ERROR = "error"
    OVERWRITE = "overwrite"


@dataclass(frozen=True, slots=True)
class LoadedFileSet:
    """Data loaded from a batch of files.

    Attributes:
        files: Absolute file path to decoded data, in discovery order. Files
            that failed to load are not present.
        diagnostics: One entry per input that was skipped.
    """

    files: dict[Path, KeyedData] = field(default_factory=dict)
    diagnostics: tuple[Diagnostic, ...] = ()

    def __len__(self) -> int:
        return len(self.files)
