"""Configuration models.

This module provides the Pydantic models for render options and logging
settings, and the enums they use.
"""

from enum import StrEnum
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quire.data import DEFAULT_DATA_KEY, DataKeyCollisionPolicy
from quire.files import SortKey


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold. None defers to QUIRE_LOG_LEVEL.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel | None = None
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class RenderOptions(BaseModel):
    """Everything one render needs.

    Attributes:
        root: The root template file.
        partials: Partial inputs (paths, globs or directories).
        global_data: Global data inputs, highest precedence first.
        data: Data inputs whose contents are listed under `data_key`.
        data_key: Context key for the ordered data list.
        sort_data: Sort order for data files ("filename", "modified-desc", ...).
        on_data_key_collision: What to do when a global key equals `data_key`.
        strict_sort_order: Fail on an unrecognized `sort_data` instead of
            keeping files in discovery order.
        strict_undefined: Fail on undefined variables in TEXT/HTML templates.
        output: Output file. None writes to stdout.
        logging: Logging settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    root: Path | None = None
    partials: list[Path] = Field(default_factory=list)
    global_data: list[str] = Field(default_factory=list)
    data: list[str] = Field(default_factory=list)
    data_key: str = DEFAULT_DATA_KEY
    sort_data: str = SortKey.FILENAME.value
    on_data_key_collision: DataKeyCollisionPolicy = DataKeyCollisionPolicy.ERROR
    strict_sort_order: bool = False
    strict_undefined: bool = False
    output: Path | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("data_key")
    @classmethod
    def _default_data_key(cls, value: str) -> str:
        return value or DEFAULT_DATA_KEY

    @field_validator("sort_data")
    @classmethod
    def _default_sort_data(cls, value: str) -> str:
        return value or SortKey.FILENAME.value
