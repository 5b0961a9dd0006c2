"""Supported data formats and format detection."""

from enum import StrEnum
from pathlib import PurePath


class DataFormat(StrEnum):
    """Supported data file formats (lower-case)."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"


_ALIASES: dict[str, DataFormat] = {"yml": DataFormat.YAML}


def _normalize_identifier(value: str | PurePath) -> str:
    """Reduce a path or format name to a bare lower-case identifier."""
    text = str(value)
    suffix = PurePath(text).suffix
    # A value without an extension is taken as the format name itself
    identifier = suffix if suffix else text
    return identifier.lower().removeprefix(".")


def read_data_format(path: str | PurePath) -> DataFormat | None:
    """Get the data format matching the extension of `path`.

    Args:
        path: A file path, a bare extension (".json"), or a format name
            ("toml"). Matching is case-insensitive.

    Returns:
        The matching DataFormat, or None if the format is not supported.
    """
    identifier = _normalize_identifier(path)
    if not identifier:
        return None
    if identifier in _ALIASES:
        return _ALIASES[identifier]
    try:
        return DataFormat(identifier)
    except ValueError:
        return None


def is_data_format(path: str | PurePath) -> bool:
    """Check whether `path` has a supported data format."""
    return read_data_format(path) is not None
