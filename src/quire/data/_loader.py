# pyright: reportAny=false, reportExplicitAny=false
"""Loading of JSON, YAML and TOML data."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import orjson
import yaml

from quire.diagnostics import Diagnostic
from quire.exceptions import DataLoadError, QuireError, UnsupportedDataFormatError
from quire.files import resolve_paths_with_diagnostics

from ._formats import DataFormat, read_data_format
from ._models import KeyedData, LoadedFileSet

if TYPE_CHECKING:
    from collections.abc import Iterable

    from structlog.typing import FilteringBoundLogger


def _decode(data_format: DataFormat, content: bytes) -> Any:
    match data_format:
        case DataFormat.JSON:
            return orjson.loads(content)
        case DataFormat.YAML:
            return yaml.safe_load(content)
        case DataFormat.TOML:
            return tomllib.loads(content.decode("utf-8"))


def load_data(
    data_format: DataFormat | str,
    content: str | bytes,
    *,
    path: Path | None = None,
) -> KeyedData:
    """Decode `content` as `data_format` into a keyed container.

    Args:
        data_format: The format to decode as. Strings are matched like file
            extensions ("json", ".yml", "TOML").
        content: Raw document text or bytes.
        path: Source file, used only for error context.

    Returns:
        The decoded mapping. Empty content decodes to an empty dict.

    Raises:
        UnsupportedDataFormatError: If the format is not supported.
        DataLoadError: If the content cannot be decoded, or its top-level
            value is not a mapping.
    """
    resolved = (
        data_format
        if isinstance(data_format, DataFormat)
        else read_data_format(data_format)
    )
    if resolved is None:
        msg = f"'{data_format}' is not a supported data format"
        raise UnsupportedDataFormatError(msg, identifier=str(data_format), path=path)

    raw = content.encode("utf-8") if isinstance(content, str) else content
    if not raw:
        return {}

    location = f"'{path}'" if path is not None else f"{resolved.value} content"
    try:
        decoded = _decode(resolved, raw)
    except (
        orjson.JSONDecodeError,
        yaml.YAMLError,
        tomllib.TOMLDecodeError,
        UnicodeDecodeError,
    ) as e:
        msg = f"Failed to load data {location}: {e}"
        raise DataLoadError(msg, path=path, data_format=resolved.value) from e

    if decoded is None:
        # YAML documents holding only comments or whitespace
        return {}
    if not isinstance(decoded, dict):
        msg = (
            f"Failed to load data {location}: top-level value must be a mapping, "
            f"got {type(decoded).__name__}"
        )
        raise DataLoadError(msg, path=path, data_format=resolved.value)
    return decoded


def load_data_file(path: str | Path) -> KeyedData:
    """Load a data file in the format named by its extension.

    Args:
        path: Path to the data file (e.g. "x.json" is loaded as JSON).

    Returns:
        The decoded mapping. An empty file yields an empty dict.

    Raises:
        UnsupportedDataFormatError: If the extension is not a supported format.
        DataLoadError: If the file content cannot be decoded.
        OSError: If the file cannot be read.
    """
    file_path = Path(path)
    data_format = read_data_format(file_path)
    if data_format is None:
        identifier = file_path.suffix.lower().removeprefix(".") or file_path.name
        msg = f"'{identifier}' is not a supported data format: {file_path}"
        raise UnsupportedDataFormatError(msg, identifier=identifier, path=file_path)

    content = file_path.read_bytes()
    return load_data(data_format, content, path=file_path)


def load_data_files(
    inputs: Iterable[str | Path],
    *,
    logger: FilteringBoundLogger | None = None,
) -> LoadedFileSet:
    """Load every file found in `inputs`.

    Globs are expanded and directories walked recursively before loading.
    A file that fails to load is skipped with a diagnostic; one bad file
    never aborts the batch.

    Args:
        inputs: Plain paths, glob patterns, or directories.
        logger: Optional logger for diagnostics.

    Returns:
        LoadedFileSet keyed by absolute path, in discovery order.
    """
    if logger is None:
        from quire.utils import create_logger  # noqa: PLC0415

        logger = create_logger()

    paths, diagnostics = resolve_paths_with_diagnostics(inputs)
    files: dict[Path, KeyedData] = {}

    for path in paths:
        absolute = path.absolute()
        if absolute in files:
            continue
        try:
            files[absolute] = load_data_file(absolute)
        except (QuireError, OSError) as e:
            diagnostics.append(Diagnostic(absolute, str(e)))

    for diagnostic in diagnostics:
        logger.warning(
            "Skipping data file", path=str(diagnostic.path), reason=diagnostic.message
        )

    return LoadedFileSet(files=files, diagnostics=tuple(diagnostics))
