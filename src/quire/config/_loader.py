# pyright: reportAny=false, reportExplicitAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Configuration file loading and option resolution."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from quire.data import load_data_file
from quire.exceptions import ConfigLoadError, ConfigValidationError, DataError

from ._defaults import DEFAULT_CONFIG
from ._models import RenderOptions

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic_core import ErrorDetails

LIST_KEYS = ("partials", "global_data", "data")
PATH_KEYS = ("root", "output")

_KEY_ALIASES = {"partial": "partials"}


def normalize_key(key: str) -> str:
    """Normalize a config key: dashes become underscores, aliases are mapped.

    Examples:
        >>> normalize_key("global-data")
        'global_data'
        >>> normalize_key("partial")
        'partials'
    """
    normalized = key.replace("-", "_").lower()
    return _KEY_ALIASES.get(normalized, normalized)


def _normalize_keys(values: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in values.items():
        normalized = normalize_key(str(key))
        if isinstance(value, dict):
            result[normalized] = _normalize_keys(value)
        elif isinstance(value, tuple):
            result[normalized] = list(value)
        elif normalized in LIST_KEYS and not isinstance(value, list | None):
            result[normalized] = [value]
        else:
            result[normalized] = value
    return result


def _resolve_relative(value: Any, base: Path) -> Any:
    if not isinstance(value, str) or not value:
        return value
    if Path(value).is_absolute():
        return value
    return str(base / value)


def _resolve_paths(values: dict[str, Any], base: Path) -> dict[str, Any]:
    for key in PATH_KEYS:
        if key in values:
            values[key] = _resolve_relative(values[key], base)
    for key in LIST_KEYS:
        if key in values:
            values[key] = [_resolve_relative(item, base) for item in values[key]]
    logging_values = values.get("logging")
    if isinstance(logging_values, dict) and "file" in logging_values:
        logging_values["file"] = _resolve_relative(logging_values["file"], base)
    return values


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load a configuration file.

    A config file is any supported data file (TOML, YAML or JSON). Keys are
    normalized (see normalize_key) and relative paths are resolved against
    the directory holding the config file.

    Args:
        path: Path to the config file.

    Returns:
        Normalized configuration values.

    Raises:
        ConfigLoadError: If the file does not exist or cannot be parsed.
    """
    config_path = Path(path)
    if not config_path.is_file():
        msg = f"Config file not found: {config_path}"
        raise ConfigLoadError(msg, path=config_path)

    try:
        raw = load_data_file(config_path)
    except DataError as e:
        msg = f"Failed to load config file '{config_path}': {e}"
        raise ConfigLoadError(msg, path=config_path) from e
    except OSError as e:
        msg = f"Failed to read config file '{config_path}': {e}"
        raise ConfigLoadError(msg, path=config_path) from e

    values = _normalize_keys(raw)
    return _resolve_paths(values, config_path.absolute().parent)


def _merge_values(
    base: Mapping[str, Any], override: Mapping[str, Any]
) -> dict[str, Any]:
    """Merge `override` into `base`.

    Scalars in `override` win. Lists are concatenated with the `override`
    entries first. Nested dicts are merged recursively.
    """
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = _merge_values(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            result[key] = [*value, *current]
        else:
            result[key] = value
    return result


def _drop_unset(values: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in values.items():
        if isinstance(value, dict):
            nested = _drop_unset(value)
            if nested:
                result[key] = nested
        elif value is not None and value != []:
            result[key] = value
    return result


def _validation_error(
    error: ErrorDetails, source: str | None
) -> ConfigValidationError:
    key = ".".join(str(part) for part in error.get("loc", ()))
    message = str(error.get("msg", "Validation error"))
    ctx = error.get("ctx")
    expected = message
    if ctx is not None and "expected" in ctx:
        expected = str(ctx["expected"])

    msg = f"Invalid configuration value for '{key}': {message}"
    return ConfigValidationError(
        msg,
        key=key,
        value=error.get("input"),
        expected=expected,
        source=source,
    )


def resolve_options(
    cli_values: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> RenderOptions:
    """Resolve render options from command-line values and a config file.

    Precedence, highest first: command-line values, config file values,
    DEFAULT_CONFIG. `None` and empty lists on the command line count as
    "not given". List options combine the command-line entries followed by
    the config file entries.

    Args:
        cli_values: Option values given on the command line.
        config_path: Optional config file to read.

    Returns:
        Validated RenderOptions.

    Raises:
        ConfigLoadError: If the config file cannot be loaded.
        ConfigValidationError: If the merged values are invalid.
    """
    values: dict[str, Any] = dict(DEFAULT_CONFIG)
    source: str | None = None

    if config_path is not None:
        values = _merge_values(values, load_config_file(config_path))
        source = str(config_path)

    if cli_values:
        values = _merge_values(values, _drop_unset(_normalize_keys(cli_values)))

    try:
        return RenderOptions.model_validate(values)
    except ValidationError as e:
        raise _validation_error(e.errors()[0], source) from e
