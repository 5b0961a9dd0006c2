"""quire configuration.

Render options come from three sources, highest precedence first: the
command line, an optional config file (any supported data format), and the
built-in defaults.

Example:
    >>> from quire.config import resolve_options
    >>> options = resolve_options({"root": "page.tmpl", "data": ["posts/"]})
    >>> options.sort_data
    'filename'
"""

from quire.data import DataKeyCollisionPolicy
from quire.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._defaults import DEFAULT_CONFIG
from ._loader import load_config_file, normalize_key, resolve_options
from ._models import LogFormat, LoggingConfig, LogLevel, RenderOptions

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "DataKeyCollisionPolicy",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RenderOptions",
    "load_config_file",
    "normalize_key",
    "resolve_options",
]
