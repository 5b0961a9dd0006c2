"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be merged with values read from
config files and the command line before validation.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "root": None,
    "partials": [],
    "global_data": [],
    "data": [],
    "data_key": "data",
    "sort_data": "filename",
    "on_data_key_collision": "error",
    "strict_sort_order": False,
    "strict_undefined": False,
    "output": None,
    "logging": {
        "level": None,
        "format": "text",
        "file": "",
    },
}
