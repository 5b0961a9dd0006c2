"""Path discovery and file ordering."""

from ._order import (
    DEFAULT_SORT_ORDER,
    SortKey,
    SortOrder,
    parse_sort_order,
    sort_loaded,
    sort_paths,
)
from ._resolve import (
    is_glob_pattern,
    resolve_paths,
    resolve_paths_with_diagnostics,
    walk_files,
)

__all__ = [
    "DEFAULT_SORT_ORDER",
    "SortKey",
    "SortOrder",
    "is_glob_pattern",
    "parse_sort_order",
    "resolve_paths",
    "resolve_paths_with_diagnostics",
    "sort_loaded",
    "sort_paths",
    "walk_files",
]
