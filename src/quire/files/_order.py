"""Ordering of file paths and loaded file data.

Two dimensions are supported, base filename and modification time, each in
ascending or descending direction. The same key parser and comparator serve
raw path lists (before loading) and loaded data keyed by path (after
loading).

Order strings:
    ""               filename, ascending
    "filename"       filename, ascending
    "filename-asc"   filename, ascending
    "filename-desc"  filename, descending
    "modified"       modification time, ascending
    "modified-asc"   modification time, ascending
    "modified-desc"  modification time, descending
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from quire.exceptions import FileOrderError, InvalidSortOrderError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from structlog.typing import FilteringBoundLogger

T = TypeVar("T")

DESCENDING_SUFFIX = "-desc"


class SortKey(StrEnum):
    """File attribute used to order files."""

    FILENAME = "filename"
    MODIFIED = "modified"


@dataclass(frozen=True, slots=True)
class SortOrder:
    """A parsed sort order.

    Attributes:
        key: The file attribute to compare.
        descending: Whether to reverse the ascending order.
    """

    key: SortKey = SortKey.FILENAME
    descending: bool = False

    def __str__(self) -> str:
        return f"{self.key}-{'desc' if self.descending else 'asc'}"


DEFAULT_SORT_ORDER = SortOrder()


def parse_sort_order(value: str) -> SortOrder | None:
    """Parse a sort order string.

    The prefix ("filename" or "modified") selects the dimension and a
    "-desc" suffix selects descending direction; anything else is ascending.

    Args:
        value: The order string. An empty string means filename ascending.

    Returns:
        The parsed SortOrder, or None if the string is not recognized.
    """
    if not value:
        return DEFAULT_SORT_ORDER

    for key in SortKey:
        if value.startswith(key.value):
            return SortOrder(key=key, descending=value.endswith(DESCENDING_SUFFIX))

    return None


def _filename_key(path: Path) -> tuple[str, str]:
    return (path.name, str(path))


def _modified_key(path: Path) -> tuple[int, str, str]:
    try:
        mtime = path.stat().st_mtime_ns
    except OSError as e:
        msg = f"Failed to read modification time of '{path}': {e}"
        raise FileOrderError(msg, path=path) from e
    return (mtime, path.name, str(path))


def _key_function(order: SortOrder) -> Callable[[Path], tuple[object, ...]]:
    if order.key is SortKey.MODIFIED:
        return _modified_key
    return _filename_key


def _ordered_paths(paths: Iterable[Path], order: SortOrder) -> list[Path]:
    """Order paths; every path gets a unique key so the order is total."""
    key_func = _key_function(order)
    # Compute keys up front so a stat failure aborts before any reordering
    keyed = [(key_func(path), path) for path in paths]
    keyed.sort(key=lambda pair: pair[0], reverse=order.descending)
    return [path for _, path in keyed]


def _resolve_order(
    order: str | SortOrder,
    *,
    strict: bool,
    logger: FilteringBoundLogger | None,
) -> SortOrder | None:
    if isinstance(order, SortOrder):
        return order

    parsed = parse_sort_order(order)
    if parsed is not None:
        return parsed

    if strict:
        msg = f"Invalid sort order '{order}'"
        raise InvalidSortOrderError(msg, order=order)

    if logger is None:
        from quire.utils import create_logger  # noqa: PLC0415

        logger = create_logger()
    logger.warning("Unrecognized sort order, keeping files as found", order=order)
    return None


def sort_paths(
    paths: Iterable[str | Path],
    order: str | SortOrder = DEFAULT_SORT_ORDER,
    *,
    strict: bool = False,
    logger: FilteringBoundLogger | None = None,
) -> list[Path]:
    """Sort a list of file paths.

    Args:
        paths: File paths to order.
        order: Sort order string or parsed SortOrder.
        strict: Raise on an unrecognized order instead of keeping input order.
        logger: Optional logger for diagnostics.

    Returns:
        A new list with the paths in the requested order.

    Raises:
        FileOrderError: If ordering by modification time and a file cannot
            be stat'd.
        InvalidSortOrderError: If `strict` and the order is not recognized.
    """
    path_list = [Path(p) for p in paths]
    resolved = _resolve_order(order, strict=strict, logger=logger)
    if resolved is None:
        return path_list
    return _ordered_paths(path_list, resolved)


def sort_loaded(
    files: Mapping[Path, T],
    order: str | SortOrder = DEFAULT_SORT_ORDER,
    *,
    strict: bool = False,
    logger: FilteringBoundLogger | None = None,
) -> list[T]:
    """Order loaded file contents by an attribute of the file they came from.

    Args:
        files: Mapping of file path to loaded content.
        order: Sort order string or parsed SortOrder.
        strict: Raise on an unrecognized order instead of keeping input order.
        logger: Optional logger for diagnostics.

    Returns:
        The loaded contents in the requested order. An unrecognized order
        (non-strict) returns them in mapping order.

    Raises:
        FileOrderError: If ordering by modification time and a file cannot
            be stat'd.
        InvalidSortOrderError: If `strict` and the order is not recognized.
    """
    resolved = _resolve_order(order, strict=strict, logger=logger)
    if resolved is None:
        return list(files.values())
    return [files[path] for path in _ordered_paths(files.keys(), resolved)]
