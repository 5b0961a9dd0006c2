"""Expansion of glob patterns and directories into file paths."""

from __future__ import annotations

import glob
from pathlib import Path
from typing import TYPE_CHECKING

from quire.diagnostics import Diagnostic

if TYPE_CHECKING:
    from collections.abc import Iterable

    from structlog.typing import FilteringBoundLogger

WILDCARD = "*"


def is_glob_pattern(value: str) -> bool:
    """Check whether a path string contains the `*` glob wildcard.

    `?` and `[` only act as glob syntax inside a pattern that also holds `*`,
    so file names such as `post[1].json` pass through as plain paths.
    """
    return WILDCARD in value


def walk_files(directory: Path) -> list[Path]:
    """List all regular files below a directory, at any depth.

    Args:
        directory: Directory to walk.

    Returns:
        Sorted list of file paths. Directories are never included.
    """
    return sorted(path for path in directory.rglob("*") if path.is_file())


def _expand_glob(pattern: str) -> list[Path]:
    """Expand a glob pattern, walking any directories it matches."""
    expanded: list[Path] = []
    for match in sorted(glob.glob(pattern, recursive=True)):  # noqa: PTH207
        path = Path(match)
        if path.is_dir():
            expanded.extend(walk_files(path))
        elif path.is_file():
            expanded.append(path)
    return expanded


def resolve_paths_with_diagnostics(
    inputs: Iterable[str | Path],
) -> tuple[list[Path], list[Diagnostic]]:
    """Expand inputs into a flat, deduplicated list of file paths.

    Glob patterns are expanded, directories are walked recursively, and any
    other input passes through unchanged without an existence check.

    Args:
        inputs: Plain paths, glob patterns, or directories.

    Returns:
        Tuple of (paths, diagnostics). Paths keep first-seen order; a pattern
        that matches nothing or cannot be expanded produces a diagnostic.
    """
    seen: dict[Path, None] = {}
    diagnostics: list[Diagnostic] = []

    for item in inputs:
        text = str(item)
        if is_glob_pattern(text):
            try:
                matches = _expand_glob(text)
            except (OSError, ValueError) as e:
                diagnostics.append(Diagnostic(text, f"failed to expand glob: {e}"))
                continue
            if not matches:
                diagnostics.append(Diagnostic(text, "glob matched no files"))
            for match in matches:
                seen.setdefault(match, None)
            continue

        path = Path(item)
        if path.is_dir():
            for found in walk_files(path):
                seen.setdefault(found, None)
        else:
            seen.setdefault(path, None)

    return list(seen), diagnostics


def resolve_paths(
    inputs: Iterable[str | Path],
    *,
    logger: FilteringBoundLogger | None = None,
) -> list[Path]:
    """Expand inputs into a flat, deduplicated list of file paths.

    Args:
        inputs: Plain paths, glob patterns, or directories.
        logger: Optional logger for diagnostics.

    Returns:
        List of file paths in first-seen order.
    """
    paths, diagnostics = resolve_paths_with_diagnostics(inputs)
    if diagnostics:
        if logger is None:
            from quire.utils import create_logger  # noqa: PLC0415

            logger = create_logger()
        for diagnostic in diagnostics:
            logger.warning(
                "Skipping path input", path=str(diagnostic.path), reason=diagnostic.message
            )
    return paths
