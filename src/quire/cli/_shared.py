"""Shared CLI utilities.

This module provides exit codes and console helpers for error handling.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Never

from rich.markup import escape

from quire.exceptions import (
    ConfigError,
    DataError,
    FileOrderError,
    QuireError,
    TemplateError,
)

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "ExitCode",
    "exit_code_for",
    "exit_with_error",
    "get_error_console",
]


class ExitCode(IntEnum):
    """Standard exit codes for the quire CLI."""

    SUCCESS = 0
    CONFIG_ERROR = 1
    DATA_ERROR = 2
    TEMPLATE_ERROR = 3
    IO_ERROR = 4


def exit_code_for(error: QuireError | OSError) -> ExitCode:
    """Map an error raised while rendering to the exit code reporting it."""
    match error:
        case ConfigError():
            return ExitCode.CONFIG_ERROR
        case DataError() | FileOrderError():
            return ExitCode.DATA_ERROR
        case TemplateError():
            return ExitCode.TEMPLATE_ERROR
        case _:
            return ExitCode.IO_ERROR


def get_error_console() -> Console:
    """Get a Rich console configured for error output to stderr.

    Returns:
        Console instance writing to stderr.
    """
    from rich.console import Console  # noqa: PLC0415

    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.IO_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display. Rich markup is not
            interpreted.
        code: The exit code to use (defaults to IO_ERROR).
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(code)
