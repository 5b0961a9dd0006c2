"""quire exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class QuireError(Exception):
    """Base exception for quire errors."""


# =============================================================================
# Data Exceptions
# =============================================================================


class DataError(QuireError):
    """Base exception for data loading and merging errors."""


class UnsupportedDataFormatError(DataError, ValueError):
    """Raised when a data format identifier is not supported.

    Attributes:
        identifier: The format name or file extension that was not recognized.
        path: The file that was being loaded, if any.
    """

    def __init__(
        self, message: str, *, identifier: str, path: Path | None = None
    ) -> None:
        """Initialize with error message and the offending identifier."""
        super().__init__(message)
        self.identifier: str = identifier
        self.path: Path | None = path


class DataLoadError(DataError):
    """Raised when data content cannot be decoded.

    Attributes:
        path: The file that failed to decode, or None for in-memory content.
        data_format: The format the content was decoded as.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        data_format: str | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.data_format: str | None = data_format


class DataKeyCollisionError(DataError, KeyError):
    """Raised when the data key is already defined by global data.

    Attributes:
        key: The colliding data key.
    """

    def __init__(self, message: str, *, key: str) -> None:
        """Initialize with error message and the colliding key."""
        super().__init__(message)
        self.key: str = key

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


# =============================================================================
# File Ordering Exceptions
# =============================================================================


class FileOrderError(QuireError):
    """Raised when a set of files cannot be put in order.

    Attributes:
        path: The file whose metadata could not be read, if any.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and optional path context."""
        super().__init__(message)
        self.path: Path | None = path


class InvalidSortOrderError(FileOrderError, ValueError):
    """Raised in strict mode when a sort order string is not recognized.

    Attributes:
        order: The unrecognized sort order string.
    """

    def __init__(self, message: str, *, order: str) -> None:
        """Initialize with error message and the rejected order."""
        super().__init__(message)
        self.order: str = order


# =============================================================================
# Template Exceptions
# =============================================================================


class TemplateError(QuireError):
    """Base exception for template loading and execution errors."""


class UnsupportedTemplateLanguageError(TemplateError, ValueError):
    """Raised when a template language identifier is not supported.

    Attributes:
        identifier: The language name or file extension that was not recognized.
    """

    def __init__(self, message: str, *, identifier: str) -> None:
        """Initialize with error message and the offending identifier."""
        super().__init__(message)
        self.identifier: str = identifier


class TemplateLoadError(TemplateError):
    """Raised when a root template or partial cannot be loaded or parsed.

    Attributes:
        path: The template file that failed, or None for in-memory sources.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and optional path context."""
        super().__init__(message)
        self.path: Path | None = path


class TemplateNotFoundError(TemplateLoadError, FileNotFoundError):
    """Raised when the root template file does not exist."""


class TemplateExecutionError(TemplateError):
    """Raised when a loaded template fails to render.

    Attributes:
        name: Name of the root template.
        language: The template language tag, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        language: str | None = None,
    ) -> None:
        """Initialize with error message and template context."""
        super().__init__(message)
        self.name: str | None = name
        self.language: str | None = language


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(QuireError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when a configuration file cannot be loaded or parsed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
