"""Shared utilities for quire."""

from ._logging import LogFormatType, create_logger

__all__ = ["LogFormatType", "create_logger"]
