"""
Error types for stencil template initialization and verification.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class StencilError(Exception):
    """Base exception for all stencil errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class ConfigError(StencilError):
    """
    Raised when template configuration cannot be loaded.

    Examples:
    - Malformed stencil.toml
    - Override with the wrong type (string where a list is expected)
    """

    pass


class InitError(StencilError):
    """Raised when template initialization fails."""

    pass


class MarkerError(InitError):
    """
    Raised when the UNINITIALIZED marker cannot be removed.

    Fatal: files may already be rewritten while the marker still
    declares the tree uninitialized.
    """

    pass


class StateError(StencilError):
    """Raised when the initialization state record cannot be read."""

    pass


class GitCommandError(StencilError):
    """Raised when a git command exits non-zero."""

    pass


@dataclass
class ErrorContext:
    """
    Location information for an error.

    Attributes:
        file: Path of the file involved
        line: Optional line number (1-indexed)
    """

    file: Path
    line: int | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "stencil.toml:3"
        """
        if self.line is not None:
            return f"{self.file}:{self.line}"
        return str(self.file)
