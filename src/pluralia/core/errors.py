"""
Error types for pluralia configuration.

Inflection itself never raises; only loading configuration can fail.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class PluraliaError(Exception):
    """Base exception for all pluralia errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class ManifestError(PluraliaError):
    """
    Raised when a ``pluralia.toml`` manifest cannot be used.

    Examples:
    - File not found
    - Invalid TOML syntax
    - Unknown classical flag
    - Non-boolean flag or non-string plural
    """

    pass


@dataclass
class ErrorContext:
    """
    Where a configuration error was found.

    Attributes:
        file: Manifest path, if the data came from a file
        key: Dotted key inside the manifest (e.g. "classical.herd")
    """

    file: Path | None = None
    key: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "pluralia.toml [classical.herd]"
        """
        location = str(self.file) if self.file else "<manifest>"
        if self.key:
            location += f" [{self.key}]"
        return location
