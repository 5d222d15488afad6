"""
Error types for dynui resolution and configuration.
"""

from typing import Any


class DynUIError(Exception):
    """Base exception for all dynui errors."""

    def __init__(self, message: str, context: Any = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context is not None:
            return f"{self.message} (in {self.context!r})"
        return self.message


class SelectorError(DynUIError):
    """
    Raised when a dynamic variable contains a level that is not a selector.

    Examples:
    - A level missing the "root" property
    - A level missing the "keys" property
    - A level that is not a mapping at all
    """

    def __init__(self, level: Any, context: Any = None):
        self.level = level
        super().__init__(
            f"Could not resolve the following variable: {level!r}. "
            'Missing "root" or "keys" properties.',
            context,
        )


class ConfigError(DynUIError):
    """
    Raised when a renderer manifest cannot be loaded.

    Examples:
    - Manifest file does not exist
    - Invalid TOML syntax
    - A registry table that is not a table
    """

    pass
