"""Custom exceptions for token style resolution."""

from typing import Any


class TokenStyleError(Exception):
    """Base exception for token style operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class TokenStyleConfigError(TokenStyleError):
    """Raised when a palette, rule set or theme file is invalid."""
