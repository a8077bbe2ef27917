"""
Base exceptions for the application.
"""

from typing import Any, Dict, Optional


class StylesheetError(Exception):
    """Base exception for stylesheet rendering failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """
        Args:
            message: Human-readable error message
            context: Additional context for logging (kind, hook name, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class UnknownStylesheetError(StylesheetError):
    """Raised in strict mode when a stylesheet kind is not recognised."""


class StylesheetHookError(StylesheetError):
    """Raised when a stylesheet hook does not return a string."""


class StylesheetTransformError(StylesheetError):
    """Raised when a stylesheet cannot be compiled or applied by lxml."""
