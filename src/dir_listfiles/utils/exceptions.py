"""
Custom exceptions for directory listing.
"""

from typing import Any, Optional


class ListFilesError(Exception):
    """Base exception for directory listing errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class InvalidRootError(ListFilesError):
    """Exception raised when the root path is missing or not a directory."""

    def __init__(self, message: str, path: Optional[str] = None):
        details = {}
        if path:
            details["path"] = path
        super().__init__(message, details)
        self.path = path


class DirectoryReadError(ListFilesError):
    """Exception raised when a directory cannot be opened or read."""

    def __init__(
        self, message: str, path: Optional[str] = None, operation: Optional[str] = None
    ):
        details = {}
        if path:
            details["path"] = path
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
        self.path = path
        self.operation = operation


class ConfigurationError(ListFilesError):
    """Exception raised when listing options are invalid."""

    def __init__(
        self, message: str, config_field: Optional[str] = None, config_value: Any = None
    ):
        details = {}
        if config_field:
            details["config_field"] = config_field
        if config_value is not None:
            details["config_value"] = str(config_value)
        super().__init__(message, details)
        self.config_field = config_field
        self.config_value = config_value


def handle_listing_error(
    error: OSError, context: Optional[dict] = None
) -> DirectoryReadError:
    """Convert an OSError from a directory operation to DirectoryReadError."""
    error_context = context or {}
    path = error_context.get("path")
    operation = error_context.get("operation")

    if isinstance(error, FileNotFoundError):
        message = f"Directory not found: {error}"
    elif isinstance(error, NotADirectoryError):
        message = f"Not a directory: {error}"
    elif isinstance(error, PermissionError):
        message = f"Permission denied: {error}"
    else:
        message = f"Cannot open directory: {error}"
    return DirectoryReadError(message, path=path, operation=operation)
