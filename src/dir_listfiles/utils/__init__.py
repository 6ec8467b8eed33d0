"""
Utility modules for directory listing.
"""

from .exceptions import (
    ConfigurationError,
    DirectoryReadError,
    InvalidRootError,
    ListFilesError,
    handle_listing_error,
)
from .logging import LoggerMixin, get_logger, setup_logging

__all__ = [
    "ListFilesError",
    "InvalidRootError",
    "DirectoryReadError",
    "ConfigurationError",
    "handle_listing_error",
    "setup_logging",
    "get_logger",
    "LoggerMixin",
]
