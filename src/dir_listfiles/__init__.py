"""
dir-listfiles

List the files and directories under a path, recursively or one level deep,
with filters for files, directories, hidden entries and extensions.
"""

__version__ = "0.4.0"

from .listing import list_files_flat, list_files_no_path, list_files_recursive
from .models.options import ListOptions
from .utils.exceptions import (
    ConfigurationError,
    DirectoryReadError,
    InvalidRootError,
    ListFilesError,
)

__all__ = [
    "list_files_flat",
    "list_files_recursive",
    "list_files_no_path",
    "ListOptions",
    "ListFilesError",
    "InvalidRootError",
    "DirectoryReadError",
    "ConfigurationError",
]
