"""
Core listing logic: path composition, filtering and the directory walker.
"""

from .paths import qualify, qualify_all, strip, strip_all
from .filters import EntryFilter
from .walker import DirectoryWalker

__all__ = [
    # Path composition
    "qualify",
    "qualify_all",
    "strip",
    "strip_all",
    # Filtering
    "EntryFilter",
    # Traversal
    "DirectoryWalker",
]
