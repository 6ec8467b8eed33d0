"""
Data models for directory listing.
"""

from .entry import Entry, ListingResult
from .options import OPTION_ALIASES, ListOptions, canonicalize_options

__all__ = [
    "Entry",
    "ListingResult",
    "ListOptions",
    "OPTION_ALIASES",
    "canonicalize_options",
]
