"""
Filesystem input modules.
"""

from .dir_scanner import DirectoryScanner

__all__ = [
    "DirectoryScanner",
]
