"""
Entry inclusion filter.
"""

import os
from typing import Optional

from ..models.options import ListOptions
from .paths import qualify


class EntryFilter:
    """
    Decides whether a single directory entry belongs in the output.

    Checks run in a fixed order and short-circuit:

    1. resolve whether the entry is a directory,
    2. directories-only drops anything that is not a directory,
    3. files-only drops directories,
    4. exclude-directories drops directories,
    5. exclude-hidden drops names starting with ``.``,
    6. the extension filter decides last, on the name suffix alone.

    The filter only controls membership in the result. Whether a directory
    is descended into is decided by the walker and never depends on this.
    """

    def matches(
        self,
        candidate: str,
        options: ListOptions,
        base: Optional[str] = None,
        is_dir: Optional[bool] = None,
    ) -> bool:
        """
        Return True if ``candidate`` should be kept.

        Args:
            candidate: Bare name when ``base`` is given, otherwise a full path
            options: Normalized listing options
            base: Directory containing ``candidate``; joined with it for the
                directory test when set
            is_dir: Already-known directory flag, skips the stat when given
        """
        if is_dir is None:
            target = qualify(base, candidate) if base else candidate
            is_dir = os.path.isdir(target)

        if options.only_directories and not is_dir:
            return False

        if is_dir and (options.only_files or options.exclude_directories):
            return False

        name = self.bare_name(candidate)

        if options.exclude_hidden and self.is_hidden(name):
            return False

        if options.has_extension_filter:
            return self.has_extension(name, options.extension)

        return True

    @staticmethod
    def bare_name(candidate: str) -> str:
        return os.path.basename(candidate.rstrip(os.sep)) or candidate

    @staticmethod
    def is_hidden(name: str) -> bool:
        return name.startswith(".")

    @staticmethod
    def has_extension(name: str, extension: str) -> bool:
        """Case-insensitive check that ``name`` ends in ``.<extension>``."""
        return name.lower().endswith("." + extension.lower())
