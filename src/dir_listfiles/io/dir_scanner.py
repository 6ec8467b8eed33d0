"""
Single-level directory scanning.
"""

import os

from ..core.paths import qualify
from ..models.entry import Entry
from ..utils.exceptions import handle_listing_error
from ..utils.logging import LoggerMixin


class DirectoryScanner(LoggerMixin):
    """Lists the immediate children of one directory."""

    SPECIAL_ENTRIES = frozenset({os.curdir, os.pardir})

    def scan(self, directory: str, sort: bool = False) -> list[Entry]:
        """
        Return the entries directly inside ``directory``.

        Entries come back in the order the filesystem yields them unless
        ``sort`` is set, in which case they are ordered by name. ``is_dir``
        follows symbolic links.

        Raises:
            DirectoryReadError: If the directory cannot be opened or read
        """
        entries = []
        try:
            with os.scandir(directory) as it:
                for item in it:
                    if item.name in self.SPECIAL_ENTRIES:
                        continue
                    entries.append(
                        Entry(
                            path=qualify(directory, item.name),
                            name=item.name,
                            is_dir=item.is_dir(),
                        )
                    )
        except OSError as e:
            self.log_error("scandir", e, directory=directory)
            raise handle_listing_error(
                e, {"path": directory, "operation": "scandir"}
            ) from e

        if sort:
            entries.sort(key=lambda entry: entry.name)

        self.log_debug("Scanned directory", directory=directory, entries=len(entries))
        return entries

    def scan_names(self, directory: str, sort: bool = False) -> list[str]:
        """Return the bare names of the entries directly inside ``directory``."""
        return [entry.name for entry in self.scan(directory, sort=sort)]
