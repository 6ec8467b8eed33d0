"""
Depth-first directory walker.
"""

import os
import time
from typing import Optional, Union

from ..io.dir_scanner import DirectoryScanner
from ..models.entry import ListingResult
from ..models.options import ListOptions
from ..utils.exceptions import InvalidRootError
from ..utils.logging import LoggerMixin
from .filters import EntryFilter
from .paths import qualify_all, strip_all

PathLike = Union[str, "os.PathLike[str]"]


class DirectoryWalker(LoggerMixin):
    """
    Drives the scanner over a directory tree and filters what it finds.

    Recursive walks descend into every subdirectory, including directories
    the filter keeps out of the result: options such as ``exclude_directories``
    or ``only_files`` change what is returned, never how deep the walk goes.
    """

    def __init__(
        self,
        scanner: Optional[DirectoryScanner] = None,
        entry_filter: Optional[EntryFilter] = None,
    ):
        """Initialise walker with its scanner and filter."""
        self.scanner = scanner or DirectoryScanner()
        self.entry_filter = entry_filter or EntryFilter()

    @staticmethod
    def validate_root(path: Optional[PathLike]) -> str:
        """Return ``path`` as a string, or raise if it is not an existing directory."""
        if path is None:
            raise InvalidRootError("Root path is required")

        root = os.fspath(path)
        if not root:
            raise InvalidRootError("Root path is required")

        if not os.path.exists(root):
            raise InvalidRootError(f"Root path does not exist: {root}", path=root)

        if not os.path.isdir(root):
            raise InvalidRootError(f"Root path is not a directory: {root}", path=root)

        return root

    def walk_recursive(self, path: PathLike, options: ListOptions) -> ListingResult:
        """
        List every entry under ``path``.

        Entries of a directory come before the contents of its subdirectories,
        and subdirectories are expanded in scan order. The walk keeps its own
        stack, so tree depth is not bounded by the interpreter recursion limit.

        Raises:
            InvalidRootError: If ``path`` is not an existing directory
            DirectoryReadError: If any directory in the tree cannot be read
        """
        root = self.validate_root(path)
        self.log_operation("recursive listing", root=root)
        start_time = time.perf_counter()

        result = ListingResult()
        pending = [root]

        while pending:
            directory = pending.pop()
            entries = self.scanner.scan(directory, sort=options.sort)
            result.directories_visited += 1

            for entry in entries:
                result.total_scanned += 1
                if self.entry_filter.matches(entry.path, options, is_dir=entry.is_dir):
                    result.paths.append(entry.path)
                else:
                    result.filtered_out += 1

            # Reversed so the first subdirectory is expanded first.
            pending.extend(entry.path for entry in reversed(entries) if entry.is_dir)

        if options.strip_path:
            result.paths = strip_all(root, result.paths)

        result.scan_time_ms = (time.perf_counter() - start_time) * 1000
        self.log_success(
            "recursive listing",
            root=root,
            entries=len(result.paths),
            total_scanned=result.total_scanned,
            filtered_out=result.filtered_out,
            directories_visited=result.directories_visited,
            scan_time_ms=f"{result.scan_time_ms:.1f}",
        )
        return result

    def walk_flat(self, path: PathLike, options: ListOptions) -> ListingResult:
        """
        List the direct children of ``path``.

        Surviving names are joined with the root unless ``strip_path`` is set,
        in which case bare names are returned.

        Raises:
            InvalidRootError: If ``path`` is not an existing directory
            DirectoryReadError: If ``path`` cannot be read
        """
        root = self.validate_root(path)
        self.log_operation("flat listing", root=root)
        start_time = time.perf_counter()

        names = self.scanner.scan_names(root, sort=options.sort)
        kept = [
            name for name in names if self.entry_filter.matches(name, options, base=root)
        ]

        if not options.strip_path:
            kept = qualify_all(root, kept)

        result = ListingResult(
            paths=kept,
            total_scanned=len(names),
            filtered_out=len(names) - len(kept),
            directories_visited=1,
            scan_time_ms=(time.perf_counter() - start_time) * 1000,
        )
        self.log_success(
            "flat listing",
            root=root,
            entries=len(result.paths),
            filtered_out=result.filtered_out,
        )
        return result
