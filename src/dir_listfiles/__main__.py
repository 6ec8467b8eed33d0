#!/usr/bin/env python3
"""
Command-line directory listing.
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Optional

from .listing import list_files_flat, list_files_no_path, list_files_recursive
from .models.options import ListOptions
from .utils.exceptions import ListFilesError
from .utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dir-listfiles",
        description="List files and directories under a path",
    )
    parser.add_argument("root", help="Directory to list")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--flat",
        action="store_true",
        help="List direct children only, no subdirectories",
    )
    mode.add_argument(
        "--no-path",
        action="store_true",
        help="List recursively with paths relative to ROOT",
    )

    parser.add_argument(
        "--only-dirs", action="store_true", help="Emit directories only"
    )
    parser.add_argument("--only-files", action="store_true", help="Emit files only")
    parser.add_argument(
        "--no-dirs",
        action="store_true",
        help="Omit directories from output (their contents are still listed)",
    )
    parser.add_argument(
        "--no-hidden",
        action="store_true",
        help="Omit entries whose name starts with a dot",
    )
    parser.add_argument(
        "--ext", default=None, help="Keep only names ending in .EXT (case-insensitive)"
    )
    parser.add_argument(
        "--strip-path",
        action="store_true",
        help="Print paths relative to ROOT (bare names with --flat)",
    )
    parser.add_argument(
        "--sort", action="store_true", help="Sort each directory's entries by name"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results as a JSON array"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--log-file", type=Path, default=None, help="Also write logs to this file"
    )
    return parser


def options_from_args(args: argparse.Namespace) -> ListOptions:
    """Create listing options from parsed CLI arguments."""
    return ListOptions(
        only_directories=args.only_dirs,
        only_files=args.only_files,
        exclude_directories=args.no_dirs,
        exclude_hidden=args.no_hidden,
        extension=args.ext,
        strip_path=args.strip_path,
        sort=args.sort,
    )


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(
        level="WARNING" if args.quiet else "INFO",
        log_file=args.log_file,
        verbose=args.verbose,
    )

    try:
        options = options_from_args(args)

        if args.flat:
            paths = list_files_flat(args.root, options)
        elif args.no_path:
            paths = list_files_no_path(args.root, options)
        else:
            paths = list_files_recursive(args.root, options)

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        sys.exit(130)
    except ListFilesError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    write_paths(paths, as_json=args.json)


def write_paths(paths: list[str], as_json: bool = False) -> None:
    """
    Print listing results to stdout.

    Names that are not valid in the filesystem encoding arrive with surrogate
    escapes; text output writes their original bytes, and JSON output escapes
    them as ``\\udcXX`` code points.
    """
    if as_json:
        print(json.dumps(paths, indent=2))
        return

    out = getattr(sys.stdout, "buffer", None)
    if out is None:
        for path in paths:
            print(path)
        return

    sys.stdout.flush()
    for path in paths:
        out.write(os.fsencode(path) + b"\n")
    out.flush()


if __name__ == "__main__":
    main()
