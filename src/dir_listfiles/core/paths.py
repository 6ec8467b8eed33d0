"""
Path composition between full, root-relative and bare-name forms.

Prefix stripping is a plain string comparison rather than a pattern match,
so characters in the root that are special to regular expressions or globs
need no escaping.
"""

import os
from collections.abc import Iterable


def qualify(root: str, name: str, sep: str = os.sep) -> str:
    """
    Join a root path and a bare entry name.

    A separator already ending ``root`` is not doubled, so ``qualify("/", "etc")``
    gives ``"/etc"`` and ``qualify("a/", "b")`` gives ``"a/b"``.
    """
    if not root:
        return name
    if root.endswith(sep):
        return root + name
    return root + sep + name


def strip(root: str, path: str, sep: str = os.sep) -> str:
    """
    Remove ``root`` and at most one following separator from ``path``.

    Paths that do not start with ``root`` are returned unchanged.
    """
    if not root or not path.startswith(root):
        return path
    rest = path[len(root):]
    if rest.startswith(sep):
        rest = rest[len(sep):]
    return rest


def qualify_all(root: str, names: Iterable[str]) -> list[str]:
    """Qualify every name in ``names`` with ``root``."""
    return [qualify(root, name) for name in names]


def strip_all(root: str, paths: Iterable[str]) -> list[str]:
    """Strip ``root`` from every path in ``paths``."""
    return [strip(root, path) for path in paths]
