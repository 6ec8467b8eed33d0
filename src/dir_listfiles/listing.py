"""
Public listing functions.

Each function takes a root directory and options, either as a
:class:`ListOptions`, as a mapping of option keys, as keyword arguments, or
any mix of these with keywords applied last::

    list_files_recursive("/etc", only_folders=True)
    list_files_recursive("/etc", {"excludeHiddenFiles": 1, "ext": "conf"})

Option synonyms are resolved before filtering and unknown keys are ignored.
Directory filters (``only_files``, ``exclude_directories``) only affect what
is returned: recursive listings still descend into every subdirectory.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from .core.walker import DirectoryWalker, PathLike
from .models.options import ListOptions

OptionsArg = Optional[Union[ListOptions, Mapping[str, Any]]]


def list_files_flat(
    path: PathLike, options: OptionsArg = None, **kwargs: Any
) -> list[str]:
    """
    List the direct children of a directory, with full path.

    >>> list_files_flat("/etc")  # doctest: +SKIP
    ['/etc/hosts', '/etc/passwd', '/etc/ssl']

    With ``strip_path`` the bare names are returned instead.

    Raises:
        InvalidRootError: If ``path`` is missing or not a directory
        DirectoryReadError: If ``path`` cannot be read
    """
    opts = ListOptions.coerce(options, **kwargs)
    return DirectoryWalker().walk_flat(path, opts).paths


def list_files_recursive(
    path: PathLike, options: OptionsArg = None, **kwargs: Any
) -> list[str]:
    """
    List a directory and all of its subdirectories, with full path.

    >>> list_files_recursive("/etc")  # doctest: +SKIP
    ['/etc/hosts', '/etc/passwd', '/etc/apache', '/etc/apache/httpd.conf']

    With ``strip_path`` the paths are returned relative to ``path``.

    Raises:
        InvalidRootError: If ``path`` is missing or not a directory
        DirectoryReadError: If any directory in the tree cannot be read
    """
    opts = ListOptions.coerce(options, **kwargs)
    return DirectoryWalker().walk_recursive(path, opts).paths


def list_files_no_path(
    path: PathLike, options: OptionsArg = None, **kwargs: Any
) -> list[str]:
    """
    List a directory and all of its subdirectories, relative to ``path``.

    >>> list_files_no_path("/etc")  # doctest: +SKIP
    ['hosts', 'passwd', 'apache', 'apache/httpd.conf']

    Paths are always root-relative; ``strip_path`` makes no difference here.
    """
    opts = ListOptions.coerce(options, **kwargs).stripped()
    return DirectoryWalker().walk_recursive(path, opts).paths
