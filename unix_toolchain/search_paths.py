"""Search-path derivation and executable lookup over directory lists.

Turns a ``PATH``-style string into an ordered tuple of absolute
directories and scans such a tuple for a named executable.
"""

from __future__ import annotations

import os
from typing import Iterable, Optional

from .implementations import RealFileSystem
from .interfaces import FileSystemInterface


def get_env_search_paths(path_string: Optional[str], cwd: Optional[str]) -> tuple[str, ...]:
    """Split a ``PATH`` value into absolute directories.

    Empty entries and entries containing NUL are skipped. Relative
    entries are resolved against cwd, or skipped when cwd is unknown.

    Args:
        path_string: Colon-separated directory list, or None if unset.
        cwd: Current working directory used to absolutize relative entries.

    Returns:
        Tuple of normalized absolute directories in PATH order.
    """
    if not path_string:
        return ()

    paths: list[str] = []
    for entry in path_string.split(os.pathsep):
        if not entry or "\0" in entry:
            continue
        if not os.path.isabs(entry):
            if cwd is None:
                continue
            entry = os.path.join(cwd, entry)
        paths.append(os.path.normpath(entry))
    return tuple(paths)


def lookup_executable_path(
    filename: str,
    search_paths: Iterable[str],
    fs: Optional[FileSystemInterface] = None,
    cwd: Optional[str] = None,
) -> Optional[str]:
    """Find the first directory in search_paths that contains filename.

    Only existence is checked; the executable bit and tool version are
    left to the caller. A filename containing a ``/`` is treated as a
    path: it is checked directly (relative ones against cwd) and
    search_paths is not consulted.

    Args:
        filename: Executable name to look for (e.g. ``clang``), or a path.
        search_paths: Directories to scan, highest priority first.
        fs: Filesystem probe, defaults to the real filesystem.
        cwd: Directory that relative path-valued filenames resolve against.

    Returns:
        Absolute path of the first match, or None if not found.
    """
    if not filename:
        return None
    fs = fs or RealFileSystem()
    if os.sep in filename:
        if not os.path.isabs(filename):
            if cwd is None:
                return None
            filename = os.path.join(cwd, filename)
        candidate = os.path.normpath(filename)
        return candidate if fs.is_file(candidate) else None
    for directory in search_paths:
        candidate = os.path.join(directory, filename)
        if fs.is_file(candidate):
            return candidate
    return None
