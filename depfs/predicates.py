"""Filesystem predicates that tell "missing" apart from "cannot tell".

Every predicate fetches fresh metadata. A path that does not exist is a
normal ``False`` answer; any other failure to read metadata raises an
:class:`~depfs.errors.FsError`, because the question could not be answered.
"""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

from .errors import wrap_os_error
from .types import FileInfo

if TYPE_CHECKING:
    from .types import EntryKind, StrPath


def _stat(path: StrPath, *, follow_symlinks: bool = True) -> os.stat_result | None:
    try:
        return os.stat(path, follow_symlinks=follow_symlinks)
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise wrap_os_error(exc, path, "cannot stat") from exc


def _kind(mode: int) -> EntryKind:
    if stat.S_ISREG(mode):
        return "regular"
    if stat.S_ISDIR(mode):
        return "dir"
    if stat.S_ISLNK(mode):
        return "symlink"
    return "other"


def file_info(path: StrPath, *, follow_symlinks: bool = True) -> FileInfo | None:
    """Return a metadata snapshot for path, or None if it does not exist."""
    st = _stat(path, follow_symlinks=follow_symlinks)
    if st is None:
        return None
    return FileInfo(
        path=os.fspath(path),
        kind=_kind(st.st_mode),
        mode=stat.S_IMODE(st.st_mode),
        size=st.st_size,
    )


def is_regular(path: StrPath) -> bool:
    """Return True if path is a regular file (symlinks are followed)."""
    st = _stat(path)
    return st is not None and stat.S_ISREG(st.st_mode)


def is_dir(path: StrPath) -> bool:
    """Return True if path is a directory (symlinks are followed)."""
    st = _stat(path)
    return st is not None and stat.S_ISDIR(st.st_mode)


def is_symlink(path: StrPath) -> bool:
    """Return True if path itself is a symbolic link."""
    st = _stat(path, follow_symlinks=False)
    return st is not None and stat.S_ISLNK(st.st_mode)


def is_non_empty_dir(path: StrPath) -> bool:
    """Return True if path is a directory holding at least one entry.

    Anything that is not a directory, including a missing path, gives False.
    A directory whose contents cannot be listed raises.
    """
    if not is_dir(path):
        return False

    try:
        with os.scandir(path) as entries:
            return next(entries, None) is not None
    except OSError as exc:
        raise wrap_os_error(exc, path, "cannot list directory") from exc
