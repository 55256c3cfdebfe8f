"""Error taxonomy for filesystem operations."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import StrPath


class FsError(Exception):
    """Base error for every failure raised by depfs.

    ``path`` names the file or directory the failing call was working on,
    ``errno`` is copied from the underlying ``OSError`` when there is one.
    """

    def __init__(self, message: str, path: StrPath, errno: int | None = None) -> None:
        super().__init__(message)
        self.path = os.fspath(path)
        self.errno = errno


class NotFoundError(FsError):
    """A path that had to exist does not."""


class PermissionDeniedError(FsError):
    """The OS refused access to a path."""


class TypeMismatchError(FsError):
    """A path exists but is the wrong kind of entry."""


class PartialWriteError(FsError):
    """Bytes were copied but the permission bits could not be applied.

    The destination file holds the complete content when this is raised.
    """


class UnsupportedEntryError(FsError):
    """A tree copy met an entry that is neither file, directory nor symlink."""


_ERROR_TYPES: list[tuple[type[OSError] | tuple[type[OSError], ...], type[FsError]]] = [
    (FileNotFoundError, NotFoundError),
    (PermissionError, PermissionDeniedError),
    ((NotADirectoryError, IsADirectoryError, FileExistsError), TypeMismatchError),
]


def wrap_os_error(exc: OSError, path: StrPath, action: str) -> FsError:
    """Translate an OSError into the matching FsError subclass.

    The caller is expected to ``raise wrap_os_error(...) from exc``.
    """
    error_cls: type[FsError] = FsError
    for os_types, fs_type in _ERROR_TYPES:
        if isinstance(exc, os_types):
            error_cls = fs_type
            break

    reason = exc.strerror or str(exc)
    return error_cls(f"{action} {os.fspath(path)}: {reason}", path, exc.errno)
