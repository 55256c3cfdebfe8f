"""Filesystem copying and introspection helpers for dependency tooling."""

from __future__ import annotations

from .capabilities import permission_denial_supported
from .copier import copy_dir, copy_file
from .errors import (
    FsError,
    NotFoundError,
    PartialWriteError,
    PermissionDeniedError,
    TypeMismatchError,
    UnsupportedEntryError,
    wrap_os_error,
)
from .paths import has_filepath_prefix
from .predicates import file_info, is_dir, is_non_empty_dir, is_regular, is_symlink
from .rename import rename_with_fallback
from .types import EntryKind, FileInfo, StrPath

__all__ = [
    # capabilities
    "permission_denial_supported",
    # copier
    "copy_dir",
    "copy_file",
    # errors
    "FsError",
    "NotFoundError",
    "PartialWriteError",
    "PermissionDeniedError",
    "TypeMismatchError",
    "UnsupportedEntryError",
    "wrap_os_error",
    # paths
    "has_filepath_prefix",
    # predicates
    "file_info",
    "is_dir",
    "is_non_empty_dir",
    "is_regular",
    "is_symlink",
    # rename
    "rename_with_fallback",
    # types
    "EntryKind",
    "FileInfo",
    "StrPath",
]
