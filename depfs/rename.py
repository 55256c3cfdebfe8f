"""Rename that survives crossing filesystem boundaries."""

from __future__ import annotations

import errno
import os
import shutil
from typing import TYPE_CHECKING

from .copier import copy_dir, copy_file
from .errors import NotFoundError, UnsupportedEntryError, wrap_os_error
from .logger import logger
from .predicates import file_info

if TYPE_CHECKING:
    from .types import StrPath


def rename_with_fallback(src: StrPath, dst: StrPath) -> None:
    """Move src to dst, copying and deleting when a plain rename cannot.

    The copy fallback only kicks in for EXDEV (src and dst on different
    devices). It is not atomic: a failure while copying or removing src can
    leave both paths populated.
    """
    info = file_info(src, follow_symlinks=False)
    if info is None:
        raise NotFoundError(f"cannot rename {os.fspath(src)}: source does not exist", src)

    try:
        os.rename(src, dst)
        return
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise wrap_os_error(exc, dst, f"cannot rename {os.fspath(src)} to") from exc

    logger.debug("rename crossed devices, copying instead", src=os.fspath(src), dst=os.fspath(dst))

    if info.kind == "dir":
        copy_dir(src, dst)
        try:
            shutil.rmtree(src)
        except OSError as exc:
            raise wrap_os_error(exc, src, "copied but cannot remove source directory") from exc
        return

    if info.kind == "symlink":
        try:
            os.symlink(os.readlink(src), dst)
        except OSError as exc:
            raise wrap_os_error(exc, dst, f"cannot recreate symlink {os.fspath(src)} as") from exc
    elif info.kind == "regular":
        copy_file(src, dst)
    else:
        raise UnsupportedEntryError(f"cannot move special file {os.fspath(src)} across devices", src)

    try:
        os.unlink(src)
    except OSError as exc:
        raise wrap_os_error(exc, src, "copied but cannot remove source") from exc
