"""File and directory-tree copying with exact permission propagation."""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from . import config
from .errors import (
    FsError,
    NotFoundError,
    PartialWriteError,
    TypeMismatchError,
    UnsupportedEntryError,
    wrap_os_error,
)
from .logger import logger
from .paths import has_filepath_prefix
from .predicates import file_info

if TYPE_CHECKING:
    from .types import StrPath


def _is_same_file(src_stat: os.stat_result, dst: StrPath) -> bool:
    try:
        dst_stat = os.stat(dst)
    except OSError:
        # Missing or unreachable; opening dst reports the real problem.
        return False
    return os.path.samestat(src_stat, dst_stat)


def copy_file(src: StrPath, dst: StrPath) -> None:
    """Copy the bytes and permission bits of src into dst.

    dst is created or truncated; its parent directory must already exist.
    Timestamps and extended attributes are not carried over. If the bytes
    are written but the mode cannot be applied, PartialWriteError is raised
    and dst keeps the copied content.
    """
    try:
        fsrc = open(src, "rb")
    except OSError as exc:
        raise wrap_os_error(exc, src, "cannot open source file") from exc

    with fsrc:
        try:
            src_stat = os.fstat(fsrc.fileno())
        except OSError as exc:
            raise wrap_os_error(exc, src, "cannot stat source file") from exc
        mode = stat.S_IMODE(src_stat.st_mode)

        if _is_same_file(src_stat, dst):
            raise FsError(f"{os.fspath(src)} and {os.fspath(dst)} are the same file", dst)

        try:
            fdst = open(dst, "wb")
        except OSError as exc:
            raise wrap_os_error(exc, dst, "cannot create destination file") from exc

        try:
            with fdst:
                shutil.copyfileobj(fsrc, fdst, config.COPY_BUFFER_SIZE)
        except OSError as exc:
            raise wrap_os_error(exc, dst, f"cannot copy {os.fspath(src)} to") from exc

    try:
        os.chmod(dst, mode)
    except OSError as exc:
        raise PartialWriteError(
            f"copied {os.fspath(src)} to {os.fspath(dst)} but cannot set mode {mode:#o}: {exc.strerror or exc}",
            dst,
            exc.errno,
        ) from exc


def _resolve(path: Path) -> Path:
    # Symlinked aliases of src must not hide a dst that lies inside it.
    try:
        return path.resolve()
    except (OSError, RuntimeError) as exc:
        raise FsError(f"cannot resolve {path}: {exc}", path, getattr(exc, "errno", None)) from exc


def _make_dir(path: Path) -> None:
    try:
        os.makedirs(path, config.DEFAULT_DIR_MODE, exist_ok=True)
    except OSError as exc:
        raise wrap_os_error(exc, path, "cannot create directory") from exc


def _copy_symlink(src: Path, dst: Path) -> None:
    try:
        target = os.readlink(src)
        if os.path.lexists(dst) and not os.path.isdir(dst):
            os.unlink(dst)
        os.symlink(target, dst)
    except OSError as exc:
        raise wrap_os_error(exc, dst, f"cannot recreate symlink {src} as") from exc
    logger.debug("recreated symlink", src=str(src), dst=str(dst), target=target)


def _copy_tree(src: Path, dst: Path) -> None:
    try:
        with os.scandir(src) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise wrap_os_error(exc, src, "cannot list directory") from exc

    for entry in entries:
        src_path = src / entry.name
        dst_path = dst / entry.name

        try:
            mode = entry.stat(follow_symlinks=False).st_mode
        except OSError as exc:
            raise wrap_os_error(exc, src_path, "cannot stat") from exc

        if stat.S_ISDIR(mode):
            _make_dir(dst_path)
            _copy_tree(src_path, dst_path)
        elif stat.S_ISREG(mode):
            copy_file(src_path, dst_path)
        elif stat.S_ISLNK(mode):
            _copy_symlink(src_path, dst_path)
        else:
            raise UnsupportedEntryError(f"cannot copy special file {src_path}", src_path)


def copy_dir(src: StrPath, dst: StrPath) -> None:
    """Recursively copy the directory src to dst.

    src is validated before anything is created. dst and any missing parents
    are created with ``config.DEFAULT_DIR_MODE``; an existing directory at dst
    is copied into. Regular files keep their exact permission bits, symlinks
    are recreated with the same target, and any other kind of entry aborts
    the copy. The first error stops the walk and leaves dst partially
    populated.

    Failures are never logged; they are raised with the failing path. The
    only log output is debug-level progress, which the default WARNING
    level filters out.
    """
    src_path = Path(src)
    dst_path = Path(dst)

    info = file_info(src_path)
    if info is None:
        raise NotFoundError(f"source directory {src_path} does not exist", src_path)
    if not info.is_dir:
        raise TypeMismatchError(f"source {src_path} is not a directory", src_path)
    if has_filepath_prefix(_resolve(dst_path), _resolve(src_path)):
        raise FsError(f"cannot copy {src_path} into itself at {dst_path}", dst_path)

    _make_dir(dst_path)
    logger.debug("copying directory", src=str(src_path), dst=str(dst_path))
    _copy_tree(src_path, dst_path)
