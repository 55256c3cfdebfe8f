"""Shared fixtures for depfs tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from depfs.capabilities import permission_denial_supported

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

requires_permission_denial = pytest.mark.skipif(
    not permission_denial_supported(),
    reason="permission bits do not deny access on this platform or for this user",
)


def make_tree(root: Path, files: dict[str, str]) -> None:
    """Write a {relative_path: content} mapping under root."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")


@pytest.fixture()
def make_inaccessible_dir(tmp_path: Path) -> Iterator[Callable[..., Path]]:
    """Yield a factory for directories the current user cannot use.

    The factory creates a fresh directory, passes it to ``op`` so the test can
    populate it, then drops its permissions to ``mode`` (0o666 by default, so
    nothing beneath it can be reached). Permissions are restored on teardown
    so the temporary tree can be removed.
    """
    locked: list[Path] = []

    def _make(op: Callable[[Path], object] | None = None, mode: int = 0o666) -> Path:
        base = tmp_path / f"locked-{len(locked)}"
        base.mkdir()
        subdir = base / "dir"
        subdir.mkdir()
        locked.append(subdir)
        if op is not None:
            op(subdir)
        subdir.chmod(mode)
        return subdir

    yield _make

    for subdir in locked:
        subdir.chmod(0o777)
