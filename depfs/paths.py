"""Pure path helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import StrPath


def has_filepath_prefix(path: StrPath, prefix: StrPath) -> bool:
    """Return True if path is prefix itself or lies beneath it.

    Compares whole components of the absolute, normalized paths, so /a/bc is
    not considered to be under /a/b. The filesystem is never consulted.
    """
    path_parts = Path(os.path.abspath(path)).parts
    prefix_parts = Path(os.path.abspath(prefix)).parts
    if len(prefix_parts) > len(path_parts):
        return False
    return path_parts[: len(prefix_parts)] == prefix_parts
