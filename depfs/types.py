"""Shared types for depfs."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict

StrPath = str | os.PathLike[str]

EntryKind = Literal["regular", "dir", "symlink", "other"]


class FileInfo(BaseModel):
    """Metadata snapshot of a single filesystem entry."""

    model_config = ConfigDict(frozen=True)

    path: str
    kind: EntryKind
    mode: int
    size: int

    @property
    def is_regular(self) -> bool:
        return self.kind == "regular"

    @property
    def is_dir(self) -> bool:
        return self.kind == "dir"
