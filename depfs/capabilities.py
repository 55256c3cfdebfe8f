"""Platform capability probes."""

from __future__ import annotations

import functools
import os
import tempfile
from pathlib import Path


@functools.lru_cache(maxsize=None)
def permission_denial_supported() -> bool:
    """Report whether permission bits actually deny access here.

    False on non-POSIX platforms, and for privileged users whose access is
    never refused. The probe runs once per process.
    """
    if os.name != "posix":
        return False

    with tempfile.TemporaryDirectory(prefix="depfs-probe-") as tmp:
        locked = Path(tmp) / "locked"
        locked.mkdir()
        (locked / "entry").touch()
        locked.chmod(0o666)
        try:
            (locked / "entry").stat()
        except PermissionError:
            return True
        else:
            return False
        finally:
            locked.chmod(0o777)
