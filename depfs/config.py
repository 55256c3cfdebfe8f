"""Settings for depfs, read from the environment or a .env file."""

from __future__ import annotations

import os
from pathlib import Path

SETTING_KEYS: tuple[str, ...] = ("DEPFS_DIR_MODE", "DEPFS_COPY_BUFFER_SIZE", "DEPFS_LOG_LEVEL")


def read_env_file(keys: list[str] | tuple[str, ...] = SETTING_KEYS, env_file: Path | None = None) -> dict[str, str]:
    """Collect depfs settings from a .env file.

    Only ``keys`` are returned, with surrounding quotes stripped and empty
    values dropped. A missing or unreadable file yields no settings.
    os.environ is left untouched.
    """
    path = env_file if env_file is not None else Path.cwd() / ".env"
    try:
        lines = path.read_text().splitlines()
    except OSError:
        return {}

    wanted = set(keys)
    settings: dict[str, str] = {}

    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or key not in wanted:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        if value:
            settings[key] = value

    return settings


def _setting(key: str, default: str) -> str:
    return os.environ.get(key) or _env_config.get(key, default)


def _int_setting(key: str, default: str, base: int = 10) -> int:
    raw = _setting(key, default)
    try:
        return int(raw, base)
    except ValueError as exc:
        kind = "an octal" if base == 8 else "an integer"
        raise ValueError(f"{key} must be {kind} value, got {raw!r}") from exc


_env_config = read_env_file()

# Mode for every directory created by copy_dir, before the umask applies.
DEFAULT_DIR_MODE: int = _int_setting("DEPFS_DIR_MODE", "777", base=8)
COPY_BUFFER_SIZE: int = max(1, _int_setting("DEPFS_COPY_BUFFER_SIZE", "65536"))
LOG_LEVEL: str = _setting("DEPFS_LOG_LEVEL", "WARNING").upper()
