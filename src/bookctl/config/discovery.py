"""Locate the ``bookctl.toml`` that applies to the current invocation."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "bookctl.toml"
CONFIG_ENV_VAR = "BOOKCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start*, or None when there is none.

    ``BOOKCTL_CONFIG`` wins when set. A value that names no file means
    "no config" rather than a fallback to searching. Otherwise the nearest
    ``bookctl.toml`` in *start* (default: cwd) or any ancestor is used.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
