"""Locate ``fnkit.toml``.

``FNKIT_CONFIG`` pins an explicit file; otherwise the nearest
``fnkit.toml`` at or above the start directory wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "fnkit.toml"
CONFIG_ENV_VAR = "FNKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    A set but missing ``FNKIT_CONFIG`` path disables discovery entirely.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
