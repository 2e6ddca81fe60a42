"""Locate zonectl.toml.

Lookup order: the ``ZONECTL_CONFIG`` env var (must name an existing
file), then a walk up from the start directory to the filesystem root.
The directory holding the file becomes the workspace root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "zonectl.toml"
CONFIG_ENV_VAR = "ZONECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest zonectl.toml at or above *start* (default: cwd)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        candidate = Path(override)
        return candidate if candidate.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
