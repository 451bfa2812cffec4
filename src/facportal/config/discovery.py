"""Locate facportal.toml.

The file is found by walking up from the working directory. The
FACPORTAL_CONFIG env var names a file directly and disables the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "facportal.toml"
CONFIG_ENV_VAR = "FACPORTAL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest facportal.toml at or above *start*, or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
