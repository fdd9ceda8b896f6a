"""Locating regcheck.toml.

An explicit REGCHECK_CONFIG path wins.  Otherwise the nearest
regcheck.toml in the start directory or any of its ancestors is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "regcheck.toml"
CONFIG_ENV_VAR = "REGCHECK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A REGCHECK_CONFIG value that does not name a file disables
    discovery instead of falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
