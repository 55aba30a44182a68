"""Locate prflow.toml.

The nearest ``prflow.toml`` at or above the working directory applies.
``PRFLOW_CONFIG`` names a file explicitly and disables the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "prflow.toml"
CONFIG_ENV_VAR = "PRFLOW_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A ``PRFLOW_CONFIG`` value pointing at a missing file yields None rather
    than falling back to discovery.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
