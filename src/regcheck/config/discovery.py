"""Locate regcheck.toml.

Resolution order: ``--config`` (handled by the caller), then the
``REGCHECK_CONFIG`` env var, then the nearest ``regcheck.toml`` in the
start directory or any of its parents.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "regcheck.toml"
CONFIG_ENV_VAR = "REGCHECK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    A set but dangling ``REGCHECK_CONFIG`` yields None; it never falls
    back to the walk-up search.
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
