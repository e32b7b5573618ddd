"""Locate ``fluentval.toml``.

``FLUENTVAL_CONFIG`` names the file explicitly; otherwise the nearest
``fluentval.toml`` in the start directory or one of its parents wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "fluentval.toml"
CONFIG_ENV_VAR = "FLUENTVAL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None."""
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
