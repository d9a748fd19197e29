"""Locate the one ``lpfcalc.toml`` that supplies default filter settings.

``LPFCALC_CONFIG`` names the file outright. Otherwise the nearest
``lpfcalc.toml`` in the start directory or any parent is used, so a
project can pin its sample period once at its root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "lpfcalc.toml"
CONFIG_ENV_VAR = "LPFCALC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Path of the config file in effect, or None when there is none.

    A ``LPFCALC_CONFIG`` that points at a missing file yields None; the
    walk-up search is skipped in that case.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
