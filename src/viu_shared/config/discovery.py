"""Config file discovery.

Walk-up finder locates ``viu.toml`` the way git finds ``.git/``. The
``VIU_CONFIG`` env var and the ``--config`` CLI flag override discovery.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "viu.toml"
CONFIG_ENV_VAR = "VIU_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for ``viu.toml``.

    ``VIU_CONFIG`` wins when set; if it points at a missing file no
    config is used at all.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent
