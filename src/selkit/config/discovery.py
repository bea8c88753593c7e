"""Config file discovery.

Walk-up finder locates selkit.toml, similar to how git finds .git/.
The SELKIT_CONFIG env var points at an explicit file instead.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "selkit.toml"
CONFIG_ENV_VAR = "SELKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for selkit.toml.

    Returns None when nothing is found, or when SELKIT_CONFIG names a
    missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
