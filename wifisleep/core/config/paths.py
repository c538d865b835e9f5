"""Config path helpers.

Kept separate from the main Config object so the state store and the log
helpers can resolve the directory without loading settings.
"""

from __future__ import annotations

import os
from pathlib import Path


def config_dir() -> Path:
    """Return the per-user directory holding config, state records and the log.

    Priority:
    - WIFISLEEP_CONFIG_DIR
    - ~/.wifi-sleep-manager
    """

    p = os.environ.get("WIFISLEEP_CONFIG_DIR")
    if p:
        return Path(p)

    return Path.home() / ".wifi-sleep-manager"


def config_file_path() -> Path:
    """Return the config.json path.

    Priority:
    - WIFISLEEP_CONFIG_PATH (explicit file override)
    - config_dir()/config.json
    """

    p = os.environ.get("WIFISLEEP_CONFIG_PATH")
    if p:
        return Path(p)
    return config_dir() / "config.json"


def log_file_path() -> Path:
    return config_dir() / "app.log"
