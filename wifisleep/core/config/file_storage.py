"""Reading and writing config.json.

The tray and the helper CLI share the file. A reader can catch a save half
way, so a load that fails to parse is retried a few times before giving up.
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any

from ..utils import write_text_atomic


def _read_settings(config_file: Path) -> dict[str, Any]:
    raw = json.loads(config_file.read_text(encoding="utf-8"))
    # A hand-edited file holding a list or a bare value counts as empty.
    return raw if isinstance(raw, dict) else {}


def load_config_settings(
    *,
    config_file: Path,
    defaults: dict[str, Any],
    retries: int = 3,
    retry_delay: float = 0.02,
    logger,
) -> dict[str, Any] | None:
    """Return `defaults` overlaid with the saved settings.

    A missing file yields plain defaults. None means the file exists but
    could not be read, and callers should keep what they already have.
    """

    if not config_file.exists():
        return dict(defaults)

    attempts = max(1, retries)
    for attempt in range(1, attempts + 1):
        try:
            saved = _read_settings(config_file)
        except json.JSONDecodeError as exc:
            if attempt == attempts:
                logger.warning("config.json is not valid JSON after %d attempts: %s", attempts, exc)
                return None
            time.sleep(retry_delay)
            continue
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", config_file, exc)
            return None

        merged = dict(defaults)
        merged.update(saved)
        return merged

    return None


def save_config_settings_atomic(*, config_dir: Path, config_file: Path, settings: dict[str, Any], logger) -> None:
    """Persist `settings`; a failed save is logged and the old file stays."""

    try:
        config_dir.mkdir(parents=True, exist_ok=True)
        write_text_atomic(config_file, json.dumps(settings, indent=2), fsync=True)
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("Failed to save config to %s: %s", config_file, exc)
