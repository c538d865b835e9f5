"""Saved interface state records.

One small file per key under the config directory. The store holds no
logic beyond reading and writing: the presence of a record is interpreted by
the sleep/wake controller, not here.

Every filesystem error is swallowed and logged at debug level. A failed read
looks like a missing record, which makes restore a no-op and lets the next
sleep save again.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..config.paths import config_dir
from ..utils import write_text_atomic

logger = logging.getLogger(__name__)


WIFI_STATE = "wifi_state"
BLUETOOTH_STATE = "bluetooth_state"
DISABLED_SERVICES = "disabled_services"

RECORD_KEYS: tuple[str, ...] = (WIFI_STATE, BLUETOOTH_STATE, DISABLED_SERVICES)

FLAG_ON = "1"
FLAG_OFF = "0"


class StateStore:
    """Key -> text records, one file per key."""

    def __init__(self, root: Optional[Path] = None):
        self._root = Path(root) if root is not None else None

    @property
    def root(self) -> Path:
        # Resolved lazily so tests can point WIFISLEEP_CONFIG_DIR elsewhere.
        return self._root if self._root is not None else config_dir()

    def path(self, key: str) -> Path:
        return self.root / key

    def exists(self, key: str) -> bool:
        try:
            return self.path(key).is_file()
        except OSError:
            return False

    def read(self, key: str) -> Optional[str]:
        try:
            return self.path(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not read state record %s: %s", key, exc)
            return None

    def write(self, key: str, value: str) -> bool:
        """Replace a record. Returns False when the write failed."""

        try:
            write_text_atomic(self.path(key), value)
            return True
        except OSError as exc:
            logger.debug("Could not write state record %s: %s", key, exc)
            return False

    def delete(self, key: str) -> bool:
        try:
            self.path(key).unlink()
            return True
        except FileNotFoundError:
            return True
        except OSError as exc:
            logger.debug("Could not delete state record %s: %s", key, exc)
            return False

    # ---- typed helpers

    def read_flag(self, key: str) -> Optional[bool]:
        """Return True/False for a "1"/"0" record, None if missing or garbled."""

        raw = self.read(key)
        if raw is None:
            return None
        s = raw.strip()
        if s == FLAG_ON:
            return True
        if s == FLAG_OFF:
            return False
        return None

    def write_flag(self, key: str, on: bool) -> bool:
        return self.write(key, FLAG_ON if on else FLAG_OFF)

    def has_flag(self, key: str) -> bool:
        # A half-written flag counts as missing so the next sleep saves again.
        return self.read_flag(key) is not None

    def read_lines(self, key: str) -> Optional[list[str]]:
        raw = self.read(key)
        if raw is None:
            return None
        return [line for line in raw.splitlines() if line.strip()]

    def write_lines(self, key: str, lines: Iterable[str]) -> bool:
        return self.write(key, "\n".join(lines))

    def clear(self, keys: Iterable[str] = RECORD_KEYS) -> None:
        for key in keys:
            self.delete(key)
