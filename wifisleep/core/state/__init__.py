from __future__ import annotations

from .store import (
    BLUETOOTH_STATE,
    DISABLED_SERVICES,
    FLAG_OFF,
    FLAG_ON,
    RECORD_KEYS,
    WIFI_STATE,
    StateStore,
)

__all__ = [
    "BLUETOOTH_STATE",
    "DISABLED_SERVICES",
    "FLAG_OFF",
    "FLAG_ON",
    "RECORD_KEYS",
    "WIFI_STATE",
    "StateStore",
]
