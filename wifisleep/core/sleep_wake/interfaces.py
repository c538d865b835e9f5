"""Save/disable and restore steps for each managed interface.

Each step is best-effort: a failed command or state write is logged at debug
level and the step returns, so the caller moves on to the next interface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from ..commands.parsing import parse_bluetooth_power, parse_wifi_power, select_services_to_disable
from ..state import BLUETOOTH_STATE, DISABLED_SERVICES, WIFI_STATE, StateStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedInterfaceState:
    wifi_on: Optional[bool] = None
    bluetooth_on: Optional[bool] = None
    disabled_services: tuple[str, ...] = field(default_factory=tuple)


def read_saved_state(store: StateStore) -> SavedInterfaceState:
    return SavedInterfaceState(
        wifi_on=store.read_flag(WIFI_STATE),
        bluetooth_on=store.read_flag(BLUETOOTH_STATE),
        disabled_services=tuple(store.read_lines(DISABLED_SERVICES) or ()),
    )


def _on_off(on: Optional[bool]) -> str:
    if on is None:
        return "unknown"
    return "on" if on else "off"


# ---- Wi-Fi


def save_and_disable_wifi(commands: Any, store: StateStore) -> None:
    if store.has_flag(WIFI_STATE):
        logger.debug("Wi-Fi state already saved for this sleep; not overwriting")
    else:
        was_on = parse_wifi_power(commands.query_wifi_power())
        if store.write_flag(WIFI_STATE, was_on):
            logger.info("Saved Wi-Fi state: %s", _on_off(was_on))
        else:
            logger.debug("Could not save Wi-Fi state; it will not be restored")

    res = commands.set_wifi_power(False)
    if res.ok:
        logger.info("Wi-Fi turned off")
    else:
        logger.debug("Turning Wi-Fi off failed: %s", res.error)


def restore_wifi(commands: Any, store: StateStore) -> bool:
    """Turn Wi-Fi back on iff it was saved as on. Returns True if a command was issued."""

    if store.read_flag(WIFI_STATE) is not True:
        logger.debug("Wi-Fi was not on before sleep; leaving it alone")
        return False

    res = commands.set_wifi_power(True)
    if res.ok:
        logger.info("Wi-Fi restored")
    else:
        logger.debug("Restoring Wi-Fi failed: %s", res.error)
    return True


# ---- Bluetooth


def save_and_disable_bluetooth(commands: Any, store: StateStore) -> None:
    if not commands.bluetooth_tool_available():
        logger.debug("blueutil not found; Bluetooth is not managed")
        return

    if store.has_flag(BLUETOOTH_STATE):
        logger.debug("Bluetooth state already saved for this sleep; not overwriting")
    else:
        res = commands.query_bluetooth_power()
        was_on = parse_bluetooth_power(res.output) if res.ok else None
        if was_on is None:
            # Without a known prior state we could not restore it, so leave it on.
            logger.debug("Bluetooth power query failed (%s); leaving Bluetooth untouched", res.error or res.output)
            return
        if store.write_flag(BLUETOOTH_STATE, was_on):
            logger.info("Saved Bluetooth state: %s", _on_off(was_on))
        else:
            logger.debug("Could not save Bluetooth state; it will not be restored")

    res = commands.set_bluetooth_power(False)
    if res.ok:
        logger.info("Bluetooth turned off")
    else:
        logger.debug("Turning Bluetooth off failed: %s", res.error)


def restore_bluetooth(commands: Any, store: StateStore) -> bool:
    if store.read_flag(BLUETOOTH_STATE) is not True:
        logger.debug("Bluetooth was not on before sleep; leaving it alone")
        return False

    if not commands.bluetooth_tool_available():
        logger.debug("blueutil not found; skipping Bluetooth restore")
        return False

    res = commands.set_bluetooth_power(True)
    if res.ok:
        logger.info("Bluetooth restored")
    else:
        logger.debug("Restoring Bluetooth failed: %s", res.error)
    return True


# ---- other network services


def disable_other_services(commands: Any, store: StateStore) -> list[str]:
    """Disable every eligible service and record the ones that succeeded.

    Runs on every sleep trigger. Names recorded earlier in the same episode
    are kept (they now show up as "*Name" and are no longer selected), new
    successes are appended after them.

    Returns the names disabled by this call.
    """

    names = commands.list_network_services()
    candidates = select_services_to_disable(names, wifi_service=commands.wifi_service_name())

    disabled: list[str] = []
    for name in candidates:
        if commands.set_service_enabled(name, False):
            disabled.append(name)
        else:
            logger.debug("Disabling network service failed: %s", name)

    recorded = store.read_lines(DISABLED_SERVICES)
    if recorded is None:
        merged = list(disabled)
    else:
        merged = list(recorded) + [n for n in disabled if n not in recorded]

    if recorded is None or merged != recorded:
        if not store.write_lines(DISABLED_SERVICES, merged):
            logger.debug("Could not save disabled services; they will not be restored")

    if disabled:
        logger.info("Disabled network services: %s", ", ".join(disabled))
    return disabled


def restore_other_services(commands: Any, store: StateStore) -> list[str]:
    """Re-enable every recorded service in order, ignoring individual failures."""

    names = store.read_lines(DISABLED_SERVICES) or []
    for name in names:
        if not commands.set_service_enabled(name, True):
            logger.debug("Re-enabling network service failed: %s", name)

    if names:
        logger.info("Restored network services: %s", ", ".join(names))
    return names
