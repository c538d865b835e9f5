"""Menu callback handlers.

`WiFiSleepTray` keeps the bound-method surface area for pystray, but delegates
into this module to keep the class smaller.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Any

logger = logging.getLogger(__name__)


def _refresh(tray: Any) -> None:
    if hasattr(tray, "_refresh_ui"):
        tray._refresh_ui()


def on_toggle_monitoring_clicked(tray: Any) -> None:
    """Flip monitoring and persist the choice for the next launch."""

    enable = not tray.controller.is_monitoring
    tray.config.monitoring_enabled = enable
    if enable:
        tray.controller.start()
    else:
        tray.controller.stop()
    _refresh(tray)


def on_toggle_bluetooth_clicked(tray: Any) -> None:
    tray.controller.manage_bluetooth = not tray.controller.manage_bluetooth
    logger.info("Manage Bluetooth: %s", tray.controller.manage_bluetooth)
    _refresh(tray)


def on_toggle_other_services_clicked(tray: Any) -> None:
    tray.controller.manage_other_services = not tray.controller.manage_other_services
    logger.info("Manage other network services: %s", tray.controller.manage_other_services)
    _refresh(tray)


def on_toggle_verbose_clicked(tray: Any) -> None:
    tray.controller.verbose_logging = not tray.controller.verbose_logging
    logger.info("Debug logging: %s", tray.controller.verbose_logging)
    _refresh(tray)


def on_show_logs_clicked(tray: Any) -> None:
    """Open the config directory (app.log and state files) in Finder."""

    target = tray.controller.config_dir
    try:
        target.mkdir(parents=True, exist_ok=True)
        subprocess.Popen(["open", str(target)], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError as exc:
        logger.warning("Could not open %s: %s", target, exc)


def on_clear_logs_clicked(tray: Any) -> None:
    if tray.controller.clear_log():
        logger.info("Log cleared")


def on_remove_all_files_clicked(tray: Any) -> None:
    """Stop monitoring and delete everything under the config directory."""

    tray.controller.remove_all_files_and_stop()
    _refresh(tray)
