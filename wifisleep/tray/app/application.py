"""Menu-bar application class.

This module holds the `WiFiSleepTray` class implementation.
"""

from __future__ import annotations

import logging

from . import callbacks
from ..integrations import runtime
from ..ui import icon as icon_mod
from ..ui import menu as menu_mod
from wifisleep.core import app_log
from wifisleep.core.config import Config
from wifisleep.core.sleep_wake import SleepWakeController

logger = logging.getLogger(__name__)


class WiFiSleepTray:
    """Menu-bar application for WiFi Sleep Manager."""

    def __init__(self, *, config: Config | None = None, controller: SleepWakeController | None = None):
        self.config = config or Config()
        self.controller = controller or SleepWakeController(config=self.config)
        self.icon = None

        app_log.attach_file_handler(path=self.controller.log_path, verbose=self.config.verbose_logging)
        self.controller.add_listener(self._on_monitoring_changed)

        if self.config.monitoring_enabled:
            self.controller.start()

    # ---- UI refresh

    def _update_icon(self) -> None:
        if self.icon is None:
            return
        color = icon_mod.icon_color(is_monitoring=self.controller.is_monitoring)
        self.icon.icon = icon_mod.create_icon(color)

    def _update_menu(self) -> None:
        if self.icon is None:
            return
        pystray, item = runtime.get_pystray()
        self.icon.menu = menu_mod.build_menu(self, pystray=pystray, item=item)
        update = getattr(self.icon, "update_menu", None)
        if callable(update):
            update()

    def _refresh_ui(self) -> None:
        self._update_icon()
        self._update_menu()

    def _on_monitoring_changed(self, _is_monitoring: bool) -> None:
        self._refresh_ui()

    # ---- menu callbacks

    def _on_toggle_monitoring_clicked(self, _icon, _item):
        callbacks.on_toggle_monitoring_clicked(self)

    def _on_toggle_bluetooth_clicked(self, _icon, _item):
        callbacks.on_toggle_bluetooth_clicked(self)

    def _on_toggle_other_services_clicked(self, _icon, _item):
        callbacks.on_toggle_other_services_clicked(self)

    def _on_toggle_verbose_clicked(self, _icon, _item):
        callbacks.on_toggle_verbose_clicked(self)

    def _on_show_logs_clicked(self, _icon, _item):
        callbacks.on_show_logs_clicked(self)

    def _on_clear_logs_clicked(self, _icon, _item):
        callbacks.on_clear_logs_clicked(self)

    def _on_remove_all_files_clicked(self, _icon, _item):
        callbacks.on_remove_all_files_clicked(self)

    def _on_quit_clicked(self, icon, _item):
        self.controller.stop()
        icon.stop()

    # ---- run

    def run(self):
        pystray, item = runtime.get_pystray()

        logger.info("Creating menu-bar icon...")
        self.icon = pystray.Icon(
            "wifi-sleep-manager",
            icon_mod.create_icon(icon_mod.icon_color(is_monitoring=self.controller.is_monitoring)),
            "WiFi Sleep Manager",
            menu=menu_mod.build_menu(self, pystray=pystray, item=item),
        )

        logger.info("WiFi Sleep Manager started")
        logger.info(
            "Monitoring: %s, Bluetooth: %s, other services: %s",
            self.controller.is_monitoring,
            self.controller.manage_bluetooth,
            self.controller.manage_other_services,
        )
        self.icon.run()
