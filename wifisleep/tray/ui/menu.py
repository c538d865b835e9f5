from __future__ import annotations

from typing import Any


def monitoring_label(tray: Any) -> str:
    return "Disable" if tray.controller.is_monitoring else "Enable"


def status_text(tray: Any) -> str:
    return "Status: Active" if tray.controller.is_monitoring else "Status: Inactive"


def build_menu_items(tray: Any, *, pystray: Any, item: Any) -> list[Any]:
    """Build menu items list for dynamic menu updates."""

    controller = tray.controller

    def _monitoring_checked(_item) -> bool:
        return bool(controller.is_monitoring)

    def _bluetooth_checked(_item) -> bool:
        return bool(controller.manage_bluetooth)

    def _other_services_checked(_item) -> bool:
        return bool(controller.manage_other_services)

    def _verbose_checked(_item) -> bool:
        return bool(controller.verbose_logging)

    return [
        item(status_text(tray), None, enabled=False),
        pystray.Menu.SEPARATOR,
        item(monitoring_label(tray), tray._on_toggle_monitoring_clicked, checked=_monitoring_checked),
        pystray.Menu.SEPARATOR,
        item(
            "Manage Bluetooth",
            tray._on_toggle_bluetooth_clicked,
            checked=_bluetooth_checked,
            enabled=bool(controller.is_monitoring),
        ),
        item(
            "Disable Other Network Services",
            tray._on_toggle_other_services_clicked,
            checked=_other_services_checked,
            enabled=bool(controller.is_monitoring),
        ),
        item("Debug Logging", tray._on_toggle_verbose_clicked, checked=_verbose_checked),
        pystray.Menu.SEPARATOR,
        item("Show Logs", tray._on_show_logs_clicked),
        item("Clear Logs", tray._on_clear_logs_clicked),
        item("Remove All Files", tray._on_remove_all_files_clicked),
        pystray.Menu.SEPARATOR,
        item("Quit", tray._on_quit_clicked),
    ]


def build_menu(tray: Any, *, pystray: Any, item: Any) -> Any:
    return pystray.Menu(*build_menu_items(tray, pystray=pystray, item=item))
