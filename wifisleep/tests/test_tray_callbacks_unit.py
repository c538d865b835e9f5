from __future__ import annotations

from unittest.mock import MagicMock, patch

from wifisleep.tray.app import callbacks


def _tray(*, monitoring: bool) -> MagicMock:
    tray = MagicMock()
    tray.controller.is_monitoring = monitoring
    return tray


def test_toggle_monitoring_enables_and_persists() -> None:
    tray = _tray(monitoring=False)

    callbacks.on_toggle_monitoring_clicked(tray)

    assert tray.config.monitoring_enabled is True
    tray.controller.start.assert_called_once_with()
    tray.controller.stop.assert_not_called()
    tray._refresh_ui.assert_called_once()


def test_toggle_monitoring_disables_and_persists() -> None:
    tray = _tray(monitoring=True)

    callbacks.on_toggle_monitoring_clicked(tray)

    assert tray.config.monitoring_enabled is False
    tray.controller.stop.assert_called_once_with()
    tray.controller.start.assert_not_called()


def test_flag_toggles_flip_controller_flags() -> None:
    tray = _tray(monitoring=True)
    tray.controller.manage_bluetooth = True
    tray.controller.manage_other_services = False
    tray.controller.verbose_logging = False

    callbacks.on_toggle_bluetooth_clicked(tray)
    callbacks.on_toggle_other_services_clicked(tray)
    callbacks.on_toggle_verbose_clicked(tray)

    assert tray.controller.manage_bluetooth is False
    assert tray.controller.manage_other_services is True
    assert tray.controller.verbose_logging is True
    assert tray._refresh_ui.call_count == 3


def test_show_logs_opens_config_dir(tmp_path) -> None:
    tray = _tray(monitoring=True)
    tray.controller.config_dir = tmp_path / "cfg"

    with patch("wifisleep.tray.app.callbacks.subprocess.Popen") as popen:
        callbacks.on_show_logs_clicked(tray)

    assert (tmp_path / "cfg").is_dir()
    assert popen.call_args.args[0] == ["open", str(tmp_path / "cfg")]


def test_show_logs_survives_missing_open(tmp_path) -> None:
    tray = _tray(monitoring=True)
    tray.controller.config_dir = tmp_path

    with patch("wifisleep.tray.app.callbacks.subprocess.Popen", side_effect=FileNotFoundError("open")):
        callbacks.on_show_logs_clicked(tray)


def test_clear_logs_and_remove_all_delegate() -> None:
    tray = _tray(monitoring=True)

    callbacks.on_clear_logs_clicked(tray)
    callbacks.on_remove_all_files_clicked(tray)

    tray.controller.clear_log.assert_called_once_with()
    tray.controller.remove_all_files_and_stop.assert_called_once_with()
    tray._refresh_ui.assert_called_once()
