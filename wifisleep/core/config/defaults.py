"""Default configuration values."""

from __future__ import annotations

DEFAULTS: dict = {
    # Whether the sleep/wake controller should be monitoring. The tray writes
    # this when the user toggles Enable/Disable; the helper CLI reads it.
    "monitoring_enabled": True,
    "manage_bluetooth": True,
    # Ethernet, USB LAN, Thunderbolt Bridge, ... (everything except Wi-Fi).
    "manage_other_services": True,
    "verbose_logging": False,
    # Empty means auto-detect from `networksetup -listallhardwareports`.
    "wifi_device": "",
    "debounce_seconds": 5,
    "poll_interval_seconds": 5,
    # app.log is emptied on sleep once it grows past this size.
    "max_log_bytes": 1_048_576,
}
