#!/usr/bin/env python3
"""WiFi Sleep Manager Config implementation."""

from __future__ import annotations

import logging

from .defaults import DEFAULTS as _DEFAULTS
from .file_storage import load_config_settings, save_config_settings_atomic
from .paths import config_dir, config_file_path
from ._props import bool_prop, int_prop, str_prop

logger = logging.getLogger(__name__)


class Config:
    """Configuration flags shared by the tray, the helper CLI and the controller."""

    DEFAULTS = _DEFAULTS

    def __init__(self):
        # Recompute at runtime so test harnesses can set env vars in conftest.
        self.CONFIG_DIR = config_dir()
        self.CONFIG_FILE = config_file_path()
        try:
            self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.debug("Could not create config dir %s: %s", self.CONFIG_DIR, exc)
        loaded = self._load()
        self._settings = loaded if loaded is not None else self.DEFAULTS.copy()

    def _load(self, *, retries: int = 3, retry_delay: float = 0.02):
        """Load settings from file.

        The tray and the helper CLI may race on config.json; transient
        JSONDecodeErrors are retried. Returns None if loading fails after retries.
        """

        return load_config_settings(
            config_file=self.CONFIG_FILE,
            defaults=self.DEFAULTS,
            retries=retries,
            retry_delay=retry_delay,
            logger=logger,
        )

    def reload(self):
        loaded = self._load()
        # If the file was transiently unreadable, keep the previous in-memory settings.
        if loaded is not None:
            self._settings = loaded

    def _save(self):
        save_config_settings_atomic(
            config_dir=self.CONFIG_DIR,
            config_file=self.CONFIG_FILE,
            settings=self._settings,
            logger=logger,
        )

    monitoring_enabled = bool_prop("monitoring_enabled", default=True)
    manage_bluetooth = bool_prop("manage_bluetooth", default=True)
    manage_other_services = bool_prop("manage_other_services", default=True)
    verbose_logging = bool_prop("verbose_logging", default=False)

    wifi_device = str_prop("wifi_device", default="")

    debounce_seconds = int_prop("debounce_seconds", default=5, min_v=0, max_v=300)
    poll_interval_seconds = int_prop("poll_interval_seconds", default=5, min_v=1, max_v=600)
    max_log_bytes = int_prop("max_log_bytes", default=1_048_576, min_v=0)
