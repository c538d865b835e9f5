from __future__ import annotations

import logging
import os
import sys

from ..integrations import runtime


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging for console output.

    This is intentionally small and best-effort: if callers already configured
    logging handlers, we don't override them. The app.log file handler is
    attached separately (see `wifisleep.core.app_log`).
    """

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if os.environ.get("WIFISLEEP_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def acquire_single_instance_or_exit() -> None:
    """Acquire the tray single-instance lock or exit with code 0."""

    if runtime.acquire_single_instance_lock():
        return

    logger.error("WiFi Sleep Manager is already running (lock held). Not starting a second instance.")
    sys.exit(0)
