"""Console entry point for the menu-bar app."""

from __future__ import annotations

import logging

from .app import WiFiSleepTray
from .startup import acquire_single_instance_or_exit, configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    acquire_single_instance_or_exit()

    try:
        WiFiSleepTray().run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
