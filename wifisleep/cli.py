"""Helper trigger CLI.

Lets an external hook (e.g. sleepwatcher's ~/.sleep and ~/.wakeup scripts)
feed sleep/wake triggers into the same handlers the tray uses:

    wifisleep-trigger sleep
    wifisleep-trigger wake

Because the handlers key on the saved state files, a trigger that races the
tray's own notification for the same event does nothing extra.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .core import app_log
from .core.config import Config
from .core.sleep_wake import SleepWakeController
from .tray.startup import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wifisleep-trigger",
        description="Feed sleep/wake triggers to WiFi Sleep Manager, or inspect its state.",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("sleep", help="save interface state and turn interfaces off")
    sub.add_parser("wake", help="restore interfaces saved by the last sleep")
    sub.add_parser("status", help="print the monitoring flag and saved state")
    sub.add_parser("files", help="list files in the config directory")
    return parser


def _run_trigger(controller: SleepWakeController, config: Config, kind: str) -> int:
    if not config.monitoring_enabled:
        logger.info("Monitoring is disabled; ignoring %s trigger", kind)
        return 0

    controller.start(clear_stale=False, sources=False)
    try:
        if kind == "sleep":
            controller.handle_sleep("helper")
        else:
            controller.handle_wake("helper")
    finally:
        controller.stop()
    return 0


def _print_status(controller: SleepWakeController, config: Config) -> int:
    state = controller.saved_state()

    def _fmt(on: Optional[bool]) -> str:
        if on is None:
            return "-"
        return "on" if on else "off"

    print(f"monitoring enabled: {'yes' if config.monitoring_enabled else 'no'}")
    print(f"saved wifi:         {_fmt(state.wifi_on)}")
    print(f"saved bluetooth:    {_fmt(state.bluetooth_on)}")
    print(f"disabled services:  {', '.join(state.disabled_services) or '-'}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    configure_logging()
    config = Config()
    app_log.attach_file_handler(path=config.CONFIG_DIR / "app.log", verbose=config.verbose_logging)

    controller = SleepWakeController(config=config)

    if args.command in ("sleep", "wake"):
        return _run_trigger(controller, config, args.command)
    if args.command == "status":
        return _print_status(controller, config)
    if args.command == "files":
        for path in controller.list_config_files():
            print(path)
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
