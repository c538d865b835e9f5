"""Sleep/wake controller.

Turns Wi-Fi, Bluetooth and other network services off when the machine or
its display goes to sleep, and restores what was on when it wakes.

Triggers arrive from independent sources: NSWorkspace system sleep/wake,
NSWorkspace screen sleep/wake, and edges found by polling display activity.
They are not merged upstream. Whether to save is decided by whether a state
record already exists for the episode, so duplicate deliveries are harmless;
a short time debounce drops the obvious repeats.
"""

from __future__ import annotations

import atexit
import logging
import shutil
import threading
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

from .. import app_log
from ..commands import NetworkCommands
from ..config import Config
from ..monitoring import DisplayActivityPoller, WorkspaceNotificationSource
from ..state import StateStore
from .debounce import SLEEP, WAKE, TransitionDebounce
from .interfaces import (
    SavedInterfaceState,
    disable_other_services,
    read_saved_state,
    restore_bluetooth,
    restore_other_services,
    restore_wifi,
    save_and_disable_bluetooth,
    save_and_disable_wifi,
)

logger = logging.getLogger(__name__)


class SleepWakeController:
    """Owns the monitoring session and the sleep/wake decision logic."""

    def __init__(
        self,
        *,
        config: Config | None = None,
        commands: Any = None,
        store: StateStore | None = None,
        notification_source: Any = None,
        poller_factory: Callable[..., Any] | None = None,
        monotonic_fn: Callable[[], float] = time.monotonic,
    ):
        self._config = config or Config()
        self._commands = commands or NetworkCommands(wifi_device=self._config.wifi_device)
        self._store = store or StateStore()
        self._notifications = notification_source or WorkspaceNotificationSource()
        self._poller_factory = poller_factory or DisplayActivityPoller
        self._monotonic = monotonic_fn
        self._debounce = TransitionDebounce(window_s=float(self._config.debounce_seconds))

        self._active = False
        self._subscription: Any = None
        self._poller: Any = None
        self._last_display_active: Optional[bool] = None
        self._atexit_registered = False
        self._listeners: list[Callable[[bool], None]] = []

        # One event at a time; the lifecycle lock only guards start/stop.
        self._handler_lock = threading.RLock()
        self._lifecycle_lock = threading.Lock()

    # ---- UI-facing surface

    @property
    def is_monitoring(self) -> bool:
        return self._active

    @property
    def manage_bluetooth(self) -> bool:
        return bool(self._config.manage_bluetooth)

    @manage_bluetooth.setter
    def manage_bluetooth(self, value: bool) -> None:
        self._config.manage_bluetooth = bool(value)

    @property
    def manage_other_services(self) -> bool:
        return bool(self._config.manage_other_services)

    @manage_other_services.setter
    def manage_other_services(self, value: bool) -> None:
        self._config.manage_other_services = bool(value)

    @property
    def verbose_logging(self) -> bool:
        return bool(self._config.verbose_logging)

    @verbose_logging.setter
    def verbose_logging(self, value: bool) -> None:
        self._config.verbose_logging = bool(value)
        app_log.set_verbose(bool(value))

    @property
    def config_dir(self) -> Path:
        return self._store.root

    @property
    def log_path(self) -> Path:
        return self._store.root / "app.log"

    def add_listener(self, callback: Callable[[bool], None]) -> None:
        """Register a callback invoked with `is_monitoring` after start/stop."""

        self._listeners.append(callback)

    def _notify_listeners(self) -> None:
        for cb in list(self._listeners):
            try:
                cb(self._active)
            except Exception as exc:
                logger.exception("Monitoring listener failed: %s", exc)

    def clear_log(self) -> bool:
        return app_log.clear_log(self.log_path)

    def list_config_files(self) -> list[Path]:
        root = self._store.root
        try:
            return sorted(p for p in root.iterdir() if p.is_file())
        except OSError:
            return []

    def saved_state(self) -> SavedInterfaceState:
        return read_saved_state(self._store)

    def remove_all_files_and_stop(self) -> None:
        """Stop monitoring and delete the whole config directory."""

        self.stop()
        root = self._store.root
        # The log handler would recreate app.log on the next record.
        app_log.detach_file_handlers()
        try:
            shutil.rmtree(root)
            logger.info("Removed %s", root)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.warning("Could not remove %s: %s", root, exc)

    # ---- lifecycle

    def start(self, *, clear_stale: bool = True, sources: bool = True) -> None:
        """Start monitoring.

        Args:
            clear_stale: delete state records left behind by an unclean exit.
            sources: subscribe to notifications and start display polling.
                The helper CLI passes False to run a single trigger.
        """

        with self._lifecycle_lock:
            if self._active:
                return

            self._active = True
            self._debounce = TransitionDebounce(window_s=float(self._config.debounce_seconds))
            self._last_display_active = None

            if clear_stale:
                self._store.clear()

            if sources:
                try:
                    self._subscription = self._notifications.subscribe(
                        on_sleep=lambda: self.handle_sleep("system-sleep"),
                        on_wake=lambda: self.handle_wake("system-wake"),
                        on_screen_sleep=lambda: self.handle_sleep("screen-sleep"),
                        on_screen_wake=lambda: self.handle_wake("screen-wake"),
                    )
                except Exception as exc:
                    logger.exception("Subscribing to workspace notifications failed: %s", exc)
                    self._subscription = None

                try:
                    self._poller = self._poller_factory(
                        on_sample=self._on_display_sample,
                        interval_s=float(self._config.poll_interval_seconds),
                        monotonic_fn=self._monotonic,
                    )
                    self._poller.start()
                except Exception as exc:
                    logger.exception("Starting display activity polling failed: %s", exc)
                    self._poller = None

                if not self._atexit_registered:
                    atexit.register(self.stop)
                    self._atexit_registered = True

        logger.info("Monitoring started")
        self._notify_listeners()

    def stop(self) -> None:
        with self._lifecycle_lock:
            if not self._active:
                return
            self._active = False
            poller, self._poller = self._poller, None
            subscription, self._subscription = self._subscription, None
            if self._atexit_registered:
                atexit.unregister(self.stop)
                self._atexit_registered = False

        if poller is not None:
            try:
                poller.stop()
            except Exception as exc:
                logger.exception("Stopping display activity polling failed: %s", exc)
        if subscription is not None:
            try:
                subscription.close()
            except Exception as exc:
                logger.exception("Releasing workspace notifications failed: %s", exc)

        logger.info("Monitoring stopped")
        self._notify_listeners()

    def __enter__(self) -> "SleepWakeController":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    # ---- triggers

    def handle_sleep(self, source: str = "system-sleep") -> bool:
        """Sleep trigger from any source. Returns True if it was acted upon."""

        return self._handle_transition(SLEEP, source, self._do_sleep)

    def handle_wake(self, source: str = "system-wake") -> bool:
        """Wake trigger from any source. Returns True if it was acted upon."""

        return self._handle_transition(WAKE, source, self._do_wake)

    def _on_display_sample(self, active: Optional[bool], started_at: Optional[float] = None) -> None:
        if active is None:
            return
        if started_at is not None and self._acted_since(started_at):
            # A slow ioreg sample can straddle a notification-driven transition.
            logger.debug("Dropping display sample taken before the last transition")
            return
        previous, self._last_display_active = self._last_display_active, bool(active)
        if previous is None or previous == bool(active):
            return
        if active:
            self.handle_wake("display-poll")
        else:
            self.handle_sleep("display-poll")

    def _acted_since(self, started_at: float) -> bool:
        with self._handler_lock:
            for kind in (SLEEP, WAKE):
                last = self._debounce.last_action_at(kind)
                if last is not None and last >= float(started_at):
                    return True
        return False

    def _handle_transition(self, kind: str, source: str, action: Callable[[], None]) -> bool:
        if not self._active:
            return False

        with self._handler_lock:
            if not self._active:
                return False

            now = float(self._monotonic())
            if not self._debounce.should_act(kind, now):
                logger.debug("Ignoring %s from %s (within %.1fs of the last one)", kind, source, self._debounce.window_s)
                return False
            self._debounce.record(kind, now)

            logger.info("%s detected (%s)", kind.capitalize(), source)
            try:
                action()
            except Exception as exc:
                logger.exception("Error while handling %s: %s", kind, exc)
            return True

    def _refresh_config(self) -> None:
        try:
            self._config.reload()
        except Exception as exc:
            logger.debug("Config reload failed, using cached flags: %s", exc)

    def _do_sleep(self) -> None:
        self._refresh_config()
        self._run_step(
            "log trim",
            lambda: app_log.trim_log_if_needed(max_bytes=int(self._config.max_log_bytes), path=self.log_path),
        )

        self._run_step("Wi-Fi save/off", lambda: save_and_disable_wifi(self._commands, self._store))

        if self.manage_bluetooth:
            self._run_step("Bluetooth save/off", lambda: save_and_disable_bluetooth(self._commands, self._store))

        if self.manage_other_services:
            self._run_step("network services off", lambda: disable_other_services(self._commands, self._store))

    def _do_wake(self) -> None:
        self._refresh_config()

        # Restores are not gated by the manage_* flags: a record only exists
        # if the interface was managed when the machine went to sleep.
        try:
            self._run_step("Wi-Fi restore", lambda: restore_wifi(self._commands, self._store))
            self._run_step("Bluetooth restore", lambda: restore_bluetooth(self._commands, self._store))
            self._run_step("network services restore", lambda: restore_other_services(self._commands, self._store))
        finally:
            self._store.clear()
            logger.debug("Cleared saved interface state")

    def _run_step(self, name: str, step: Callable[[], Any]) -> None:
        try:
            step()
        except Exception as exc:
            logger.exception("%s failed, continuing: %s", name, exc)
