"""NSWorkspace sleep/wake and screen sleep/wake notifications.

Delivered through PyObjC. The observers fire on the thread running the main
AppKit run loop, which pystray drives on macOS.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from typing import Any, Optional

logger = logging.getLogger(__name__)


_NOTIFICATION_NAMES = {
    "sleep": "NSWorkspaceWillSleepNotification",
    "wake": "NSWorkspaceDidWakeNotification",
    "screen_sleep": "NSWorkspaceScreensDidSleepNotification",
    "screen_wake": "NSWorkspaceScreensDidWakeNotification",
}


def _load_appkit() -> Any | None:
    """Import AppKit only when subscribing; returns None off macOS."""

    try:
        return importlib.import_module("AppKit")
    except ImportError as exc:
        logger.debug("AppKit not available, workspace notifications disabled: %s", exc)
        return None


class Subscription:
    """Handles for registered observers; `close()` releases all of them."""

    def __init__(self, center: Any = None, tokens: list[Any] | None = None):
        self._center = center
        self._tokens = list(tokens or [])

    @property
    def active(self) -> bool:
        return bool(self._tokens)

    def close(self) -> None:
        tokens, self._tokens = self._tokens, []
        for token in tokens:
            try:
                self._center.removeObserver_(token)
            except Exception as exc:
                logger.debug("Failed to remove workspace observer: %s", exc)


class WorkspaceNotificationSource:
    def __init__(self, *, appkit_loader: Callable[[], Any | None] = _load_appkit):
        self._appkit_loader = appkit_loader

    def subscribe(
        self,
        *,
        on_sleep: Callable[[], None],
        on_wake: Callable[[], None],
        on_screen_sleep: Callable[[], None],
        on_screen_wake: Callable[[], None],
    ) -> Subscription:
        appkit = self._appkit_loader()
        if appkit is None:
            return Subscription()

        callbacks = {
            "sleep": on_sleep,
            "wake": on_wake,
            "screen_sleep": on_screen_sleep,
            "screen_wake": on_screen_wake,
        }

        center = appkit.NSWorkspace.sharedWorkspace().notificationCenter()
        tokens: list[Any] = []
        for kind, attr in _NOTIFICATION_NAMES.items():
            name: Optional[str] = getattr(appkit, attr, None)
            if name is None:
                logger.debug("AppKit has no %s", attr)
                continue
            token = center.addObserverForName_object_queue_usingBlock_(
                name,
                None,
                None,
                _make_block(callbacks[kind]),
            )
            tokens.append(token)

        logger.info("Subscribed to %d workspace notifications", len(tokens))
        return Subscription(center, tokens)


def _make_block(callback: Callable[[], None]) -> Callable[[Any], None]:
    def _block(_notification: Any) -> None:
        callback()

    return _block
