from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

from wifisleep.core.monitoring import WorkspaceNotificationSource


def _fake_appkit():
    center = MagicMock()
    blocks: dict[str, object] = {}

    def add(name, obj, queue, block):
        blocks[name] = block
        return f"token-{name}"

    center.addObserverForName_object_queue_usingBlock_.side_effect = add
    workspace = MagicMock()
    workspace.notificationCenter.return_value = center

    appkit = SimpleNamespace(
        NSWorkspace=SimpleNamespace(sharedWorkspace=lambda: workspace),
        NSWorkspaceWillSleepNotification="WillSleep",
        NSWorkspaceDidWakeNotification="DidWake",
        NSWorkspaceScreensDidSleepNotification="ScreensDidSleep",
        NSWorkspaceScreensDidWakeNotification="ScreensDidWake",
    )
    return appkit, center, blocks


def test_subscribe_registers_four_observers_and_routes_callbacks() -> None:
    appkit, center, blocks = _fake_appkit()
    cbs = {k: MagicMock() for k in ("on_sleep", "on_wake", "on_screen_sleep", "on_screen_wake")}

    sub = WorkspaceNotificationSource(appkit_loader=lambda: appkit).subscribe(**cbs)

    assert sub.active is True
    assert set(blocks) == {"WillSleep", "DidWake", "ScreensDidSleep", "ScreensDidWake"}

    blocks["WillSleep"](object())
    blocks["ScreensDidWake"](object())
    cbs["on_sleep"].assert_called_once_with()
    cbs["on_screen_wake"].assert_called_once_with()
    cbs["on_wake"].assert_not_called()


def test_close_removes_each_observer_once() -> None:
    appkit, center, _blocks = _fake_appkit()
    sub = WorkspaceNotificationSource(appkit_loader=lambda: appkit).subscribe(
        on_sleep=lambda: None,
        on_wake=lambda: None,
        on_screen_sleep=lambda: None,
        on_screen_wake=lambda: None,
    )

    sub.close()
    sub.close()

    assert center.removeObserver_.call_count == 4
    assert sub.active is False


def test_no_appkit_yields_inactive_subscription() -> None:
    sub = WorkspaceNotificationSource(appkit_loader=lambda: None).subscribe(
        on_sleep=lambda: None,
        on_wake=lambda: None,
        on_screen_sleep=lambda: None,
        on_screen_wake=lambda: None,
    )

    assert sub.active is False
    sub.close()
