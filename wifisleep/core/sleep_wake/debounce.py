from __future__ import annotations

from typing import Optional


SLEEP = "sleep"
WAKE = "wake"


class TransitionDebounce:
    """Time-based suppression of repeated sleep/wake triggers.

    Several sources report the same physical event (system sleep, screen
    sleep, display polling). A trigger is suppressed when the last acted-upon
    trigger of the same class is younger than the window and no trigger of
    the opposite class was acted upon in between.

    It only looks at timestamps, never at saved state, so a missing wake can
    hold it shut for at most one window.

    It is IO-free and unit-testable.
    """

    def __init__(self, window_s: float = 5.0) -> None:
        self.window_s = max(0.0, float(window_s))
        self._last_at: dict[str, Optional[float]] = {SLEEP: None, WAKE: None}

    @staticmethod
    def _opposite(kind: str) -> str:
        if kind == SLEEP:
            return WAKE
        if kind == WAKE:
            return SLEEP
        raise ValueError(f"unknown transition kind: {kind!r}")

    def should_act(self, kind: str, now: float) -> bool:
        other = self._opposite(kind)
        last_same = self._last_at[kind]
        if last_same is None:
            return True

        last_other = self._last_at[other]
        if last_other is not None and last_other >= last_same:
            return True

        return (float(now) - float(last_same)) >= self.window_s

    def record(self, kind: str, now: float) -> None:
        self._opposite(kind)
        self._last_at[kind] = float(now)

    def last_action_at(self, kind: str) -> Optional[float]:
        self._opposite(kind)
        return self._last_at[kind]

    def reset(self) -> None:
        self._last_at = {SLEEP: None, WAKE: None}
