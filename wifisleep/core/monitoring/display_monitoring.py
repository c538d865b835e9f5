from __future__ import annotations

import logging
import re
import threading
import time
from collections.abc import Callable
from typing import Optional

from ..commands.executor import CommandResult, run_command

logger = logging.getLogger(__name__)


_POWER_STATE_RE = re.compile(r'"CurrentPowerState"\s*=\s*(\d+)')
_CLAMSHELL_RE = re.compile(r'"AppleClamshellState"\s*=\s*(Yes|No)', re.IGNORECASE)

# IODisplayWrangler power states: 4 on, 3 dimmed, 0-1 display asleep.
_DISPLAY_ASLEEP_MAX_STATE = 1


def _parse_display_power_state(output: str | None) -> int | None:
    if not output:
        return None
    m = _POWER_STATE_RE.search(str(output))
    if not m:
        return None
    return int(m.group(1))


def _parse_clamshell_closed(output: str | None) -> bool | None:
    if not output:
        return None
    m = _CLAMSHELL_RE.search(str(output))
    if not m:
        return None
    return m.group(1).lower() == "yes"


def read_display_active(
    *,
    run_fn: Callable[[list[str], float], CommandResult] = run_command,
) -> Optional[bool]:
    """Sample whether the built-in display is active.

    Returns False when the lid is closed or the display wrangler reports
    sleep, True when either source says active, None when neither source
    could be read.
    """

    clamshell = run_fn(["ioreg", "-r", "-k", "AppleClamshellState", "-d", "1"], 5.0)
    closed = _parse_clamshell_closed(clamshell.output) if clamshell.ok else None
    if closed:
        return False

    wrangler = run_fn(["ioreg", "-n", "IODisplayWrangler", "-r", "-d", "1"], 5.0)
    state = _parse_display_power_state(wrangler.output) if wrangler.ok else None
    if state is not None:
        return state > _DISPLAY_ASLEEP_MAX_STATE

    # Apple Silicon has no IODisplayWrangler; an open lid is all we know.
    if closed is False:
        return True
    return None


class DisplayActivityPoller:
    """Periodically sample display activity on a background thread.

    `on_sample(active, started_at)` gets the monotonic time the sample began,
    so the receiver can drop samples that a faster signal has overtaken.
    `stop()` is synchronous: once it returns, `on_sample` will not be called
    again.
    """

    def __init__(
        self,
        *,
        on_sample: Callable[[Optional[bool], float], None],
        interval_s: float = 5.0,
        sample_fn: Callable[[], Optional[bool]] = read_display_active,
        join_timeout_s: float = 15.0,
        monotonic_fn: Callable[[], float] = time.monotonic,
    ):
        self._on_sample = on_sample
        self._interval_s = max(0.0, float(interval_s))
        self._sample_fn = sample_fn
        self._join_timeout_s = float(join_timeout_s)
        self._monotonic = monotonic_fn
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        t = self._thread
        return t is not None and t.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._loop, args=(self._stop_event,), daemon=True)
        self._thread.start()
        logger.debug("Display activity polling started (every %.1fs)", self._interval_s)

    def stop(self) -> None:
        self._stop_event.set()
        t = self._thread
        self._thread = None
        if t is None or t is threading.current_thread():
            return
        t.join(timeout=self._join_timeout_s)
        if t.is_alive():
            logger.warning("Display activity poller did not stop within %.1fs", self._join_timeout_s)

    def _loop(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            try:
                started_at = float(self._monotonic())
                active = self._sample_fn()
                if stop_event.is_set():
                    break
                self._on_sample(active, started_at)
            except Exception as exc:
                logger.exception("Display activity polling error: %s", exc)

            stop_event.wait(self._interval_s)
