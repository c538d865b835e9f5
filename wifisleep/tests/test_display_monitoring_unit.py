from __future__ import annotations

import threading
import time

from wifisleep.core.commands import CommandResult
from wifisleep.core.monitoring import display_monitoring
from wifisleep.core.monitoring.display_monitoring import DisplayActivityPoller, read_display_active


CLAMSHELL_OPEN = '+-o AppleACPIPlatformExpert\n  {\n    "AppleClamshellState" = No\n  }\n'
CLAMSHELL_CLOSED = '+-o AppleACPIPlatformExpert\n  {\n    "AppleClamshellState" = Yes\n  }\n'


def _wrangler(state: int) -> str:
    return f'+-o IODisplayWrangler\n  {{\n    "IOPowerManagement" = {{"CurrentPowerState"={state},"MaxPowerState"=4}}\n  }}\n'


def _runner(clamshell: CommandResult, wrangler: CommandResult):
    def _run(argv, timeout_s):
        if "AppleClamshellState" in argv:
            return clamshell
        return wrangler

    return _run


def test_parsers() -> None:
    assert display_monitoring._parse_clamshell_closed(CLAMSHELL_CLOSED) is True
    assert display_monitoring._parse_clamshell_closed(CLAMSHELL_OPEN) is False
    assert display_monitoring._parse_clamshell_closed("") is None
    assert display_monitoring._parse_display_power_state(_wrangler(4)) == 4
    assert display_monitoring._parse_display_power_state("nothing") is None


def test_closed_lid_means_inactive() -> None:
    run = _runner(CommandResult(ok=True, output=CLAMSHELL_CLOSED), CommandResult(ok=True, output=_wrangler(4)))
    assert read_display_active(run_fn=run) is False


def test_wrangler_state_decides_when_lid_open() -> None:
    on = _runner(CommandResult(ok=True, output=CLAMSHELL_OPEN), CommandResult(ok=True, output=_wrangler(4)))
    dimmed = _runner(CommandResult(ok=True, output=CLAMSHELL_OPEN), CommandResult(ok=True, output=_wrangler(3)))
    asleep = _runner(CommandResult(ok=True, output=CLAMSHELL_OPEN), CommandResult(ok=True, output=_wrangler(1)))

    assert read_display_active(run_fn=on) is True
    assert read_display_active(run_fn=dimmed) is True
    assert read_display_active(run_fn=asleep) is False


def test_open_lid_without_wrangler_is_active() -> None:
    run = _runner(CommandResult(ok=True, output=CLAMSHELL_OPEN), CommandResult(ok=True, output=""))
    assert read_display_active(run_fn=run) is True


def test_unknown_when_nothing_readable() -> None:
    run = _runner(CommandResult(ok=False), CommandResult(ok=False))
    assert read_display_active(run_fn=run) is None


def test_poller_delivers_samples_until_stopped() -> None:
    seen: list = []
    got_two = threading.Event()

    def on_sample(active, started_at):
        seen.append(active)
        if len(seen) >= 2:
            got_two.set()

    poller = DisplayActivityPoller(on_sample=on_sample, interval_s=0.01, sample_fn=lambda: True)
    poller.start()
    assert got_two.wait(timeout=5.0)

    poller.stop()
    assert poller.running is False
    count = len(seen)
    time.sleep(0.05)
    assert len(seen) == count


def test_poller_survives_sample_errors() -> None:
    calls: list[int] = []
    done = threading.Event()

    def sample():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("ioreg exploded")
        done.set()
        return False

    poller = DisplayActivityPoller(on_sample=lambda *_a: None, interval_s=0.01, sample_fn=sample)
    poller.start()
    try:
        assert done.wait(timeout=5.0)
    finally:
        poller.stop()


def test_stop_without_start_is_harmless() -> None:
    poller = DisplayActivityPoller(on_sample=lambda *_a: None)
    poller.stop()
    assert poller.running is False


def test_poller_reports_when_each_sample_started() -> None:
    ticks = iter([10.0, 20.0, 30.0, 40.0])
    seen: list[tuple] = []
    got_one = threading.Event()

    def on_sample(active, started_at):
        seen.append((active, started_at))
        got_one.set()

    poller = DisplayActivityPoller(
        on_sample=on_sample,
        interval_s=60.0,
        sample_fn=lambda: False,
        monotonic_fn=lambda: next(ticks),
    )
    poller.start()
    try:
        assert got_one.wait(timeout=5.0)
    finally:
        poller.stop()

    assert seen[0] == (False, 10.0)
