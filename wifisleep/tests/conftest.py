from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from typing import Optional

import pytest

from wifisleep.core.commands import CommandResult


# Safety default: during pytest, never touch the user's real config/state
# directory, and never let a running tray react to test writes.
os.environ.setdefault(
    "WIFISLEEP_CONFIG_DIR",
    tempfile.mkdtemp(prefix="wifisleep-test-config-"),
)


@pytest.fixture
def cfg_dir(tmp_path, monkeypatch):
    d = tmp_path / "cfg"
    monkeypatch.setenv("WIFISLEEP_CONFIG_DIR", str(d))
    monkeypatch.delenv("WIFISLEEP_CONFIG_PATH", raising=False)
    return d


@pytest.fixture(autouse=True)
def _reset_package_logger():
    pkg = logging.getLogger("wifisleep")
    level = pkg.level
    yield
    from wifisleep.core import app_log

    app_log.detach_file_handlers()
    pkg.setLevel(level)


@dataclass
class FakeNetworkCommands:
    """In-memory stand-in for `NetworkCommands` that records every call."""

    wifi_on: bool = True
    bluetooth_on: Optional[bool] = True
    blueutil_present: bool = True
    services: list[str] = field(default_factory=lambda: ["Wi-Fi", "Ethernet", "Thunderbolt Bridge"])
    wifi_service: Optional[str] = "Wi-Fi"
    fail_services: set[str] = field(default_factory=set)
    calls: list[tuple] = field(default_factory=list)

    # ---- Wi-Fi

    def wifi_service_name(self) -> Optional[str]:
        return self.wifi_service

    def query_wifi_power(self) -> str:
        self.calls.append(("query_wifi",))
        return f"Wi-Fi Power (en0): {'On' if self.wifi_on else 'Off'}"

    def set_wifi_power(self, on: bool) -> CommandResult:
        self.calls.append(("set_wifi", bool(on)))
        self.wifi_on = bool(on)
        return CommandResult(ok=True)

    # ---- Bluetooth

    def bluetooth_tool_available(self) -> bool:
        return self.blueutil_present

    def query_bluetooth_power(self) -> CommandResult:
        self.calls.append(("query_bluetooth",))
        if self.bluetooth_on is None:
            return CommandResult(ok=False, error="boom")
        return CommandResult(ok=True, output="1" if self.bluetooth_on else "0")

    def set_bluetooth_power(self, on: bool) -> CommandResult:
        self.calls.append(("set_bluetooth", bool(on)))
        self.bluetooth_on = bool(on)
        return CommandResult(ok=True)

    # ---- other services

    def list_network_services(self) -> list[str]:
        self.calls.append(("list_services",))
        return list(self.services)

    def set_service_enabled(self, name: str, on: bool) -> bool:
        self.calls.append(("set_service", name, bool(on)))
        if name in self.fail_services:
            return False
        starred = f"*{name}"
        if on and starred in self.services:
            self.services[self.services.index(starred)] = name
        elif not on and name in self.services:
            self.services[self.services.index(name)] = starred
        return True

    def calls_named(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def fake_commands() -> FakeNetworkCommands:
    return FakeNetworkCommands()
