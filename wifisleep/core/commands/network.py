"""macOS network interface commands.

Wraps `networksetup` (Wi-Fi power, network services) and `blueutil`
(Bluetooth power). Every method is synchronous and best-effort: failures come
back as values, never as exceptions.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .executor import CommandResult, Runner, find_tool, run_command
from .parsing import find_wifi_port, parse_hardware_ports, parse_network_services

logger = logging.getLogger(__name__)


NETWORKSETUP = "/usr/sbin/networksetup"
BLUEUTIL = "blueutil"
DEFAULT_WIFI_DEVICE = "en0"


class NetworkCommands:
    """The external operations the sleep/wake controller calls."""

    def __init__(
        self,
        *,
        runner: Runner = run_command,
        wifi_device: str = "",
        tool_finder: Callable[[str], Optional[str]] = find_tool,
        timeout_s: float = 10.0,
    ):
        self._run = runner
        self._find_tool = tool_finder
        self._timeout_s = float(timeout_s)
        self._configured_device = str(wifi_device or "").strip()
        self._wifi_port: Optional[tuple[str, str]] = None
        self._port_probed = False

    # ---- Wi-Fi

    def _probe_wifi_port(self) -> Optional[tuple[str, str]]:
        if not self._port_probed:
            self._port_probed = True
            res = self._run([NETWORKSETUP, "-listallhardwareports"], self._timeout_s)
            if res.ok:
                self._wifi_port = find_wifi_port(parse_hardware_ports(res.output))
            if self._wifi_port is None:
                logger.debug("Wi-Fi hardware port not detected; using %s", DEFAULT_WIFI_DEVICE)
        return self._wifi_port

    def wifi_device(self) -> str:
        if self._configured_device:
            return self._configured_device
        port = self._probe_wifi_port()
        return port[1] if port else DEFAULT_WIFI_DEVICE

    def wifi_service_name(self) -> Optional[str]:
        port = self._probe_wifi_port()
        return port[0] if port else None

    def query_wifi_power(self) -> str:
        """Return the raw `-getairportpower` text ("" when the call failed)."""

        res = self._run([NETWORKSETUP, "-getairportpower", self.wifi_device()], self._timeout_s)
        return res.output if res.ok else ""

    def set_wifi_power(self, on: bool) -> CommandResult:
        return self._run(
            [NETWORKSETUP, "-setairportpower", self.wifi_device(), "on" if on else "off"],
            self._timeout_s,
        )

    # ---- Bluetooth

    def _blueutil(self) -> Optional[str]:
        return self._find_tool(BLUEUTIL)

    def bluetooth_tool_available(self) -> bool:
        return self._blueutil() is not None

    def query_bluetooth_power(self) -> CommandResult:
        tool = self._blueutil()
        if tool is None:
            return CommandResult(ok=False, error="blueutil not found", tool_missing=True)
        return self._run([tool, "-p"], self._timeout_s)

    def set_bluetooth_power(self, on: bool) -> CommandResult:
        tool = self._blueutil()
        if tool is None:
            return CommandResult(ok=False, error="blueutil not found", tool_missing=True)
        return self._run([tool, "-p", "1" if on else "0"], self._timeout_s)

    # ---- other network services

    def list_network_services(self) -> list[str]:
        res = self._run([NETWORKSETUP, "-listallnetworkservices"], self._timeout_s)
        if not res.ok:
            return []
        return parse_network_services(res.output)

    def set_service_enabled(self, name: str, on: bool) -> bool:
        res = self._run(
            [NETWORKSETUP, "-setnetworkserviceenabled", str(name), "on" if on else "off"],
            self._timeout_s,
        )
        return bool(res.ok)
