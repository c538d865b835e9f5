"""Pure parsers for `networksetup` / `blueutil` output."""

from __future__ import annotations

import re
from typing import Iterable, Optional


_POWER_RE = re.compile(r":\s*(on|off)\s*$", re.IGNORECASE)

WIFI_PORT_NAMES = ("Wi-Fi", "AirPort")


def parse_wifi_power(output: Optional[str]) -> bool:
    """Return True if `-getairportpower` output reports power on.

    Typical output: "Wi-Fi Power (en0): On". Anything without an "on"
    indicator counts as off.
    """

    if not output:
        return False
    s = str(output).strip()
    m = _POWER_RE.search(s)
    if m:
        return m.group(1).lower() == "on"
    return re.search(r"\bon\b", s, re.IGNORECASE) is not None


def parse_bluetooth_power(output: Optional[str]) -> Optional[bool]:
    """Parse `blueutil -p`. Returns None when the value is not recognisable."""

    if output is None:
        return None
    s = str(output).strip().lower()
    if s in {"1", "on", "yes", "true"}:
        return True
    if s in {"0", "off", "no", "false"}:
        return False
    return None


def parse_network_services(output: Optional[str]) -> list[str]:
    """Parse `-listallnetworkservices` into names, in listed order.

    The first line is an explanatory header ("An asterisk (*) denotes ...").
    Disabled services keep their leading asterisk.
    """

    if not output:
        return []

    names: list[str] = []
    for raw_line in str(output).splitlines():
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            continue
        if line.lower().startswith("an asterisk"):
            continue
        names.append(line.strip())
    return names


def parse_hardware_ports(output: Optional[str]) -> list[tuple[str, str]]:
    """Parse `-listallhardwareports` into (port name, device) pairs."""

    if not output:
        return []

    pairs: list[tuple[str, str]] = []
    port: Optional[str] = None
    for raw_line in str(output).splitlines():
        line = raw_line.strip()
        if line.startswith("Hardware Port:"):
            port = line.split(":", 1)[1].strip()
        elif line.startswith("Device:") and port is not None:
            pairs.append((port, line.split(":", 1)[1].strip()))
            port = None
    return pairs


def find_wifi_port(pairs: Iterable[tuple[str, str]]) -> Optional[tuple[str, str]]:
    for port, device in pairs:
        if port in WIFI_PORT_NAMES and device:
            return port, device
    return None


def is_wifi_service(name: str, *, wifi_service: Optional[str] = None) -> bool:
    if wifi_service and name == wifi_service:
        return True
    return any(port in name for port in WIFI_PORT_NAMES)


def select_services_to_disable(names: Iterable[str], *, wifi_service: Optional[str] = None) -> list[str]:
    """Pick the "other" services eligible for disabling, keeping order.

    Excludes the Wi-Fi service and names marked already disabled ("*" prefix).

    >>> select_services_to_disable(["Wi-Fi", "*Thunderbolt Bridge", "Ethernet", "USB LAN"])
    ['Ethernet', 'USB LAN']
    """

    out: list[str] = []
    for name in names:
        n = str(name).strip()
        if not n or n.startswith("*"):
            continue
        if is_wifi_service(n, wifi_service=wifi_service):
            continue
        out.append(n)
    return out
