from __future__ import annotations

from .executor import CommandResult, find_tool, run_command
from .network import NetworkCommands
from .parsing import (
    parse_bluetooth_power,
    parse_network_services,
    parse_wifi_power,
    select_services_to_disable,
)

__all__ = [
    "CommandResult",
    "NetworkCommands",
    "find_tool",
    "parse_bluetooth_power",
    "parse_network_services",
    "parse_wifi_power",
    "run_command",
    "select_services_to_disable",
]
