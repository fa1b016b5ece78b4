"""Ports module — discover service ports declared in module config files."""

from ad_cli.ports.discover import PortInfo, get_module_ports, port_report
from ad_cli.ports.sources import PortSource, read_if_present

__all__ = [
    "PortInfo",
    "get_module_ports",
    "port_report",
    "PortSource",
    "read_if_present",
]
