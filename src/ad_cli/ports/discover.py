"""Assemble per-module port summaries from the port sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ad_cli.ports.sources import (
    APP_CONFIG,
    CLUSTER_SERVICE,
    NODE_PORT,
    PORT_FORWARD,
    ContentProvider,
    read_if_present,
)

NOT_FOUND = "not available (module not found)"
NO_CONFIG = "not available (no port config found)"


@dataclass
class PortInfo:
    """Ports discovered for one module. Computed fresh on every query."""

    module: str
    found_module: bool = True
    primary_port: str | None = None
    primary_source: str | None = None
    secondary: list[tuple[str, str]] = field(default_factory=list)

    @property
    def has_ports(self) -> bool:
        return bool(self.primary_port or self.secondary)

    def render(self) -> str:
        if not self.found_module:
            return NOT_FOUND
        if not self.has_ports:
            return NO_CONFIG

        parts = []
        if self.primary_port:
            parts.append(f"{self.primary_port} ({self.primary_source})")
        parts.extend(f"{label}: {value}" for label, value in self.secondary)
        return ", ".join(parts)


def get_module_ports(
    module: str,
    workspace: Path,
    read: ContentProvider = read_if_present,
) -> PortInfo:
    """Probe a module's config files for its service ports.

    The primary port comes from the application config, falling back to
    the cluster service. A node port equal to the primary is dropped.

    Args:
        module: Module directory name.
        workspace: Workspace root.
        read: Content provider for the probed files.

    Returns:
        PortInfo; found_module is False when the directory is missing.
    """
    path = workspace / module
    if not path.is_dir():
        return PortInfo(module=module, found_module=False)

    info = PortInfo(module=module)

    for source in (APP_CONFIG, CLUSTER_SERVICE):
        port = source.probe(path, read)
        if port:
            info.primary_port = port
            info.primary_source = source.label
            break

    node_port = NODE_PORT.probe(path, read)
    if node_port and node_port != info.primary_port:
        info.secondary.append((NODE_PORT.label, node_port))

    forward = PORT_FORWARD.probe(path, read)
    if forward:
        info.secondary.append((PORT_FORWARD.label, forward))

    return info


def port_report(
    modules: list[str],
    workspace: Path,
    read: ContentProvider = read_if_present,
) -> list[PortInfo]:
    """Port info for each module, in the given order."""
    return [get_module_ports(m, workspace, read) for m in modules]
