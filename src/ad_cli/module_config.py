"""Canonical module definitions — single source of truth.

The default module set and its human-readable descriptions live here.
Workspaces can replace the set through ad.yaml (see registry.loader).
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Default modules, in the order every action walks them
MODULES: dict[str, str] = {
    "ad-core":       "Core application service",
    "ad-db":         "Database service",
    "ad-deployment": "Deployment configurations",
    "ad-gateway":    "API gateway service",
    "ad-wp":         "WordPress integration service",
}

GENERIC_DESCRIPTION = "AD module"

# Marker for the parent checkout in sync targets
PARENT_TARGET = "."

# Single remote used for pull and push
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True)
class ModuleRegistry:
    """Ordered, immutable set of known module names."""

    names: tuple[str, ...]
    descriptions: dict[str, str] = field(default_factory=dict, compare=False)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self):
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def describe(self, name: str) -> str:
        """Description for a module, falling back to the generic one."""
        return (
            self.descriptions.get(name)
            or MODULES.get(name)
            or GENERIC_DESCRIPTION
        )


def default_registry() -> ModuleRegistry:
    """Registry built from the canonical MODULES table."""
    return ModuleRegistry(names=tuple(MODULES), descriptions=dict(MODULES))


def module_names() -> list[str]:
    """List of default module names, in registry order."""
    return list(MODULES)
