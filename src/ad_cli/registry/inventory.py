"""Module inventory — existence and checkout status of every module."""

from dataclasses import dataclass
from pathlib import Path

from ad_cli.git.repo import GitRepo
from ad_cli.module_config import ModuleRegistry

AVAILABLE = "Available"
NOT_A_REPO = "Not a git repo"
MISSING = "Missing"


@dataclass
class ModuleStatus:
    name: str
    status: str
    description: str


def module_status(path: Path) -> str:
    """Classify a module directory."""
    if not path.is_dir():
        return MISSING
    if (path / ".git").exists() or GitRepo(path).is_repository(own_root=True):
        return AVAILABLE
    return NOT_A_REPO


def module_inventory(registry: ModuleRegistry, workspace: Path) -> list[ModuleStatus]:
    """Status of every registered module, in registry order.

    Always covers the whole registry; callers never filter it.
    """
    return [
        ModuleStatus(
            name=name,
            status=module_status(workspace / name),
            description=registry.describe(name),
        )
        for name in registry
    ]
