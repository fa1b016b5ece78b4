"""Load the optional ad.yaml workspace configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from ad_cli.module_config import DEFAULT_REMOTE, ModuleRegistry, default_registry
from ad_cli.paths import config_path, workspace_root


class ConfigError(ValueError):
    """Raised when ad.yaml exists but cannot be used."""


@dataclass(frozen=True)
class WorkspaceConfig:
    """Resolved settings for one invocation."""

    workspace: Path
    registry: ModuleRegistry = field(default_factory=default_registry)
    remote: str = DEFAULT_REMOTE


def _parse_modules(raw: object, source: Path) -> ModuleRegistry:
    if not isinstance(raw, list):
        raise ConfigError(f"{source}: 'modules' must be a list")

    names: list[str] = []
    descriptions: dict[str, str] = {}
    for entry in raw:
        if isinstance(entry, str):
            name, description = entry, None
        elif isinstance(entry, dict):
            name, description = entry.get("name"), entry.get("description")
        else:
            name, description = None, None

        if not name or not isinstance(name, str):
            raise ConfigError(f"{source}: module entry without a name: {entry!r}")
        if name in names:
            raise ConfigError(f"{source}: duplicate module '{name}'")

        names.append(name)
        if description:
            descriptions[name] = str(description)

    return ModuleRegistry(names=tuple(names), descriptions=descriptions)


def load_config(workspace: Path | str | None = None) -> WorkspaceConfig:
    """Load ad.yaml for a workspace, falling back to built-in defaults.

    Args:
        workspace: Workspace root. Defaults to AD_WORKSPACE_DIR or the cwd.

    Returns:
        WorkspaceConfig with the module registry and remote name.

    Raises:
        ConfigError: If the file is malformed.
    """
    ws = workspace_root(workspace)
    path = config_path(ws)
    if not path.is_file():
        return WorkspaceConfig(workspace=ws)

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"{path}: cannot read config: {e}") from e

    if data is None:
        return WorkspaceConfig(workspace=ws)
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a YAML mapping")

    registry = default_registry()
    if "modules" in data:
        registry = _parse_modules(data["modules"], path)

    remote = data.get("remote") or DEFAULT_REMOTE
    if not isinstance(remote, str):
        raise ConfigError(f"{path}: 'remote' must be a string")

    return WorkspaceConfig(workspace=ws, registry=registry, remote=remote)
