"""Workspace path resolution.

Resolves the workspace root and the optional ad.yaml config file. Uses
environment variables when available, falls back to conventional defaults.

Environment variables:
    AD_WORKSPACE_DIR: workspace root (default: current directory)
    AD_CONFIG: config file (default: <workspace>/ad.yaml)
    AD_VERBOSE: echo git commands when set to a non-empty value
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "ad.yaml"


def workspace_root(override: Path | str | None = None) -> Path:
    """Return the workspace root directory."""
    if override:
        return Path(override).expanduser().resolve()
    env = os.environ.get("AD_WORKSPACE_DIR")
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd()


def config_path(workspace: Path | str | None = None) -> Path:
    """Return the path to ad.yaml for a workspace."""
    env = os.environ.get("AD_CONFIG")
    if env:
        return Path(env).expanduser()
    return workspace_root(workspace) / CONFIG_FILENAME


def verbose() -> bool:
    return bool(os.environ.get("AD_VERBOSE"))
