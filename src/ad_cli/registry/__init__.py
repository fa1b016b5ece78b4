"""Registry module — load, validate and inspect the workspace module set."""

from ad_cli.registry.loader import ConfigError, WorkspaceConfig, load_config
from ad_cli.registry.validator import ValidationResult, is_valid_module, validate_modules
from ad_cli.registry.inventory import ModuleStatus, module_inventory

__all__ = [
    "ConfigError",
    "WorkspaceConfig",
    "load_config",
    "ValidationResult",
    "is_valid_module",
    "validate_modules",
    "ModuleStatus",
    "module_inventory",
]
