"""Validate user-supplied module names against the registry."""

from dataclasses import dataclass, field

from ad_cli import log
from ad_cli.module_config import ModuleRegistry


@dataclass
class ValidationResult:
    """Partition of requested names into known and unknown modules."""

    valid: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return len(self.invalid) == 0


def is_valid_module(name: str, registry: ModuleRegistry) -> bool:
    """Exact, case-sensitive membership test."""
    return name in registry


def validate_modules(
    names: list[str],
    registry: ModuleRegistry,
    report: bool = True,
) -> ValidationResult:
    """Check every requested module name before anything touches git.

    All unknown names are collected and reported together; a single
    unknown name fails the whole batch.

    Args:
        names: Module names as typed by the user.
        registry: Registry to validate against.
        report: Log the unknown names and the available modules.

    Returns:
        ValidationResult with valid and invalid names in input order.
    """
    result = ValidationResult()
    for name in names:
        if is_valid_module(name, registry):
            result.valid.append(name)
        else:
            result.invalid.append(name)

    if report and not result.passed:
        log.error(f"Invalid modules: {' '.join(result.invalid)}")
        log.info(f"Available modules: {' '.join(registry.names)}")

    return result
