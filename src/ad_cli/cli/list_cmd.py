"""List CLI command: module inventory and service ports."""

import argparse
import sys
from pathlib import Path

from rich.text import Text

from ad_cli import log
from ad_cli.cli.action import add_workspace_argument, new_parser
from ad_cli.cli.exit_codes import EXIT_FAILURE, EXIT_OK, EXIT_USAGE
from ad_cli.module_config import ModuleRegistry, module_names

DESCRIPTION = "List information about modules and their service ports"

EPILOG = f"""\
modules:
  With --port, only the given modules are checked (default: all).
  --modules always lists every module.
  Available modules: {' '.join(module_names())}

examples:
  ad list --modules                   # List all available modules
  ad list --port                      # List ports for all modules
  ad list --port ad-core ad-gateway   # List ports for specific modules
  ad list --port --all                # List ports for all modules (explicit)

notes:
  Ports are read from application.yml, k8s/service.yml and the Tiltfile.
"""

STATUS_STYLES = {
    "Available": "green",
    "Missing": "red",
}


def build_parser() -> argparse.ArgumentParser:
    parser = new_parser("list", DESCRIPTION, EPILOG)
    parser.add_argument(
        "names", nargs="*", metavar="module",
        help="Modules to check with --port",
    )
    parser.add_argument("--port", action="store_true", help="List service ports for modules")
    parser.add_argument("--modules", action="store_true", help="List all available modules")
    parser.add_argument(
        "--all", action="store_true",
        help="Apply the operation to all modules (used with --port)",
    )
    add_workspace_argument(parser)
    return parser


def _column_width(names: list[str]) -> int:
    return max(len(n) for n in [*names, "MODULE"]) + 2


def print_inventory(registry: ModuleRegistry, workspace: Path) -> None:
    from ad_cli.registry.inventory import module_inventory

    log.info("Available AD Modules:")
    log.plain()

    width = _column_width(list(registry.names))
    log.plain(f"{'MODULE':<{width}} {'STATUS':<14} DESCRIPTION")
    log.plain(f"{'-' * width} {'-' * 14} {'-' * 30}")
    for entry in module_inventory(registry, workspace):
        style = STATUS_STYLES.get(entry.status, "yellow")
        log.console.print(Text.assemble(
            f"{entry.name:<{width}} ",
            (f"{entry.status:<14}", style),
            f" {entry.description}",
        ))
    log.plain()


def print_ports(modules: list[str], workspace: Path) -> list[str]:
    """Print the port table; return the modules whose lookup failed."""
    from ad_cli.ports.discover import port_report

    log.info("Service Port Information:")
    log.plain()

    width = _column_width(modules)
    log.plain(f"{'MODULE':<{width}} PORTS")
    log.plain(f"{'-' * width} {'-' * 50}")

    failed = []
    for info in port_report(modules, workspace):
        log.plain(f"{info.module:<{width}} {info.render()}")
        if not info.found_module:
            failed.append(info.module)
    log.plain()
    return failed


def run(argv: list[str]) -> int:
    from ad_cli.registry.loader import load_config
    from ad_cli.registry.validator import validate_modules

    args = build_parser().parse_intermixed_args(argv)

    if not args.port and not args.modules:
        log.error("No action specified. Use --port or --modules.")
        print("Run 'ad list --help' for usage information.", file=sys.stderr)
        return EXIT_USAGE

    config = load_config(args.workspace)

    if args.names and not validate_modules(args.names, config.registry).passed:
        return EXIT_USAGE

    if args.modules:
        print_inventory(config.registry, config.workspace)

    rc = EXIT_OK
    if args.port:
        targets = args.names
        if args.all or not targets:
            targets = list(config.registry.names)
        failed = print_ports(targets, config.workspace)
        if failed:
            log.warning(f"Port lookup failed for: {' '.join(failed)}")
            rc = EXIT_FAILURE
    return rc
