"""Top-level usage text and per-action help."""

import sys

from ad_cli import log
from ad_cli.cli.action import Action
from ad_cli.cli.exit_codes import EXIT_OK, EXIT_USAGE
from ad_cli.module_config import ModuleRegistry


def render_usage(actions: dict[str, Action], registry: ModuleRegistry) -> str:
    """Top-level usage, listing every registered action."""
    lines = [
        "AD - Modular Command Tool for AD Project",
        "",
        "USAGE:",
        "    ad <action> [options] [arguments...]",
        "    ad help [action]",
        "    ad --help",
        "",
        "DESCRIPTION:",
        "    ad runs git operations across the AD project modules and the",
        "    parent repository that holds them.",
        "",
        "GLOBAL OPTIONS:",
        "    --help, -h      Show this help message",
        "    --version       Show the ad version",
        "",
        "AVAILABLE ACTIONS:",
    ]
    for action in actions.values():
        lines.append(f"    {action.name:<12} {action.description}")
    lines += [
        "",
        "MODULES:",
        f"    The following modules are available: {' '.join(registry.names)}",
        "",
        "EXAMPLES:",
        "    ad pull                     # Pull all modules",
        "    ad pull ad-core ad-db       # Pull specific modules",
        "    ad sync -m \"Fix typo\" .     # Commit and push the parent repository",
        "    ad list --modules           # Show module status",
        "",
        "For detailed help on any action, use:",
        "    ad <action> --help",
        "",
    ]
    return "\n".join(lines)


def show_action_help(name: str, actions: dict[str, Action]) -> int:
    """Print an action's own --help output."""
    action = actions.get(name)
    if action is None:
        log.error(f"Unknown action: {name}")
        print("Run 'ad --help' to see available actions.", file=sys.stderr)
        return EXIT_USAGE
    action.build_parser().print_help()
    return EXIT_OK
