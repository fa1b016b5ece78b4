"""Command dispatcher for the ad tool.

Usage:
    ad pull [--all] [--force] [module...]
    ad sync [--all] [--message MSG] [--force] [--dry-run] [target...]
    ad list [--port] [--modules] [--all] [module...]
    ad help [action]
    ad --help | --version
"""

import sys

from ad_cli import __version__, log
from ad_cli.cli import list_cmd, pull, sync
from ad_cli.cli.action import Action
from ad_cli.cli.exit_codes import EXIT_OK, EXIT_USAGE
from ad_cli.cli.help import render_usage, show_action_help
from ad_cli.module_config import default_registry
from ad_cli.registry.loader import ConfigError, load_config

ACTIONS: dict[str, Action] = {
    a.name: a
    for a in (
        Action("pull", pull.DESCRIPTION, pull.build_parser, pull.run),
        Action("sync", sync.DESCRIPTION, sync.build_parser, sync.run),
        Action("list", list_cmd.DESCRIPTION, list_cmd.build_parser, list_cmd.run),
    )
}

HELP_FLAGS = ("--help", "-h")


def available_actions() -> list[str]:
    return list(ACTIONS)


def _print_usage() -> int:
    try:
        registry = load_config().registry
    except ConfigError as e:
        log.warning(f"{e}; showing default modules")
        registry = default_registry()
    print(render_usage(ACTIONS, registry))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    if not args or args[0] in HELP_FLAGS:
        return _print_usage()

    name, rest = args[0], args[1:]

    if name == "--version":
        print(f"ad {__version__}")
        return EXIT_OK

    if name == "help":
        if not rest:
            return _print_usage()
        return show_action_help(rest[0], ACTIONS)

    action = ACTIONS.get(name)
    if action is None:
        log.error(f"Unknown action '{name}'")
        print("Run 'ad --help' to see available actions.", file=sys.stderr)
        return EXIT_USAGE

    try:
        return action.run(rest)
    except ConfigError as e:
        log.error(str(e))
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
