"""Sync CLI command."""

import argparse

from ad_cli import log
from ad_cli.cli.action import add_workspace_argument, new_parser
from ad_cli.cli.exit_codes import EXIT_FAILURE, EXIT_OK, EXIT_USAGE
from ad_cli.module_config import PARENT_TARGET, module_names

DESCRIPTION = "Sync changes by performing git add, commit, and push"

EPILOG = f"""\
targets:
  .                   Sync the parent repository (the workspace checkout)
  module...           Sync specific modules
  If no target is given and --all is not used, syncs the parent repository.
  Available modules: {' '.join(module_names())}

examples:
  ad sync .                           # Sync parent repository
  ad sync ad-core ad-db               # Sync specific modules
  ad sync --all                       # Sync all modules
  ad sync --all -m "Update all"       # Sync all with custom message
  ad sync ad-core --force             # Force push ad-core module
  ad sync --dry-run .                 # See what would happen to parent repo

notes:
  Commit messages are generated per target when none is given.
  Pushes only to an existing branch of the same name on the remote.
  Use --force carefully as it can overwrite remote changes.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = new_parser("sync", DESCRIPTION, EPILOG)
    parser.add_argument(
        "targets", nargs="*", metavar="target",
        help="'.' for the parent repository, or module names",
    )
    parser.add_argument("--all", action="store_true", help="Sync all modules")
    parser.add_argument(
        "--message", "-m", default=None, metavar="MSG",
        help="Custom commit message (default: auto-generated)",
    )
    parser.add_argument(
        "--force", action="store_true",
        help="Force push (use with caution)",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Show what would be done without executing",
    )
    add_workspace_argument(parser)
    return parser


def run(argv: list[str]) -> int:
    from ad_cli.git.sync import sync_targets
    from ad_cli.registry.loader import load_config
    from ad_cli.registry.validator import validate_modules

    args = build_parser().parse_intermixed_args(argv)

    if args.all and args.targets:
        log.error("Cannot specify both --all and specific targets")
        return EXIT_USAGE
    if args.message is not None and not args.message.strip():
        log.error("--message requires a commit message")
        return EXIT_USAGE

    config = load_config(args.workspace)

    if args.all:
        targets = list(config.registry.names)
    elif args.targets:
        targets = args.targets
    else:
        targets = [PARENT_TARGET]

    modules = [t for t in targets if t != PARENT_TARGET]
    if modules and not validate_modules(modules, config.registry).passed:
        return EXIT_USAGE

    if args.dry_run:
        log.info("DRY RUN: Showing what would be synced")
    else:
        log.info(f"Starting sync operation for: {' '.join(targets)}")

    summary = sync_targets(
        targets,
        config.workspace,
        message=args.message,
        remote=config.remote,
        force=args.force,
        dry_run=args.dry_run,
    )

    log.plain()
    if args.dry_run:
        log.info("Dry run completed")
        return EXIT_OK

    log.info("Sync operation completed")
    log.success(f"Successfully synced: {summary.tally()} targets")

    if summary.failed:
        log.warning(f"Failed targets: {' '.join(summary.failed)}")
        return EXIT_FAILURE
    return EXIT_OK
