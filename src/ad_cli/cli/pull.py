"""Pull CLI command."""

import argparse

from ad_cli import log
from ad_cli.cli.action import add_workspace_argument, new_parser
from ad_cli.cli.exit_codes import EXIT_FAILURE, EXIT_OK, EXIT_USAGE
from ad_cli.module_config import module_names

DESCRIPTION = "Pull latest code from GitHub for specified modules"

EPILOG = f"""\
modules:
  If no modules are given, pulls all modules.
  Available modules: {' '.join(module_names())}

examples:
  ad pull                          # Pull all modules
  ad pull ad-core ad-db            # Pull specific modules
  ad pull --all                    # Pull all modules explicitly
  ad pull --force ad-core          # Force pull ad-core module
"""


def build_parser() -> argparse.ArgumentParser:
    parser = new_parser("pull", DESCRIPTION, EPILOG)
    parser.add_argument("modules", nargs="*", metavar="module", help="Modules to pull")
    parser.add_argument("--all", action="store_true", help="Pull all modules")
    parser.add_argument(
        "--force", action="store_true",
        help="Pull even if there are local changes",
    )
    add_workspace_argument(parser)
    return parser


def run(argv: list[str]) -> int:
    from ad_cli.git.pull import pull_modules
    from ad_cli.registry.loader import load_config
    from ad_cli.registry.validator import validate_modules

    args = build_parser().parse_intermixed_args(argv)
    config = load_config(args.workspace)

    modules = args.modules
    if args.all or not modules:
        modules = list(config.registry.names)

    if not validate_modules(modules, config.registry).passed:
        return EXIT_USAGE

    log.info(f"Starting pull operation for modules: {' '.join(modules)}")

    summary = pull_modules(
        modules,
        config.workspace,
        remote=config.remote,
        force=args.force,
    )

    log.plain()
    log.info("Pull operation completed")
    log.success(f"Successfully pulled: {summary.tally()} modules")

    if summary.failed:
        log.warning(f"Failed modules: {' '.join(summary.failed)}")
        return EXIT_FAILURE
    return EXIT_OK
