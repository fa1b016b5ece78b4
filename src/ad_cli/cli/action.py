"""Action registration — the static table the dispatcher routes through."""

import argparse
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Action:
    """A subcommand: its name, one-line description, parser and handler."""

    name: str
    description: str
    build_parser: Callable[[], argparse.ArgumentParser]
    run: Callable[[list[str]], int]


def add_workspace_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--workspace", type=Path, default=None,
        help="Workspace root (default: $AD_WORKSPACE_DIR or the current directory)",
    )


def new_parser(name: str, description: str, epilog: str) -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog=f"ad {name}",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
