"""
argmatches

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import sys
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from argmatches.console import console
from argmatches.exceptions import SnapshotError
from argmatches.logger import logger
from argmatches.snapshot import load_snapshot
from argmatches.utils import setup_logging


def get_root_parser(prog: str = "argmatches") -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog,
        description="Inspect recorded command-line match sets.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Logging output mode (defaults to $ARGMATCHES_LOG_MODE).",
    )
    return parser


def get_parsers() -> tuple[ArgumentParser, _SubParsersAction]:
    root_parser = get_root_parser()
    subparsers = root_parser.add_subparsers(dest="command", required=True)
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Show the matches stored in a snapshot file",
        description="Load a YAML or TOML snapshot and render its matches.",
    )
    inspect_parser.add_argument("file", type=Path, help="Snapshot file to inspect")
    inspect_parser.add_argument(
        "--json", action="store_true", help="Print the matches as JSON instead"
    )
    return root_parser, subparsers


def inspect_command(args: Namespace) -> int:
    try:
        matches = load_snapshot(args.file)
    except (FileNotFoundError, SnapshotError) as error:
        logger.debug("inspect failed for '%s'", args.file, exc_info=True)
        console.print(f"[matches.error]❌ {escape(str(error))}[/]")
        return 1

    if args.json:
        console.print_json(json.dumps(matches.to_dict()))
    else:
        matches.render(console)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    root_parser, _ = get_parsers()
    args = root_parser.parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    if args.command == "inspect":
        return inspect_command(args)
    root_parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
