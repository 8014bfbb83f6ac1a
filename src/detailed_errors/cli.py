"""
detailed-errors Command-Line Interface.

A small driver around the library: it checks ``if`` predicates and prints
the resulting error tree, and re-displays error snapshots saved as JSON.

Usage:
    detailed-errors check 'if a==1'                 # Explain what is wrong
    detailed-errors check 'if a==1' --define a:Int  # Declare variables
    detailed-errors check 'if a==1' --json          # Print the snapshot as JSON
    detailed-errors show snapshot.json              # Display a saved snapshot
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from detailed_errors import __version__
from detailed_errors.config import ColorMode, RenderConfig
from detailed_errors.predicates import check_predicate
from detailed_errors.tree.display import DisplayInfo
from detailed_errors.tree.renderer import ErrorTreeRenderer

logger = logging.getLogger("detailed-errors")


def _parse_definition(value: str) -> tuple[str, str]:
    """Parse ``NAME`` or ``NAME:TYPE`` (type defaults to Int)."""
    name, _, type_name = value.partition(":")
    name = name.strip()
    if not name:
        raise argparse.ArgumentTypeError(f"invalid definition: {value!r}")
    return name, type_name.strip() or "Int"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="detailed-errors",
        description="detailed-errors - hierarchical, human-readable error explanations",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--color",
        choices=[mode.value for mode in ColorMode],
        default=ColorMode.AUTO.value,
        help="When to style output for the terminal (default: auto)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser("check", help="Check an if predicate")
    check_parser.add_argument(
        "predicate",
        help="The predicate to check, e.g. 'if a==1'",
    )
    check_parser.add_argument(
        "-d",
        "--define",
        action="append",
        default=[],
        type=_parse_definition,
        metavar="NAME[:TYPE]",
        help="Declare a variable (type defaults to Int); repeatable",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the error snapshot as JSON instead of text",
    )

    # Show command
    show_parser = subparsers.add_parser("show", help="Display a saved JSON error snapshot")
    show_parser.add_argument(
        "input",
        type=Path,
        help="JSON file written by 'check --json'",
    )

    return parser


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the check command."""
    error = check_predicate(args.predicate, dict(args.define))
    if error is None:
        print("OK: the predicate is valid")
        return 0

    renderer = ErrorTreeRenderer(RenderConfig(color=ColorMode(args.color)))
    info = renderer.render(error)
    if args.json:
        print(info.to_json(indent=2))
    else:
        print(info.to_text(), file=sys.stderr)
    return 1


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the show command."""
    input_path: Path = args.input

    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        info = DisplayInfo.from_json(input_path.read_text(encoding="utf-8"))
    except (AttributeError, TypeError, ValueError) as e:
        print(f"Error: {input_path} is not an error snapshot: {e}", file=sys.stderr)
        return 1

    print(info.to_text())
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Running %s with color mode %s", args.command, args.color)

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "check": cmd_check,
        "show": cmd_show,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
