"""Main argument parser for orgconfig CLI."""

import argparse
from pathlib import Path


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from orgconfig import __version__

    parser = argparse.ArgumentParser(
        prog="orgconfig",
        description="Inspect org-mode options: TODO keywords, agenda files, archive targets and keybindings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  orgconfig keywords
  orgconfig keywords --json
  orgconfig files --config ~/org/orgconfig.yaml
  orgconfig archive ~/org/work.org
  orgconfig mappings agenda
  orgconfig show --json
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"orgconfig {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across multiple commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--config",
        type=Path,
        action="append",
        default=[],
        help="Configuration file path (can be specified multiple times)",
    )

    parser.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help="Directory searched for orgconfig.* files (default: current directory)",
    )


def add_json_argument(parser: argparse.ArgumentParser) -> None:
    """Add the --json output switch to a parser.

    Args:
        parser: Parser to add argument to
    """
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON",
    )


__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
    "add_json_argument",
]
