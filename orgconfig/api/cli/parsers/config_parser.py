"""Argument parsers for the option inspection commands."""

import argparse

from .main_parser import add_common_arguments, add_json_argument


def add_keywords_subparser(subparsers) -> argparse.ArgumentParser:
    """Add the keywords command subparser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured subparser
    """
    keywords_parser = subparsers.add_parser(
        "keywords",
        help="Show how TODO keywords are classified",
        description="Show active and done TODO keywords and their fast-access shortcuts"
    )
    add_common_arguments(keywords_parser)
    add_json_argument(keywords_parser)
    return keywords_parser


def add_files_subparser(subparsers) -> argparse.ArgumentParser:
    """Add the files command subparser."""
    files_parser = subparsers.add_parser(
        "files",
        help="List agenda files",
        description="Expand org_agenda_files and list the org files it matches"
    )
    add_common_arguments(files_parser)
    add_json_argument(files_parser)
    return files_parser


def add_show_subparser(subparsers) -> argparse.ArgumentParser:
    """Add the show command subparser."""
    show_parser = subparsers.add_parser(
        "show",
        help="Show merged options",
        description="Show options after merging config files, environment and defaults"
    )
    add_common_arguments(show_parser)
    add_json_argument(show_parser)
    return show_parser


def add_archive_subparser(subparsers) -> argparse.ArgumentParser:
    """Add the archive command subparser."""
    archive_parser = subparsers.add_parser(
        "archive",
        help="Show where an org file archives to",
        description="Resolve org_archive_location for a file"
    )
    archive_parser.add_argument(
        "file",
        help="Org file to resolve the archive target for"
    )
    archive_parser.add_argument(
        "--location",
        default=None,
        help="Archive location to use instead of org_archive_location"
    )
    add_common_arguments(archive_parser)
    return archive_parser


def add_mappings_subparser(subparsers) -> argparse.ArgumentParser:
    """Add the mappings command subparser."""
    mappings_parser = subparsers.add_parser(
        "mappings",
        help="Show resolved keybindings",
        description="Show the keybindings registered for a buffer category"
    )
    mappings_parser.add_argument(
        "category",
        nargs="?",
        default=None,
        help="Mapping category (agenda, capture, org); omit for global bindings"
    )
    add_common_arguments(mappings_parser)
    add_json_argument(mappings_parser)
    return mappings_parser


def add_config_subparsers(subparsers) -> None:
    """Add every option inspection command to the main parser."""
    add_keywords_subparser(subparsers)
    add_files_subparser(subparsers)
    add_show_subparser(subparsers)
    add_archive_subparser(subparsers)
    add_mappings_subparser(subparsers)
