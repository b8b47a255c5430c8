"""Option inspection commands - keywords, files, show, archive and mappings."""

import argparse
from typing import Callable, Dict

from loguru import logger

from orgconfig.config import Config
from orgconfig.core.config import OrgSettings
from orgconfig.mappings import RecordingKeymapHost
from ..utils.output import OutputFormatter, print_section


def load_config(args: argparse.Namespace) -> Config:
    """Build a Config from the config files, project dir and environment.

    Raises:
        OrgConfigError: If a config file cannot be read or options are invalid
    """
    settings = OrgSettings.load_hierarchical(
        project_dir=getattr(args, 'project_dir', None),
        config_files=getattr(args, 'config', None) or [],
    )
    return Config(settings=settings)


def keywords_command(args: argparse.Namespace, config: Config) -> None:
    """Handle keywords command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    keywords = config.get_todo_keywords()

    if getattr(args, 'json', False):
        formatter.json_output(keywords.to_dict())
        return

    print(f"Active: {' '.join(keywords.active) or '-'}")
    print(f"Done:   {' '.join(keywords.done)}")

    print_section("Fast access")
    widths = [16, 8, 8]
    formatter.table_header(["Keyword", "Key", "Type"], widths)
    for entry in keywords.fast_access:
        formatter.table_row([entry.value, entry.shortcut, entry.category.value], widths)

    if not keywords.has_fast_access:
        print()
        formatter.info("No keyword declares a shortcut; keys default to the first letter.")


def files_command(args: argparse.Namespace, config: Config) -> None:
    """Handle files command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    files = config.get_all_files()

    if getattr(args, 'json', False):
        formatter.json_output(files)
        return

    if not files:
        formatter.info("No agenda files found.")
        return

    for file in files:
        print(file)


def show_command(args: argparse.Namespace, config: Config) -> None:
    """Handle show command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    options = config.opts

    if getattr(args, 'json', False):
        formatter.json_output(options)
        return

    mappings = options.pop('mappings', {})
    for key, value in options.items():
        print(f"{key} = {value!r}")
    print(f"agenda span (effective) = {config.get_agenda_span()!r}")
    print(f"mappings.disable_all = {mappings.get('disable_all', False)!r}")


def archive_command(args: argparse.Namespace, config: Config) -> None:
    """Handle archive command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    target = config.parse_archive_location(args.file, getattr(args, 'location', None))

    if target is None:
        formatter.info(f"{args.file} is already an archive file.")
        return

    print(target)


def mappings_command(args: argparse.Namespace, config: Config) -> None:
    """Handle mappings command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    host = RecordingKeymapHost()
    bindings = config.setup_mappings(host, getattr(args, 'category', None))

    if getattr(args, 'json', False):
        formatter.json_output([
            {
                'mode': b.mode,
                'lhs': b.lhs,
                'action': list(b.action),
                'buffer': b.buffer,
            }
            for b in bindings
        ])
        return

    if not bindings:
        formatter.info("No bindings for this category.")
        return

    widths = [14, 44]
    formatter.table_header(["Key", "Action"], widths)
    for binding in bindings:
        formatter.table_row([binding.lhs, ' '.join(binding.action)], widths)


COMMAND_HANDLERS: Dict[str, Callable[[argparse.Namespace, Config], None]] = {
    "keywords": keywords_command,
    "files": files_command,
    "show": show_command,
    "archive": archive_command,
    "mappings": mappings_command,
}


def config_command(args: argparse.Namespace) -> None:
    """Load options and run the handler for args.command.

    Raises:
        OrgConfigError: If options cannot be loaded
        ValueError: If the command is unknown
    """
    handler = COMMAND_HANDLERS.get(args.command)
    if handler is None:
        raise ValueError(f"Unknown command: {args.command}")

    config = load_config(args)
    logger.debug(f"Loaded {config!r}")
    handler(args, config)
