"""Argument parser utilities for orgconfig CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .config_parser import add_config_subparsers

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_config_subparsers",
]
