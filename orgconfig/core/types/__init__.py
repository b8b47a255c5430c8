"""orgconfig Core Types Package - Common type definitions and aliases."""

from .common import (
    KEYWORD_SEPARATOR,
    ActionPath,
    AgendaSpan,
    KeywordCategory,
    KeywordName,
    OrgFileType,
    Shortcut,
    Tag,
)

__all__ = [
    # Constants
    "KEYWORD_SEPARATOR",

    # Enums
    "AgendaSpan",
    "KeywordCategory",
    "OrgFileType",

    # Type aliases
    "ActionPath",
    "KeywordName",
    "Shortcut",
    "Tag",
]
