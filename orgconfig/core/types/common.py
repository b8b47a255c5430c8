"""orgconfig Core Types - Common type definitions and aliases.

This module contains type definitions, enums, and type aliases used throughout
orgconfig. These types give option values and derived structures a name of
their own instead of bare strings.
"""

from enum import Enum
from pathlib import Path
from typing import NewType, Tuple, Union


# String-based type aliases for better semantic clarity
KeywordName = NewType("KeywordName", str)  # e.g., "TODO", "WAITING"
Shortcut = NewType("Shortcut", str)        # single fast-access character
Tag = NewType("Tag", str)                  # headline tag without colons

# Complex types
ActionPath = Tuple[str, ...]               # e.g. ("agenda.change_span", "day")

# Literal separator between active and done keywords
KEYWORD_SEPARATOR = "|"


class KeywordCategory(Enum):
    """Side of the separator a TODO keyword belongs to."""

    TODO = "TODO"
    DONE = "DONE"

    @property
    def is_done(self) -> bool:
        return self is KeywordCategory.DONE


class AgendaSpan(Enum):
    """Named agenda spans. Integer spans (number of days) are also accepted."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def names(cls) -> list[str]:
        """Return the valid span names in declaration order."""
        return [span.value for span in cls]

    @classmethod
    def is_valid(cls, value: Union[str, int]) -> bool:
        """Return True if value is a span name or a non-negative day count."""
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return value >= 0
        return value in cls.names()


class OrgFileType(Enum):
    """File types recognised as agenda sources."""

    ORG = "org"
    ORG_ARCHIVE = "org_archive"

    @classmethod
    def from_file_extension(cls, file_path: Union[str, Path]) -> "OrgFileType | None":
        """Return the org file type for a path, or None for other files."""
        extension = Path(file_path).suffix.lstrip(".")
        try:
            return cls(extension)
        except ValueError:
            return None
