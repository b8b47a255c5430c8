"""orgconfig Keyword Domain Models - Parsed TODO keywords and their classification.

A raw keyword list such as ``["TODO", "WAITING(w)", "|", "DONE(d)"]`` is
parsed into KeywordSpec values and partitioned into a KeywordClassification.
All models here are frozen so a cached classification can be shared.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..types import KeywordCategory, KeywordName, Shortcut


@dataclass(frozen=True)
class KeywordSpec:
    """One keyword token as written in the configuration.

    Attributes:
        value: Display name of the state (``"WAITING"`` for ``"WAITING(w)"``)
        shortcut: Fast-access character; lowercase first letter unless given
        has_custom_shortcut: True only when the ``NAME(x)`` form was used
    """

    value: KeywordName
    shortcut: Shortcut
    has_custom_shortcut: bool = False


@dataclass(frozen=True)
class FastAccessEntry:
    """Single-keystroke lookup entry for a keyword."""

    value: KeywordName
    category: KeywordCategory
    shortcut: Shortcut

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "category": self.category.value,
            "shortcut": self.shortcut,
        }


@dataclass(frozen=True)
class KeywordClassification:
    """Partition of the configured keywords into active and done states.

    Attributes:
        active: State names declared before the separator, in order
        done: State names declared after the separator, never empty
        all: ``active + done``
        fast_access: One entry per keyword in declaration order
        has_fast_access: True if any keyword declared its own shortcut
    """

    active: Tuple[KeywordName, ...]
    done: Tuple[KeywordName, ...]
    fast_access: Tuple[FastAccessEntry, ...] = ()
    has_fast_access: bool = False
    all: Tuple[KeywordName, ...] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "all", self.active + self.done)

    def shortcut_for(self, value: str) -> Optional[Shortcut]:
        """Return the shortcut of a keyword, or None if it is not configured."""
        for entry in self.fast_access:
            if entry.value == value:
                return entry.shortcut
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert classification to a JSON-friendly dictionary."""
        return {
            "active": list(self.active),
            "done": list(self.done),
            "all": list(self.all),
            "fast_access": [entry.to_dict() for entry in self.fast_access],
            "has_fast_access": self.has_fast_access,
        }
