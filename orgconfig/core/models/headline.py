"""orgconfig Headline Model - the part of an org headline the config layer reads."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..types import Tag


@dataclass
class Headline:
    """Minimal headline view used for tag inheritance.

    Attributes:
        title: Headline text without stars, keyword or tags
        tags: Tags in the order they appear on the headline
        level: Number of leading stars
        todo_keyword: Keyword the headline carries, if any
    """

    title: str
    tags: List[Tag] = field(default_factory=list)
    level: int = 1
    todo_keyword: Optional[str] = None
