"""orgconfig Core Models Package - Domain models for keywords and headlines."""

from .headline import Headline
from .keyword import FastAccessEntry, KeywordClassification, KeywordSpec

__all__ = [
    "FastAccessEntry",
    "Headline",
    "KeywordClassification",
    "KeywordSpec",
]
