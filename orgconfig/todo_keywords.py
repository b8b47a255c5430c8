"""TODO keyword parsing and classification.

Keywords are configured as an ordered list of tokens, optionally split by a
``"|"`` separator into active and done states::

    ["TODO", "WAITING(w)", "|", "DONE(d)", "CANCELLED(c)"]

A token may carry its fast-access shortcut in parentheses; anything after
the first character inside the parentheses is ignored (``"DONE(d!)"``).
"""

import re
import threading
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from orgconfig.core.exceptions import InvalidConfiguration
from orgconfig.core.models import FastAccessEntry, KeywordClassification, KeywordSpec
from orgconfig.core.types import KEYWORD_SEPARATOR, KeywordCategory, KeywordName, Shortcut

SHORTCUT_RE = re.compile(r"^(.*)\((.)[^)]*\)$", re.DOTALL)


def parse_keyword(token: str) -> KeywordSpec:
    """Parse a single keyword token into its value and shortcut.

    ``"WAITING(w)"`` -> value ``WAITING``, shortcut ``w``, custom.
    ``"TODO"`` -> value ``TODO``, shortcut ``t``, not custom.
    """
    match = SHORTCUT_RE.match(token)
    if match:
        return KeywordSpec(
            value=KeywordName(match.group(1)),
            shortcut=Shortcut(match.group(2)),
            has_custom_shortcut=True,
        )
    return KeywordSpec(
        value=KeywordName(token),
        shortcut=Shortcut(token[:1].lower()),
        has_custom_shortcut=False,
    )


def validate_keywords(tokens: Sequence[str]) -> None:
    """Reject keyword lists that cannot produce a done state.

    Raises:
        InvalidConfiguration: if tokens is a string instead of a list, has
            no keyword besides separators, or more than one separator
    """
    if isinstance(tokens, str) or not isinstance(tokens, Sequence):
        raise InvalidConfiguration(
            "org_todo_keywords", tokens,
            f"expected a list of keywords, got {type(tokens).__name__}"
        )
    keywords = [token for token in tokens if token != KEYWORD_SEPARATOR]
    if not keywords:
        raise InvalidConfiguration(
            "org_todo_keywords", list(tokens),
            "at least one keyword is required"
        )
    separators = len(tokens) - len(keywords)
    if separators > 1:
        raise InvalidConfiguration(
            "org_todo_keywords", list(tokens),
            f"expected at most one '{KEYWORD_SEPARATOR}' separator, found {separators}"
        )


def classify_keywords(tokens: Iterable[str]) -> KeywordClassification:
    """Partition keyword tokens into active and done states.

    Tokens before the separator are active, tokens after it are done. When
    nothing follows the separator (or there is no separator) the last
    active keyword becomes the only done keyword.

    Raises:
        InvalidConfiguration: if there are no keywords at all
    """
    active: List[KeywordName] = []
    done: List[KeywordName] = []
    fast_access: List[FastAccessEntry] = []
    has_fast_access = False
    category = KeywordCategory.TODO

    for token in tokens:
        if token == KEYWORD_SEPARATOR:
            category = KeywordCategory.DONE
            continue
        spec = parse_keyword(token)
        has_fast_access = has_fast_access or spec.has_custom_shortcut
        (done if category.is_done else active).append(spec.value)
        fast_access.append(FastAccessEntry(
            value=spec.value,
            category=category,
            shortcut=spec.shortcut,
        ))

    if not active and not done:
        raise InvalidConfiguration("org_todo_keywords", [], "no keywords to classify")

    if not done:
        done.append(active.pop())

    return KeywordClassification(
        active=tuple(active),
        done=tuple(done),
        fast_access=tuple(fast_access),
        has_fast_access=has_fast_access,
    )


class TodoKeywordClassifier:
    """Owns a keyword list and its cached classification.

    The classification is computed on first use and reused until the
    keyword list is replaced or ``invalidate()`` is called.
    """

    def __init__(self, keywords: Sequence[str]):
        validate_keywords(keywords)
        self._keywords: tuple[str, ...] = tuple(keywords)
        self._cache: Optional[KeywordClassification] = None
        self._lock = threading.Lock()

    @property
    def keywords(self) -> tuple[str, ...]:
        return self._keywords

    @keywords.setter
    def keywords(self, keywords: Sequence[str]) -> None:
        validate_keywords(keywords)
        with self._lock:
            self._keywords = tuple(keywords)
            self._cache = None

    def invalidate(self) -> None:
        """Drop the cached classification."""
        with self._lock:
            self._cache = None

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    def classify(self) -> KeywordClassification:
        """Return the classification, computing it if needed."""
        cached = self._cache
        if cached is not None:
            return cached
        with self._lock:
            if self._cache is None:
                self._cache = classify_keywords(self._keywords)
                logger.debug(
                    f"Classified TODO keywords: active={list(self._cache.active)} "
                    f"done={list(self._cache.done)}"
                )
            return self._cache

    def find_by_shortcut(self, shortcut: str) -> Optional[FastAccessEntry]:
        """Return the first keyword bound to a fast-access character."""
        for entry in self.classify().fast_access:
            if entry.shortcut == shortcut:
                return entry
        return None

    def is_active(self, value: str) -> bool:
        return value in self.classify().active

    def is_done(self, value: str) -> bool:
        return value in self.classify().done

    def __repr__(self) -> str:
        return f"TodoKeywordClassifier(keywords={list(self._keywords)})"
