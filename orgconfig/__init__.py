"""orgconfig - Option merging, TODO keyword classification and keybinding glue for org-mode tools."""

__version__ = "0.1.0"
__description__ = "Option merging, TODO keyword classification and keybinding glue for org-mode tools"

__all__ = [
    "Config",
    "get_config",
    "TodoKeywordClassifier",
    "classify_keywords",
    "parse_keyword",
]


def __getattr__(name: str):
    """Lazy import so the CLI can read __version__ without loading pydantic."""
    if name in ("Config", "get_config"):
        from . import config
        return getattr(config, name)
    elif name in ("TodoKeywordClassifier", "classify_keywords", "parse_keyword"):
        from . import todo_keywords
        return getattr(todo_keywords, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
