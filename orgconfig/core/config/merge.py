"""
Deep merging of nested option tables.

Dictionaries are merged key by key, recursively. Lists and scalar values are
treated as leaves and replaced wholesale, so overriding ``org_todo_keywords``
replaces the whole keyword list instead of patching it by index.
"""

import copy
from typing import Any, Dict, Literal, Mapping, Optional

from ..exceptions import ConfigurationError

MergeBehavior = Literal['force', 'keep', 'error']


def _can_merge(value: Any) -> bool:
    return isinstance(value, Mapping)


def _merge_into(
    target: Dict[str, Any],
    source: Mapping[str, Any],
    behavior: MergeBehavior,
    path: str,
) -> None:
    for key, value in source.items():
        key_path = f"{path}.{key}" if path else str(key)
        if key in target and _can_merge(target[key]) and _can_merge(value):
            _merge_into(target[key], value, behavior, key_path)
        elif key not in target or behavior == 'force':
            target[key] = copy.deepcopy(dict(value)) if _can_merge(value) else copy.deepcopy(value)
        elif behavior == 'error':
            raise ConfigurationError(
                config_key=key_path,
                config_value=value,
                reason="key is defined in more than one table",
            )
        # 'keep': existing value wins


def deep_extend(behavior: MergeBehavior, *tables: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge option tables left to right into a new dictionary.

    Args:
        behavior: What to do when a non-table key is present in more than one
            table: 'force' uses the rightmost value, 'keep' the leftmost,
            'error' raises ConfigurationError
        *tables: Tables to merge; None entries are skipped

    Returns:
        A new dictionary; the inputs are not modified
    """
    if behavior not in ('force', 'keep', 'error'):
        raise ValueError(f"Invalid merge behavior: {behavior}")

    result: Dict[str, Any] = {}
    for table in tables:
        if table is None:
            continue
        if not _can_merge(table):
            raise ConfigurationError(
                config_value=table,
                reason=f"expected a table, got {type(table).__name__}",
            )
        _merge_into(result, table, behavior, "")
    return result
