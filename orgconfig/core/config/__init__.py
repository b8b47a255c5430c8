"""
Configuration management package for orgconfig.

This package provides:
- Typed option models validated with Pydantic
- Multiple configuration sources (config files, environment variables, runtime overrides)
- Deep merging of nested option tables
- Default option values and keybinding tables
"""

from .defaults import DEFAULT_ACTIONS, DEFAULT_KEYS, DEFAULT_TODO_KEYWORDS
from .merge import deep_extend
from .settings_sources import (
    JsonConfigSource,
    TomlConfigSource,
    YamlConfigSource,
    create_config_sources,
    find_config_files,
    load_config_file,
)
from .unified_config import MappingsConfig, OrgSettings

__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_KEYS",
    "DEFAULT_TODO_KEYWORDS",
    "deep_extend",
    "JsonConfigSource",
    "TomlConfigSource",
    "YamlConfigSource",
    "create_config_sources",
    "find_config_files",
    "load_config_file",
    "MappingsConfig",
    "OrgSettings",
]
