"""
Configuration file sources for orgconfig.

This module provides file sources that load option tables from YAML, TOML
and JSON files, and helpers to discover configuration files in the usual
locations. OrgSettings.load_hierarchical merges what they return.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

import tomllib
import yaml
from loguru import logger

from ..exceptions import ConfigurationError
from .merge import deep_extend


class BaseFileConfigSource(ABC):
    """
    Abstract base class for file-based configuration sources.

    Several files can be given; they are deep-merged in order, so later
    files override earlier ones key by key.
    """

    def __init__(self, config_file: Union[str, Path, List[Union[str, Path]]]):
        """
        Initialize file-based configuration source.

        Args:
            config_file: Path(s) to configuration file(s)
        """
        if isinstance(config_file, (str, Path)):
            self.config_files = [Path(config_file)]
        else:
            self.config_files = [Path(f) for f in config_file]

        self._data = self._load_files()

    def _load_files(self) -> Dict[str, Any]:
        """Load and merge data from all configuration files."""
        merged_data: Dict[str, Any] = {}

        for config_file in self.config_files:
            if not config_file.exists():
                if len(self.config_files) == 1:
                    logger.warning(f"Config file {config_file} not found")
                continue
            try:
                file_data = self.load_file(config_file)
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")
                continue
            if file_data:
                merged_data = deep_extend('force', merged_data, file_data)

        return merged_data

    @abstractmethod
    def load_file(self, path: Path) -> Dict[str, Any]:
        """
        Load configuration data from a specific file.

        Args:
            path: Path to the configuration file

        Returns:
            Dictionary containing configuration data
        """
        pass

    def __call__(self) -> Dict[str, Any]:
        """Return the loaded configuration data."""
        return self._data

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(config_files={[str(f) for f in self.config_files]})'


def read_yaml_file(path: Path) -> Dict[str, Any]:
    """Read a YAML file; a document that is not a mapping reads as empty."""
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}


def read_toml_file(path: Path) -> Dict[str, Any]:
    """Read a TOML file."""
    with open(path, 'rb') as f:
        return tomllib.load(f)


def read_json_file(path: Path) -> Dict[str, Any]:
    """Read a JSON file; a document that is not an object reads as empty."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
        return data if isinstance(data, dict) else {}


class YamlConfigSource(BaseFileConfigSource):
    """Configuration source for YAML files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        return read_yaml_file(path)


class TomlConfigSource(BaseFileConfigSource):
    """Configuration source for TOML files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        return read_toml_file(path)


class JsonConfigSource(BaseFileConfigSource):
    """Configuration source for JSON files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        return read_json_file(path)


SOURCE_BY_SUFFIX: Dict[str, Type[BaseFileConfigSource]] = {
    '.yaml': YamlConfigSource,
    '.yml': YamlConfigSource,
    '.toml': TomlConfigSource,
    '.json': JsonConfigSource,
}

READER_BY_SUFFIX = {
    '.yaml': read_yaml_file,
    '.yml': read_yaml_file,
    '.toml': read_toml_file,
    '.json': read_json_file,
}


def create_config_sources(
    config_files: Optional[List[Union[str, Path]]] = None,
) -> List[BaseFileConfigSource]:
    """
    Create one settings source per configuration file.

    Files with an unknown extension are skipped with a warning.

    Args:
        config_files: List of configuration files to load

    Returns:
        List of file sources, in the order given
    """
    sources: List[BaseFileConfigSource] = []

    for config_file in config_files or []:
        config_path = Path(config_file)
        source_cls = SOURCE_BY_SUFFIX.get(config_path.suffix.lower())
        if source_cls is None:
            logger.warning(f"Unknown config file format: {config_path}")
            continue
        sources.append(source_cls(config_path))

    return sources


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a single configuration file into a dictionary.

    Unlike the settings sources this is strict: a missing, unreadable or
    unsupported file raises.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    config_path = Path(path)
    reader = READER_BY_SUFFIX.get(config_path.suffix.lower())
    if reader is None:
        raise ConfigurationError(
            config_value=str(config_path),
            reason=f"unsupported config file format '{config_path.suffix}'",
        )
    if not config_path.is_file():
        raise ConfigurationError(
            config_value=str(config_path),
            reason=f"config file {config_path} not found",
        )
    try:
        return reader(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(
            config_value=str(config_path),
            reason=f"failed to parse {config_path}: {e}",
            cause=e,
        ) from e


def find_config_files(
    base_dirs: Optional[List[Union[str, Path]]] = None,
    config_names: Optional[List[str]] = None,
) -> List[Path]:
    """
    Find configuration files in common locations.

    Args:
        base_dirs: Directories to search (defaults to common config locations)
        config_names: Config file names to look for

    Returns:
        List of found configuration files in priority order
    """
    if base_dirs is None:
        base_dirs = [
            Path.home() / '.config' / 'orgconfig',
            Path.cwd(),
        ]
    else:
        base_dirs = [Path(d) for d in base_dirs]

    if config_names is None:
        config_names = [
            'orgconfig.yaml',
            'orgconfig.yml',
            'orgconfig.toml',
            'orgconfig.json',
            '.orgconfig.yaml',
            '.orgconfig.yml',
            '.orgconfig.toml',
            '.orgconfig.json',
        ]

    found_files = []

    for base_dir in base_dirs:
        if not base_dir.exists():
            continue

        for config_name in config_names:
            config_path = base_dir / config_name
            if config_path.exists() and config_path.is_file():
                found_files.append(config_path)

    return found_files
