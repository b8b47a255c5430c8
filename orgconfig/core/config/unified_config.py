"""
Unified option model for orgconfig.

This module provides a single, type-safe model for every option the
configuration layer reads, with hierarchical loading from config files,
environment variables and runtime overrides.
"""

import copy
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    EnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    SettingsError,
)

from orgconfig.todo_keywords import validate_keywords

from ..exceptions import ConfigurationError, InvalidConfiguration
from .defaults import DEFAULT_ARCHIVE_LOCATION, DEFAULT_KEYS, DEFAULT_TODO_KEYWORDS, KeySpec
from .merge import deep_extend
from .settings_sources import create_config_sources, find_config_files, load_config_file


def _default_keys(category: str):
    return lambda: copy.deepcopy(DEFAULT_KEYS[category])


class MappingsConfig(BaseModel):
    """Keybinding configuration.

    Each category maps a mapping name to one key or a list of keys. Values
    given by the user are merged over the defaults, so overriding a single
    key keeps the rest of the category.
    """

    model_config = ConfigDict(populate_by_name=True, extra='allow')

    disable_all: bool = Field(
        default=False,
        description="Skip registering any keybinding"
    )

    global_: Dict[str, KeySpec] = Field(
        default_factory=_default_keys('global'),
        alias='global',
        description="Keys available in every buffer"
    )

    agenda: Dict[str, KeySpec] = Field(
        default_factory=_default_keys('agenda'),
        description="Keys bound in the agenda buffer"
    )

    capture: Dict[str, KeySpec] = Field(
        default_factory=_default_keys('capture'),
        description="Keys bound in the capture buffer"
    )

    org: Dict[str, KeySpec] = Field(
        default_factory=_default_keys('org'),
        description="Keys bound in org file buffers"
    )

    @model_validator(mode='before')
    @classmethod
    def merge_with_defaults(cls, data: Any) -> Any:
        """Deep-merge user supplied keys over the default tables."""
        if isinstance(data, dict):
            if 'global_' in data and 'global' not in data:
                data = {**data, 'global': data['global_']}
                del data['global_']
            return deep_extend('force', {'disable_all': False, **DEFAULT_KEYS}, data)
        return data

    def category(self, name: str) -> Optional[Dict[str, KeySpec]]:
        """Return the keys of a category, or None if it is not configured."""
        if name == 'global':
            return self.global_
        if name in type(self).model_fields:
            value = getattr(self, name)
        else:
            value = (self.model_extra or {}).get(name)
        return value if isinstance(value, dict) else None


class OrgSettings(BaseSettings):
    """
    Unified options for orgconfig.

    Configuration Sources (in order of precedence):
    1. Runtime parameters (highest priority)
    2. Environment variables (ORGCONFIG_*)
    3. Project config file (orgconfig.yaml / .toml / .json in the project dir)
    4. User config file (~/.config/orgconfig/orgconfig.*)
    5. Default values (lowest priority)

    Only load_hierarchical consults files and the environment; building
    the model directly (or through from_options) uses the given options
    over the defaults and nothing else.

    Environment Variable Examples:
        ORGCONFIG_ORG_AGENDA_SPAN=day
        ORGCONFIG_ORG_TODO_KEYWORDS='["TODO", "WAITING(w)", "|", "DONE(d)"]'
        ORGCONFIG_ORG_AGENDA_FILES='~/org/**/*'
        ORGCONFIG_MAPPINGS__DISABLE_ALL=true
    """

    model_config = SettingsConfigDict(
        env_prefix='ORGCONFIG_',
        env_nested_delimiter='__',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        populate_by_name=True,
        env_file=None,
    )

    org_agenda_files: Union[str, List[str], None] = Field(
        default='',
        description="File, glob or list of files/globs shown in the agenda"
    )

    org_default_notes_file: str = Field(
        default='',
        description="File capture templates refile to by default"
    )

    org_todo_keywords: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TODO_KEYWORDS),
        description="TODO keywords, optionally split into active and done by '|'"
    )

    org_agenda_span: Union[int, str] = Field(
        default='week',
        description="Agenda span: day, week, month, year or a number of days"
    )

    org_agenda_start_on_weekday: int = Field(
        default=1,
        ge=1,
        le=7,
        description="ISO weekday the agenda week starts on"
    )

    org_deadline_warning_days: int = Field(
        default=14,
        ge=0,
        description="Days before a deadline it starts showing in the agenda"
    )

    org_priority_highest: str = Field(default='A', min_length=1, max_length=1)
    org_priority_default: str = Field(default='B', min_length=1, max_length=1)
    org_priority_lowest: str = Field(default='C', min_length=1, max_length=1)

    org_archive_location: str = Field(
        default=DEFAULT_ARCHIVE_LOCATION,
        description="Archive target; '%s' is replaced by the source file path"
    )

    org_use_tag_inheritance: bool = Field(
        default=True,
        description="Whether headlines inherit tags from their parents"
    )

    org_tags_exclude_from_inheritance: List[str] = Field(
        default_factory=list,
        description="Tags that are never inherited"
    )

    org_log_done: Optional[str] = Field(
        default='time',
        description="What to record when an entry is marked done"
    )

    org_hide_leading_stars: bool = Field(default=False)

    mappings: MappingsConfig = Field(
        default_factory=MappingsConfig,
        description="Keybinding configuration"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # environment is merged explicitly in load_hierarchical
        return (init_settings,)

    @field_validator('org_todo_keywords')
    @classmethod
    def validate_todo_keywords(cls, v: List[str]) -> List[str]:
        """Reject keyword lists that leave no terminal state."""
        try:
            validate_keywords(v)
        except InvalidConfiguration as e:
            raise ValueError(e.reason) from e
        return v

    @field_validator('org_agenda_span', mode='before')
    @classmethod
    def normalize_span(cls, v: Any) -> Any:
        """Parse numeric strings; booleans become names so they stay invalid spans."""
        if isinstance(v, bool):
            return str(v).lower()
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return v

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]] = None) -> 'OrgSettings':
        """
        Build settings from an option table.

        Raises:
            InvalidConfiguration: If any option fails validation
        """
        options = options or {}
        try:
            return cls(**options)
        except ValidationError as e:
            first = e.errors()[0]
            key = '.'.join(str(part) for part in first['loc'])
            raise InvalidConfiguration(
                config_key=key,
                config_value=first.get('input'),
                reason=first['msg'],
                context={'errors': e.error_count()},
                cause=e,
            ) from e

    @classmethod
    def load_hierarchical(cls,
                          project_dir: Path | None = None,
                          config_files: List[Union[str, Path]] | None = None,
                          **override_values: Any) -> 'OrgSettings':
        """
        Load settings from hierarchical sources.

        Args:
            project_dir: Project directory to search for orgconfig.* files
            config_files: Explicit config files, applied after discovered
                ones; unlike discovered files these must exist and parse
            **override_values: Runtime option overrides

        Returns:
            Loaded and validated settings

        Raises:
            ConfigurationError: If an explicit config file or an ORGCONFIG_*
                variable cannot be parsed
            InvalidConfiguration: If the merged options fail validation
        """
        user_dir = Path.home() / '.config' / 'orgconfig'
        discovered = find_config_files([user_dir])
        discovered += find_config_files([project_dir or Path.cwd()])

        config_data: Dict[str, Any] = {}
        for source in create_config_sources(discovered):
            logger.debug(f"Loading options from {source!r}")
            config_data = deep_extend('force', config_data, source())

        for config_file in config_files or []:
            logger.debug(f"Loading options from {config_file}")
            config_data = deep_extend('force', config_data, load_config_file(config_file))

        try:
            env_data = EnvSettingsSource(cls)()
        except SettingsError as e:
            raise ConfigurationError(
                reason=f"invalid ORGCONFIG_* environment variable: {e}",
                context={'source': 'environment'},
                cause=e,
            ) from e
        config_data = deep_extend('force', config_data, env_data, override_values)

        return cls.from_options(config_data)

    def to_options(self) -> Dict[str, Any]:
        """
        Convert settings to a plain option table.

        Returns:
            Options as a dictionary, using 'global' for the global mappings
        """
        return self.model_dump(mode='json', by_alias=True)

    def __repr__(self) -> str:
        return (
            f"OrgSettings("
            f"org_agenda_files={self.org_agenda_files!r}, "
            f"org_todo_keywords={self.org_todo_keywords!r}, "
            f"org_agenda_span={self.org_agenda_span!r})"
        )
