"""Runtime configuration object.

Config merges user options over the defaults and derives the values the
rest of the application reads: agenda files, agenda span, the TODO keyword
classification, archive targets and inheritable tags. Options are also
readable as attributes::

    config = Config({'org_agenda_span': 'day'})
    config.org_agenda_span            # 'day'
    config.get_todo_keywords().done   # ('DONE',)
"""

import glob
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from orgconfig.core.config import OrgSettings, deep_extend
from orgconfig.core.models import KeywordClassification
from orgconfig.core.types import AgendaSpan, OrgFileType, Tag
from orgconfig.mappings import Binding, KeymapHost, setup_mappings
from orgconfig.todo_keywords import TodoKeywordClassifier

ARCHIVE_HEADING_DELIMITER = '::'
FILE_PLACEHOLDER = '%s'


def convert_from_isoweekday(isoweekday: int) -> int:
    """Convert an ISO weekday (Monday=1 .. Sunday=7) to Sunday-first numbering (Sunday=1)."""
    return isoweekday % 7 + 1


class Config:
    """Merged options plus the values derived from them."""

    def __init__(self, opts: Optional[Dict[str, Any]] = None, settings: Optional[OrgSettings] = None):
        """
        Args:
            opts: Option table merged over the defaults
            settings: Already validated settings; takes precedence over opts

        Raises:
            InvalidConfiguration: If the merged options fail validation
        """
        if settings is None:
            settings = OrgSettings.from_options(opts)
        self._settings = settings
        self._classifier = TodoKeywordClassifier(settings.org_todo_keywords)

    def __getattr__(self, name: str) -> Any:
        settings = self.__dict__.get('_settings')
        if settings is not None and name in type(settings).model_fields:
            return getattr(settings, name)
        raise AttributeError(f"{type(self).__name__} has no option or attribute '{name}'")

    @property
    def settings(self) -> OrgSettings:
        return self._settings

    @property
    def opts(self) -> Dict[str, Any]:
        """Current options as a plain table."""
        return self._settings.to_options()

    def extend(self, opts: Optional[Dict[str, Any]]) -> 'Config':
        """Deep-merge opts over the current options.

        The TODO keyword classification is recomputed on next use.

        Raises:
            InvalidConfiguration: If the merged options fail validation
        """
        merged = deep_extend('force', self._settings.to_options(), opts or {})
        self._settings = OrgSettings.from_options(merged)
        self._classifier.keywords = self._settings.org_todo_keywords
        return self

    def get_all_files(self) -> List[str]:
        """Expand org_agenda_files into the list of org files it names.

        Entries may use ``~`` and glob patterns, ``**`` included. Only
        ``.org`` and ``.org_archive`` files are returned.
        """
        files = self._settings.org_agenda_files
        if not files:
            return []
        if isinstance(files, str):
            files = [files]

        all_files: List[str] = []
        for pattern in files:
            expanded = os.path.abspath(os.path.expanduser(pattern))
            all_files.extend(sorted(glob.glob(expanded, recursive=True)))

        return [f for f in all_files if OrgFileType.from_file_extension(f) is not None]

    def get_week_start_day_number(self) -> int:
        return convert_from_isoweekday(self._settings.org_agenda_start_on_weekday)

    def get_week_end_day_number(self) -> int:
        # last day of the week is the ISO day before the start day
        start = self._settings.org_agenda_start_on_weekday
        return convert_from_isoweekday((start + 5) % 7 + 1)

    def get_agenda_span(self) -> Union[str, int]:
        """Return the configured agenda span, falling back to 'week' when invalid."""
        span = self._settings.org_agenda_span
        valid_spans = AgendaSpan.names()
        if isinstance(span, str) and span not in valid_spans:
            logger.warning(
                f"Invalid agenda span {span}. Valid spans: {', '.join(valid_spans)}. Falling back to week"
            )
            return AgendaSpan.WEEK.value
        if isinstance(span, int) and not AgendaSpan.is_valid(span):
            logger.warning(
                f"Invalid agenda span number {span}. Must be 0 or more. Falling back to week"
            )
            return AgendaSpan.WEEK.value
        return span

    def get_todo_keywords(self) -> KeywordClassification:
        return self._classifier.classify()

    @property
    def todo_keywords(self) -> TodoKeywordClassifier:
        return self._classifier

    def setup_mappings(self, host: KeymapHost, category: Optional[str] = None) -> List[Binding]:
        """Register the bindings of a category (global ones when None) on host."""
        return setup_mappings(host, self._settings.mappings, category)

    def parse_archive_location(
        self, file: Union[str, Path], archive_loc: Optional[str] = None
    ) -> Optional[str]:
        """Return the archive file for an org file.

        Returns None when file is itself an archive. Only the file part of
        the location (before ``::``) is used.
        """
        if self.is_archive_file(file):
            return None

        archive_loc = archive_loc or self._settings.org_archive_location
        # TODO: Support archiving under the heading given after '::'
        archive_location = archive_loc.split(ARCHIVE_HEADING_DELIMITER)[0].strip()
        if FILE_PLACEHOLDER in archive_location:
            return archive_location.replace(FILE_PLACEHOLDER, str(file), 1)
        return os.path.abspath(os.path.expanduser(archive_location))

    def is_archive_file(self, file: Union[str, Path]) -> bool:
        return OrgFileType.from_file_extension(file) is OrgFileType.ORG_ARCHIVE

    def get_inheritable_tags(self, headline: Any) -> List[Tag]:
        """Tags of headline that its children inherit.

        Args:
            headline: Anything with a ``tags`` sequence, usually a Headline
        """
        tags = getattr(headline, 'tags', None)
        if not tags or not self._settings.org_use_tag_inheritance:
            return []
        excluded = self._settings.org_tags_exclude_from_inheritance
        if not excluded:
            return list(tags)
        return [tag for tag in tags if tag not in excluded]

    def __repr__(self) -> str:
        return f"Config({self._settings!r})"


# Global configuration instance
_config_instance: Config | None = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Global Config instance, loaded from config files and environment
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config(settings=OrgSettings.load_hierarchical())
    return _config_instance


def set_config(config: Config) -> None:
    """
    Set the global configuration instance.

    Args:
        config: Configuration instance to set as global
    """
    global _config_instance
    _config_instance = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config_instance
    _config_instance = None
