"""Tests for the runtime Config object."""

import os
from pathlib import Path

import pytest

from orgconfig.config import (
    Config,
    convert_from_isoweekday,
    get_config,
    reset_config,
    set_config,
)
from orgconfig.core.exceptions import InvalidConfiguration
from orgconfig.core.models import Headline
from orgconfig.todo_keywords import TodoKeywordClassifier


@pytest.fixture
def org_dir(tmp_path: Path) -> Path:
    """A directory tree with org, archive and unrelated files."""
    root = tmp_path / "org"
    (root / "projects").mkdir(parents=True)
    (root / "inbox.org").write_text("* TODO Inbox\n")
    (root / "notes.txt").write_text("not org\n")
    (root / "old.org_archive").write_text("* DONE Old\n")
    (root / "projects" / "work.org").write_text("* NEXT Work\n")
    return root


class TestConfigOptions:
    """Test option access and merging."""

    def test_defaults(self):
        config = Config()

        assert config.org_agenda_span == 'week'
        assert config.org_todo_keywords == ['TODO', 'NEXT', '|', 'DONE']
        assert config.opts['org_archive_location'] == '%s_archive::'

    def test_user_options_override_defaults(self):
        config = Config({'org_agenda_span': 'day', 'org_deadline_warning_days': 3})

        assert config.org_agenda_span == 'day'
        assert config.org_deadline_warning_days == 3
        assert config.org_priority_highest == 'A'

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError, match="no option or attribute"):
            Config().org_not_an_option

    def test_environment_is_not_read(self, monkeypatch):
        monkeypatch.setenv('ORGCONFIG_ORG_TODO_KEYWORDS', '["OPEN", "CLOSED"]')
        monkeypatch.setenv('ORGCONFIG_ORG_AGENDA_SPAN', 'year')

        config = Config({'org_agenda_span': 'day'})

        assert config.get_todo_keywords().all == ('TODO', 'NEXT', 'DONE')
        assert config.org_agenda_span == 'day'

    def test_malformed_environment_does_not_affect_config(self, monkeypatch):
        monkeypatch.setenv('ORGCONFIG_ORG_TODO_KEYWORDS', 'TODO,DONE')

        assert Config().get_todo_keywords().done == ('DONE',)

    def test_invalid_options(self):
        with pytest.raises(InvalidConfiguration) as exc_info:
            Config({'org_todo_keywords': []})

        assert exc_info.value.config_key == 'org_todo_keywords'

    def test_extend_merges_and_returns_self(self):
        config = Config({'org_agenda_span': 'day'})

        result = config.extend({'org_deadline_warning_days': 7})

        assert result is config
        assert config.org_agenda_span == 'day'
        assert config.org_deadline_warning_days == 7

    def test_extend_merges_nested_mappings(self):
        config = Config({'mappings': {'agenda': {'org_agenda_later': 'L'}}})

        config.extend({'mappings': {'agenda': {'org_agenda_quit': 'Q'}}})

        agenda = config.mappings.agenda
        assert agenda['org_agenda_later'] == 'L'
        assert agenda['org_agenda_quit'] == 'Q'
        assert agenda['org_agenda_earlier'] == 'b'

    def test_extend_with_none_keeps_options(self):
        config = Config({'org_agenda_span': 'month'})
        config.extend(None)
        assert config.org_agenda_span == 'month'

    def test_failed_extend_keeps_previous_state(self):
        config = Config({'org_agenda_span': 'day'})
        config.get_todo_keywords()

        with pytest.raises(InvalidConfiguration):
            config.extend({'org_todo_keywords': ['|']})

        assert config.org_todo_keywords == ['TODO', 'NEXT', '|', 'DONE']
        assert config.get_todo_keywords().done == ('DONE',)


class TestTodoKeywords:
    """Test keyword classification through Config."""

    def test_default_classification(self):
        keywords = Config().get_todo_keywords()

        assert keywords.active == ('TODO', 'NEXT')
        assert keywords.done == ('DONE',)
        assert keywords.all == ('TODO', 'NEXT', 'DONE')
        assert keywords.has_fast_access is False

    def test_classification_is_cached(self):
        config = Config()
        assert config.get_todo_keywords() is config.get_todo_keywords()

    def test_extend_recomputes_classification(self):
        config = Config()
        before = config.get_todo_keywords()

        config.extend({'org_todo_keywords': ['OPEN(o)', 'WAITING(w)', '|', 'CLOSED(c)']})

        after = config.get_todo_keywords()
        assert after is not before
        assert after.active == ('OPEN', 'WAITING')
        assert after.done == ('CLOSED',)
        assert after.has_fast_access is True

    def test_extend_without_keywords_keeps_them(self):
        config = Config({'org_todo_keywords': ['A', 'B']})

        config.extend({'org_agenda_span': 'day'})

        assert config.get_todo_keywords().done == ('B',)

    def test_todo_keywords_property(self):
        assert isinstance(Config().todo_keywords, TodoKeywordClassifier)


class TestAgendaFiles:
    """Test agenda file expansion."""

    def test_empty(self):
        assert Config().get_all_files() == []
        assert Config({'org_agenda_files': []}).get_all_files() == []

    def test_single_glob(self, org_dir):
        files = Config({'org_agenda_files': str(org_dir / '*')}).get_all_files()

        assert files == [str(org_dir / 'inbox.org'), str(org_dir / 'old.org_archive')]

    def test_recursive_glob(self, org_dir):
        files = Config({'org_agenda_files': str(org_dir / '**' / '*.org')}).get_all_files()

        assert str(org_dir / 'inbox.org') in files
        assert str(org_dir / 'projects' / 'work.org') in files
        assert all(f.endswith('.org') for f in files)

    def test_list_of_files(self, org_dir):
        config = Config({'org_agenda_files': [
            str(org_dir / 'inbox.org'),
            str(org_dir / 'notes.txt'),
            str(org_dir / 'missing.org'),
        ]})

        assert config.get_all_files() == [str(org_dir / 'inbox.org')]

    def test_home_expansion(self, home_dir):
        (home_dir / 'org').mkdir()
        (home_dir / 'org' / 'todo.org').write_text('')

        files = Config({'org_agenda_files': '~/org/*.org'}).get_all_files()

        assert files == [str(home_dir / 'org' / 'todo.org')]

    def test_relative_paths_are_absolute(self, isolated_environment):
        (isolated_environment / 'local.org').write_text('')

        files = Config({'org_agenda_files': 'local.org'}).get_all_files()

        assert files == [os.path.join(str(isolated_environment), 'local.org')]


class TestWeekDays:
    """Test week start and end day numbers."""

    @pytest.mark.parametrize("isoweekday, expected", [(1, 2), (6, 7), (7, 1)])
    def test_convert_from_isoweekday(self, isoweekday, expected):
        assert convert_from_isoweekday(isoweekday) == expected

    def test_default_week_is_monday_to_sunday(self):
        config = Config()

        assert config.get_week_start_day_number() == 2
        assert config.get_week_end_day_number() == 1

    def test_week_starting_on_sunday(self):
        config = Config({'org_agenda_start_on_weekday': 7})

        assert config.get_week_start_day_number() == 1
        assert config.get_week_end_day_number() == 7

    def test_week_starting_on_wednesday(self):
        config = Config({'org_agenda_start_on_weekday': 3})

        assert config.get_week_start_day_number() == 4
        assert config.get_week_end_day_number() == 3


class TestAgendaSpan:
    """Test agenda span validation."""

    @pytest.mark.parametrize("span", ['day', 'week', 'month', 'year', 0, 10])
    def test_valid_spans(self, span, log_messages):
        assert Config({'org_agenda_span': span}).get_agenda_span() == span
        assert log_messages == []

    def test_invalid_name_falls_back_to_week(self, log_messages):
        assert Config({'org_agenda_span': 'fortnight'}).get_agenda_span() == 'week'
        assert log_messages == [
            'Invalid agenda span fortnight. Valid spans: day, week, month, year. Falling back to week'
        ]

    def test_negative_number_falls_back_to_week(self, log_messages):
        assert Config({'org_agenda_span': -3}).get_agenda_span() == 'week'
        assert log_messages == [
            'Invalid agenda span number -3. Must be 0 or more. Falling back to week'
        ]

    @pytest.mark.parametrize("span", [True, False])
    def test_boolean_falls_back_to_week(self, span, log_messages):
        assert Config({'org_agenda_span': span}).get_agenda_span() == 'week'
        assert len(log_messages) == 1


class TestArchiveLocation:
    """Test archive target resolution."""

    def test_default_location(self):
        config = Config()
        assert config.parse_archive_location('/org/work.org') == '/org/work.org_archive'

    def test_archive_file_has_no_target(self):
        assert Config().parse_archive_location('/org/work.org_archive') is None

    def test_explicit_location(self):
        config = Config()
        target = config.parse_archive_location('/org/work.org', '%s_done::* Archived')
        assert target == '/org/work.org_done'

    def test_only_first_placeholder_is_substituted(self):
        target = Config().parse_archive_location('/org/work.org', '%s_archive_%s::')
        assert target == '/org/work.org_archive_%s'

    def test_fixed_location_is_expanded(self, home_dir):
        config = Config({'org_archive_location': '~/archive/all.org_archive::'})

        target = config.parse_archive_location('/org/work.org')

        assert target == str(home_dir / 'archive' / 'all.org_archive')

    def test_is_archive_file(self):
        config = Config()

        assert config.is_archive_file('notes.org_archive')
        assert not config.is_archive_file('notes.org')


class TestInheritableTags:
    """Test tag inheritance filtering."""

    def test_all_tags_inherited_by_default(self):
        headline = Headline('Project', tags=['work', 'urgent'])
        assert Config().get_inheritable_tags(headline) == ['work', 'urgent']

    def test_excluded_tags(self):
        config = Config({'org_tags_exclude_from_inheritance': ['urgent']})
        headline = Headline('Project', tags=['work', 'urgent'])

        assert config.get_inheritable_tags(headline) == ['work']

    def test_inheritance_disabled(self):
        config = Config({'org_use_tag_inheritance': False})
        assert config.get_inheritable_tags(Headline('Project', tags=['work'])) == []

    def test_headline_without_tags(self):
        assert Config().get_inheritable_tags(Headline('Project')) == []
        assert Config().get_inheritable_tags(object()) == []


class TestGlobalConfig:
    """Test the module level configuration instance."""

    def test_get_config_loads_project_file(self, isolated_environment):
        (isolated_environment / 'orgconfig.yaml').write_text('org_todo_keywords: [OPEN, CLOSED]\n')

        config = get_config()

        assert config.get_todo_keywords().done == ('CLOSED',)
        assert get_config() is config

    def test_set_and_reset(self):
        custom = Config({'org_agenda_span': 'day'})

        set_config(custom)
        assert get_config() is custom

        reset_config()
        assert get_config() is not custom
