"""Tests for keybinding resolution and registration."""

from orgconfig.config import Config
from orgconfig.core.config import MappingsConfig
from orgconfig.mappings import (
    Binding,
    RecordingKeymapHost,
    resolve_bindings,
    setup_mappings,
)


class TestBinding:
    """Test Binding values."""

    def test_command_without_arguments(self):
        binding = Binding('n', '<Leader>oa', ('agenda.prompt',))

        assert binding.command == '<cmd>lua require("orgmode").action("agenda.prompt")<CR>'
        assert binding.is_buffer_local is False

    def test_command_with_arguments(self):
        binding = Binding('n', 'vd', ('agenda.change_span', 'day'), 0)

        assert binding.command == '<cmd>lua require("orgmode").action("agenda.change_span", "day")<CR>'
        assert binding.is_buffer_local is True


class TestResolveBindings:
    """Test resolving configured keys into bindings."""

    def test_global_bindings(self):
        bindings = resolve_bindings(MappingsConfig())

        assert bindings == [
            Binding('n', '<Leader>oa', ('agenda.prompt',)),
            Binding('n', '<Leader>oc', ('capture.prompt',)),
        ]

    def test_disable_all(self):
        mappings = MappingsConfig.model_validate({'disable_all': True})

        assert resolve_bindings(mappings) == []
        assert resolve_bindings(mappings, 'agenda') == []

    def test_agenda_bindings_are_buffer_local(self):
        bindings = resolve_bindings(MappingsConfig(), 'agenda')

        assert len(bindings) == 14
        assert all(b.buffer == 0 for b in bindings)
        assert bindings[0] == Binding('n', 'f', ('agenda.later',), 0)

    def test_key_lists_expand(self):
        mappings = MappingsConfig.model_validate({'agenda': {'org_agenda_goto': ['<TAB>', 'go']}})

        goto = [b.lhs for b in resolve_bindings(mappings, 'agenda') if b.action == ('agenda.goto_item',)]

        assert goto == ['<TAB>', 'go']

    def test_override_keeps_other_keys(self):
        mappings = MappingsConfig.model_validate({'agenda': {'org_agenda_later': 'L'}})

        keys = {b.lhs for b in resolve_bindings(mappings, 'agenda')}

        assert 'L' in keys
        assert 'f' not in keys
        assert 'b' in keys

    def test_names_without_action_are_skipped(self):
        mappings = MappingsConfig.model_validate({'agenda': {'org_agenda_unknown': 'U'}})

        keys = [b.lhs for b in resolve_bindings(mappings, 'agenda')]

        assert 'U' not in keys
        assert len(keys) == 14

    def test_unknown_category(self):
        assert resolve_bindings(MappingsConfig(), 'calendar') == []

    def test_custom_action_table(self):
        mappings = MappingsConfig.model_validate({'notes': {'notes_open': 'no'}})
        actions = {'notes': {'notes_open': ('notes.open', 'true')}}

        bindings = resolve_bindings(mappings, 'notes', actions)

        assert bindings == [Binding('n', 'no', ('notes.open', 'true'), 0)]


class TestSetupMappings:
    """Test registering bindings on a host."""

    def test_global_keymaps(self):
        host = RecordingKeymapHost()

        bindings = setup_mappings(host, MappingsConfig())

        assert len(bindings) == 2
        assert host.global_maps[('n', '<Leader>oa')] == (
            '<cmd>lua require("orgmode").action("agenda.prompt")<CR>'
        )
        assert host.buffer_maps == {}

    def test_buffer_keymaps(self):
        host = RecordingKeymapHost()

        setup_mappings(host, MappingsConfig(), 'agenda')

        assert len(host) == 14
        assert host.buffer_maps[(0, 'n', 'vd')] == (
            '<cmd>lua require("orgmode").action("agenda.change_span", "day")<CR>'
        )
        assert host.global_maps == {}

    def test_disabled_registers_nothing(self):
        host = RecordingKeymapHost()

        config = Config({'mappings': {'disable_all': True}})

        assert config.setup_mappings(host, 'org') == []
        assert len(host) == 0

    def test_config_uses_its_mappings(self):
        host = RecordingKeymapHost()
        config = Config({'mappings': {'global': {'org_agenda': 'ga'}}})

        config.setup_mappings(host)

        assert ('n', 'ga') in host.global_maps
        assert ('n', '<Leader>oc') in host.global_maps
