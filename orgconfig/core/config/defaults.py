"""
Default option values and keybinding tables.

DEFAULT_KEYS maps each mapping category to the key(s) bound to every
named mapping. DEFAULT_ACTIONS maps the same names to the action path
dispatched by the host; the first element is the action, the rest are
its arguments.
"""

from typing import Dict, List, Union

from ..types import ActionPath

KeySpec = Union[str, List[str]]

DEFAULT_TODO_KEYWORDS: List[str] = ['TODO', 'NEXT', '|', 'DONE']

DEFAULT_ARCHIVE_LOCATION = '%s_archive::'

DEFAULT_KEYS: Dict[str, Dict[str, KeySpec]] = {
    'global': {
        'org_agenda': '<Leader>oa',
        'org_capture': '<Leader>oc',
    },
    'agenda': {
        'org_agenda_later': 'f',
        'org_agenda_earlier': 'b',
        'org_agenda_goto_today': '.',
        'org_agenda_day_view': 'vd',
        'org_agenda_week_view': 'vw',
        'org_agenda_month_view': 'vm',
        'org_agenda_year_view': 'vy',
        'org_agenda_quit': 'q',
        'org_agenda_switch_to': '<CR>',
        'org_agenda_goto': ['<TAB>'],
        'org_agenda_goto_date': 'J',
        'org_agenda_redo': 'r',
        'org_agenda_todo': 't',
        'org_agenda_show_help': '?',
    },
    'capture': {
        'org_capture_finalize': '<C-c>',
        'org_capture_refile': '<Leader>or',
        'org_capture_kill': '<Leader>ok',
        'org_capture_show_help': '?',
    },
    'org': {
        'org_refile': '<Leader>or',
        'org_increase_date': '<C-a>',
        'org_decrease_date': '<C-x>',
        'org_toggle_checkbox': '<C-Space>',
        'org_open_at_point': '<Leader>oo',
        'org_cycle': '<TAB>',
        'org_global_cycle': '<S-TAB>',
        'org_archive_subtree': '<Leader>o$',
        'org_set_tags_command': '<Leader>ot',
        'org_toggle_archive_tag': '<Leader>oA',
        'org_do_promote': '<<',
        'org_do_demote': '>>',
        'org_promote_subtree': '<s',
        'org_demote_subtree': '>s',
        'org_meta_return': '<Leader><CR>',
        'org_insert_heading_respect_content': '<Leader>oih',
        'org_insert_todo_heading': '<Leader>oiT',
        'org_insert_todo_heading_respect_content': '<Leader>oit',
        'org_move_subtree_up': '<Leader>oK',
        'org_move_subtree_down': '<Leader>oJ',
        'org_export': '<Leader>oe',
        'org_next_visible_heading': '}',
        'org_previous_visible_heading': '{',
        'org_forward_heading_same_level': ']]',
        'org_backward_heading_same_level': '[[',
        'outline_up_heading': 'g{',
        'org_deadline': '<Leader>oid',
        'org_schedule': '<Leader>ois',
        'org_time_stamp': '<Leader>oi.',
        'org_time_stamp_inactive': '<Leader>oi!',
        'org_todo': 'cit',
        'org_todo_prev': 'ciT',
        'org_change_date': 'cid',
        'org_show_help': '?',
    },
}

DEFAULT_ACTIONS: Dict[str, Dict[str, ActionPath]] = {
    'global': {
        'org_agenda': ('agenda.prompt',),
        'org_capture': ('capture.prompt',),
    },
    'agenda': {
        'org_agenda_later': ('agenda.later',),
        'org_agenda_earlier': ('agenda.earlier',),
        'org_agenda_goto_today': ('agenda.reset',),
        'org_agenda_day_view': ('agenda.change_span', 'day'),
        'org_agenda_week_view': ('agenda.change_span', 'week'),
        'org_agenda_month_view': ('agenda.change_span', 'month'),
        'org_agenda_year_view': ('agenda.change_span', 'year'),
        'org_agenda_quit': ('agenda.quit',),
        'org_agenda_switch_to': ('agenda.switch_to_item',),
        'org_agenda_goto': ('agenda.goto_item',),
        'org_agenda_goto_date': ('agenda.goto_date',),
        'org_agenda_redo': ('agenda.redo',),
        'org_agenda_todo': ('agenda.change_todo_state',),
        'org_agenda_show_help': ('org_mappings.show_help',),
    },
    'capture': {
        'org_capture_finalize': ('capture.refile',),
        'org_capture_refile': ('capture.refile_to_destination',),
        'org_capture_kill': ('capture.kill',),
        'org_capture_show_help': ('org_mappings.show_help',),
    },
    'org': {
        'org_refile': ('capture.refile_headline_to_destination',),
        'org_increase_date': ('org_mappings.increase_date',),
        'org_decrease_date': ('org_mappings.decrease_date',),
        'org_toggle_checkbox': ('org_mappings.toggle_checkbox',),
        'org_open_at_point': ('org_mappings.open_at_point',),
        'org_cycle': ('org_mappings.cycle',),
        'org_global_cycle': ('org_mappings.global_cycle',),
        'org_archive_subtree': ('org_mappings.archive',),
        'org_set_tags_command': ('org_mappings.set_tags',),
        'org_toggle_archive_tag': ('org_mappings.toggle_archive_tag',),
        'org_do_promote': ('org_mappings.do_promote',),
        'org_do_demote': ('org_mappings.do_demote',),
        'org_promote_subtree': ('org_mappings.do_promote', 'true'),
        'org_demote_subtree': ('org_mappings.do_demote', 'true'),
        'org_meta_return': ('org_mappings.handle_return',),
        'org_insert_heading_respect_content': ('org_mappings.insert_heading_respect_content',),
        'org_insert_todo_heading': ('org_mappings.insert_todo_heading',),
        'org_insert_todo_heading_respect_content': ('org_mappings.insert_todo_heading_respect_content',),
        'org_move_subtree_up': ('org_mappings.move_subtree_up',),
        'org_move_subtree_down': ('org_mappings.move_subtree_down',),
        'org_export': ('org_mappings.export',),
        'org_next_visible_heading': ('org_mappings.next_visible_heading',),
        'org_previous_visible_heading': ('org_mappings.previous_visible_heading',),
        'org_forward_heading_same_level': ('org_mappings.forward_heading_same_level',),
        'org_backward_heading_same_level': ('org_mappings.backward_heading_same_level',),
        'outline_up_heading': ('org_mappings.outline_up_heading',),
        'org_deadline': ('org_mappings.org_deadline',),
        'org_schedule': ('org_mappings.org_schedule',),
        'org_time_stamp': ('org_mappings.org_time_stamp',),
        'org_time_stamp_inactive': ('org_mappings.org_time_stamp', 'true'),
        'org_todo': ('org_mappings.todo_next_state',),
        'org_todo_prev': ('org_mappings.todo_prev_state',),
        'org_change_date': ('org_mappings.change_date',),
        'org_show_help': ('org_mappings.show_help',),
    },
}
