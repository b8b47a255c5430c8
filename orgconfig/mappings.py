"""Keybinding resolution and registration.

Configured keys are looked up in the action table and turned into Binding
values. The host editor receives them through the KeymapHost protocol;
orgconfig never talks to an editor directly.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Protocol

from loguru import logger

from orgconfig.core.config.defaults import DEFAULT_ACTIONS, KeySpec
from orgconfig.core.config.unified_config import MappingsConfig
from orgconfig.core.types import ActionPath

NORMAL_MODE = 'n'
CURRENT_BUFFER = 0
GLOBAL_CATEGORY = 'global'


@dataclass(frozen=True)
class Binding:
    """A single key bound to an action.

    Attributes:
        mode: Editor mode the key is bound in
        lhs: Key sequence as written in the configuration
        action: Action path dispatched by the host, followed by its arguments
        buffer: Buffer number for buffer-local bindings, None for global ones
    """

    mode: str
    lhs: str
    action: ActionPath
    buffer: Optional[int] = None

    @property
    def command(self) -> str:
        """Right-hand side the host runs when the key is pressed."""
        args = ', '.join(f'"{part}"' for part in self.action)
        return f'<cmd>lua require("orgmode").action({args})<CR>'

    @property
    def is_buffer_local(self) -> bool:
        return self.buffer is not None


class KeymapHost(Protocol):
    """The part of a host editor that registers keymaps."""

    def keymap(self, mode: str, lhs: str, rhs: str) -> None:
        ...

    def buf_keymap(self, buffer: int, mode: str, lhs: str, rhs: str) -> None:
        ...


class RecordingKeymapHost:
    """KeymapHost that keeps registered keymaps in memory.

    Used by the CLI to show what would be bound, and handy in tests.
    """

    def __init__(self):
        self.global_maps: Dict[tuple[str, str], str] = {}
        self.buffer_maps: Dict[tuple[int, str, str], str] = {}

    def keymap(self, mode: str, lhs: str, rhs: str) -> None:
        self.global_maps[(mode, lhs)] = rhs

    def buf_keymap(self, buffer: int, mode: str, lhs: str, rhs: str) -> None:
        self.buffer_maps[(buffer, mode, lhs)] = rhs

    def __len__(self) -> int:
        return len(self.global_maps) + len(self.buffer_maps)


def _as_key_list(keys: KeySpec) -> List[str]:
    if isinstance(keys, str):
        return [keys]
    return list(keys)


def resolve_bindings(
    mappings: MappingsConfig,
    category: Optional[str] = None,
    actions: Mapping[str, Mapping[str, ActionPath]] = DEFAULT_ACTIONS,
) -> List[Binding]:
    """Resolve configured keys into bindings.

    Args:
        mappings: Keybinding configuration
        category: Buffer category ('agenda', 'capture', 'org', ...); None
            resolves the global agenda and capture prompts
        actions: Action table, category -> mapping name -> action path

    Returns:
        Bindings in configuration order; empty when mappings are disabled
        or the category is not configured
    """
    if mappings.disable_all:
        return []

    if category is None:
        global_keys = mappings.category(GLOBAL_CATEGORY) or {}
        global_actions = actions.get(GLOBAL_CATEGORY, {})
        bindings = []
        for name in ('org_agenda', 'org_capture'):
            if name not in global_keys or name not in global_actions:
                continue
            for key in _as_key_list(global_keys[name]):
                bindings.append(Binding(NORMAL_MODE, key, tuple(global_actions[name])))
        return bindings

    configured = mappings.category(category)
    if not configured:
        return []

    category_actions = actions.get(category, {})
    bindings = []
    for name, keys in configured.items():
        action = category_actions.get(name)
        if not action:
            logger.debug(f"No action for mapping {category}.{name}, skipping")
            continue
        for key in _as_key_list(keys):
            bindings.append(Binding(NORMAL_MODE, key, tuple(action), CURRENT_BUFFER))
    return bindings


def setup_mappings(
    host: KeymapHost,
    mappings: MappingsConfig,
    category: Optional[str] = None,
) -> List[Binding]:
    """Resolve bindings for a category and register them on the host.

    Returns:
        The bindings that were registered
    """
    bindings = resolve_bindings(mappings, category)
    for binding in bindings:
        if binding.is_buffer_local:
            host.buf_keymap(binding.buffer, binding.mode, binding.lhs, binding.command)
        else:
            host.keymap(binding.mode, binding.lhs, binding.command)
    logger.debug(f"Registered {len(bindings)} bindings for category {category or GLOBAL_CATEGORY}")
    return bindings
