from __future__ import annotations

from typing import Dict, Mapping

from columnfall.events.bus import EventBus, EVENT_COMMAND
from columnfall.events.commands import Command

# Raw pyglet/arcade key symbols; avoids importing arcade so the binding stays headless.
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_SPACE = 32
KEY_N = 110
KEY_P = 112
KEY_Z = 122

DEFAULT_KEY_MAP: Dict[int, Command] = {
    KEY_LEFT: Command.MOVE_LEFT,
    KEY_RIGHT: Command.MOVE_RIGHT,
    KEY_Z: Command.ROTATE_PIECE,
    KEY_UP: Command.ROTATE_PIECE,
    KEY_DOWN: Command.SOFT_DROP,
    KEY_P: Command.TOGGLE_PAUSE,
    KEY_SPACE: Command.TOGGLE_PAUSE,
    KEY_N: Command.NEW_GAME,
}


class InputSystem:
    """Translates key presses into session commands on the event bus."""

    def __init__(self, event_bus: EventBus, key_map: Mapping[int, Command] | None = None):
        self.event_bus = event_bus
        self.key_map: Dict[int, Command] = dict(key_map if key_map is not None else DEFAULT_KEY_MAP)

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> Command | None:
        command = self.key_map.get(symbol)
        if command is None:
            return None
        self.event_bus.emit(EVENT_COMMAND, command=command)
        return command
