"""Commands the input layer delivers to the game session."""
from enum import Enum, auto


class Command(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    ROTATE_PIECE = auto()
    SOFT_DROP = auto()
    TOGGLE_PAUSE = auto()
    NEW_GAME = auto()


# Commands that act on the falling column; only honoured while running.
PIECE_COMMANDS = frozenset({
    Command.MOVE_LEFT,
    Command.MOVE_RIGHT,
    Command.ROTATE_PIECE,
    Command.SOFT_DROP,
})
