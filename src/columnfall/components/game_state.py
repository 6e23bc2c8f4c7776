"""Game state resource describing the session mode."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Session states; piece commands are only honoured while RUNNING."""
    RUNNING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the session mode."""
    mode: GameMode = GameMode.RUNNING
    # True while a paced cascade is still being resolved after a landing.
    resolving: bool = False
