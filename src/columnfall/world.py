import random

from esper import World
from .events.bus import EventBus
from columnfall.components.game_state import GameState, GameMode
from columnfall.components.score import Score
from columnfall.components.drop_timer import DropTimer
from columnfall.components.tile_type_registry import TileTypeRegistry
from columnfall.components.tile_types import TileTypes
from columnfall.constants import COLOR_PALETTE, DROP_INTERVAL, GRID_COLS, GRID_ROWS
from columnfall.systems.board_ops import create_board


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.RUNNING,
    *,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    drop_interval: float = DROP_INTERVAL,
    palette: dict[str, tuple[int, int, int]] | None = None,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Session resources live together on one entity.
    world.create_entity(
        GameState(mode=initial_mode),
        Score(),
        DropTimer(interval=drop_interval),
    )

    world.create_entity(
        TileTypeRegistry(),
        TileTypes(types=dict(palette or COLOR_PALETTE)),
    )

    create_board(world, rows, cols)
    return world
