from __future__ import annotations

from typing import Dict, List, Tuple

from esper import World

from columnfall.components.active_switch import ActiveSwitch
from columnfall.components.board import Board
from columnfall.components.board_position import BoardPosition
from columnfall.components.tile import TileType
from columnfall.components.tile_type_registry import TileTypeRegistry
from columnfall.components.tile_types import TileTypes

Position = Tuple[int, int]


def get_tile_registry(world: World) -> TileTypes:
    for entity, _ in world.get_component(TileTypeRegistry):
        return world.component_for_entity(entity, TileTypes)
    raise RuntimeError("TileTypes definitions not found")


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def board_dimensions(world: World) -> Tuple[int, int] | None:
    for _, board in world.get_component(Board):
        return board.rows, board.cols
    return None


def create_board(world: World, rows: int, cols: int) -> int:
    """Create the Board and one empty cell entity per position."""
    board = Board(rows=rows, cols=cols)
    board_entity = world.create_entity(board)
    for r in range(rows):
        for c in range(cols):
            board.cell_entities[(r, c)] = world.create_entity(
                BoardPosition(row=r, col=c),
                ActiveSwitch(active=False),
                TileType(),
            )
    return board_entity


def get_entity_at(world: World, row: int, col: int) -> int:
    board = get_board(world)
    if not board.in_bounds(row, col):
        raise IndexError(f"cell ({row}, {col}) outside {board.rows}x{board.cols} board")
    return board.cell_entities[(row, col)]


def get_cell(world: World, row: int, col: int) -> str | None:
    """Return the settled colour at (row, col), or None when empty."""
    entity = get_entity_at(world, row, col)
    if not world.component_for_entity(entity, ActiveSwitch).active:
        return None
    return world.component_for_entity(entity, TileType).type_name


def set_cell(world: World, row: int, col: int, color: str | None) -> None:
    entity = get_entity_at(world, row, col)
    tile_switch: ActiveSwitch = world.component_for_entity(entity, ActiveSwitch)
    tile_type: TileType = world.component_for_entity(entity, TileType)
    if color is None:
        tile_switch.active = False
        tile_type.type_name = ""
    else:
        tile_type.type_name = color
        tile_switch.active = True


def is_empty(world: World, row: int, col: int) -> bool:
    return get_cell(world, row, col) is None


def clear_board(world: World) -> None:
    for _, (tile_switch, tile_type) in world.get_components(ActiveSwitch, TileType):
        tile_switch.active = False
        tile_type.type_name = ""


def active_tile_type_map(world: World) -> Dict[Position, str]:
    """Return mapping of occupied cell positions to their colours."""
    mapping: Dict[Position, str] = {}
    for _, (position, tile_switch, tile) in world.get_components(BoardPosition, ActiveSwitch, TileType):
        if not tile_switch.active:
            continue
        mapping[(position.row, position.col)] = tile.type_name
    return mapping


def board_rows(world: World) -> List[List[str | None]]:
    """Return the settled grid as a list of rows, row 0 first."""
    board = get_board(world)
    rows, cols = board.rows, board.cols
    types = active_tile_type_map(world)
    return [[types.get((r, c)) for c in range(cols)] for r in range(rows)]


def load_rows(world: World, layout: List[List[str | None]]) -> None:
    """Overwrite the settled grid from a list of rows (row 0 first)."""
    board = get_board(world)
    if len(layout) != board.rows or any(len(row) != board.cols for row in layout):
        raise ValueError(f"layout must be {board.rows}x{board.cols}")
    for r, row_values in enumerate(layout):
        for c, color in enumerate(row_values):
            set_cell(world, r, c, color)
