"""Falling column lifecycle: spawn, collision checks, moves, rotation and landing."""
from __future__ import annotations

from enum import Enum, auto
from typing import List, Sequence, Tuple

from esper import World

from columnfall.components.falling_column import FallingColumn
from columnfall.constants import COLUMN_LENGTH
from columnfall.systems.board_ops import get_board, get_tile_registry, is_empty, set_cell, Position


class DropResult(Enum):
    MOVED = auto()
    LANDED = auto()


def spawn_position(world: World) -> Position:
    board = get_board(world)
    return 0, board.cols // 2


def random_colors(world: World) -> List[str]:
    rng = getattr(world, "random")
    choices = get_tile_registry(world).spawnable_types()
    return [rng.choice(choices) for _ in range(COLUMN_LENGTH)]


def spawn_column(world: World, colors: Sequence[str] | None = None) -> int | None:
    """Create the falling column at the spawn cell.

    Returns None without creating anything when the spawn cell is occupied;
    that is the game-over signal.
    """
    row, col = spawn_position(world)
    if not is_empty(world, row, col):
        return None
    if colors is None:
        colors = random_colors(world)
    elif len(colors) != COLUMN_LENGTH:
        raise ValueError(f"a column has exactly {COLUMN_LENGTH} colours, got {len(colors)}")
    return world.create_entity(FallingColumn(row=row, col=col, colors=list(colors)))


def get_falling_column(world: World) -> Tuple[int, FallingColumn] | None:
    for entity, column in world.get_component(FallingColumn):
        return entity, column
    return None


def remove_falling_column(world: World) -> None:
    for entity, _ in list(world.get_component(FallingColumn)):
        world.delete_entity(entity, immediate=True)


def can_move_down(world: World, column: FallingColumn) -> bool:
    # Only the leading cell can collide; the cells above trail into space it vacated.
    board = get_board(world)
    if column.row + 1 >= board.rows:
        return False
    return is_empty(world, column.row + 1, column.col)


def move_horizontal(world: World, column: FallingColumn, direction: int) -> bool:
    board = get_board(world)
    target = column.col + direction
    if not 0 <= target < board.cols:
        return False
    if not is_empty(world, column.row, target):
        return False
    column.col = target
    return True


def rotate_colors(column: FallingColumn) -> None:
    column.colors = column.colors[1:] + column.colors[:1]


def commit_column(world: World, column: FallingColumn) -> List[Position]:
    """Write the column's colours into the board; returns the cells written."""
    written: List[Position] = []
    for row, col, color in column.cells():
        if row < 0:
            continue
        set_cell(world, row, col, color)
        written.append((row, col))
    return written


def drop_one_step(world: World, column: FallingColumn) -> DropResult:
    if can_move_down(world, column):
        column.row += 1
        return DropResult.MOVED
    commit_column(world, column)
    return DropResult.LANDED
