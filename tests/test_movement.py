import random

import pytest

from columnfall.components.falling_column import FallingColumn
from columnfall.systems.board_ops import get_cell, get_tile_registry, set_cell
from columnfall.systems.movement import (
    DropResult,
    can_move_down,
    commit_column,
    drop_one_step,
    get_falling_column,
    move_horizontal,
    random_colors,
    rotate_colors,
    spawn_column,
)
from columnfall.world import create_world


def _spawn(world, colors=('red', 'green', 'blue')):
    entity = spawn_column(world, list(colors))
    assert entity is not None
    return world.component_for_entity(entity, FallingColumn)


def test_spawn_at_fixed_position(world):
    column = _spawn(world)
    assert (column.row, column.col) == (0, 3)
    assert column.colors == ['red', 'green', 'blue']
    assert get_falling_column(world)[1] is column


def test_spawn_uses_palette_colours(world):
    entity = spawn_column(world)
    column = world.component_for_entity(entity, FallingColumn)
    assert len(column.colors) == 3
    assert set(column.colors) <= {'red', 'green', 'blue', 'yellow', 'purple'}


def test_spawn_blocked_returns_none(world):
    set_cell(world, 0, 3, 'red')
    assert spawn_column(world, ['red', 'green', 'blue']) is None
    assert get_falling_column(world) is None


def test_spawn_rejects_wrong_length(world):
    with pytest.raises(ValueError):
        spawn_column(world, ['red', 'green'])


def test_drop_to_floor_and_land(world):
    column = _spawn(world)
    for _ in range(12):
        assert drop_one_step(world, column) is DropResult.MOVED
    assert column.row == 12
    assert drop_one_step(world, column) is DropResult.LANDED
    assert get_cell(world, 12, 3) == 'red'
    assert get_cell(world, 11, 3) == 'green'
    assert get_cell(world, 10, 3) == 'blue'


def test_can_move_down_blocked_by_settled_cell(world):
    set_cell(world, 5, 3, 'yellow')
    column = _spawn(world)
    for _ in range(4):
        assert drop_one_step(world, column) is DropResult.MOVED
    assert column.row == 4
    assert not can_move_down(world, column)
    assert drop_one_step(world, column) is DropResult.LANDED
    assert [get_cell(world, r, 3) for r in (2, 3, 4, 5)] == ['blue', 'green', 'red', 'yellow']


def test_commit_skips_rows_above_board(world):
    column = FallingColumn(row=0, col=2, colors=['red', 'green', 'blue'])
    written = commit_column(world, column)
    assert written == [(0, 2)]
    assert get_cell(world, 0, 2) == 'red'


def test_move_left_at_wall_is_noop(world):
    column = FallingColumn(row=4, col=0, colors=['red', 'green', 'blue'])
    assert move_horizontal(world, column, -1) is False
    assert (column.row, column.col) == (4, 0)


def test_move_right_at_wall_is_noop(world):
    column = FallingColumn(row=4, col=5, colors=['red', 'green', 'blue'])
    assert move_horizontal(world, column, 1) is False
    assert column.col == 5


def test_move_blocked_by_settled_cell(world):
    column = _spawn(world)
    set_cell(world, 0, 2, 'purple')
    assert move_horizontal(world, column, -1) is False
    assert column.col == 3
    assert move_horizontal(world, column, 1) is True
    assert column.col == 4


def test_rotate_cycle(world):
    column = _spawn(world)
    rotate_colors(column)
    assert column.colors == ['green', 'blue', 'red']
    rotate_colors(column)
    rotate_colors(column)
    assert column.colors == ['red', 'green', 'blue']


def test_spawn_colours_come_from_whole_palette(bus):
    palette = {'cyan': (0, 255, 255), 'pink': (255, 0, 255)}
    world = create_world(bus, palette=palette, rng=random.Random(7))
    assert get_tile_registry(world).spawnable_types() == ['cyan', 'pink']
    for _ in range(10):
        assert set(random_colors(world)) <= set(palette)
