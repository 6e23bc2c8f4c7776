import random

from columnfall.systems.board_ops import active_tile_type_map, board_rows, get_cell, load_rows
from columnfall.systems.gravity import settle, settle_fully, settle_moves

ROWS, COLS = 13, 6


def _column(layout, c):
    return [layout[r][c] for r in range(ROWS) if layout[r][c] is not None]


def test_single_pass_moves_each_cell_one_row(world, placer):
    placer(world, {(8, 0): 'red', (9, 0): 'green'})
    moves = settle_moves(world)
    assert sorted(moves) == [((8, 0), (9, 0)), ((9, 0), (10, 0))]
    assert get_cell(world, 10, 0) == 'green'
    assert get_cell(world, 9, 0) == 'red'
    assert get_cell(world, 8, 0) is None


def test_settle_reports_no_movement_on_stable_board(world, placer):
    placer(world, {(12, 0): 'red', (11, 0): 'blue', (12, 5): 'green'})
    assert settle(world) is False


def test_settle_fully_reaches_fixed_point(world, placer):
    placer(world, {(0, 2): 'yellow', (5, 2): 'blue'})
    passes = settle_fully(world)
    assert passes == 11
    assert get_cell(world, 12, 2) == 'blue'
    assert get_cell(world, 11, 2) == 'yellow'
    assert settle(world) is False


def test_fixed_point_has_no_floating_cells_on_random_boards(world):
    rng = random.Random(11)
    for _ in range(40):
        layout = [[rng.choice(['red', 'green', None, None]) for _ in range(COLS)] for _ in range(ROWS)]
        load_rows(world, layout)
        settle_fully(world)
        settled = board_rows(world)
        for c in range(COLS):
            assert _column(settled, c) == _column(layout, c)
            for r in range(ROWS - 1):
                if settled[r][c] is not None:
                    assert settled[r + 1][c] is not None
        assert len(active_tile_type_map(world)) == sum(
            1 for row in layout for cell in row if cell is not None
        )
