from __future__ import annotations

from typing import List, Tuple

from esper import World

from columnfall.systems.board_ops import get_board, get_cell, set_cell, Position

GravityMove = Tuple[Position, Position]


def settle_moves(world: World) -> List[GravityMove]:
    """Apply one gravity pass and return the (source, target) of every moved cell.

    Rows are scanned from the second-to-last upward; an occupied cell with an
    empty cell directly below drops exactly one row per pass.
    """
    board = get_board(world)
    moves: List[GravityMove] = []
    for r in range(board.rows - 2, -1, -1):
        for c in range(board.cols):
            color = get_cell(world, r, c)
            if color is None or get_cell(world, r + 1, c) is not None:
                continue
            set_cell(world, r + 1, c, color)
            set_cell(world, r, c, None)
            moves.append(((r, c), (r + 1, c)))
    return moves


def settle(world: World) -> bool:
    return bool(settle_moves(world))


def settle_fully(world: World) -> int:
    """Run gravity passes to a fixed point; returns the number of passes that moved cells."""
    board = get_board(world)
    passes = 0
    while settle(world):
        passes += 1
        if passes > board.rows:
            raise RuntimeError("gravity did not settle within board height")
    return passes
