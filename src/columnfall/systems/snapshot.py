from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from esper import World

from columnfall.components.falling_column import FallingColumn
from columnfall.components.game_state import GameMode, GameState
from columnfall.components.score import Score
from columnfall.systems.board_ops import board_rows, get_board
from columnfall.systems.movement import get_falling_column


@dataclass(frozen=True, slots=True)
class ColumnSnapshot:
    row: int
    col: int
    colors: Tuple[str, ...]

    def cells(self, rows: int | None = None) -> list[tuple[int, int, str]]:
        """Cells of the column that fall inside the board."""
        out = []
        for i, color in enumerate(self.colors):
            r = self.row - i
            if r < 0 or (rows is not None and r >= rows):
                continue
            out.append((r, self.col, color))
        return out


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only view of the board and falling column for the display layer."""
    rows: int
    cols: int
    cells: Tuple[Tuple[str | None, ...], ...]
    column: ColumnSnapshot | None
    score: int
    high_score: int
    mode: GameMode
    resolving: bool = False

    def settled_at(self, row: int, col: int) -> str | None:
        return self.cells[row][col]

    def color_at(self, row: int, col: int) -> str | None:
        """Colour to draw at (row, col): the falling column wins over settled cells."""
        if self.column is not None and col == self.column.col:
            offset = self.column.row - row
            if 0 <= offset < len(self.column.colors):
                return self.column.colors[offset]
        return self.cells[row][col]


def _session(world: World) -> tuple[GameState | None, Score | None]:
    state = next((comp for _, comp in world.get_component(GameState)), None)
    score = next((comp for _, comp in world.get_component(Score)), None)
    return state, score


def take_snapshot(world: World) -> BoardSnapshot:
    board = get_board(world)
    grid = tuple(tuple(row) for row in board_rows(world))
    falling = get_falling_column(world)
    column = None
    if falling is not None:
        comp: FallingColumn = falling[1]
        column = ColumnSnapshot(row=comp.row, col=comp.col, colors=tuple(comp.colors))
    state, score = _session(world)
    return BoardSnapshot(
        rows=board.rows,
        cols=board.cols,
        cells=grid,
        column=column,
        score=score.current if score else 0,
        high_score=score.high if score else 0,
        mode=state.mode if state else GameMode.RUNNING,
        resolving=state.resolving if state else False,
    )
