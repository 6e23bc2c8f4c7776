from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Set

from esper import World

from columnfall.constants import MATCH_LENGTH
from columnfall.systems.board_ops import active_tile_type_map, get_board, set_cell, Position


@dataclass(frozen=True, slots=True)
class Triple:
    """Three equal settled colours in a horizontal or vertical line."""
    positions: tuple[Position, Position, Position]
    type_name: str
    orientation: str  # 'horizontal' | 'vertical'


def find_matching_triples(world: World) -> List[Triple]:
    """Detect every line window of three equal colours on one board snapshot.

    A run of N equal cells yields N - 2 overlapping triples.
    """
    board = get_board(world)
    types = active_tile_type_map(world)
    triples: List[Triple] = []
    # Vertical windows first, then horizontal.
    for r in range(board.rows - (MATCH_LENGTH - 1)):
        for c in range(board.cols):
            window = tuple((r + i, c) for i in range(MATCH_LENGTH))
            tval = _uniform_type(types, window)
            if tval is not None:
                triples.append(Triple(positions=window, type_name=tval, orientation='vertical'))
    for r in range(board.rows):
        for c in range(board.cols - (MATCH_LENGTH - 1)):
            window = tuple((r, c + i) for i in range(MATCH_LENGTH))
            tval = _uniform_type(types, window)
            if tval is not None:
                triples.append(Triple(positions=window, type_name=tval, orientation='horizontal'))
    return triples


def _uniform_type(types: dict, window: tuple) -> str | None:
    first = types.get(window[0])
    if first is None:
        return None
    for pos in window[1:]:
        if types.get(pos) != first:
            return None
    return first


def matched_positions(triples: List[Triple]) -> List[Position]:
    cells: Set[Position] = set()
    for triple in triples:
        cells.update(triple.positions)
    return sorted(cells)


def find_and_clear_matches(
    world: World,
    on_match: Callable[[Triple], None] | None = None,
) -> bool:
    """Clear every cell that belongs to a triple; notify ``on_match`` once per triple.

    A cell shared by several triples is cleared once but each triple is reported.
    """
    triples = find_matching_triples(world)
    if not triples:
        return False
    for pos in matched_positions(triples):
        set_cell(world, pos[0], pos[1], None)
    if on_match is not None:
        for triple in triples:
            on_match(triple)
    return True
