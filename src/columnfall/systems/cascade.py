"""Clear -> settle cycle run after a column lands.

The cascade is a generator so the presentation layer can pace it one step at a
time; ``resolve_cascade`` drains it synchronously.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from esper import World

from columnfall.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CASCADE_COMPLETE,
    EVENT_CASCADE_STEP,
    EVENT_GRAVITY_APPLIED,
    EVENT_MATCH_CLEARED,
)
from columnfall.systems.board_ops import get_board, Position
from columnfall.systems.gravity import settle_moves
from columnfall.systems.match import Triple, find_and_clear_matches, matched_positions


@dataclass(slots=True)
class CascadeStep:
    kind: str  # 'clear' | 'settle'
    depth: int
    positions: List[Position] = field(default_factory=list)


def cascade_steps(world: World, event_bus: EventBus) -> Iterator[CascadeStep]:
    board = get_board(world)
    max_depth = board.rows * board.cols
    depth = 0
    while True:
        cleared: List[Triple] = []
        if not find_and_clear_matches(world, cleared.append):
            break
        depth += 1
        if depth > max_depth:
            raise RuntimeError(f"cascade did not converge after {max_depth} clears")
        for triple in cleared:
            event_bus.emit(
                EVENT_MATCH_CLEARED,
                positions=list(triple.positions),
                type_name=triple.type_name,
                depth=depth,
            )
        positions = matched_positions(cleared)
        event_bus.emit(EVENT_CASCADE_STEP, kind='clear', depth=depth, positions=positions)
        event_bus.emit(EVENT_BOARD_CHANGED, reason='match_cleared')
        yield CascadeStep(kind='clear', depth=depth, positions=positions)
        while True:
            moves = settle_moves(world)
            if not moves:
                break
            event_bus.emit(EVENT_GRAVITY_APPLIED, moves=moves, depth=depth)
            event_bus.emit(EVENT_CASCADE_STEP, kind='settle', depth=depth, positions=[dst for _, dst in moves])
            event_bus.emit(EVENT_BOARD_CHANGED, reason='gravity')
            yield CascadeStep(kind='settle', depth=depth, positions=[dst for _, dst in moves])
    event_bus.emit(EVENT_CASCADE_COMPLETE, depth=depth)


def resolve_cascade(world: World, event_bus: EventBus) -> int:
    """Run the cascade to a stable board; returns the number of clear steps."""
    depth = 0
    for step in cascade_steps(world, event_bus):
        depth = step.depth
    return depth
