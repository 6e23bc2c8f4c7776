import sys, os
import random
from types import SimpleNamespace

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from columnfall.events.bus import EventBus
from columnfall.systems.board_ops import set_cell
from columnfall.systems.score_system import ScoreSystem
from columnfall.systems.session import SessionSystem
from columnfall.utils.high_score_store import InMemoryHighScoreStore
from columnfall.world import create_world


class CycleRandom(random.Random):
    """Deterministic rng whose choice() walks the sequence in order."""

    def __init__(self):
        super().__init__(0)
        self._index = 0

    def choice(self, seq):
        value = seq[self._index % len(seq)]
        self._index += 1
        return value


def place(world, cells):
    """Write a {(row, col): colour} mapping onto the board."""
    for (row, col), color in cells.items():
        set_cell(world, row, col, color)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def world(bus):
    return create_world(bus, rng=random.Random(1234))


@pytest.fixture
def game_factory():
    def _make(*, store=None, drop_interval=1.0, cascade_step_delay=0.0, start=True, rng=None):
        bus = EventBus()
        world = create_world(bus, drop_interval=drop_interval, rng=rng or CycleRandom())
        store = store if store is not None else InMemoryHighScoreStore()
        score = ScoreSystem(world, bus, store=store)
        session = SessionSystem(world, bus, cascade_step_delay=cascade_step_delay)
        if start:
            session.start_new_game()
        return SimpleNamespace(bus=bus, world=world, store=store, score=score, session=session)
    return _make


@pytest.fixture
def placer():
    return place
