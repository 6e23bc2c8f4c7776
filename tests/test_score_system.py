import pytest

from columnfall.components.game_state import GameMode
from columnfall.components.score import Score
from columnfall.events.bus import (
    EVENT_GAME_MODE_CHANGED,
    EVENT_MATCH_CLEARED,
    EVENT_NEW_GAME_STARTED,
    EVENT_SCORE_CHANGED,
)
from columnfall.systems.score_system import ScoreSystem
from columnfall.utils.high_score_store import InMemoryHighScoreStore


def test_high_score_loaded_from_store(bus, world):
    system = ScoreSystem(world, bus, store=InMemoryHighScoreStore(initial=450))
    assert system.score == 0
    assert system.high_score == 450


def test_each_cleared_triple_awards_points_and_persists(bus, world):
    store = InMemoryHighScoreStore(initial=150)
    system = ScoreSystem(world, bus, store=store)
    events = []
    bus.subscribe(EVENT_SCORE_CHANGED, lambda s, **k: events.append(k))
    for _ in range(2):
        bus.emit(EVENT_MATCH_CLEARED, positions=[(12, 0), (12, 1), (12, 2)], type_name='red', depth=1)
    assert system.score == 200
    assert system.high_score == 200
    assert store.get_high_score() == 200
    assert [e['score'] for e in events] == [100, 200]
    assert all(e['delta'] == 100 for e in events)


def test_new_game_resets_score_but_keeps_high_score(bus, world):
    store = InMemoryHighScoreStore()
    system = ScoreSystem(world, bus, store=store)
    system.award(500)
    bus.emit(EVENT_NEW_GAME_STARTED)
    assert system.score == 0
    assert system.high_score == 500
    assert store.get_high_score() == 500


def test_game_over_merges_into_store(bus, world):
    store = InMemoryHighScoreStore(initial=100)
    system = ScoreSystem(world, bus, store=store)
    system.award(300)
    # The stored mark was raised elsewhere while this game ran.
    store.set_high_score(1000)
    bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=GameMode.RUNNING, new_mode=GameMode.GAME_OVER)
    assert store.get_high_score() == 1000
    assert system.high_score == 1000


def test_custom_points_per_match(bus, world):
    system = ScoreSystem(world, bus, points_per_match=50)
    bus.emit(EVENT_MATCH_CLEARED, positions=[], type_name='blue', depth=1)
    assert system.score == 50


def test_pause_does_not_touch_store(bus, world):
    store = InMemoryHighScoreStore(initial=100)
    system = ScoreSystem(world, bus, store=store)
    store.set_high_score(700)
    bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=GameMode.RUNNING, new_mode=GameMode.PAUSED)
    assert system.high_score == 100


def test_missing_score_component_raises(bus, world):
    for ent, _ in list(world.get_component(Score)):
        world.remove_component(ent, Score)
    with pytest.raises(RuntimeError):
        ScoreSystem(world, bus)
