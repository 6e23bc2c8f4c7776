from __future__ import annotations

from esper import World

from columnfall.components.game_state import GameMode
from columnfall.components.score import Score
from columnfall.constants import POINTS_PER_MATCH
from columnfall.events.bus import (
    EventBus,
    EVENT_GAME_MODE_CHANGED,
    EVENT_MATCH_CLEARED,
    EVENT_NEW_GAME_STARTED,
    EVENT_SCORE_CHANGED,
)
from columnfall.utils.high_score_store import HighScoreStore, InMemoryHighScoreStore


class ScoreSystem:
    """Awards points for cleared triples and keeps the persisted high score current."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        store: HighScoreStore | None = None,
        points_per_match: int = POINTS_PER_MATCH,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.store = store if store is not None else InMemoryHighScoreStore()
        self.points_per_match = points_per_match
        self.event_bus.subscribe(EVENT_MATCH_CLEARED, self._on_match_cleared)
        self.event_bus.subscribe(EVENT_NEW_GAME_STARTED, self._on_new_game_started)
        self.event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self._on_mode_changed)
        self._score().high = self.store.get_high_score()

    def _score(self) -> Score:
        for _, score in self.world.get_component(Score):
            return score
        raise RuntimeError("Score not found")

    @property
    def score(self) -> int:
        return self._score().current

    @property
    def high_score(self) -> int:
        return self._score().high

    def _on_match_cleared(self, sender, **kwargs):
        self.award(self.points_per_match)

    def _on_new_game_started(self, sender, **kwargs):
        self._score().current = 0
        self.award(0)

    def _on_mode_changed(self, sender, **kwargs):
        # Merged before the game-over payload is read from the Score component.
        if kwargs.get('new_mode') == GameMode.GAME_OVER:
            self._merge_high_score()

    def award(self, points: int) -> None:
        score = self._score()
        score.add(points)
        self._merge_high_score()
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            score=score.current,
            high_score=score.high,
            delta=points,
        )

    def _merge_high_score(self) -> int:
        score = self._score()
        high = max(score.current, self.store.get_high_score())
        self.store.set_high_score(high)
        score.high = high
        return high
