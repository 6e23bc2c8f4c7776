from typing import Any, Dict, Tuple

from esper import World

from columnfall.components.game_state import GameMode
from columnfall.components.tile_types import TileTypes
from columnfall.events.bus import EventBus, EVENT_GAME_OVER
from columnfall.rendering.board_renderer import BoardRenderer
from columnfall.systems.board_ops import get_tile_registry
from columnfall.systems.snapshot import BoardSnapshot, take_snapshot
from columnfall.ui.layout import cell_origin, compute_board_geometry

PADDING = 2


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        self._board_renderer = BoardRenderer(self, padding=PADDING)
        self._last_snapshot: BoardSnapshot | None = None
        # (row, col) -> {"x", "y", "size", "color"} for the last built frame.
        self._last_tile_layout: Dict[Tuple[int, int], Dict[str, Any]] = {}
        self._geometry: Tuple[int, float, float] | None = None
        self.game_over_message: str | None = None

    def on_game_over(self, sender, **kwargs):
        score = kwargs.get('score', 0)
        high_score = kwargs.get('high_score', 0)
        self.game_over_message = f"Game Over  Score: {score}  High Score: {high_score}"

    @property
    def last_snapshot(self) -> BoardSnapshot | None:
        return self._last_snapshot

    @property
    def tile_layout(self) -> Dict[Tuple[int, int], Dict[str, Any]]:
        return self._last_tile_layout

    def build_layout(self) -> BoardSnapshot:
        """Take a snapshot and compute per-cell draw rectangles without touching arcade."""
        snapshot = take_snapshot(self.world)
        tile_size, start_x, start_y = compute_board_geometry(
            self.window.width, self.window.height, snapshot.rows, snapshot.cols
        )
        self._geometry = (tile_size, start_x, start_y)
        registry = self._registry()
        layout: Dict[Tuple[int, int], Dict[str, Any]] = {}
        for row in range(snapshot.rows):
            for col in range(snapshot.cols):
                x, y = cell_origin(row, col, snapshot.rows, tile_size, start_x, start_y)
                color_name = snapshot.color_at(row, col)
                layout[(row, col)] = {
                    "x": x,
                    "y": y,
                    "size": tile_size,
                    "color_name": color_name,
                    "color": registry.background_for(color_name) if color_name else None,
                }
        self._last_tile_layout = layout
        self._last_snapshot = snapshot
        if snapshot.mode != GameMode.GAME_OVER:
            self.game_over_message = None
        return snapshot

    def get_cell_at_point(self, x: float, y: float) -> Tuple[int, int] | None:
        for pos, entry in self._last_tile_layout.items():
            size = entry["size"]
            if entry["x"] <= x < entry["x"] + size and entry["y"] <= y < entry["y"] + size:
                return pos
        return None

    def process(self):
        snapshot = self.build_layout()
        # Local import keeps tests headless without creating a window.
        import arcade
        try:
            arcade.get_window()
        except Exception:
            return
        self._board_renderer.render(arcade, snapshot, self._geometry)

    def _registry(self) -> TileTypes:
        return get_tile_registry(self.world)
