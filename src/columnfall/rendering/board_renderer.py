from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from columnfall.components.game_state import GameMode

if TYPE_CHECKING:
    from columnfall.systems.render import RenderSystem
    from columnfall.systems.snapshot import BoardSnapshot

GRID_LINE_COLOR = (60, 60, 70)
BOARD_BG_COLOR = (24, 24, 32)
OVERLAY_COLOR = (0, 0, 0, 160)


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 2):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, snapshot: BoardSnapshot, geometry: Tuple[int, float, float]) -> None:
        tile_size, start_x, start_y = geometry
        board_w = tile_size * snapshot.cols
        board_h = tile_size * snapshot.rows
        arcade.draw_lbwh_rectangle_filled(start_x, start_y, board_w, board_h, BOARD_BG_COLOR)

        draw_size = max(tile_size - self._padding * 2, 4)
        for (row, col), entry in self._rs.tile_layout.items():
            x = entry["x"]
            y = entry["y"]
            arcade.draw_lbwh_rectangle_outline(x, y, tile_size, tile_size, GRID_LINE_COLOR, border_width=1)
            color = entry["color"]
            if color is None:
                continue
            arcade.draw_lbwh_rectangle_filled(
                x + self._padding,
                y + self._padding,
                draw_size,
                draw_size,
                color,
            )

        self._render_score(arcade, snapshot, start_x, start_y + board_h)
        if snapshot.mode == GameMode.PAUSED:
            self._render_overlay(arcade, "Paused", start_x, start_y, board_w, board_h)
        elif snapshot.mode == GameMode.GAME_OVER:
            message = self._rs.game_over_message or "Game Over"
            self._render_overlay(arcade, message, start_x, start_y, board_w, board_h, hint="Press N for a new game")

    def _render_score(self, arcade, snapshot: BoardSnapshot, left: float, top: float) -> None:
        arcade.draw_text(f"Score: {snapshot.score}", left, top + 8, arcade.color.WHITE, 14)
        arcade.draw_text(
            f"High Score: {snapshot.high_score}",
            left,
            top + 28,
            arcade.color.LIGHT_GRAY,
            12,
        )

    def _render_overlay(self, arcade, message: str, left: float, bottom: float, width: float, height: float, hint: str | None = None) -> None:
        arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, OVERLAY_COLOR)
        cx = left + width / 2
        cy = bottom + height / 2
        arcade.draw_text(
            message,
            cx,
            cy,
            arcade.color.WHITE,
            14,
            anchor_x="center",
            anchor_y="center",
            bold=True,
            width=int(width),
            multiline=True,
            align="center",
        )
        if hint:
            arcade.draw_text(hint, cx, cy - 36, arcade.color.LIGHT_GRAY, 11, anchor_x="center", anchor_y="center")
