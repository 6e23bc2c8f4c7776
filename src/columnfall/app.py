"""Columnfall arcade window: sets up ECS world, event bus, systems and input."""
from arcade import Window, run, set_background_color, color
from columnfall.world import create_world
from columnfall.constants import (
    CASCADE_STEP_DELAY,
    GRID_COLS,
    GRID_ROWS,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from columnfall.events.bus import EVENT_TICK, EventBus
from columnfall.systems.input import InputSystem
from columnfall.systems.render import RenderSystem
from columnfall.systems.score_system import ScoreSystem
from columnfall.systems.session import SessionSystem
from columnfall.utils.high_score_store import JsonHighScoreStore


class ColumnfallWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, rows=GRID_ROWS, cols=GRID_COLS)

        self.score_system = ScoreSystem(self.world, self.event_bus, store=JsonHighScoreStore())
        self.session_system = SessionSystem(
            self.world,
            self.event_bus,
            cascade_step_delay=CASCADE_STEP_DELAY,
        )
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus)

        set_background_color(color.BLACK)
        self.session_system.start_new_game()

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.input_system.handle_key_press(symbol, modifiers)


def main():
    ColumnfallWindow()
    run()
