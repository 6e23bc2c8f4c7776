"""Top-level game session: spawning, drop timer, pause and game over."""
from __future__ import annotations

from typing import Iterator

from esper import World

from columnfall.components.drop_timer import DropTimer
from columnfall.components.falling_column import FallingColumn
from columnfall.components.game_state import GameMode, GameState
from columnfall.components.score import Score
from columnfall.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_COLUMN_LANDED,
    EVENT_COLUMN_MOVED,
    EVENT_COLUMN_ROTATED,
    EVENT_COLUMN_SPAWNED,
    EVENT_COMMAND,
    EVENT_GAME_MODE_CHANGED,
    EVENT_GAME_OVER,
    EVENT_NEW_GAME_STARTED,
    EVENT_TICK,
)
from columnfall.events.commands import Command, PIECE_COMMANDS
from columnfall.systems.board_ops import clear_board
from columnfall.systems.cascade import CascadeStep, cascade_steps, resolve_cascade
from columnfall.systems.movement import (
    DropResult,
    drop_one_step,
    get_falling_column,
    move_horizontal,
    remove_falling_column,
    rotate_colors,
    spawn_column,
)


class SessionSystem:
    """Drives the RUNNING / PAUSED / GAME_OVER state machine.

    Time only enters through ``EVENT_TICK``; the ``DropTimer`` component is the
    single timer. With ``cascade_step_delay`` > 0 the post-landing cascade is
    advanced one step per delay instead of resolving inside the landing tick.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        cascade_step_delay: float = 0.0,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.cascade_step_delay = max(0.0, float(cascade_step_delay))
        self._cascade: Iterator[CascadeStep] | None = None
        self._cascade_elapsed = 0.0
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_COMMAND, self.on_command)

    # ------------------------------------------------------------------
    # Singletons
    # ------------------------------------------------------------------
    def _state(self) -> GameState:
        for _, state in self.world.get_component(GameState):
            return state
        raise RuntimeError("GameState not found")

    def _timer(self) -> DropTimer:
        for _, timer in self.world.get_component(DropTimer):
            return timer
        raise RuntimeError("DropTimer not found")

    @property
    def mode(self) -> GameMode:
        return self._state().mode

    @property
    def resolving(self) -> bool:
        return self._cascade is not None

    def _set_mode(self, new_mode: GameMode) -> None:
        state = self._state()
        previous = state.mode
        if previous == new_mode:
            return
        state.mode = new_mode
        self.event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous, new_mode=new_mode)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start_new_game(self) -> None:
        self._cascade = None
        self._cascade_elapsed = 0.0
        self._state().resolving = False
        remove_falling_column(self.world)
        clear_board(self.world)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='reset')
        self.event_bus.emit(EVENT_NEW_GAME_STARTED)
        self._set_mode(GameMode.RUNNING)
        self._timer().arm()
        self._spawn_next()

    def toggle_pause(self) -> bool:
        mode = self.mode
        if mode == GameMode.RUNNING:
            self._timer().disarm()
            self._set_mode(GameMode.PAUSED)
            return True
        if mode == GameMode.PAUSED:
            self._timer().arm()
            self._cascade_elapsed = 0.0
            self._set_mode(GameMode.RUNNING)
            return True
        return False

    def _spawn_next(self) -> bool:
        entity = spawn_column(self.world)
        if entity is None:
            self._game_over()
            return False
        column = self.world.component_for_entity(entity, FallingColumn)
        self.event_bus.emit(EVENT_COLUMN_SPAWNED, row=column.row, col=column.col, colors=list(column.colors))
        return True

    def _game_over(self) -> None:
        self._timer().disarm()
        self._set_mode(GameMode.GAME_OVER)
        score = next((comp for _, comp in self.world.get_component(Score)), None)
        current = score.current if score else 0
        high = max(current, score.high) if score else current
        self.event_bus.emit(EVENT_GAME_OVER, score=current, high_score=high)

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------
    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            return
        self.tick(dt)

    def tick(self, dt: float) -> None:
        if self.mode != GameMode.RUNNING:
            return
        if self._cascade is not None:
            self._advance_cascade(dt)
            return
        fired = self._timer().advance(dt)
        for _ in range(fired):
            self.step()
            if self.mode != GameMode.RUNNING or self._cascade is not None:
                break

    def step(self) -> DropResult | None:
        """Move the falling column down one row, landing it when blocked."""
        if self.mode != GameMode.RUNNING or self._cascade is not None:
            return None
        falling = get_falling_column(self.world)
        if falling is None:
            return None
        entity, column = falling
        result = drop_one_step(self.world, column)
        if result is DropResult.MOVED:
            self.event_bus.emit(EVENT_COLUMN_MOVED, row=column.row, col=column.col, direction=(1, 0))
            return result
        positions = [(r, c) for r, c, _ in column.cells() if r >= 0]
        colors = list(column.colors)
        self.world.delete_entity(entity, immediate=True)
        self.event_bus.emit(
            EVENT_COLUMN_LANDED,
            row=column.row,
            col=column.col,
            colors=colors,
            positions=positions,
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='column_landed')
        if self.cascade_step_delay > 0:
            self._cascade = cascade_steps(self.world, self.event_bus)
            self._cascade_elapsed = 0.0
            self._state().resolving = True
        else:
            resolve_cascade(self.world, self.event_bus)
            self._spawn_next()
        return result

    def _advance_cascade(self, dt: float) -> None:
        self._cascade_elapsed += dt
        while self._cascade is not None and self._cascade_elapsed >= self.cascade_step_delay:
            self._cascade_elapsed -= self.cascade_step_delay
            try:
                next(self._cascade)
            except StopIteration:
                self._finish_cascade()

    def _finish_cascade(self) -> None:
        self._cascade = None
        self._cascade_elapsed = 0.0
        self._state().resolving = False
        self._timer().elapsed = 0.0
        self._spawn_next()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def on_command(self, sender, **kwargs):
        command = kwargs.get('command')
        if not isinstance(command, Command):
            return
        self.handle_command(command)

    def handle_command(self, command: Command) -> bool:
        """Apply a command; returns False when it was ignored."""
        if command is Command.NEW_GAME:
            self.start_new_game()
            return True
        if command is Command.TOGGLE_PAUSE:
            return self.toggle_pause()
        if command not in PIECE_COMMANDS:
            return False
        if self.mode != GameMode.RUNNING or self._cascade is not None:
            return False
        falling = get_falling_column(self.world)
        if falling is None:
            return False
        _, column = falling
        if command is Command.SOFT_DROP:
            return self.step() is not None
        if command is Command.ROTATE_PIECE:
            rotate_colors(column)
            self.event_bus.emit(EVENT_COLUMN_ROTATED, colors=list(column.colors))
            return True
        direction = -1 if command is Command.MOVE_LEFT else 1
        if not move_horizontal(self.world, column, direction):
            return False
        self.event_bus.emit(EVENT_COLUMN_MOVED, row=column.row, col=column.col, direction=(0, direction))
        return True
