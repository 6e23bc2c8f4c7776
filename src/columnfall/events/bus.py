from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT
# ============================================================================
EVENT_COMMAND = "command"                          # payload: command=Command


# ============================================================================
# FALLING COLUMN
# ============================================================================
EVENT_COLUMN_SPAWNED = "column_spawned"            # payload: row, col, colors=list[str]
EVENT_COLUMN_MOVED = "column_moved"                # payload: row, col, direction=(drow, dcol)
EVENT_COLUMN_ROTATED = "column_rotated"            # payload: colors=list[str]
EVENT_COLUMN_LANDED = "column_landed"              # payload: row, col, colors=list[str], positions=[(r,c),...]


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_MATCH_CLEARED = "match_cleared"              # payload: positions=[(r,c),(r,c),(r,c)], type_name=str, depth=int
EVENT_GRAVITY_APPLIED = "gravity_applied"          # payload: moves=[((r,c),(r,c)),...], depth=int
EVENT_CASCADE_STEP = "cascade_step"                # payload: kind=str, depth=int, positions=[(r,c),...]
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: depth=int
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str


# ============================================================================
# SCORE
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, high_score=int, delta=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_NEW_GAME_STARTED = "new_game_started"        # payload: None
EVENT_GAME_OVER = "game_over"                      # payload: score=int, high_score=int
