GRID_ROWS = 13
GRID_COLS = 6
TILE_SIZE = 48
BOTTOM_MARGIN = 20

# Seconds between automatic drop steps.
DROP_INTERVAL = 0.7
# Delay between animated cascade steps when the presentation paces the cascade.
CASCADE_STEP_DELAY = 0.05
POINTS_PER_MATCH = 100
# Length of a colour run that clears.
MATCH_LENGTH = 3
COLUMN_LENGTH = 3

# Colour name -> RGB used by the renderer.
COLOR_PALETTE = {
    'red':    (204, 51, 51),
    'green':  (64, 168, 75),
    'blue':   (60, 96, 200),
    'yellow': (222, 196, 58),
    'purple': (142, 68, 173),
}

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.60
BOARD_MAX_HEIGHT_PCT = 0.90

WINDOW_WIDTH = 480
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Columnfall"
