from columnfall.constants import BOTTOM_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT, GRID_COLS, GRID_ROWS

MIN_TILE_SIZE = 12


def compute_board_geometry(window_width: int, window_height: int, rows: int = GRID_ROWS, cols: int = GRID_COLS):
    """Return (tile_size, start_x, start_y) for a board centred horizontally.

    start_y is the bottom edge of the board; row 0 is drawn at the top.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_origin(row: int, col: int, rows: int, tile_size: int, start_x: float, start_y: float):
    """Bottom-left pixel of a cell; arcade's y axis grows upward so row 0 sits on top."""
    x = start_x + col * tile_size
    y = start_y + (rows - 1 - row) * tile_size
    return x, y
