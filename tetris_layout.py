# tetris_layout.py
from dataclasses import dataclass
from typing import Tuple
from tetris_config import CONFIG


@dataclass
class Dims:
    cell: int
    cols: int
    rows: int
    board_w: int
    board_h: int
    sidebar_w: int
    total_w: int
    total_h: int
    sidebar_x: int


def compute_dims(cols: int, rows: int) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    sidebar_w = int(CONFIG["SIDEBAR_CELLS"]) * cell

    board_w = cols * cell
    board_h = rows * cell

    # The sidebar needs room for its text even when the board is tiny
    total_w = board_w + sidebar_w
    total_h = max(board_h, 18 * cell)

    return Dims(
        cell=cell, cols=cols, rows=rows,
        board_w=board_w, board_h=board_h,
        sidebar_w=sidebar_w,
        total_w=total_w, total_h=total_h,
        sidebar_x=board_w,
    )


def board_cells_for(width_px: int, height_px: int) -> Tuple[int, int]:
    """Board size in cells that fits a window, leaving room for the sidebar."""
    cell = int(CONFIG["CELL_SIZE"])
    cols = width_px // cell - int(CONFIG["SIDEBAR_CELLS"])
    rows = height_px // cell
    return max(cols, 0), max(rows, 0)
