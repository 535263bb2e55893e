
"""Gameplay tables and front-end tunables"""
from typing import List

CONFIG = {
    "CELL_SIZE": 20,
    "SIDEBAR_CELLS": 6,
    "BOARD_COLS": 10,
    "BOARD_ROWS": 20,
    "FPS": 60,
    "SEED": None,
    "MUSIC_DIR": ".",
    "MUSIC_TRACK": "tetris.mp3",
    "GAME_OVER_TRACK": "gameover.mp3",
    "LOG_LEVEL": "INFO",
}

MAX_DIFFICULTY = 9

# Milliseconds between ticks, indexed by difficulty
DIFFICULTY_TIMEOUTS: List[int] = [1000, 750, 625, 500, 425, 300, 250, 225, 200, 175]

# Points for clearing 1..4 lines at once, multiplied by (difficulty + 1)
POINTS_FOR_LINES: List[int] = [40, 100, 300, 1200]

# Score that must be exceeded to leave each difficulty
SCORE_PER_LEVEL: List[int] = [1200, 1200 * 4, 1200 * 8, 1200 * 16, 1200 * 32,
                              1200 * 64, 1200 * 128, 1200 * 256, 1200 * 512, 1200 * 1024]


def validate_tables():
    levels = MAX_DIFFICULTY + 1
    if len(DIFFICULTY_TIMEOUTS) != levels:
        raise ValueError(f"DIFFICULTY_TIMEOUTS needs {levels} entries, has {len(DIFFICULTY_TIMEOUTS)}")
    if len(SCORE_PER_LEVEL) != levels:
        raise ValueError(f"SCORE_PER_LEVEL needs {levels} entries, has {len(SCORE_PER_LEVEL)}")
    if len(POINTS_FOR_LINES) != 4:
        raise ValueError(f"POINTS_FOR_LINES needs 4 entries, has {len(POINTS_FOR_LINES)}")
    if any(t <= 0 for t in DIFFICULTY_TIMEOUTS):
        raise ValueError("tick intervals must be positive")
    if any(b <= a for a, b in zip(SCORE_PER_LEVEL, SCORE_PER_LEVEL[1:])):
        raise ValueError("SCORE_PER_LEVEL must be strictly increasing")


validate_tables()
