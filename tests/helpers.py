from tetris_board import Board
from tetris_piece import Block


class FixedRandom:
    """Deals the given kinds in order, then repeats the last one."""
    def __init__(self, *kinds):
        self.kinds = list(kinds)

    def next_piece(self):
        if len(self.kinds) > 1:
            return self.kinds.pop(0)
        return self.kinds[0]


def fill_row(board: Board, y: int, color: int = 0, gap=None):
    for x in range(board.width):
        board.grid[y][x] = None if x == gap else Block(color)
