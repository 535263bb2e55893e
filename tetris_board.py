
"""Board: collision queries, baking, line detection and collapse, resize"""
from typing import Iterable, List, Optional, Tuple
from tetris_piece import BOX, Cell, Piece

Grid = List[List[Cell]]


class Board:
    """width x height grid of cells, addressed grid[y][x] from the top-left.

    Everything outside the grid counts as occupied. `cache_valid` belongs to
    the renderer: the board only clears it when its rows change structurally.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"board size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.grid: Grid = [[None] * width for _ in range(height)]
        self.cache_valid = False

    # ---------- render cache flag ----------
    def invalidate(self):
        self.cache_valid = False

    def validate(self):
        self.cache_valid = True

    # ---------- queries ----------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return self.grid[y][x] is not None

    def is_valid_move(self, piece: Piece, action: str) -> bool:
        """Try `action` on a clone of `piece`; neither the piece nor the grid changes."""
        test = piece.clone()
        test.apply(action)
        test.compute_occupancy()
        for x, y, _ in test.cells():
            if self.is_occupied(x, y):
                return False
        return True

    # ---------- mutation ----------
    def bake_piece(self, piece: Piece) -> int:
        """Merge `piece` into the grid, clear the lines it completed, return how many."""
        for x, y, block in piece.cells():
            if self.in_bounds(x, y):
                self.grid[y][x] = block
        lines = self.check_lines(piece)
        return self.clear_lines(lines)

    def check_lines(self, piece: Optional[Piece] = None) -> List[int]:
        """Full rows, ascending. Only the rows `piece` spans are scanned when given."""
        if piece is not None:
            top, bottom = max(piece.y, 0), min(piece.y + BOX, self.height)
        else:
            top, bottom = 0, self.height
        if self.width == 0:
            return []
        return [y for y in range(top, bottom) if all(self.grid[y])]

    def clear_lines(self, lines: Iterable[int]) -> int:
        rows = sorted(set(lines))
        if not rows:
            return 0
        for y in reversed(rows):
            del self.grid[y]
        for _ in rows:
            self.grid.insert(0, [None] * self.width)
        self.invalidate()
        return len(rows)

    def resize(self, width: int, height: int):
        """Keep every cell still in range, pad with empty cells, drop the rest."""
        if width < 0 or height < 0:
            raise ValueError(f"board size must not be negative: {width}x{height}")
        grid = [row[:width] + [None] * (width - len(row)) for row in self.grid[:height]]
        grid.extend([None] * width for _ in range(height - len(grid)))
        self.grid = grid
        self.width = width
        self.height = height
        self.invalidate()

    # ---------- views ----------
    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.grid)

    def occupied_count(self) -> int:
        return sum(cell is not None for row in self.grid for cell in row)
