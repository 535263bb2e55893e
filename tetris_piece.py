
"""Piece model: rotation, translation, lazily built 4x4 occupancy"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple
from tetris_shapes import ShapeDefinition, definition_for, occupies_cell

LEFT, RIGHT, DOWN, ROTATE = "left", "right", "down", "rotate"
# Starts the game or toggles pause; never reaches a piece
CONFIRM = "confirm"

ACTIONS = (ROTATE, LEFT, RIGHT, DOWN, CONFIRM)

MOVES = {
    LEFT: (-1, 0),
    RIGHT: (1, 0),
    DOWN: (0, 1),
}

BOX = 4


@dataclass(frozen=True)
class Block:
    """An occupied cell; `color` indexes the current difficulty's palette."""
    color: int


# None is an empty cell
Cell = Optional[Block]
Occupancy = List[List[Cell]]


@dataclass
class Piece:
    shape: ShapeDefinition
    rotation: int = 0
    x: int = 0
    y: int = 0
    _occupancy: Optional[Occupancy] = field(default=None, repr=False, compare=False)

    @staticmethod
    def spawn(kind: str) -> "Piece":
        return Piece(definition_for(kind))

    @property
    def kind(self) -> str:
        return self.shape.kind

    @property
    def mask(self) -> int:
        return self.shape.masks[self.rotation]

    @property
    def occupancy(self) -> Occupancy:
        if self._occupancy is None:
            self.compute_occupancy()
        return self._occupancy

    def compute_occupancy(self) -> Occupancy:
        block = Block(self.shape.color)
        mask = self.mask
        self._occupancy = [
            [block if occupies_cell(row, col, mask) else None for col in range(BOX)]
            for row in range(BOX)
        ]
        return self._occupancy

    def rotate(self):
        self.rotation = (self.rotation + 1) % 4
        self._occupancy = None

    def translate(self, direction: str):
        try:
            dx, dy = MOVES[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
        self.x += dx
        self.y += dy

    def apply(self, action: str):
        if action == ROTATE:
            self.rotate()
        else:
            self.translate(action)

    def clone(self) -> "Piece":
        return Piece(self.shape, self.rotation, self.x, self.y)

    def cells(self) -> Iterator[Tuple[int, int, Block]]:
        """Board coordinates and block of every occupied cell."""
        for row, line in enumerate(self.occupancy):
            for col, cell in enumerate(line):
                if cell is not None:
                    yield self.x + col, self.y + row, cell

    def place_at_spawn(self, board_width: int):
        # ceil((width - size) / 2): an odd gap leans right
        self.x = -(-(board_width - self.shape.size) // 2)
        self.y = 0
