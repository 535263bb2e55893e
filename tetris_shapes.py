
"""Shape catalog: the 7 tetrominoes as 16-bit rotation masks over a 4x4 box"""
import random
from dataclasses import dataclass
from typing import Dict, Tuple

KINDS: Tuple[str, ...] = ("I", "J", "L", "O", "S", "T", "Z")

# BIT_WEIGHTS[row][col] is the mask bit for one cell of the 4x4 box.
# A shape mask is the sum of the weights of its cells.
BIT_WEIGHTS: Tuple[Tuple[int, ...], ...] = (
    (0x8000, 0x4000, 0x2000, 0x1000),
    (0x0800, 0x0400, 0x0200, 0x0100),
    (0x0080, 0x0040, 0x0020, 0x0010),
    (0x0008, 0x0004, 0x0002, 0x0001),
)


@dataclass(frozen=True)
class ShapeDefinition:
    kind: str
    size: int
    masks: Tuple[int, int, int, int]
    color: int


SHAPES: Dict[str, ShapeDefinition] = {
    "I": ShapeDefinition("I", 4, (0x0F00, 0x2222, 0x00F0, 0x4444), 0),
    "J": ShapeDefinition("J", 4, (0x44C0, 0x8E00, 0x6440, 0x0E20), 1),
    "L": ShapeDefinition("L", 3, (0x4460, 0x0E80, 0xC440, 0x2E00), 2),
    "O": ShapeDefinition("O", 2, (0xCC00, 0xCC00, 0xCC00, 0xCC00), 3),
    "S": ShapeDefinition("S", 3, (0x06C0, 0x8C40, 0x6C00, 0x4620), 4),
    "T": ShapeDefinition("T", 3, (0x0E40, 0x4C40, 0x4E00, 0x4640), 5),
    "Z": ShapeDefinition("Z", 3, (0x0C60, 0x4C80, 0xC600, 0x2640), 6),
}


def occupies_cell(row: int, col: int, mask: int) -> bool:
    return bool(BIT_WEIGHTS[row][col] & mask)


def definition_for(kind: str) -> ShapeDefinition:
    return SHAPES[kind]


def random_kind(source=random) -> str:
    """Pick a kind uniformly; `source` is anything with a random.Random-style choice()."""
    return source.choice(KINDS)


def validate_catalog(shapes: Dict[str, ShapeDefinition]):
    """Raise ValueError unless `shapes` holds exactly the 7 well-formed tetrominoes."""
    if set(shapes) != set(KINDS):
        raise ValueError(f"catalog kinds {sorted(shapes)} != {sorted(KINDS)}")
    for kind, d in shapes.items():
        if d.kind != kind:
            raise ValueError(f"{kind}: definition is labelled {d.kind!r}")
        if d.size not in (2, 3, 4):
            raise ValueError(f"{kind}: bad size {d.size}")
        if not 0 <= d.color < len(KINDS):
            raise ValueError(f"{kind}: bad color index {d.color}")
        if len(d.masks) != 4:
            raise ValueError(f"{kind}: needs 4 rotation masks, has {len(d.masks)}")
        for rot, mask in enumerate(d.masks):
            if not 0 <= mask <= 0xFFFF:
                raise ValueError(f"{kind}[{rot}]: mask {mask:#x} is not 16 bits")
            cells = [(r, c) for r in range(4) for c in range(4) if occupies_cell(r, c, mask)]
            if len(cells) != 4:
                raise ValueError(f"{kind}[{rot}]: mask {mask:#06x} has {len(cells)} cells")
            if any(r >= d.size or c >= d.size for r, c in cells):
                raise ValueError(f"{kind}[{rot}]: mask {mask:#06x} leaves its {d.size}x{d.size} box")


validate_catalog(SHAPES)
