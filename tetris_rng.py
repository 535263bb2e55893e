
"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_shapes import KINDS, random_kind


class PieceRandom:
    """Every kind equally likely on every draw: no bag, no repeat rejection.

    Pass a seed to replay the same sequence; None seeds from OS entropy.
    """
    PIECES = KINDS

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return random_kind(self._rng)
