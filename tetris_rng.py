"""Piece randomizer module"""
import random
from typing import Optional

from tetris_piece import KINDS


class UniformRandom:
    """Uniform pick among the seven kinds on every call.

    No bag and no repeat rejection, so the same kind can come up several
    times in a row. Pass a seed for a reproducible sequence.
    """
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_kind(self) -> int:
        return self._rng.choice(KINDS)
