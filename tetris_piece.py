"""Piece model, shapes, rotation"""
from dataclasses import dataclass
from typing import Dict, List

# Shape cells carry the piece's kind id (1..7); 0 means no block.
# Square boxes keep every rotation inside the same bounding box.
SHAPES: Dict[int, List[List[int]]] = {
    1: [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],  # I
    2: [[2,0,0],[2,2,2],[0,0,0]],                  # J
    3: [[0,0,3],[3,3,3],[0,0,0]],                  # L
    4: [[4,4],[4,4]],                              # O
    5: [[0,5,5],[5,5,0],[0,0,0]],                  # S
    6: [[0,6,0],[6,6,6],[0,0,0]],                  # T
    7: [[7,7,0],[0,7,7],[0,0,0]],                  # Z
}

NAMES: Dict[int, str] = {1: "I", 2: "J", 3: "L", 4: "O", 5: "S", 6: "T", 7: "Z"}
KINDS = sorted(SHAPES)


def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]


@dataclass
class Piece:
    kind: int
    shape: List[List[int]]
    x: int = 0
    y: int = 0

    @property
    def name(self) -> str:
        return NAMES[self.kind]

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @staticmethod
    def of(kind: int) -> "Piece":
        return Piece(kind, [r[:] for r in SHAPES[kind]])

    def cells(self):
        """Yield board coordinates of every occupied cell."""
        for y, row in enumerate(self.shape):
            for x, v in enumerate(row):
                if v:
                    yield self.x + x, self.y + y


def create_piece(rng) -> Piece:
    """Draw a fresh piece from rng (anything with next_kind())."""
    return Piece.of(rng.next_kind())
