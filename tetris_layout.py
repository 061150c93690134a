"""Window geometry for a given grid size and cell size"""
from dataclasses import dataclass
from typing import Tuple

from tetris_config import CONFIG

MARGIN = 16
PANEL_W = 200
# panel text and preview need this much height even on short boards
PANEL_MIN_H = 420


@dataclass
class Dims:
    cell: int
    board_x: int
    board_y: int
    board_w: int
    board_h: int
    panel_x: int
    panel_h: int
    preview_cell: int
    preview_x: int
    preview_y: int
    total_w: int
    total_h: int

    @property
    def margin(self) -> int:
        return MARGIN

    @property
    def panel_w(self) -> int:
        return PANEL_W

    @property
    def panel_y(self) -> int:
        return self.board_y

    @property
    def preview_size(self) -> int:
        # the I piece needs a 4x4 box
        return self.preview_cell * 4

    def cell_origin(self, bx: int, by: int) -> Tuple[int, int]:
        """Top-left pixel of board cell (bx, by)."""
        return self.board_x + bx * self.cell, self.board_y + by * self.cell


def compute_dims(config=CONFIG) -> Dims:
    cell = int(config["CELL_SIZE"])
    board_w = config["COLS"] * cell
    board_h = config["ROWS"] * cell
    panel_x = MARGIN + board_w + MARGIN
    panel_h = max(board_h, PANEL_MIN_H)
    return Dims(
        cell=cell,
        board_x=MARGIN, board_y=MARGIN,
        board_w=board_w, board_h=board_h,
        panel_x=panel_x, panel_h=panel_h,
        preview_cell=max(14, int(cell * 0.66)),
        preview_x=panel_x + 12, preview_y=MARGIN + 150,
        total_w=panel_x + PANEL_W + MARGIN,
        total_h=MARGIN + panel_h + MARGIN,
    )
