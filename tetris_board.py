"""Board helpers: collide, merge, sweep, compact, ghost"""
from typing import List

from tetris_piece import Piece

# Cell value 0 is empty; 1..7 is the kind id of the piece that left the
# block there, which also indexes the color table.
Board = List[List[int]]


def new_board(cols: int, rows: int) -> Board:
    return [[0] * cols for _ in range(rows)]


def collide(board: Board, shape, px: int, py: int) -> bool:
    """True if shape at (px, py) hits a wall, the floor or a settled block.

    Cells above the top edge only collide with the side walls.
    """
    rows, cols = len(board), len(board[0])
    for y, row in enumerate(shape):
        for x, v in enumerate(row):
            if not v: continue
            bx, by = px + x, py + y
            if bx < 0 or bx >= cols or by >= rows: return True
            if by >= 0 and board[by][bx]: return True
    return False


def merge(board: Board, piece: Piece):
    """Write the piece into the board; cells above the top are dropped."""
    for y, r in enumerate(piece.shape):
        for x, v in enumerate(r):
            if v:
                by = piece.y + y
                if by >= 0: board[by][piece.x + x] = v


def sweep(board: Board) -> int:
    """Remove full rows and return how many were cleared."""
    c = 0; y = len(board) - 1
    cols = len(board[0])
    while y >= 0:
        if all(board[y]):
            del board[y]; board.insert(0, [0] * cols); c += 1
            # same index again: the row above just moved into it
        else: y -= 1
    return c


def compact(board: Board) -> int:
    """Let every unsupported block fall cell by cell until nothing moves.

    Works per cell rather than per piece, so blocks of one piece can split
    apart. Returns the total number of single-row moves made.
    """
    rows, cols = len(board), len(board[0])
    moved = 0
    while True:
        fell = 0
        for y in range(rows - 2, -1, -1):
            for x in range(cols):
                if board[y][x] and not board[y + 1][x]:
                    board[y + 1][x] = board[y][x]
                    board[y][x] = 0
                    fell += 1
        if not fell:
            return moved
        moved += fell


def ghost_y(board: Board, piece: Piece) -> int:
    """Return the y position where the piece would land if hard-dropped."""
    y = piece.y
    while not collide(board, piece.shape, piece.x, y + 1):
        y += 1
    return y
