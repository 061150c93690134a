from tetris_board import collide, compact, ghost_y, merge, new_board, sweep
from tetris_piece import SHAPES, Piece
from conftest import count_blocks, fill_row

T = SHAPES[6]
I = SHAPES[1]


def test_new_board_dimensions():
    b = new_board(10, 20)
    assert len(b) == 20 and all(len(r) == 10 for r in b)
    assert count_blocks(b) == 0


def test_collide_walls_and_floor():
    b = new_board(10, 20)
    assert not collide(b, T, 0, 0)
    assert collide(b, T, -1, 0)
    assert not collide(b, T, 7, 0)
    assert collide(b, T, 8, 0)
    assert not collide(b, I, 0, 18)
    assert collide(b, I, 0, 19)


def test_collide_with_settled_blocks():
    b = new_board(10, 20)
    b[1][4] = 3
    assert collide(b, T, 3, 0)
    assert not collide(b, T, 5, 0)


def test_cells_above_top_ignore_board_but_not_walls():
    b = new_board(10, 20)
    fill_row(b, 0)
    assert not collide(b, T, 3, -2)
    assert collide(b, T, 3, -1)
    assert collide(b, T, -1, -2)


def test_collide_matches_cell_rule_everywhere():
    b = new_board(10, 20)
    b[19][0] = b[10][5] = b[0][9] = 1
    for kind in (1, 4, 6):
        p = Piece.of(kind)
        for x in range(-4, 12):
            for y in range(-4, 22):
                p.x, p.y = x, y
                expected = any(
                    bx < 0 or bx >= 10 or by >= 20 or (by >= 0 and b[by][bx])
                    for bx, by in p.cells()
                )
                assert collide(b, p.shape, x, y) == expected


def test_merge_writes_kind_and_drops_cells_above_top():
    b = new_board(10, 20)
    p = Piece.of(6)
    p.x, p.y = 0, -1
    merge(b, p)
    assert b[0][:3] == [6, 6, 6]
    assert count_blocks(b) == 3


def test_sweep_non_adjacent_rows():
    b = new_board(10, 20)
    fill_row(b, 19)
    b[18][0] = 2
    fill_row(b, 17)
    b[16][1] = 3
    assert sweep(b) == 2
    assert b[19][0] == 2
    assert b[18][1] == 3
    assert count_blocks(b) == 2
    assert not any(b[0]) and not any(b[1])
    assert len(b) == 20 and all(len(r) == 10 for r in b)


def test_sweep_preserves_blocks_outside_cleared_rows():
    b = new_board(10, 20)
    for y in (12, 15, 19):
        fill_row(b, y, gaps=(y % 10,))
    fill_row(b, 18)
    fill_row(b, 14)
    before = count_blocks(b) - 20
    assert sweep(b) == 2
    assert count_blocks(b) == before


def test_sweep_nothing_to_clear():
    b = new_board(10, 20)
    fill_row(b, 19, gaps=(3,))
    assert sweep(b) == 0
    assert b[19][3] == 0


def test_compact_drops_cells_independently():
    b = new_board(10, 20)
    b[10][0] = 1
    b[12][0] = 2
    b[15][3] = 5
    fill_row(b, 19, gaps=(0, 3))
    assert compact(b) == 7 + 8 + 4
    assert b[19][0] == 2 and b[18][0] == 1
    assert b[19][3] == 5
    assert count_blocks(b) == 11


def test_compact_is_idempotent():
    b = new_board(10, 20)
    b[3][2] = b[7][2] = b[7][3] = b[0][9] = 4
    compact(b)
    snapshot = [r[:] for r in b]
    assert compact(b) == 0
    assert b == snapshot


def test_ghost_y():
    b = new_board(10, 20)
    p = Piece.of(4)
    p.x = 4
    assert ghost_y(b, p) == 18
    b[10][5] = 1
    assert ghost_y(b, p) == 8
