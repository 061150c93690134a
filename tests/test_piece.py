import pytest

from tetris_piece import KINDS, NAMES, SHAPES, Piece, create_piece, rotate_cw
from tetris_rng import UniformRandom
from conftest import ScriptedRandom


def test_seven_kinds_with_own_fill_value():
    assert KINDS == [1, 2, 3, 4, 5, 6, 7]
    for kind, shape in SHAPES.items():
        values = {v for row in shape for v in row}
        assert values - {0} == {kind}
        assert sum(1 for row in shape for v in row if v) == 4


@pytest.mark.parametrize("kind", KINDS)
def test_shapes_are_square(kind):
    shape = SHAPES[kind]
    assert all(len(row) == len(shape) for row in shape)
    assert len(shape) == (2 if NAMES[kind] == "O" else 4 if NAMES[kind] == "I" else 3)


@pytest.mark.parametrize("kind", KINDS)
def test_four_rotations_return_original(kind):
    shape = SHAPES[kind]
    m = shape
    for _ in range(4):
        m = rotate_cw(m)
        assert len(m) == len(shape) and len(m[0]) == len(shape[0])
    assert m == shape


def test_rotate_is_clockwise():
    assert rotate_cw(SHAPES[6]) == [[0, 6, 0], [0, 6, 6], [0, 6, 0]]
    assert rotate_cw(SHAPES[1]) == [[0, 0, 1, 0]] * 4


def test_piece_of_copies_shape():
    p = Piece.of(4)
    p.shape[0][0] = 0
    assert SHAPES[4][0][0] == 4


def test_cells_are_offset_by_position():
    p = Piece.of(4)
    p.x, p.y = 3, -1
    assert sorted(p.cells()) == [(3, -1), (3, 0), (4, -1), (4, 0)]


def test_create_piece_uses_rng():
    rng = ScriptedRandom([2, 7])
    assert create_piece(rng).kind == 2
    assert create_piece(rng).name == "Z"


def test_uniform_random_is_reproducible_and_covers_all_kinds():
    a, b = UniformRandom(seed=7), UniformRandom(seed=7)
    seq = [a.next_kind() for _ in range(500)]
    assert seq == [b.next_kind() for _ in range(500)]
    assert set(seq) == set(KINDS)
