import numpy as np
import pytest

from tetris_engine.game import (
    Piece,
    TetrominoType,
    color,
    is_valid_rotation,
    is_valid_type,
    rotate_clockwise,
    rotate_counter_clockwise,
    shape,
)


ALL_TYPES = list(TetrominoType)


def test_i_piece_is_a_row_then_a_column():
    horizontal = shape(TetrominoType.I, 0)
    assert horizontal[1].all()
    assert horizontal.sum() == 4

    vertical = shape(TetrominoType.I, 1)
    assert vertical[:, 2].all()
    assert vertical.sum() == 4


def test_o_piece_is_identical_in_every_rotation():
    base = shape(TetrominoType.O, 0)
    for rotation in range(4):
        assert np.array_equal(shape(TetrominoType.O, rotation), base)


@pytest.mark.parametrize("left, right", [(TetrominoType.S, TetrominoType.Z), (TetrominoType.J, TetrominoType.L)])
def test_mirror_pairs(left, right):
    a = shape(left, 0)[:, :3]
    b = shape(right, 0)[:, :3]
    assert np.array_equal(a, np.fliplr(b))


EXPECTED_ROTATIONS = {
    TetrominoType.I: [
        [[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 0, 1, 0], [0, 0, 1, 0], [0, 0, 1, 0], [0, 0, 1, 0]],
        [[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 0, 1, 0], [0, 0, 1, 0], [0, 0, 1, 0], [0, 0, 1, 0]],
    ],
    TetrominoType.O: [
        [[0, 1, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
    ] * 4,
    TetrominoType.T: [
        [[0, 1, 0, 0], [1, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 1, 0, 0], [0, 1, 1, 0], [0, 1, 0, 0], [0, 0, 0, 0]],
        [[0, 0, 0, 0], [1, 1, 1, 0], [0, 1, 0, 0], [0, 0, 0, 0]],
        [[0, 1, 0, 0], [1, 1, 0, 0], [0, 1, 0, 0], [0, 0, 0, 0]],
    ],
    TetrominoType.S: [
        [[0, 1, 1, 0], [1, 1, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 1, 0, 0], [0, 1, 1, 0], [0, 0, 1, 0], [0, 0, 0, 0]],
        [[0, 1, 1, 0], [1, 1, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 1, 0, 0], [0, 1, 1, 0], [0, 0, 1, 0], [0, 0, 0, 0]],
    ],
    TetrominoType.Z: [
        [[1, 1, 0, 0], [0, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 0, 1, 0], [0, 1, 1, 0], [0, 1, 0, 0], [0, 0, 0, 0]],
        [[1, 1, 0, 0], [0, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 0, 1, 0], [0, 1, 1, 0], [0, 1, 0, 0], [0, 0, 0, 0]],
    ],
    TetrominoType.J: [
        [[1, 0, 0, 0], [1, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 1, 1, 0], [0, 1, 0, 0], [0, 1, 0, 0], [0, 0, 0, 0]],
        [[0, 0, 0, 0], [1, 1, 1, 0], [0, 0, 1, 0], [0, 0, 0, 0]],
        [[0, 1, 0, 0], [0, 1, 0, 0], [1, 1, 0, 0], [0, 0, 0, 0]],
    ],
    TetrominoType.L: [
        [[0, 0, 1, 0], [1, 1, 1, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 1, 0], [0, 0, 0, 0]],
        [[0, 0, 0, 0], [1, 1, 1, 0], [1, 0, 0, 0], [0, 0, 0, 0]],
        [[1, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0], [0, 0, 0, 0]],
    ],
}


@pytest.mark.parametrize("kind", ALL_TYPES)
@pytest.mark.parametrize("rotation", range(4))
def test_rotation_bitmaps(kind, rotation):
    assert shape(kind, rotation).astype(int).tolist() == EXPECTED_ROTATIONS[kind][rotation]


@pytest.mark.parametrize("kind", [TetrominoType.I, TetrominoType.S, TetrominoType.Z])
def test_two_state_pieces_repeat(kind):
    assert np.array_equal(shape(kind, 2), shape(kind, 0))
    assert np.array_equal(shape(kind, 3), shape(kind, 1))


@pytest.mark.parametrize("kind", ALL_TYPES)
def test_every_rotation_has_four_cells(kind):
    for rotation in range(4):
        s = shape(kind, rotation)
        assert s.shape == (4, 4)
        assert int(s.sum()) == 4


def test_shapes_are_read_only():
    with pytest.raises(ValueError):
        shape(TetrominoType.T, 0)[0, 0] = True


@pytest.mark.parametrize(
    "kind, rotation",
    [(0, 0), (8, 0), (-1, 0), ("X", 0), (None, 0), (TetrominoType.I, 4), (TetrominoType.I, -1), (TetrominoType.O, None)],
)
def test_invalid_lookups_return_none(kind, rotation):
    assert shape(kind, rotation) is None


def test_colors():
    assert color(TetrominoType.I) == 1
    assert color(TetrominoType.L) == 7
    assert sorted(color(k) for k in ALL_TYPES) == list(range(1, 8))
    assert color(99) is None
    assert color(None) is None


def test_validity_predicates():
    assert is_valid_type(TetrominoType.Z)
    assert is_valid_type(3)
    assert not is_valid_type(0)
    assert not is_valid_type(True)
    assert is_valid_rotation(3)
    assert not is_valid_rotation(4)
    assert not is_valid_rotation(1.0)


def test_rotation_index_arithmetic():
    assert rotate_clockwise(3) == 0
    assert rotate_counter_clockwise(0) == 3
    for start in range(4):
        r = start
        for _ in range(4):
            r = rotate_clockwise(r)
        assert r == start
        for _ in range(4):
            r = rotate_counter_clockwise(r)
        assert r == start


def test_create_uses_spawn_anchor_for_every_type():
    for kind in ALL_TYPES:
        piece = Piece.create(kind)
        assert (piece.x, piece.y, piece.rotation) == (3, 0, 0)


def test_moved_never_checks_bounds():
    piece = Piece.create(TetrominoType.I)
    far = piece.moved(-100, 50)
    assert (far.x, far.y) == (-97, 50)
    assert (piece.x, piece.y) == (3, 0)


def test_rotated_returns_new_piece():
    piece = Piece.create(TetrominoType.J)
    assert piece.rotated(True).rotation == 1
    assert piece.rotated(False).rotation == 3
    assert piece.rotation == 0


def test_cells_are_absolute_coordinates():
    piece = Piece.create(TetrominoType.I)
    assert piece.cells() == [(3, 1), (4, 1), (5, 1), (6, 1)]
    assert Piece(kind=42).cells() == []
