import numpy as np

from falling_blocks.game import ActivePiece, PieceKind, get_shape, rotate_cw
from falling_blocks.game.pieces import BASE_SHAPES


def test_every_kind_has_four_cells():
    for kind in PieceKind:
        assert int(np.sum(get_shape(kind))) == 4


def test_get_shape_returns_fresh_copy():
    shape = get_shape(PieceKind.T)
    shape[0, 0] = 1
    assert BASE_SHAPES[PieceKind.T][0, 0] == 0
    assert get_shape(PieceKind.T)[0, 0] == 0


def test_canonical_shapes_are_read_only():
    assert not BASE_SHAPES[PieceKind.I].flags.writeable


def test_rotate_cw_maps_cells_clockwise():
    src = np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8)  # J
    out = rotate_cw(src)
    rows, cols = src.shape
    assert out.shape == (cols, rows)
    for r in range(rows):
        for c in range(cols):
            assert out[c, rows - 1 - r] == src[r, c]
    assert out.tolist() == [[1, 1], [1, 0], [1, 0]]


def test_rotate_cw_four_times_is_identity():
    shape = get_shape(PieceKind.L)
    out = shape
    for _ in range(4):
        out = rotate_cw(out)
    assert np.array_equal(out, shape)


def test_rotate_cw_does_not_alias_source():
    shape = get_shape(PieceKind.I)
    out = rotate_cw(shape)
    out[0, 0] = 0
    assert shape[0, 0] == 1


def test_spawn_centers_piece():
    p = ActivePiece.spawn(PieceKind.I, board_width=10, y=-1)
    assert (p.x, p.y) == (3, -1)
    p = ActivePiece.spawn(PieceKind.O, board_width=10, y=-1)
    assert p.x == 4
    p = ActivePiece.spawn(PieceKind.T, board_width=10, y=-1)
    assert p.x == 3


def test_copy_is_independent():
    p = ActivePiece.spawn(PieceKind.S, board_width=10, y=0)
    q = p.copy()
    q.shape[0, 0] = 1
    q.x += 2
    assert p.shape[0, 0] == 0
    assert p.x == 3


def test_from_letter():
    assert PieceKind.from_letter("Z") is PieceKind.Z
