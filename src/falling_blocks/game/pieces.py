from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

import numpy as np


class PieceKind(IntEnum):
    """Tetromino kinds. Grid cells store these values; 0 means empty."""

    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7

    @classmethod
    def from_letter(cls, letter: str) -> "PieceKind":
        return cls[letter]


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


# Rotation-0 shapes. Read-only; callers go through get_shape().
BASE_SHAPES = {
    PieceKind.I: _frozen([[1, 1, 1, 1]]),
    PieceKind.J: _frozen([[1, 0, 0], [1, 1, 1]]),
    PieceKind.L: _frozen([[0, 0, 1], [1, 1, 1]]),
    PieceKind.O: _frozen([[1, 1], [1, 1]]),
    PieceKind.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    PieceKind.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    PieceKind.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
}

# Horizontal offsets tried, in order, after a rotation.
ROTATION_KICKS: Tuple[int, ...] = (0, -1, 1, -2, 2)


def get_shape(kind: PieceKind) -> Shape:
    return BASE_SHAPES[PieceKind(kind)].copy()


def rotate_cw(shape: Shape) -> Shape:
    """Rotate 90 degrees clockwise: an RxC shape becomes CxR with
    ``result[c, R - 1 - r] == shape[r, c]``."""
    return np.rot90(shape, k=-1).copy()


@dataclass
class ActivePiece:
    kind: PieceKind
    shape: Shape
    x: int
    y: int

    @classmethod
    def spawn(cls, kind: PieceKind, board_width: int, y: int) -> "ActivePiece":
        shape = get_shape(kind)
        _, w = shape.shape
        return cls(kind=PieceKind(kind), shape=shape, x=(board_width - w) // 2, y=y)

    def copy(self) -> "ActivePiece":
        return ActivePiece(self.kind, np.array(self.shape, dtype=np.int8), int(self.x), int(self.y))

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        cells: List[Tuple[int, int]] = []
        for dy, dx in np.argwhere(self.shape):
            cells.append((origin_x + int(dx), origin_y + int(dy)))
        return cells

    def cells(self) -> List[Tuple[int, int]]:
        return self.cells_at(self.x, self.y)
