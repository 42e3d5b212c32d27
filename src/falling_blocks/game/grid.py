from __future__ import annotations

import numpy as np

from .pieces import Shape


class GameGrid:
    """Fixed-size board for the falling pieces.

    The grid uses 0 for empty cells and ``PieceKind`` values for locked
    cells. Row 0 is the top. Rows above the board (negative y) are allowed
    for pieces in flight but are never stored.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def can_place(self, shape: Shape, x: int, y: int) -> bool:
        for dy, dx in np.argwhere(shape):
            col = x + int(dx)
            row = y + int(dy)
            if col < 0 or col >= self.width:
                return False
            if row >= self.height:
                return False
            if row < 0:
                continue
            if self.grid[row, col] != 0:
                return False
        return True

    def lock(self, shape: Shape, x: int, y: int, value: int) -> int:
        """Write the filled cells of ``shape`` at (x, y) and return how many
        were stored. Cells off the board are dropped."""
        written = 0
        for dy, dx in np.argwhere(shape):
            col = x + int(dx)
            row = y + int(dy)
            if not self.is_inside(col, row):
                continue
            self.grid[row, col] = value
            written += 1
        return written

    def clear_full_lines(self) -> int:
        # Scan bottom-up; after a removal the same index is tested again.
        lines = 0
        row = self.height - 1
        while row >= 0:
            if np.all(self.grid[row] != 0):
                remaining = np.delete(self.grid, row, axis=0)
                empty = np.zeros((1, self.width), dtype=self.grid.dtype)
                self.grid = np.vstack((empty, remaining))
                lines += 1
            else:
                row -= 1
        return lines

    def landing_y(self, shape: Shape, x: int, y: int) -> int:
        while self.can_place(shape, x, y + 1):
            y += 1
        return y

    def load(self, cells: np.ndarray) -> None:
        cells = np.asarray(cells)
        if cells.shape != (self.height, self.width):
            raise ValueError(
                f"board must be {self.height}x{self.width}, got {'x'.join(map(str, cells.shape))}"
            )
        self.grid = cells.astype(np.int8, copy=True)

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
