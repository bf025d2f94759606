from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np


Coordinate = Tuple[int, int]

EMPTY = 0
MAX_CELL_VALUE = 7


class GameGrid:
    """Discrete 2D playfield.

    The grid uses 0 for empty cells and the color tag (1..7) of the piece that
    locked there for filled cells. Row 0 is the top of the board.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> int:
        # Out-of-range reads report an empty cell.
        if not self.is_in_bounds(x, y):
            return EMPTY
        return int(self.grid[y, x])

    def set_cell(self, x: int, y: int, value: int) -> None:
        if not self.is_in_bounds(x, y):
            return
        if not EMPTY <= int(value) <= MAX_CELL_VALUE:
            return
        self.grid[y, x] = value

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        for x, y in cells:
            if not self.is_in_bounds(x, y):
                return False
            if self.grid[y, x] != EMPTY:
                return False
        return True

    def is_row_full(self, row: int) -> bool:
        if not 0 <= row < self.height:
            return False
        return bool(np.all(self.grid[row] != EMPTY))

    def clear_full_rows(self) -> int:
        """Remove every full row and compact the rest downward.

        Single bottom-to-top pass: surviving rows are copied to the lowest free
        write row in their original order, then the rows left over at the top
        are zero-filled. Returns the number of rows removed.
        """
        cleared = 0
        write_row = self.height - 1
        for read_row in range(self.height - 1, -1, -1):
            if self.is_row_full(read_row):
                cleared += 1
                continue
            if write_row != read_row:
                self.grid[write_row] = self.grid[read_row]
            write_row -= 1
        if cleared:
            self.grid[: write_row + 1] = EMPTY
        return cleared

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def rows_as_lists(self) -> List[List[int]]:
        return self.grid.astype(int).tolist()
