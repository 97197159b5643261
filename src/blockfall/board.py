"""Board representation for the playfield."""

from __future__ import annotations

from typing import List

import numpy as np
from numpy.typing import NDArray

from .tetromino import Piece


# Dimensions of the standard board.
COLS = 10
ROWS = 20

EMPTY = 0

Grid = NDArray[np.uint8]


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((ROWS, COLS), dtype=np.uint8)


class Board:
    """Fixed-size grid of cells, each empty (``0``) or holding a color id."""

    width: int = COLS
    height: int = ROWS

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at column ``x``, row ``y`` is taken.

        Any coordinates outside the board are treated as occupied so that
        off-board positions are rejected by collision checks.
        """

        if self._in_bounds(x, y):
            return bool(self.grid[y, x] != EMPTY)
        return True

    def get_occupant(self, x: int, y: int) -> int:
        """Return the color id at ``(x, y)`` or ``0`` when empty.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self._in_bounds(x, y):
            return int(self.grid[y, x])
        raise IndexError("Cell out of bounds")

    def set_occupant(self, x: int, y: int, color: int) -> None:
        """Write ``color`` into the cell at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self._in_bounds(x, y):
            self.grid[y, x] = np.uint8(color)
        else:
            raise IndexError("Cell out of bounds")

    def clear_occupant(self, x: int, y: int) -> None:
        self.set_occupant(x, y, EMPTY)

    def is_row_full(self, row: int) -> bool:
        if not 0 <= row < self.height:
            raise IndexError("Row out of bounds")
        return bool(np.all(self.grid[row] != EMPTY))

    def clear_row_shift_down(self, row: int) -> None:
        """Remove ``row`` and shift every row above it down by one.

        Row ``0`` is empty afterwards.
        """

        if not 0 <= row < self.height:
            raise IndexError("Row out of bounds")
        self.grid[1 : row + 1] = self.grid[0:row].copy()
        self.grid[0] = EMPTY

    def clear_full_rows(self) -> int:
        """Clear completed rows one at a time and return how many were removed.

        Rows are scanned from the bottom up.  After a clear the same index is
        tested again, since the row above has just shifted into it.
        """

        cleared = 0
        row = self.height - 1
        while row >= 0:
            if self.is_row_full(row):
                self.clear_row_shift_down(row)
                cleared += 1
            else:
                row -= 1
        return cleared

    def lock_piece(self, piece: Piece) -> None:
        """Lock the piece's cells into the board with its color.

        Cells still above the top edge are dropped.
        """

        for x, y in piece.cells():
            if y >= 0:
                self.set_occupant(x, y, piece.color)

    def cells(self) -> List[List[int]]:
        """Return a plain copy of the grid, row-major."""

        return self.grid.tolist()
