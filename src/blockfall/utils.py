"""Utility helpers for the engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board
from .tetromino import Piece, Shape, shape_offsets


BASE_DROP_INTERVAL_MS = 1000
DROP_INTERVAL_STEP_MS = 100
MIN_DROP_INTERVAL_MS = 100


def drop_interval_ms(level: int, minimum: int = MIN_DROP_INTERVAL_MS) -> int:
    """Return the fall interval in milliseconds for ``level``.

    Level ``1`` falls once per second and every further level is 100ms
    faster.  Past level 10 the raw curve would reach zero or go negative, so
    the result is clamped to ``minimum``.
    """

    interval = BASE_DROP_INTERVAL_MS - (level - 1) * DROP_INTERVAL_STEP_MS
    return max(minimum, interval)


def collides(shape: Shape, x: int, y: int, board: Board) -> bool:
    """Return ``True`` if ``shape`` anchored at ``(x, y)`` overlaps ``board``.

    Cells left of column ``0``, right of the last column or below the last
    row collide.  Cells above the top edge (``y < 0``) are only checked
    against the side walls, which lets a piece hang partly above the grid.
    Both movement and rotation candidates are validated with this function
    before they are applied.
    """

    for i, j in shape_offsets(shape):
        cx = x + j
        cy = y + i
        if cx < 0 or cx >= board.width or cy >= board.height:
            return True
        if cy >= 0 and board.is_occupied(cx, cy):
            return True
    return False


def render_grid(board: Board, active: Optional[Piece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece).  Cells covered by the active piece receive its color id.
    """

    grid = board.cells()
    if active is not None:
        for x, y in active.cells():
            if 0 <= y < board.height and 0 <= x < board.width:
                grid[y][x] = active.color
    return grid
