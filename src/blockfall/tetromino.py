"""Tetromino definitions and basic behaviour.

Shapes are stored as small matrices of ``0``/``1`` rows.  The canonical table
keeps the compact spawn orientation, so some shapes have ragged rows such as
``((1, 1, 1), (1,))``; a missing trailing cell simply reads as empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

Shape = Tuple[Tuple[int, ...], ...]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes, in table order."""

    I = "I"
    L = "L"
    J = "J"
    O = "O"
    Z = "Z"
    S = "S"
    T = "T"


# Shape ``i`` is always paired with color ``i``.
TETROMINO_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: ((1, 1, 1, 1),),
    TetrominoType.L: ((1, 1, 1), (1,)),
    TetrominoType.J: ((1, 1, 1), (0, 0, 1)),
    TetrominoType.O: ((1, 1), (1, 1)),
    TetrominoType.Z: ((1, 1, 0), (0, 1, 1)),
    TetrominoType.S: ((0, 1, 1), (1, 1)),
    TetrominoType.T: ((1, 1, 1), (0, 1)),
}

COLOR_NAMES: Tuple[str, ...] = (
    "cyan",
    "blue",
    "orange",
    "yellow",
    "green",
    "purple",
    "red",
)

# Mapping from ``TetrominoType`` to the color id stored in the grid.  ``0`` is
# reserved for empty cells.
PIECE_COLORS: Dict[TetrominoType, int] = {t: i + 1 for i, t in enumerate(TetrominoType)}


def color_name(color: int) -> str:
    """Return the display name for a grid color id (``""`` for empty)."""

    if color == 0:
        return ""
    return COLOR_NAMES[color - 1]


def _cell(shape: Shape, row: int, col: int) -> int:
    line = shape[row]
    return line[col] if col < len(line) else 0


def rotate_shape(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    The matrix is transposed and its rows reversed, i.e. the rotation pivots
    on the local origin rather than the piece centre.  The result has one row
    per cell of the first input row and is always rectangular; gaps of a
    ragged input become ``0``.
    """

    return tuple(
        tuple(_cell(shape, row, col) for row in reversed(range(len(shape))))
        for col in range(len(shape[0]))
    )


def normalize_shape(shape: Shape) -> Shape:
    """Pad ragged rows with ``0`` so every row has the same width."""

    width = max(len(row) for row in shape)
    return tuple(tuple(row) + (0,) * (width - len(row)) for row in shape)


def shape_offsets(shape: Shape) -> List[Tuple[int, int]]:
    """Return ``(row, col)`` offsets of the occupied cells of ``shape``."""

    return [
        (i, j)
        for i, row in enumerate(shape)
        for j, value in enumerate(row)
        if value
    ]


@dataclass
class Piece:
    """Active falling piece.

    ``x``/``y`` is the anchor: the grid column and row of the shape's local
    ``(0, 0)`` cell.
    """

    kind: TetrominoType
    shape: Shape
    color: int
    x: int = 0
    y: int = 0

    @classmethod
    def of(cls, kind: TetrominoType, x: int = 0, y: int = 0) -> "Piece":
        return cls(kind, TETROMINO_SHAPES[kind], PIECE_COLORS[kind], x, y)

    @property
    def anchor(self) -> Tuple[int, int]:
        return self.x, self.y

    def cells(self) -> List[Tuple[int, int]]:
        """Return the absolute ``(x, y)`` coordinates of this piece's cells."""

        return [(self.x + j, self.y + i) for i, j in shape_offsets(self.shape)]
