from __future__ import annotations

import random

import pytest

from blockfall.board import COLS
from blockfall.game_state import PieceFactory
from blockfall.tetromino import (
    COLOR_NAMES,
    PIECE_COLORS,
    TETROMINO_SHAPES,
    Piece,
    TetrominoType,
    color_name,
    normalize_shape,
    rotate_shape,
)


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_four_rotations_return_original_shape(kind: TetrominoType) -> None:
    shape = TETROMINO_SHAPES[kind]
    rotated = shape
    for _ in range(4):
        rotated = rotate_shape(rotated)
    assert rotated == normalize_shape(shape)


def test_rotation_is_clockwise_about_origin() -> None:
    t_shape = TETROMINO_SHAPES[TetrominoType.T]
    assert rotate_shape(t_shape) == ((0, 1), (1, 1), (0, 1))
    i_shape = TETROMINO_SHAPES[TetrominoType.I]
    assert rotate_shape(i_shape) == ((1,), (1,), (1,), (1,))


def test_ragged_rows_read_as_empty() -> None:
    l_shape = TETROMINO_SHAPES[TetrominoType.L]
    assert rotate_shape(l_shape) == ((1, 1), (0, 1), (0, 1))


def test_factory_spawns_table_pieces_at_spawn_anchor() -> None:
    factory = PieceFactory(random.Random(7))
    seen = set()
    for _ in range(200):
        piece = factory.spawn()
        seen.add(piece.kind)
        assert piece.shape == TETROMINO_SHAPES[piece.kind]
        assert piece.color == PIECE_COLORS[piece.kind]
        assert piece.anchor == (COLS // 2 - 1, 0)
    assert seen == set(TetrominoType)


def test_same_seed_gives_same_sequence() -> None:
    a = PieceFactory(random.Random(3))
    b = PieceFactory(random.Random(3))
    assert [a.spawn().kind for _ in range(20)] == [b.spawn().kind for _ in range(20)]


def test_color_follows_table_index() -> None:
    assert color_name(PIECE_COLORS[TetrominoType.I]) == "cyan"
    assert color_name(PIECE_COLORS[TetrominoType.T]) == "red"
    assert color_name(0) == ""
    assert len(COLOR_NAMES) == len(TetrominoType)


def test_piece_cells_are_absolute() -> None:
    piece = Piece.of(TetrominoType.S, x=3, y=5)
    assert sorted(piece.cells()) == [(3, 6), (4, 5), (4, 6), (5, 5)]
