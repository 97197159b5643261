"""Falling-block puzzle engine with optional pygame front-end."""

from .board import Board, COLS, ROWS
from .tetromino import Piece, TetrominoType, rotate_shape
from .progression import Progression
from .game_state import EngineStatus, GameConfig, GameState, PieceFactory
from .clock import AsyncioDropClock, FrameDropClock
from .engine import GameEngine, Snapshot
from .utils import collides, drop_interval_ms, render_grid

__all__ = [
    "Board",
    "COLS",
    "ROWS",
    "Piece",
    "TetrominoType",
    "rotate_shape",
    "Progression",
    "EngineStatus",
    "GameConfig",
    "GameState",
    "PieceFactory",
    "AsyncioDropClock",
    "FrameDropClock",
    "GameEngine",
    "Snapshot",
    "collides",
    "drop_interval_ms",
    "render_grid",
]
