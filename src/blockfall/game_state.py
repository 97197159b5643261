"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import random

from .board import COLS, Board
from .progression import Progression
from .tetromino import Piece, TetrominoType
from .utils import MIN_DROP_INTERVAL_MS


SPAWN_X = COLS // 2 - 1
SPAWN_Y = 0


class EngineStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    """Per-game options.

    ``seed`` makes the piece sequence reproducible; ``min_drop_interval_ms``
    is the floor applied to the speed curve at high levels.
    """

    seed: Optional[int] = None
    min_drop_interval_ms: int = MIN_DROP_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.min_drop_interval_ms < 1:
            raise ValueError("min_drop_interval_ms must be at least 1")


class PieceFactory:
    """Produce randomly chosen pieces at the spawn anchor."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def _random_type(self) -> TetrominoType:
        """Return a random tetromino type, uniformly over the table."""

        return self.rng.choice(list(TetrominoType))

    def spawn(self) -> Piece:
        return Piece.of(self._random_type(), SPAWN_X, SPAWN_Y)


@dataclass
class GameState:
    """Mutable state for a game session: grid, falling piece and counters."""

    board: Board = field(default_factory=Board)
    active: Optional[Piece] = None
    progression: Progression = field(default_factory=Progression)
    status: EngineStatus = EngineStatus.IDLE
    pieces: int = 0

    @classmethod
    def from_config(cls, config: GameConfig) -> "GameState":
        return cls(progression=Progression(min_drop_interval_ms=config.min_drop_interval_ms))
