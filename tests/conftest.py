from __future__ import annotations

import itertools
from typing import Callable, List, Optional

import pytest

from blockfall.engine import GameEngine
from blockfall.game_state import PieceFactory
from blockfall.tetromino import TetrominoType


class SequenceFactory(PieceFactory):
    """Factory that cycles through a fixed list of piece types."""

    def __init__(self, kinds: List[TetrominoType]) -> None:
        super().__init__()
        self._kinds = itertools.cycle(kinds)

    def _random_type(self) -> TetrominoType:
        return next(self._kinds)


class RecordingClock:
    """Drop clock fake that records calls and fires ticks on demand."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.interval_ms: Optional[float] = None
        self._callback: Optional[Callable[[], None]] = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: float, callback: Callable[[], None]) -> None:
        self.calls.append(("start", interval_ms))
        self.interval_ms = interval_ms
        self._callback = callback

    def reschedule(self, interval_ms: float) -> None:
        self.calls.append(("reschedule", interval_ms))
        self.interval_ms = interval_ms

    def cancel(self) -> None:
        self.calls.append(("cancel",))
        self._callback = None

    def fire(self) -> None:
        assert self._callback is not None
        self._callback()


@pytest.fixture
def clock() -> RecordingClock:
    return RecordingClock()


@pytest.fixture
def make_engine(clock: RecordingClock) -> Callable[..., GameEngine]:
    def _make(*kinds: TetrominoType) -> GameEngine:
        return GameEngine(clock=clock, factory=SequenceFactory(list(kinds)))

    return _make


def drop_until_locked(engine: GameEngine, limit: int = 40) -> int:
    """Soft-drop until a new piece spawns; return the number of moves."""

    pieces = engine.state.pieces
    for moves in range(1, limit + 1):
        engine.move_down()
        if engine.state.pieces != pieces:
            return moves
    raise AssertionError("piece never locked")


@pytest.fixture
def drop() -> Callable[..., int]:
    return drop_until_locked
