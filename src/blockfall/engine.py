"""Game engine: commands, state machine and change notifications.

The engine owns a :class:`~blockfall.game_state.GameState` and mutates it only
from command methods.  Every command validates a candidate position or shape
with :func:`~blockfall.utils.collides` first and commits it only when valid,
so listeners never observe a piece overlapping the grid.  Gravity is driven by
a drop clock which calls :meth:`GameEngine.move_down`; the engine itself never
blocks or sleeps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import logging
import random

from .board import Board
from .clock import DropClock, FrameDropClock
from .game_state import EngineStatus, GameConfig, GameState, PieceFactory
from .tetromino import rotate_shape
from .utils import collides


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the engine handed to renderers."""

    cells: Tuple[Tuple[int, ...], ...]
    piece_cells: Tuple[Tuple[int, int], ...]
    piece_color: int
    score: int
    level: int
    drop_interval_ms: int
    status: EngineStatus


ChangeListener = Callable[[Snapshot], None]
GameOverListener = Callable[[int], None]


class GameEngine:
    """Orchestrate board, falling piece and progression for one game."""

    def __init__(
        self,
        *,
        clock: Optional[DropClock] = None,
        config: Optional[GameConfig] = None,
        factory: Optional[PieceFactory] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.state = GameState.from_config(self.config)
        self.factory = factory or PieceFactory(random.Random(self.config.seed))
        self.clock: DropClock = clock if clock is not None else FrameDropClock()
        self._change_listeners: List[ChangeListener] = []
        self._game_over_listeners: List[GameOverListener] = []

    # State queries ----------------------------------------------------
    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def status(self) -> EngineStatus:
        return self.state.status

    @property
    def score(self) -> int:
        return self.state.progression.score

    @property
    def level(self) -> int:
        return self.state.progression.level

    @property
    def drop_interval_ms(self) -> int:
        return self.state.progression.drop_interval_ms

    @property
    def piece_color(self) -> int:
        return self.state.active.color if self.state.active else 0

    def grid_cells(self) -> List[List[int]]:
        return self.state.board.cells()

    def piece_cells(self) -> List[Tuple[int, int]]:
        """Return the absolute ``(x, y)`` cells of the falling piece."""

        return self.state.active.cells() if self.state.active else []

    def snapshot(self) -> Snapshot:
        return Snapshot(
            cells=tuple(tuple(row) for row in self.grid_cells()),
            piece_cells=tuple(self.piece_cells()),
            piece_color=self.piece_color,
            score=self.score,
            level=self.level,
            drop_interval_ms=self.drop_interval_ms,
            status=self.status,
        )

    # Notifications ----------------------------------------------------
    def subscribe(
        self,
        on_change: ChangeListener,
        on_game_over: Optional[GameOverListener] = None,
    ) -> None:
        """Register callbacks for state changes and the end of the game."""

        self._change_listeners.append(on_change)
        if on_game_over is not None:
            self._game_over_listeners.append(on_game_over)

    def _notify(self) -> None:
        if not self._change_listeners:
            return
        snap = self.snapshot()
        for listener in self._change_listeners:
            listener(snap)

    # Commands ---------------------------------------------------------
    def _accepts(self, command: str) -> bool:
        if self.state.status is EngineStatus.RUNNING and self.state.active is not None:
            return True
        LOGGER.debug("Ignoring %s while %s", command, self.state.status.value)
        return False

    def start(self) -> bool:
        """Spawn the first piece and start the drop clock."""

        if self.state.status is not EngineStatus.IDLE:
            LOGGER.debug("Start ignored: game is %s", self.state.status.value)
            return False
        self.state.status = EngineStatus.RUNNING
        LOGGER.info("Game started")
        if self._spawn():
            self.clock.start(self.drop_interval_ms, self._tick)
        self._notify()
        return True

    def toggle_pause(self) -> bool:
        """Pause a running game or resume a paused one."""

        status = self.state.status
        if status is EngineStatus.RUNNING:
            self.clock.cancel()
            self.state.status = EngineStatus.PAUSED
            LOGGER.info("Paused")
        elif status is EngineStatus.PAUSED:
            self.state.status = EngineStatus.RUNNING
            self.clock.start(self.drop_interval_ms, self._tick)
            LOGGER.info("Resumed")
        else:
            LOGGER.debug("Pause toggle ignored: game is %s", status.value)
            return False
        self._notify()
        return True

    def move_left(self) -> bool:
        return self._shift_to(-1, "move-left")

    def move_right(self) -> bool:
        return self._shift_to(1, "move-right")

    def target_column(self, column: int) -> bool:
        """Move the piece so its anchor sits at ``column`` in one step.

        The move is rejected as a whole if the destination collides.
        """

        if not self._accepts("target-column"):
            return False
        return self._try_move(column, self.state.active.y)

    def _shift_to(self, dx: int, command: str) -> bool:
        if not self._accepts(command):
            return False
        piece = self.state.active
        return self._try_move(piece.x + dx, piece.y)

    def _try_move(self, x: int, y: int) -> bool:
        piece = self.state.active
        if (x, y) == piece.anchor or collides(piece.shape, x, y, self.state.board):
            return False
        piece.x, piece.y = x, y
        self._notify()
        return True

    def move_down(self) -> bool:
        """Move the piece one row down, locking it when blocked.

        Unlike sideways moves, a blocked downward move is not a silent no-op:
        it locks the piece, clears rows and spawns the next piece.
        """

        if not self._accepts("soft-drop"):
            return False
        piece = self.state.active
        if collides(piece.shape, piece.x, piece.y + 1, self.state.board):
            self._lock_and_spawn()
        else:
            piece.y += 1
        self._notify()
        return True

    def rotate(self) -> bool:
        """Rotate clockwise in place; rejected if the rotated shape collides."""

        if not self._accepts("rotate-clockwise"):
            return False
        piece = self.state.active
        candidate = rotate_shape(piece.shape)
        if collides(candidate, piece.x, piece.y, self.state.board):
            return False
        piece.shape = candidate
        self._notify()
        return True

    def dispatch(self, command: str, *args: int) -> bool:
        """Run a command by its logical name, e.g. ``"target-column", 3``."""

        handlers = {
            "start": self.start,
            "toggle-pause": self.toggle_pause,
            "move-left": self.move_left,
            "move-right": self.move_right,
            "soft-drop": self.move_down,
            "rotate-clockwise": self.rotate,
            "target-column": self.target_column,
        }
        try:
            handler = handlers[command]
        except KeyError:
            raise ValueError(f"Unknown command: {command}") from None
        return handler(*args)

    # Internals --------------------------------------------------------
    def _tick(self) -> None:
        self.move_down()

    def _lock_and_spawn(self) -> None:
        """Lock the active piece, clear rows, update progression, spawn next."""

        state = self.state
        state.board.lock_piece(state.active)
        state.pieces += 1
        cleared = state.board.clear_full_rows()
        leveled = False
        for _ in range(cleared):
            if state.progression.add_line():
                leveled = True
                LOGGER.info("Level %d reached, drop interval %dms", self.level, self.drop_interval_ms)
        if cleared:
            LOGGER.debug("Cleared %d row(s). Score: %d", cleared, self.score)
        if leveled:
            self.clock.reschedule(self.drop_interval_ms)
        self._spawn()

    def _spawn(self) -> bool:
        """Spawn the next piece; end the game if it collides immediately."""

        piece = self.factory.spawn()
        if collides(piece.shape, piece.x, piece.y, self.state.board):
            self._game_over()
            return False
        self.state.active = piece
        return True

    def _game_over(self) -> None:
        self.clock.cancel()
        self.state.active = None
        self.state.status = EngineStatus.GAME_OVER
        LOGGER.info("Game over. Score: %d", self.score)
        for listener in self._game_over_listeners:
            listener(self.score)
