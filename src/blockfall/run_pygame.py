"""Simple pygame front-end for the engine.

This module provides a playable game on top of :class:`GameEngine`.  It only
translates input into engine commands and draws the engine's snapshots; all
game rules live in the engine.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import Optional

import pygame

from .board import COLS, ROWS
from .clock import FrameDropClock
from .engine import GameEngine, Snapshot
from .game_state import EngineStatus, GameConfig
from .tetromino import COLOR_NAMES

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60

LOGGER = logging.getLogger(__name__)

# Mapping from the color id stored in the grid to an RGB colour
CELL_COLORS = {0: (0, 0, 0)}
for _value, _name in enumerate(COLOR_NAMES, start=1):
    CELL_COLORS[_value] = tuple(pygame.Color(_name))[:3]

KEY_COMMANDS = {
    pygame.K_LEFT: "move-left",
    pygame.K_RIGHT: "move-right",
    pygame.K_DOWN: "soft-drop",
    pygame.K_UP: "rotate-clockwise",
    pygame.K_p: "toggle-pause",
    pygame.K_RETURN: "start",
    pygame.K_SPACE: "start",
}


def command_for_key(key: int) -> Optional[str]:
    """Return the logical engine command bound to ``key``, if any."""

    return KEY_COMMANDS.get(key)


def column_at(pixel_x: int) -> int:
    """Return the board column under horizontal pixel ``pixel_x``."""

    return pixel_x // CELL_SIZE


def _cell_rect(x: int, y: int) -> pygame.Rect:
    return pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)


def draw_snapshot(screen: pygame.Surface, snap: Snapshot) -> None:
    """Render the locked cells and the falling piece overlay."""

    for y, row in enumerate(snap.cells):
        for x, value in enumerate(row):
            rect = _cell_rect(x, y)
            pygame.draw.rect(screen, CELL_COLORS[value], rect)
            pygame.draw.rect(screen, (50, 50, 50), rect, 1)
    color = CELL_COLORS[snap.piece_color]
    for x, y in snap.piece_cells:
        if y < 0:
            continue
        rect = _cell_rect(x, y)
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, (50, 50, 50), rect, 1)


def caption_for(snap: Snapshot) -> str:
    if snap.status is EngineStatus.GAME_OVER:
        return f"Game Over! Score: {snap.score} - press Enter"
    if snap.status is EngineStatus.IDLE:
        return "Press Enter to start"
    paused = "Paused - " if snap.status is EngineStatus.PAUSED else ""
    return f"Blockfall - {paused}Score: {snap.score}  Level: {snap.level}"


class GameRunner:
    """Own the pygame window and feed input and frame time to an engine."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self._running = False
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._drop_clock = FrameDropClock()
        self._snapshot: Optional[Snapshot] = None
        self.engine = self._new_engine()

    @property
    def running(self) -> bool:
        return self._running

    def _new_engine(self) -> GameEngine:
        engine = GameEngine(clock=self._drop_clock, config=self.config)
        engine.subscribe(self._on_change, self._on_game_over)
        self._snapshot = engine.snapshot()
        return engine

    def _on_change(self, snap: Snapshot) -> None:
        self._snapshot = snap

    def _on_game_over(self, score: int) -> None:
        LOGGER.info("Final score: %d", score)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Translate a pygame event into an engine command."""

        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.KEYDOWN:
            command = command_for_key(event.key)
            if command is None:
                return
            if command == "start" and self.engine.status is EngineStatus.GAME_OVER:
                self.engine = self._new_engine()
            self.engine.dispatch(command)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.engine.target_column(column_at(event.pos[0]))

    def _draw(self) -> None:
        if self._screen is None or self._snapshot is None:
            return
        self._screen.fill((0, 0, 0))
        draw_snapshot(self._screen, self._snapshot)
        pygame.display.set_caption(caption_for(self._snapshot))
        pygame.display.flip()

    async def run(self) -> None:
        # Ensure SDL/pygame binds to the visible canvas in the page when running on Web.
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
        pygame.init()
        self._screen = pygame.display.set_mode((COLS * CELL_SIZE, ROWS * CELL_SIZE))
        self._clock = pygame.time.Clock()
        self._running = True
        LOGGER.info("Window opened")
        try:
            while self._running:
                dt = self._clock.tick(FPS)
                for event in pygame.event.get():
                    self.handle_event(event)
                self._drop_clock.advance(dt)
                self._draw()
                # Yield to the host event loop to keep UI responsive
                await asyncio.sleep(0)
        finally:
            pygame.quit()
            LOGGER.info("Window closed")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    runner = GameRunner(GameConfig(seed=args.seed))
    asyncio.run(runner.run())


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
