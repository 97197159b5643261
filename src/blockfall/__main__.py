"""Simple ASCII demo for the engine.

Run with: `python -m blockfall`

This module starts a game, lets the first piece fall a few rows and prints a
single frame composed of the board plus the active piece, useful as a minimal
smoke test to ensure renderers see more than a blank grid.
"""

from __future__ import annotations

import argparse
import logging

from . import GameConfig, GameEngine, render_grid
from .tetromino import COLOR_NAMES


def _print_grid(grid: list[list[int]]) -> None:
    for row in grid:
        print("".join(COLOR_NAMES[cell - 1][0].upper() if cell else "." for cell in row))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence.")
    parser.add_argument("--drops", type=int, default=5, help="Rows to drop before printing.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    engine = GameEngine(config=GameConfig(seed=args.seed))
    engine.start()
    for _ in range(args.drops):
        engine.move_down()
    _print_grid(render_grid(engine.board, engine.state.active))
    print(f"Score: {engine.score}  Level: {engine.level}")


if __name__ == "__main__":
    main()
