"""Score and level bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import MIN_DROP_INTERVAL_MS, drop_interval_ms


POINTS_PER_LINE = 100
LEVEL_UP_SCORE = 1000


@dataclass
class Progression:
    """Score, level and the drop interval derived from the level.

    ``level == 1 + score // LEVEL_UP_SCORE`` holds as long as the score only
    moves through :meth:`add_line`.  The exact-multiple test in
    :meth:`add_line` relies on ``POINTS_PER_LINE`` dividing
    ``LEVEL_UP_SCORE``; otherwise a level threshold could be skipped.
    """

    score: int = 0
    level: int = 1
    min_drop_interval_ms: int = MIN_DROP_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.min_drop_interval_ms < 1:
            raise ValueError("min_drop_interval_ms must be at least 1")

    @property
    def drop_interval_ms(self) -> int:
        return drop_interval_ms(self.level, self.min_drop_interval_ms)

    def add_line(self) -> bool:
        """Award one cleared row.

        Returns ``True`` when the new score is a multiple of
        ``LEVEL_UP_SCORE``, in which case the level was incremented and the
        caller should reschedule its drop clock.
        """

        self.score += POINTS_PER_LINE
        if self.score % LEVEL_UP_SCORE == 0:
            self.level += 1
            return True
        return False
