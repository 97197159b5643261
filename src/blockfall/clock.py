"""Drop clock implementations.

A drop clock calls a callback once per interval until cancelled.  The engine
only needs ``start``, ``reschedule``, ``cancel`` and ``active``; front-ends
pick whichever implementation matches their main loop.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional, Protocol


Tick = Callable[[], None]


class DropClock(Protocol):
    @property
    def active(self) -> bool: ...

    def start(self, interval_ms: float, callback: Tick) -> None: ...

    def reschedule(self, interval_ms: float) -> None: ...

    def cancel(self) -> None: ...


class FrameDropClock:
    """Clock driven by elapsed frame time.

    The host loop calls :meth:`advance` with the milliseconds since the last
    frame (e.g. the value returned by ``pygame.time.Clock.tick``).  One tick
    fires per full interval accumulated.
    """

    def __init__(self) -> None:
        self.interval_ms: float = 0.0
        self._callback: Optional[Tick] = None
        self._accum = 0.0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: float, callback: Tick) -> None:
        self.interval_ms = interval_ms
        self._callback = callback
        self._accum = 0.0

    def reschedule(self, interval_ms: float) -> None:
        callback = self._callback
        self.cancel()
        if callback is not None:
            self.start(interval_ms, callback)

    def cancel(self) -> None:
        self._callback = None
        self._accum = 0.0

    def advance(self, dt_ms: float) -> int:
        """Add ``dt_ms`` of elapsed time and return how many ticks fired."""

        if self._callback is None:
            return 0
        self._accum += dt_ms
        fired = 0
        while self._callback is not None and self._accum >= self.interval_ms:
            self._accum -= self.interval_ms
            fired += 1
            self._callback()
        return fired


class AsyncioDropClock:
    """Clock backed by ``loop.call_later`` handles.

    The next handle is armed before the callback runs, so a ``cancel`` or
    ``reschedule`` from inside the callback replaces it and no tick is
    duplicated.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop
        self.interval_ms: float = 0.0
        self._callback: Optional[Tick] = None
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def _arm(self) -> None:
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.interval_ms / 1000.0, self._fire)

    def _fire(self) -> None:
        callback = self._callback
        self._arm()
        if callback is not None:
            callback()

    def start(self, interval_ms: float, callback: Tick) -> None:
        self.cancel()
        self.interval_ms = interval_ms
        self._callback = callback
        self._arm()

    def reschedule(self, interval_ms: float) -> None:
        callback = self._callback
        self.cancel()
        if callback is not None:
            self.start(interval_ms, callback)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._callback = None
