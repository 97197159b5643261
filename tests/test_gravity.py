from blockfall.clock import FrameDropClock
from blockfall.utils import MIN_DROP_INTERVAL_MS, drop_interval_ms


def test_interval_shrinks_by_100ms_per_level():
    assert drop_interval_ms(1) == 1000
    for level in range(1, 10):
        assert drop_interval_ms(level) - drop_interval_ms(level + 1) == 100


def test_interval_is_clamped_past_level_ten():
    assert drop_interval_ms(10) == 100
    assert drop_interval_ms(11) == MIN_DROP_INTERVAL_MS
    assert drop_interval_ms(40) == MIN_DROP_INTERVAL_MS


def test_frame_clock_fires_once_per_interval():
    ticks = []
    clock = FrameDropClock()
    clock.start(500, lambda: ticks.append(1))
    assert clock.advance(499) == 0
    assert clock.advance(1) == 1
    assert clock.advance(1000) == 2
    assert len(ticks) == 3


def test_frame_clock_cancel_inside_callback_stops_ticks():
    clock = FrameDropClock()
    ticks = []

    def tick():
        ticks.append(1)
        clock.cancel()

    clock.start(100, tick)
    assert clock.advance(1000) == 1
    assert not clock.active
    assert clock.advance(1000) == 0


def test_frame_clock_reschedule_restarts_accumulator():
    ticks = []
    clock = FrameDropClock()
    clock.start(1000, lambda: ticks.append(1))
    clock.advance(800)
    clock.reschedule(900)
    assert clock.interval_ms == 900
    assert clock.advance(800) == 0
    assert clock.advance(100) == 1
