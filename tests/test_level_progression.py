import pytest

from blockfall.progression import LEVEL_UP_SCORE, POINTS_PER_LINE, Progression


def test_each_line_awards_flat_points():
    progression = Progression()
    assert progression.add_line() is False
    assert progression.score == 100
    assert progression.level == 1
    assert progression.drop_interval_ms == 1000


def test_level_advances_on_exact_multiple():
    progression = Progression(score=900)
    assert progression.add_line() is True
    assert progression.score == 1000
    assert progression.level == 2
    assert progression.drop_interval_ms == 900


def test_score_and_level_laws_hold():
    progression = Progression()
    for _ in range(57):
        progression.add_line()
        assert progression.score % POINTS_PER_LINE == 0
        assert progression.level == 1 + progression.score // LEVEL_UP_SCORE
    assert progression.level == 6


def test_interval_floor_is_configurable():
    progression = Progression(level=12, min_drop_interval_ms=50)
    assert progression.drop_interval_ms == 50


def test_interval_floor_must_be_positive():
    with pytest.raises(ValueError):
        Progression(min_drop_interval_ms=0)
