import pytest

from pyminutes.minutes import scale_stats
from pyminutes.models import STAT_CATEGORIES, Stats

BASE = Stats(
    points=24.0,
    rebounds=8.0,
    assists=6.0,
    steals=1.2,
    blocks=0.8,
    turnovers=2.6,
    three_pointers=2.4,
)


@pytest.mark.parametrize("minutes", [1, 12.5, 30, 48])
def test_identity_scaling(minutes):
    assert scale_stats(BASE, minutes, minutes) == BASE


@pytest.mark.parametrize("new_minutes", [0, 10, 48])
def test_zero_original_minutes_scales_to_zero(new_minutes):
    assert scale_stats(BASE, 0, new_minutes) == Stats.zero()


def test_scaling_is_linear_and_uniform():
    half = scale_stats(BASE, 32, 16)
    full = scale_stats(BASE, 32, 32)
    for name in STAT_CATEGORIES:
        assert getattr(half, name) == pytest.approx(getattr(BASE, name) / 2)
        assert getattr(full, name) == pytest.approx(2 * getattr(half, name))


def test_scaling_does_not_mutate_or_round():
    result = scale_stats(BASE, 30, 10)

    assert result is not BASE
    assert BASE.points == 24.0
    assert result.points == pytest.approx(8.0)
    assert result.steals == pytest.approx(0.4)
    assert scale_stats(Stats(points=10.0), 3, 1).points == pytest.approx(10.0 / 3)


def test_negative_minutes_raise():
    with pytest.raises(ValueError):
        scale_stats(BASE, 30, -1)


@pytest.mark.parametrize("new_minutes", [float("nan"), float("inf")])
def test_non_finite_minutes_raise(new_minutes):
    with pytest.raises(ValueError):
        scale_stats(BASE, 0, new_minutes)
