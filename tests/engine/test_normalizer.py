import math

import pytest

from lifegrid.engine.normalizer import clamp_rate_hours, hours_per_day, hours_per_day_for
from lifegrid.engine.schemas.activity import Activity, RatePeriod, Rgb


@pytest.mark.parametrize(
    ("rate_hours", "rate_period", "expected"),
    [
        (8, RatePeriod.DAY, 8),
        (14, RatePeriod.WEEK, 2),
        (30, RatePeriod.MONTH, 1),
        (60, RatePeriod.MONTH, 2),
        (365, RatePeriod.YEAR, 1),
        (0, RatePeriod.WEEK, 0),
    ],
)
def test_hours_per_day_for(rate_hours, rate_period, expected):
    assert hours_per_day_for(rate_hours, rate_period) == pytest.approx(expected)


def test_month_divisor_is_flat_thirty_days():
    """Months are 30 days here, not the 30.4375 calendar average."""
    assert hours_per_day_for(24, RatePeriod.MONTH) == pytest.approx(0.8)


def test_hours_per_day_accepts_period_strings():
    assert hours_per_day_for(21, "week") == pytest.approx(3)


def test_hours_per_day_from_activity():
    activity = Activity(id="gym", name="Gym", rate_hours=7, rate_period=RatePeriod.WEEK, color=Rgb(0, 0, 0))

    assert hours_per_day(activity) == pytest.approx(1)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (12.5, 12.5),
        (-3, 0),
        (30, 24),
        (24, 24),
        ("6", 6),
        ("abc", 0),
        (None, 0),
        (math.nan, 0),
        (math.inf, 24),
    ],
)
def test_clamp_rate_hours(raw, expected):
    assert clamp_rate_hours(raw) == expected
