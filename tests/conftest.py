"""Root conftest for all tests.

Shared fixtures for life parameters and activities.
"""

from datetime import date, datetime

import pytest

from lifegrid.engine.cache import clear_cache
from lifegrid.engine.schemas.activity import Activity, RatePeriod, Rgb
from lifegrid.engine.schemas.life_parameters import LifeParameters, TimeGranularity

SLEEP_COLOR = Rgb.from_hex("#000000")
WORK_COLOR = Rgb.from_hex("#EF4444")


@pytest.fixture(autouse=True)
def reset_grid_cache():
    """Every test starts with an empty grid cache."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def quarter_century_params() -> LifeParameters:
    """Born 2000-01-01, viewed on 2025-01-01 with an 80 year lifespan."""
    return LifeParameters(
        birth_date=date(2000, 1, 1),
        lifespan_years=80,
        granularity=TimeGranularity.YEARS,
        reference_now=datetime(2025, 1, 1),
    )


@pytest.fixture
def sleep_past() -> Activity:
    """Eight hours of sleep a day, painted over the past."""
    return Activity(
        id=1,
        name="Sleeping",
        rate_hours=8,
        rate_period=RatePeriod.DAY,
        color=SLEEP_COLOR,
        applies_to_past=True,
    )


@pytest.fixture
def work_future() -> Activity:
    """Forty hours of work a week, painted over the future."""
    return Activity(
        id=2,
        name="Work",
        rate_hours=40,
        rate_period=RatePeriod.WEEK,
        color=WORK_COLOR,
        applies_to_future=True,
    )
