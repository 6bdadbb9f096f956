"""Activity Normalizer.

Turns an activity's declared rate into an hours-per-day equivalent. The
result is not clamped here; clamp_rate_hours is applied once at the input
boundary.
"""

import math

from lifegrid.engine.constants import HOURS_PER_DAY, RATE_PERIOD_DAYS
from lifegrid.engine.schemas.activity import Activity, RatePeriod


def hours_per_day_for(rate_hours: float, rate_period: RatePeriod) -> float:
    """Convert rate_hours per rate_period to hours per day.

    Divisors are flat: week 7, month 30, year 365.
    """
    return rate_hours / RATE_PERIOD_DAYS[RatePeriod(rate_period)]


def hours_per_day(activity: Activity) -> float:
    return hours_per_day_for(activity.rate_hours, activity.rate_period)


def clamp_rate_hours(value: object) -> float:
    """Clamp a raw rate to [0, 24].

    Non-numeric and NaN values become 0; this never raises.
    """
    try:
        hours = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(hours):
        return 0.0
    return min(float(HOURS_PER_DAY), max(0.0, hours))
