"""Calendar Math - exact lived/remaining/total unit counts.

Deterministic conversion of (birth_date, lifespan_years, granularity,
reference_now) into grid units. No clock is read here; reference_now is
always part of the input.
"""

import math
from datetime import date, datetime, time

from lifegrid.engine.constants import DAYS_PER_UNIT, UNITS_PER_YEAR
from lifegrid.engine.schemas.life_parameters import LifeParameters, TimeGranularity, UnitCounts

SECONDS_PER_DAY = 86400


def _as_local_datetime(value: date | datetime) -> datetime:
    """Return a naive wall-clock datetime for a date or datetime."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime.combine(value, time.min)


def elapsed_days(birth_date: date, reference_now: date | datetime) -> float:
    """Wall-clock days from local midnight of birth_date to reference_now.

    Negative when the birth date lies in the future.
    """
    delta = _as_local_datetime(reference_now) - _as_local_datetime(birth_date)
    return delta.total_seconds() / SECONDS_PER_DAY


def completed_years(birth_date: date, reference_now: date | datetime) -> int:
    """Count completed birthdays.

    A year only completes once both the month and the day of the birthday
    have been reached. A 29 February birthday completes on 1 March in
    non-leap years.
    """
    now = _as_local_datetime(reference_now).date()
    years = now.year - birth_date.year
    if (now.month, now.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def units_per_year(granularity: TimeGranularity) -> float:
    return UNITS_PER_YEAR[granularity]


def lifespan_units(lifespan_years: float, granularity: TimeGranularity) -> float:
    """Convert a lifespan in years to granularity units."""
    return lifespan_years * UNITS_PER_YEAR[granularity]


def units_to_years(units: float, granularity: TimeGranularity) -> float:
    """Inverse of lifespan_units."""
    return units / UNITS_PER_YEAR[granularity]


def lived_units(birth_date: date, reference_now: date | datetime, granularity: TimeGranularity) -> float:
    """Elapsed life in granularity units, clamped at 0 for future birth dates."""
    if granularity == TimeGranularity.YEARS:
        lived = float(completed_years(birth_date, reference_now))
    else:
        lived = elapsed_days(birth_date, reference_now) / DAYS_PER_UNIT[granularity]
    return max(0.0, lived)


def unit_counts(params: LifeParameters) -> UnitCounts:
    """Compute lived/remaining/total units for a LifeParameters snapshot.

    Args:
        params: Validated life parameters

    Returns:
        UnitCounts where remaining is never negative. When the lifespan is
        already exceeded, remaining is 0 and lived keeps its true value so
        percentage figures can exceed 100%.
    """
    lived = lived_units(params.birth_date, params.reference_now, params.granularity)
    total = lifespan_units(params.lifespan_years, params.granularity)
    remaining = max(0.0, total - lived)
    return UnitCounts(lived=lived, remaining=remaining, total=total)


def age_in_units(params: LifeParameters) -> int:
    """Whole units lived so far (the "age" figure of the current view)."""
    return math.floor(lived_units(params.birth_date, params.reference_now, params.granularity))


def percentage(part: float, whole: float) -> float:
    """part / whole as a percentage; 0 when whole is 0."""
    if whole <= 0:
        return 0.0
    return part / whole * 100
