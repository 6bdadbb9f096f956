"""LifeParameters - Immutable Input Contract.

This is the only object allowed to enter Calendar Math.
It represents a complete, validated request for one view of a lifetime.

reference_now is a snapshot, never a live clock read, so every
computation downstream is a pure function of this object.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class TimeGranularity(StrEnum):
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


class Side(StrEnum):
    PAST = "past"
    FUTURE = "future"


@dataclass(frozen=True)
class LifeParameters:
    """Inputs of one life view - immutable input contract.

    Attributes:
        birth_date: Calendar date of birth (proleptic Gregorian)
        lifespan_years: Target lifespan in whole years (1..130)
        granularity: Unit each grid cell represents
        reference_now: The "now" the view is computed at (local wall clock)
    """

    birth_date: date
    lifespan_years: int
    granularity: TimeGranularity
    reference_now: datetime


@dataclass(frozen=True)
class UnitCounts:
    """Lived/remaining/total time expressed in granularity units.

    Values are rational: unit conversions (days -> weeks, ...) do not divide
    evenly. total == lived + remaining until the lifespan is exceeded, after
    which remaining stays 0 and lived keeps growing past total.
    """

    lived: float
    remaining: float
    total: float

    @property
    def total_cells(self) -> int:
        """Number of grid cells needed to show the whole lifespan."""
        return math.ceil(self.total)

    @property
    def lived_cells(self) -> int:
        """Number of leading cells that belong to the past side."""
        return min(math.ceil(self.lived), self.total_cells)
