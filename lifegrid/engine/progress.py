"""Progress figures derived from unit counts.

Thin layer above Calendar Math. Future-committed time follows the
subtractive model: hours that future activities will take are removed from
the remaining figure. The grid itself is never re-flowed.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from lifegrid.engine.calendar_math import percentage
from lifegrid.engine.constants import HOURS_PER_DAY
from lifegrid.engine.normalizer import hours_per_day
from lifegrid.engine.schemas.activity import Activity
from lifegrid.engine.schemas.life_parameters import TimeGranularity, UnitCounts


@dataclass(frozen=True)
class ProgressStats:
    """Lived/remaining/committed figures in granularity units and percent of total.

    Attributes:
        lived: Units lived
        remaining: Units remaining after removing future-committed time
        future_committed: Units of the remaining time reserved by future activities
        total: Lifespan in units
        percentage_lived: lived / total (can exceed 100)
        percentage_remaining: remaining / total
        percentage_future: future_committed / total
    """

    lived: float
    remaining: float
    future_committed: float
    total: float
    percentage_lived: float
    percentage_remaining: float
    percentage_future: float


@dataclass(frozen=True)
class ActivityTimeSplit:
    past: float
    future: float
    total: float


def future_committed_units(counts: UnitCounts, activities: Sequence[Activity]) -> float:
    """Remaining units reserved by activities flagged for the future.

    Capped at the remaining units when activities claim more than a full day.
    """
    committed_hours = sum(hours_per_day(a) for a in activities if a.applies_to_future)
    return min(counts.remaining, counts.remaining * committed_hours / HOURS_PER_DAY)


def progress_stats(counts: UnitCounts, activities: Sequence[Activity]) -> ProgressStats:
    committed = future_committed_units(counts, activities)
    remaining = max(0.0, counts.remaining - committed)
    return ProgressStats(
        lived=counts.lived,
        remaining=remaining,
        future_committed=committed,
        total=counts.total,
        percentage_lived=percentage(counts.lived, counts.total),
        percentage_remaining=percentage(remaining, counts.total),
        percentage_future=percentage(committed, counts.total),
    )


def activity_time_split(activity: Activity, counts: UnitCounts) -> ActivityTimeSplit:
    """Time an activity takes of the lived and remaining span, in units.

    Independent of the activity's past/future flags; this is the figure shown
    next to each activity before it is painted.
    """
    share = hours_per_day(activity) / HOURS_PER_DAY
    past = counts.lived * share
    future = counts.remaining * share
    return ActivityTimeSplit(past=past, future=future, total=past + future)


def format_number(value: float) -> str:
    """One decimal place, the precision used for every progress figure."""
    return f"{value:.1f}"


def unit_label(granularity: TimeGranularity, value: float) -> str:
    """'year' for exactly 1, 'years' otherwise (same for every granularity)."""
    plural = TimeGranularity(granularity).value
    return plural[:-1] if value == 1 else plural


def progress_lines(stats: ProgressStats, granularity: TimeGranularity) -> list[str]:
    """Human readable lived/remain lines, e.g. '25.0 years lived'."""
    return [
        f"{format_number(stats.lived)} {unit_label(granularity, stats.lived)} lived",
        f"{format_number(stats.remaining)} {unit_label(granularity, stats.remaining)} remain",
    ]
