"""Default colors and activities.

Activity colors are assigned deterministically: the same activity list always
gets the same next color.
"""

from lifegrid.config.settings import settings
from lifegrid.engine.schemas.activity import Activity, RatePeriod, Rgb

ACTIVITY_PALETTE: tuple[Rgb, ...] = tuple(
    Rgb.from_hex(h)
    for h in (
        "#EF4444",
        "#F59E0B",
        "#10B981",
        "#6366F1",
        "#EC4899",
        "#8B5CF6",
        "#14B8A6",
        "#F97316",
        "#06B6D4",
        "#84CC16",
    )
)


def lived_baseline() -> Rgb:
    """Color of lived cells no activity covers."""
    return Rgb.from_hex(settings.lived_color)


def unlived_baseline() -> Rgb:
    """Color of future cells no activity covers."""
    return Rgb.from_hex(settings.unlived_color)


def next_activity_color(existing: tuple[Activity, ...] | list[Activity]) -> Rgb:
    """Pick the color for a new activity.

    First palette color not used yet; once all are taken, cycle by count.
    """
    used = {a.color for a in existing}
    for color in ACTIVITY_PALETTE:
        if color not in used:
            return color
    return ACTIVITY_PALETTE[len(existing) % len(ACTIVITY_PALETTE)]


def default_activities() -> tuple[Activity, ...]:
    """Starter activity list shown to a new session (nothing painted yet)."""
    return (
        Activity(id=1, name="Sleeping", rate_hours=8, rate_period=RatePeriod.DAY, color=Rgb.from_hex("#000000")),
        Activity(id=2, name="Eating", rate_hours=2, rate_period=RatePeriod.DAY, color=Rgb.from_hex("#22C55E")),
        Activity(id=3, name="Personal Hygiene", rate_hours=1, rate_period=RatePeriod.DAY, color=Rgb.from_hex("#3B82F6")),
    )
