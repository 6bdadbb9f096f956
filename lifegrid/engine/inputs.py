"""Input boundary.

Raw user values enter here and leave as immutable LifeParameters and
Activity tuples. This is the only layer that rejects input
(LifeGridInputError) and the only place a live clock may be read.

Out-of-range activity rates are clamped, never rejected.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime, time
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from lifegrid.config.settings import settings
from lifegrid.engine.constants import MIN_LIFESPAN_YEARS
from lifegrid.engine.errors import LifeGridInputError
from lifegrid.engine.logging import log_input_rejection
from lifegrid.engine.normalizer import clamp_rate_hours
from lifegrid.engine.palette import next_activity_color
from lifegrid.engine.schemas.activity import Activity, RatePeriod, Rgb
from lifegrid.engine.schemas.life_parameters import LifeParameters, TimeGranularity


class LifeInput(BaseModel):
    birth_date: date
    lifespan_years: int = Field(default_factory=lambda: settings.default_lifespan_years)
    granularity: TimeGranularity = Field(default_factory=lambda: TimeGranularity(settings.default_granularity))
    reference_now: datetime | None = Field(None, description="Snapshot of 'now'; local clock when omitted")

    @field_validator("lifespan_years", mode="before")
    @classmethod
    def reject_non_numeric_lifespan(cls, value: Any) -> Any:
        if isinstance(value, bool) or value is None or value == "":
            raise ValueError("lifespan_years must be a whole number of years")
        return value

    @field_validator("lifespan_years")
    @classmethod
    def validate_lifespan_range(cls, value: int) -> int:
        if value < MIN_LIFESPAN_YEARS or value > settings.max_lifespan_years:
            raise ValueError(f"lifespan_years must be between {MIN_LIFESPAN_YEARS} and {settings.max_lifespan_years}, got {value}")
        return value

    @field_validator("reference_now", mode="before")
    @classmethod
    def coerce_reference_date(cls, value: Any) -> Any:
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.min)
        if isinstance(value, str) and len(value.strip()) == 10:
            return datetime.combine(date.fromisoformat(value.strip()), time.min)
        return value

    def to_parameters(self) -> LifeParameters:
        return LifeParameters(
            birth_date=self.birth_date,
            lifespan_years=self.lifespan_years,
            granularity=self.granularity,
            reference_now=self.reference_now or datetime.now(),
        )


class ActivityInput(BaseModel):
    id: int | str
    name: str = "New Activity"
    rate_hours: float = 1.0
    rate_period: RatePeriod = RatePeriod.DAY
    color: str
    applies_to_past: bool = False
    applies_to_future: bool = False

    @field_validator("rate_hours", mode="before")
    @classmethod
    def clamp_rate(cls, value: Any) -> float:
        clamped = clamp_rate_hours(value)
        if clamped != value:
            logger.debug(f"Clamped activity rate_hours {value!r} to {clamped}")
        return clamped

    @field_validator("color")
    @classmethod
    def validate_color(cls, value: str) -> str:
        return Rgb.from_hex(value).hex

    def to_activity(self) -> Activity:
        return Activity(
            id=self.id,
            name=self.name,
            rate_hours=self.rate_hours,
            rate_period=self.rate_period,
            color=Rgb.from_hex(self.color),
            applies_to_past=self.applies_to_past,
            applies_to_future=self.applies_to_future,
        )


def _error_details(exc: ValidationError) -> list[str]:
    return [f"{'.'.join(str(p) for p in e['loc']) or 'input'}: {e['msg']}" for e in exc.errors()]


def build_life_parameters(**raw: Any) -> LifeParameters:
    """Validate raw life inputs into LifeParameters.

    Raises:
        LifeGridInputError: INVALID_LIFE_PARAMETERS for a bad birth date,
            lifespan or granularity
    """
    try:
        return LifeInput.model_validate(raw).to_parameters()
    except ValidationError as exc:
        err = LifeGridInputError("INVALID_LIFE_PARAMETERS", _error_details(exc))
        log_input_rejection(err, {"lifespan_years": str(raw.get("lifespan_years"))})
        raise err from exc


def _activity_fields(activity: Activity) -> dict[str, Any]:
    return {
        "id": activity.id,
        "name": activity.name,
        "rate_hours": activity.rate_hours,
        "rate_period": activity.rate_period,
        "color": activity.color.hex,
        "applies_to_past": activity.applies_to_past,
        "applies_to_future": activity.applies_to_future,
    }


def build_activity(raw: Mapping[str, Any] | ActivityInput | Activity) -> Activity:
    """Validate one raw activity.

    Raises:
        LifeGridInputError: INVALID_ACTIVITY for a missing id or bad color
    """
    if isinstance(raw, Activity):
        raw = _activity_fields(raw)
    if isinstance(raw, ActivityInput):
        return raw.to_activity()
    try:
        return ActivityInput.model_validate(dict(raw)).to_activity()
    except ValidationError as exc:
        err = LifeGridInputError("INVALID_ACTIVITY", _error_details(exc))
        log_input_rejection(err, {"activity_id": str(raw.get("id"))})
        raise err from exc


def build_activities(raw_activities: Iterable[Mapping[str, Any] | ActivityInput | Activity]) -> tuple[Activity, ...]:
    """Validate an ordered activity list, keeping declaration order.

    Raises:
        LifeGridInputError: INVALID_ACTIVITY or DUPLICATE_ACTIVITY_ID
    """
    activities = tuple(build_activity(raw) for raw in raw_activities)

    seen: set[int | str] = set()
    duplicates: list[str] = []
    for activity in activities:
        if activity.id in seen:
            duplicates.append(str(activity.id))
        seen.add(activity.id)
    if duplicates:
        err = LifeGridInputError("DUPLICATE_ACTIVITY_ID", duplicates)
        log_input_rejection(err, {"activity_count": len(activities)})
        raise err

    return activities


def _next_activity_id(activities: tuple[Activity, ...]) -> int:
    int_ids = [a.id for a in activities if isinstance(a.id, int)]
    return max(int_ids, default=0) + 1


def add_activity(
    activities: tuple[Activity, ...],
    name: str = "New Activity",
    rate_hours: float = 1.0,
    rate_period: RatePeriod = RatePeriod.DAY,
) -> tuple[Activity, ...]:
    """Return a new list with an activity appended (unpainted, next palette color)."""
    new = build_activity(
        {
            "id": _next_activity_id(activities),
            "name": name,
            "rate_hours": rate_hours,
            "rate_period": rate_period,
            "color": next_activity_color(activities).hex,
        }
    )
    return (*activities, new)


def _require_known_id(activities: tuple[Activity, ...], activity_id: int | str) -> None:
    if not any(a.id == activity_id for a in activities):
        err = LifeGridInputError("UNKNOWN_ACTIVITY_ID", [str(activity_id)])
        log_input_rejection(err, {"activity_count": len(activities)})
        raise err


def remove_activity(activities: tuple[Activity, ...], activity_id: int | str) -> tuple[Activity, ...]:
    _require_known_id(activities, activity_id)
    return tuple(a for a in activities if a.id != activity_id)


def update_activity(activities: tuple[Activity, ...], activity_id: int | str, **changes: Any) -> tuple[Activity, ...]:
    """Return a new list with one activity's fields replaced.

    Changes go through the same validation as new input, so rates are
    clamped and colors checked. Position in the list is preserved.

    Raises:
        LifeGridInputError: UNKNOWN_ACTIVITY_ID or INVALID_ACTIVITY
    """
    _require_known_id(activities, activity_id)
    if "id" in changes and changes["id"] != activity_id:
        err = LifeGridInputError("INVALID_ACTIVITY", ["id cannot be changed"])
        log_input_rejection(err, {"activity_id": str(activity_id)})
        raise err

    updated: list[Activity] = []
    for activity in activities:
        if activity.id == activity_id:
            fields = _activity_fields(activity)
            fields.update({k: (v.hex if isinstance(v, Rgb) else v) for k, v in changes.items()})
            activity = build_activity(fields)
        updated.append(activity)
    return tuple(updated)
