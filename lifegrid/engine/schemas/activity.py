"""Activity data models.

Activities are frozen so that an ordered tuple of them can be part of a
cache key. Order is significant: it is the paint order of the allocator.
"""

from dataclasses import dataclass
from enum import StrEnum


class RatePeriod(StrEnum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class Rgb:
    """An opaque RGB color with 0-255 channels."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> "Rgb":
        """Parse #RGB, #RRGGBB or #RRGGBBAA (alpha is dropped).

        Raises:
            ValueError: If value is not a hex color
        """
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        elif len(text) == 8:
            text = text[:6]
        if len(text) != 6:
            raise ValueError(f"Invalid hex color: {value!r}")
        try:
            channels = int(text, 16)
        except ValueError as e:
            raise ValueError(f"Invalid hex color: {value!r}") from e
        return cls(r=(channels >> 16) & 0xFF, g=(channels >> 8) & 0xFF, b=channels & 0xFF)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class Activity:
    """A recurring activity that consumes a share of every day.

    Attributes:
        id: Unique stable identifier
        name: Display name
        rate_hours: Hours spent per rate_period, already clamped to [0, 24]
        rate_period: Period rate_hours is declared against
        color: Paint color of the activity
        applies_to_past: Paint this activity over lived cells
        applies_to_future: Paint this activity over future cells
    """

    id: int | str
    name: str
    rate_hours: float
    rate_period: RatePeriod
    color: Rgb
    applies_to_past: bool = False
    applies_to_future: bool = False
