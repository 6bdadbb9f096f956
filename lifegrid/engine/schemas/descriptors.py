"""Cell color descriptors.

A descriptor is the resolved paint instruction for one grid cell. It is
either a solid color or a horizontal gradient made of hard-edged segments.
Rendering surfaces translate descriptors into paint operations; nothing in
the engine touches a rendering API.
"""

from dataclasses import dataclass

from lifegrid.engine.schemas.activity import Rgb


@dataclass(frozen=True)
class SolidColor:
    color: Rgb


@dataclass(frozen=True)
class GradientSegment:
    """Part of a cell's fill fraction attributed to one activity.

    Attributes:
        start_percent: Inclusive start, 0 <= start_percent < end_percent
        end_percent: Exclusive end, <= 100
        color: Activity color painted inside the segment
    """

    start_percent: float
    end_percent: float
    color: Rgb

    @property
    def width_percent(self) -> float:
        return self.end_percent - self.start_percent


@dataclass(frozen=True)
class GradientColor:
    """A cell split between activity segments and the side's default color.

    Attributes:
        default_color: Color shown outside every segment
        segments: Segments in encounter order
    """

    default_color: Rgb
    segments: tuple[GradientSegment, ...]

    def stops(self) -> list[tuple[float, Rgb]]:
        """Return (offset_percent, color) stops for a hard-edged linear gradient.

        Each segment contributes four stops so that colors change abruptly at
        segment edges; the default color fills every gap.
        """
        stops: list[tuple[float, Rgb]] = [(0.0, self.default_color)]
        for segment in self.segments:
            stops.append((segment.start_percent, self.default_color))
            stops.append((segment.start_percent, segment.color))
            stops.append((segment.end_percent, segment.color))
            stops.append((segment.end_percent, self.default_color))
        stops.append((100.0, self.default_color))
        return stops


CellColorDescriptor = SolidColor | GradientColor
