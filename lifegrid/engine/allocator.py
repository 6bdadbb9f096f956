"""Interval Allocator - Math Core.

Paints activities over the cells of one side of the timeline
deterministically. Each side (past, future) is an independent occupancy
line quantized to integer cells:

- every applicable activity occupies side_total_units * hours_per_day / 24 units
- activities are laid end to end in declaration order
- a cell whose fill is split between activities (or between an activity and
  nothing) becomes a gradient; every other cell is solid

The allocator only paints within the unit counts it is given. Adjustments
such as future-committed time live in the progress layer.
"""

import math
from collections.abc import Iterable, Sequence

from loguru import logger

from lifegrid.engine.constants import FILL_EPSILON, HOURS_PER_DAY
from lifegrid.engine.normalizer import hours_per_day
from lifegrid.engine.palette import lived_baseline, unlived_baseline
from lifegrid.engine.schemas.activity import Activity, Rgb
from lifegrid.engine.schemas.descriptors import CellColorDescriptor, GradientColor, GradientSegment, SolidColor
from lifegrid.engine.schemas.life_parameters import Side


def applicable_activities(activities: Iterable[Activity], side: Side) -> list[Activity]:
    """Activities painted on a side, in declaration order."""
    if Side(side) == Side.PAST:
        return [a for a in activities if a.applies_to_past]
    return [a for a in activities if a.applies_to_future]


def occupancy_units(activity: Activity, side_total_units: float) -> float:
    """Number of side units an activity visually consumes."""
    return side_total_units * (hours_per_day(activity) / HOURS_PER_DAY)


def _resolve_cell(segments: list[GradientSegment], default_color: Rgb) -> CellColorDescriptor:
    if not segments:
        return SolidColor(default_color)
    if len(segments) == 1 and segments[0].start_percent <= 0 and segments[0].end_percent >= 100:
        return SolidColor(segments[0].color)
    return GradientColor(default_color=default_color, segments=tuple(segments))


def paint_side(
    side_total_units: float,
    cell_count: int,
    activities: Sequence[Activity],
    side: Side,
    default_color: Rgb,
) -> tuple[CellColorDescriptor, ...]:
    """Paint every cell of one side in a single walk.

    Args:
        side_total_units: Units of time on this side (lived or remaining)
        cell_count: Number of cells the side spans on the grid
        activities: Full ordered activity list; filtered by side here
        side: Which side is painted
        default_color: Baseline color for unpainted space

    Returns:
        One descriptor per cell, index 0 being the first cell of the side.
        Occupancy left over after the last cell is discarded.
    """
    cell_count = max(0, int(cell_count))
    baseline = SolidColor(default_color)
    cells: list[CellColorDescriptor] = [baseline] * cell_count

    cursor = 0
    fill = 0.0
    pending: list[GradientSegment] = []

    for activity in applicable_activities(activities, side):
        occupancy = occupancy_units(activity, side_total_units)

        while occupancy > FILL_EPSILON and cursor < cell_count:
            if fill == 0.0 and occupancy >= 1 - FILL_EPSILON:
                # Whole cells: paint the run at once
                run = min(cell_count - cursor, math.floor(occupancy + FILL_EPSILON))
                solid = SolidColor(activity.color)
                for index in range(cursor, cursor + run):
                    cells[index] = solid
                cursor += run
                occupancy -= run
                continue

            available = 1.0 - fill
            if occupancy >= available - FILL_EPSILON:
                pending.append(GradientSegment(start_percent=fill * 100, end_percent=100.0, color=activity.color))
                occupancy -= available
                cells[cursor] = _resolve_cell(pending, default_color)
                pending = []
                cursor += 1
                fill = 0.0
            else:
                end = fill + occupancy
                pending.append(GradientSegment(start_percent=fill * 100, end_percent=end * 100, color=activity.color))
                fill = end
                occupancy = 0.0

        if occupancy > FILL_EPSILON:
            logger.debug(
                "allocator: Occupancy discarded past last cell",
                side=str(side),
                activity_id=activity.id,
                discarded_units=round(occupancy, 6),
            )

    if pending and cursor < cell_count:
        cells[cursor] = _resolve_cell(pending, default_color)

    return tuple(cells)


def side_cell_ranges(lived_units: float, remaining_units: float) -> tuple[range, range]:
    """Global cell index ranges of the past and future sides."""
    past_cells = math.ceil(max(0.0, lived_units))
    total_cells = max(past_cells, math.ceil(max(0.0, lived_units) + max(0.0, remaining_units)))
    return range(0, past_cells), range(past_cells, total_cells)


def color_for_cell(
    cell_index: int,
    side: Side,
    lived_units: float,
    remaining_units: float,
    activities: Sequence[Activity],
    lived_color: Rgb | None = None,
    unlived_color: Rgb | None = None,
) -> CellColorDescriptor:
    """Resolve the descriptor of a single cell with a fresh walk.

    Cells with index < lived_units belong to the past; the rest to the
    future, addressed from ceil(lived_units). A query with a side that does
    not own the cell returns the baseline of the side that does.

    For whole grids use paint_side once per side instead; this is O(cells)
    per call.

    Raises:
        IndexError: If cell_index lies outside the grid
    """
    lived_color = lived_color or lived_baseline()
    unlived_color = unlived_color or unlived_baseline()

    past_range, future_range = side_cell_ranges(lived_units, remaining_units)
    if cell_index < 0 or cell_index >= future_range.stop:
        raise IndexError(f"cell_index {cell_index} outside grid of {future_range.stop} cells")

    is_past_cell = cell_index < lived_units
    side = Side(side)
    if side == Side.PAST and not is_past_cell:
        return SolidColor(unlived_color)
    if side == Side.FUTURE and is_past_cell:
        return SolidColor(lived_color)

    if side == Side.PAST:
        cells = paint_side(lived_units, len(past_range), activities, Side.PAST, lived_color)
        return cells[cell_index]

    cells = paint_side(remaining_units, len(future_range), activities, Side.FUTURE, unlived_color)
    return cells[cell_index - future_range.start]


def painted_fraction(descriptor: CellColorDescriptor, color: Rgb) -> float:
    """Fraction of a cell painted in color (0..1)."""
    if isinstance(descriptor, SolidColor):
        return 1.0 if descriptor.color == color else 0.0
    return sum(s.width_percent for s in descriptor.segments if s.color == color) / 100
