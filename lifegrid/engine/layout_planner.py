"""Layout Planner - responsive grid geometry.

Maps (total_units, granularity, viewport) to rows, columns and cell size.
Cells never shrink below the legible minimum of their granularity: when the
viewport is too narrow the plan overflows horizontally instead.
"""

import math

from loguru import logger

from lifegrid.engine.schemas.layout import GridConfig, LayoutPlan
from lifegrid.engine.schemas.life_parameters import TimeGranularity

GRID_CONFIGS: dict[TimeGranularity, GridConfig] = {
    TimeGranularity.YEARS: GridConfig(units_per_row=10, min_cell_size=45, max_cell_size=65, padding_ratio=0.10),
    TimeGranularity.MONTHS: GridConfig(units_per_row=36, min_cell_size=34, max_cell_size=55, padding_ratio=0.10),
    TimeGranularity.WEEKS: GridConfig(
        units_per_row=52,
        min_cell_size=12,
        max_cell_size=20,
        padding_ratio=0.15,
        left_margin=15,
        right_margin=10,
        bottom_margin=120,
    ),
    TimeGranularity.DAYS: GridConfig(
        units_per_row=100,
        min_cell_size=6,
        max_cell_size=12,
        padding_ratio=0.15,
        left_margin=15,
        right_margin=10,
        bottom_margin=120,
    ),
    TimeGranularity.HOURS: GridConfig(units_per_row=24, min_cell_size=8, max_cell_size=16, padding_ratio=0.15),
}


def plan_layout(
    total_units: int,
    granularity: TimeGranularity,
    viewport_width: float,
    viewport_height: float | None = None,
) -> LayoutPlan:
    """Derive the grid layout for a viewport.

    Cell size is the width-fit size (and, when viewport_height is given, no
    larger than the height-fit size), clamped to the granularity's
    [min_cell_size, max_cell_size] band.

    Args:
        total_units: Number of cells to lay out
        granularity: Active time granularity
        viewport_width: Available width in pixels (<= 0 yields the minimum cell size)
        viewport_height: Optional available height in pixels

    Returns:
        LayoutPlan with units_per_row >= 1 and cell_size > 0
    """
    granularity = TimeGranularity(granularity)
    config = GRID_CONFIGS[granularity]
    total = max(0, int(total_units))

    units_per_row = max(1, min(config.units_per_row, total))
    rows = math.ceil(total / units_per_row)

    horizontal_margins = config.left_margin + config.right_margin
    available_width = viewport_width - horizontal_margins
    cell_size = available_width / (units_per_row * (1 + config.padding_ratio))

    if viewport_height is not None and rows > 0:
        available_height = viewport_height - (config.top_margin + config.bottom_margin)
        cell_size = min(cell_size, available_height / (rows * (1 + config.padding_ratio)))

    if not math.isfinite(cell_size):
        cell_size = config.min_cell_size
    cell_size = min(max(cell_size, config.min_cell_size), config.max_cell_size)

    cell_padding = cell_size * config.padding_ratio
    pitch = cell_size + cell_padding
    grid_width = units_per_row * pitch
    grid_height = rows * pitch
    overflows = grid_width + horizontal_margins > viewport_width

    if overflows:
        logger.debug(
            "layout_planner: Grid overflows viewport",
            granularity=granularity.value,
            viewport_width=viewport_width,
            grid_width=round(grid_width, 2),
        )

    return LayoutPlan(
        total_units=total,
        units_per_row=units_per_row,
        rows=rows,
        cell_size=cell_size,
        cell_padding=cell_padding,
        grid_width=grid_width,
        grid_height=grid_height,
        overflows=overflows,
    )


def cell_origin(plan: LayoutPlan, index: int) -> tuple[float, float]:
    """Top-left offset of a cell relative to the grid origin."""
    row, col = divmod(index, plan.units_per_row)
    return col * plan.pitch, row * plan.pitch
