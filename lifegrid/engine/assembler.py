"""Grid Assembler - the engine's external surface.

Composes Calendar Math, the Layout Planner and the Interval Allocator into
one descriptor per grid cell. Every call is a full recomputation from its
inputs; the optional cache only short-circuits identical requests.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import lifegrid.core.logger  # noqa: F401  configures loguru sinks
from lifegrid.config.settings import settings
from lifegrid.engine.allocator import paint_side
from lifegrid.engine.annotations import GridAnnotation, default_annotations
from lifegrid.engine.cache import get_cached_grid, grid_cache_key, set_cached_grid
from lifegrid.engine.calendar_math import unit_counts
from lifegrid.engine.layout_planner import plan_layout
from lifegrid.engine.metrics import log_grid_metrics
from lifegrid.engine.palette import lived_baseline, unlived_baseline
from lifegrid.engine.progress import ProgressStats, progress_stats
from lifegrid.engine.schemas.activity import Activity
from lifegrid.engine.schemas.descriptors import CellColorDescriptor
from lifegrid.engine.schemas.layout import LayoutPlan
from lifegrid.engine.schemas.life_parameters import LifeParameters, Side, UnitCounts
from lifegrid.engine.shapes import ShapeKind


@dataclass(frozen=True)
class LifeGrid:
    """Everything a rendering surface needs for one render pass.

    Attributes:
        parameters: Inputs the grid was computed from
        activities: Ordered activities the grid was painted with
        unit_counts: Lived/remaining/total units
        layout: Grid geometry
        progress: Progress figures (future-committed time removed from remaining)
        cells: One descriptor per cell index in [0, layout.total_units)
        annotations: Default annotation anchors for the view
        shape: Cell shape of this render pass
    """

    parameters: LifeParameters
    activities: tuple[Activity, ...]
    unit_counts: UnitCounts
    layout: LayoutPlan
    progress: ProgressStats
    cells: tuple[CellColorDescriptor, ...]
    annotations: tuple[GridAnnotation, ...] = ()
    shape: ShapeKind = ShapeKind.SQUARE

    def side_of(self, cell_index: int) -> Side:
        return Side.PAST if cell_index < self.unit_counts.lived_cells else Side.FUTURE


def assemble_grid(
    params: LifeParameters,
    activities: Sequence[Activity],
    viewport_width: float | None = None,
    viewport_height: float | None = None,
    *,
    shape: ShapeKind = ShapeKind.SQUARE,
    use_cache: bool | None = None,
) -> LifeGrid:
    """Build the full per-cell descriptor array for a life view.

    Past cells are painted over the lived span with past activities, future
    cells over the remaining span with future activities. When the lifespan
    is exceeded every cell is a past cell and the past side is painted over
    the lifespan only, so activity shares match the cells shown.

    Args:
        params: Validated life parameters
        activities: Ordered activities (paint order)
        viewport_width: Available width; settings default when omitted
        viewport_height: Optional available height
        shape: Cell shape carried through to the rendering surface
        use_cache: Override settings.grid_cache_enabled

    Returns:
        LifeGrid with exactly layout.total_units descriptors
    """
    activities = tuple(activities)
    if viewport_width is None:
        viewport_width = settings.default_viewport_width
    if use_cache is None:
        use_cache = settings.grid_cache_enabled
    lived_color = lived_baseline()
    unlived_color = unlived_baseline()

    key = grid_cache_key(params, activities, viewport_width, viewport_height, lived_color, unlived_color, shape)
    if use_cache:
        cached = get_cached_grid(key)
        if cached is not None:
            return cached

    counts = unit_counts(params)
    layout = plan_layout(counts.total_cells, params.granularity, viewport_width, viewport_height)

    past_cells = counts.lived_cells
    future_cells = counts.total_cells - past_cells
    past = paint_side(min(counts.lived, counts.total), past_cells, activities, Side.PAST, lived_color)
    future = paint_side(counts.remaining, future_cells, activities, Side.FUTURE, unlived_color)

    grid = LifeGrid(
        parameters=params,
        activities=activities,
        unit_counts=counts,
        layout=layout,
        progress=progress_stats(counts, activities),
        cells=past + future,
        annotations=tuple(default_annotations(params.granularity, counts.total_cells, params.lifespan_years)),
        shape=ShapeKind(shape),
    )
    log_grid_metrics(grid)

    if use_cache:
        set_cached_grid(key, grid)
    return grid
