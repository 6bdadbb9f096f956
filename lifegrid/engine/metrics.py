"""Grid Assembly Metrics.

Observability for assembled grids. Logs what was painted for monitoring
and debugging of allocation results.
"""

from typing import TYPE_CHECKING

from loguru import logger

from lifegrid.engine.schemas.descriptors import GradientColor

if TYPE_CHECKING:
    from lifegrid.engine.assembler import LifeGrid


def log_grid_metrics(grid: "LifeGrid") -> None:
    """Log grid assembly metrics.

    Logs:
    - Granularity and cell counts (total, past, future)
    - Number of gradient (boundary) cells
    - Activities painted per side
    - Lived/remaining/committed percentages

    Args:
        grid: The assembled grid
    """
    if not grid.cells:
        logger.debug(
            "Grid metrics: Empty grid",
            granularity=grid.parameters.granularity.value,
        )
        return

    gradient_cells = sum(1 for c in grid.cells if isinstance(c, GradientColor))

    logger.info(
        "Grid metrics",
        granularity=grid.parameters.granularity.value,
        total_cells=len(grid.cells),
        past_cells=grid.unit_counts.lived_cells,
        future_cells=len(grid.cells) - grid.unit_counts.lived_cells,
        gradient_cells=gradient_cells,
        past_activities=sum(1 for a in grid.activities if a.applies_to_past),
        future_activities=sum(1 for a in grid.activities if a.applies_to_future),
        percentage_lived=round(grid.progress.percentage_lived, 2),
        percentage_remaining=round(grid.progress.percentage_remaining, 2),
        percentage_future=round(grid.progress.percentage_future, 2),
        overflows=grid.layout.overflows,
    )
