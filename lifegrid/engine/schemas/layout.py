"""Grid layout data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridConfig:
    """Per-granularity layout constants.

    Attributes:
        units_per_row: Base row length; one row has calendar meaning (a decade, a year, a day)
        min_cell_size: Smallest legible cell, in pixels
        max_cell_size: Largest cell before the grid looks oversized, in pixels
        padding_ratio: Gap between cells as a fraction of cell_size
        left_margin: Space reserved left of the grid, in pixels
        right_margin: Space reserved right of the grid, in pixels
        top_margin: Space reserved above the grid, in pixels
        bottom_margin: Space reserved below the grid, in pixels
    """

    units_per_row: int
    min_cell_size: float
    max_cell_size: float
    padding_ratio: float
    left_margin: float = 25.0
    right_margin: float = 25.0
    top_margin: float = 55.0
    bottom_margin: float = 80.0


@dataclass(frozen=True)
class LayoutPlan:
    """Resolved grid geometry for one render pass.

    Attributes:
        total_units: Number of cells in the grid
        units_per_row: Cells per row (>= 1)
        rows: ceil(total_units / units_per_row)
        cell_size: Edge length of a cell (> 0)
        cell_padding: Gap between neighbouring cells (>= 0)
        grid_width: Width of the full grid including padding
        grid_height: Height of the full grid including padding
        overflows: True when the grid is wider than the supplied viewport
    """

    total_units: int
    units_per_row: int
    rows: int
    cell_size: float
    cell_padding: float
    grid_width: float
    grid_height: float
    overflows: bool = False

    @property
    def pitch(self) -> float:
        """Distance between the origins of two neighbouring cells."""
        return self.cell_size + self.cell_padding
