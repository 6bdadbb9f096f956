"""Grid Assembler Tests.

Tests enforce:
1. Exactly one descriptor per cell, past cells before future cells
2. Past and future sides are painted independently
3. An exceeded lifespan makes every cell a past cell
"""

from datetime import date, datetime

import pytest

from lifegrid.engine.allocator import painted_fraction
from lifegrid.engine.assembler import LifeGrid, assemble_grid
from lifegrid.engine.schemas.activity import Activity, RatePeriod, Rgb
from lifegrid.engine.schemas.descriptors import GradientColor, SolidColor
from lifegrid.engine.schemas.life_parameters import LifeParameters, Side, TimeGranularity
from lifegrid.engine.shapes import ShapeKind

LIVED = Rgb.from_hex("#3B82F6")
UNLIVED = Rgb.from_hex("#E5E7EB")


def test_no_activities_gives_baselines(quarter_century_params):
    grid = assemble_grid(quarter_century_params, [])

    assert isinstance(grid, LifeGrid)
    assert len(grid.cells) == 80
    assert grid.layout.total_units == 80
    assert grid.cells[:25] == (SolidColor(LIVED),) * 25
    assert grid.cells[25:] == (SolidColor(UNLIVED),) * 55
    assert grid.progress.percentage_lived == pytest.approx(31.25)


def test_sleep_over_past(quarter_century_params, sleep_past):
    grid = assemble_grid(quarter_century_params, [sleep_past])

    assert grid.cells[:8] == (SolidColor(sleep_past.color),) * 8
    boundary = grid.cells[8]
    assert isinstance(boundary, GradientColor)
    assert boundary.default_color == LIVED
    assert boundary.segments[0].end_percent == pytest.approx(100 / 3)
    assert grid.cells[9] == SolidColor(LIVED)
    assert grid.cells[25:] == (SolidColor(UNLIVED),) * 55


def test_future_activity_starts_at_first_future_cell(quarter_century_params):
    half_days = Activity(
        id="work",
        name="Work",
        rate_hours=12,
        rate_period=RatePeriod.DAY,
        color=Rgb.from_hex("#EF4444"),
        applies_to_future=True,
    )

    grid = assemble_grid(quarter_century_params, [half_days])

    assert grid.cells[:25] == (SolidColor(LIVED),) * 25
    assert grid.cells[25:52] == (SolidColor(half_days.color),) * 27
    boundary = grid.cells[52]
    assert isinstance(boundary, GradientColor)
    assert boundary.default_color == UNLIVED
    assert boundary.segments[0].end_percent == pytest.approx(50)
    assert grid.cells[53] == SolidColor(UNLIVED)


def test_sides_painted_independently(quarter_century_params, sleep_past, work_future):
    grid = assemble_grid(quarter_century_params, [sleep_past, work_future])

    assert grid.cells[0] == SolidColor(sleep_past.color)
    assert grid.cells[25] == SolidColor(work_future.color)
    assert grid.side_of(24) == Side.PAST
    assert grid.side_of(25) == Side.FUTURE
    assert grid.progress.future_committed > 0


def test_exceeded_lifespan_is_all_past(sleep_past):
    params = LifeParameters(
        birth_date=date(1900, 1, 1),
        lifespan_years=80,
        granularity=TimeGranularity.YEARS,
        reference_now=datetime(2025, 1, 1),
    )

    grid = assemble_grid(params, [sleep_past])

    assert len(grid.cells) == 80
    assert grid.unit_counts.remaining == 0
    assert all(grid.side_of(i) == Side.PAST for i in range(80))
    assert all(not isinstance(c, SolidColor) or c.color != UNLIVED for c in grid.cells)
    assert grid.progress.percentage_lived == pytest.approx(156.25)


def test_exceeded_lifespan_paints_share_of_visible_cells(sleep_past):
    """8 h/day covers a third of the 80 shown cells, not a third of 125 years."""
    params = LifeParameters(
        birth_date=date(1900, 1, 1),
        lifespan_years=80,
        granularity=TimeGranularity.YEARS,
        reference_now=datetime(2025, 1, 1),
    )

    grid = assemble_grid(params, [sleep_past])

    painted = sum(painted_fraction(c, sleep_past.color) for c in grid.cells)
    assert painted == pytest.approx(80 / 3)
    assert grid.cells[25] == SolidColor(sleep_past.color)
    assert isinstance(grid.cells[26], GradientColor)
    assert grid.cells[26].segments[0].end_percent == pytest.approx(200 / 3)
    assert grid.cells[27] == SolidColor(LIVED)


def test_weeks_view_cell_count(quarter_century_params):
    params = LifeParameters(
        birth_date=quarter_century_params.birth_date,
        lifespan_years=80,
        granularity=TimeGranularity.WEEKS,
        reference_now=quarter_century_params.reference_now,
    )

    grid = assemble_grid(params, [])

    assert len(grid.cells) == 4175
    assert grid.layout.units_per_row == 52


def test_annotations_and_shape_carried(quarter_century_params):
    grid = assemble_grid(quarter_century_params, [], shape=ShapeKind.HEART)

    assert grid.shape == ShapeKind.HEART
    texts = [a.text for a in grid.annotations]
    assert "Birth" in texts
    assert "Turning\n80" in texts


def test_viewport_defaults_from_settings(quarter_century_params):
    assert assemble_grid(quarter_century_params, [], use_cache=False).layout == assemble_grid(
        quarter_century_params, [], 1200, use_cache=False
    ).layout


def test_activity_order_changes_grid(quarter_century_params):
    first = Activity(id=1, name="A", rate_hours=6, rate_period=RatePeriod.DAY, color=Rgb(255, 0, 0), applies_to_past=True)
    second = Activity(id=2, name="B", rate_hours=6, rate_period=RatePeriod.DAY, color=Rgb(0, 255, 0), applies_to_past=True)

    forward = assemble_grid(quarter_century_params, [first, second])
    backward = assemble_grid(quarter_century_params, [second, first])

    assert forward.cells[0] == SolidColor(first.color)
    assert backward.cells[0] == SolidColor(second.color)
