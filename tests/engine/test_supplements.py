from datetime import date, datetime

import pytest

from lifegrid.engine.annotations import ROW_CAPTIONS, default_annotations
from lifegrid.engine.calendar_math import age_in_units
from lifegrid.engine.palette import ACTIVITY_PALETTE, default_activities, next_activity_color
from lifegrid.engine.schemas.activity import Activity, RatePeriod, Rgb
from lifegrid.engine.schemas.descriptors import GradientColor, GradientSegment
from lifegrid.engine.schemas.life_parameters import LifeParameters, TimeGranularity
from lifegrid.engine.shapes import ShapeKind, next_shape

BLACK = Rgb(0, 0, 0)
WHITE = Rgb(255, 255, 255)
RED = Rgb(255, 0, 0)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("#3B82F6", Rgb(0x3B, 0x82, 0xF6)),
        ("#3b82f6", Rgb(0x3B, 0x82, 0xF6)),
        ("#fff", WHITE),
        ("#FF000080", RED),
        (" 000000 ", BLACK),
    ],
)
def test_rgb_from_hex(text, expected):
    assert Rgb.from_hex(text) == expected


@pytest.mark.parametrize("text", ["", "#12", "#12345", "#GGGGGG", "red"])
def test_rgb_from_hex_rejects_garbage(text):
    with pytest.raises(ValueError):
        Rgb.from_hex(text)


def test_rgb_hex_is_uppercase():
    assert Rgb(59, 130, 246).hex == "#3B82F6"
    assert str(Rgb(0, 0, 0)) == "#000000"


def test_gradient_stops_are_hard_edged():
    gradient = GradientColor(
        default_color=WHITE,
        segments=(GradientSegment(0, 40, RED), GradientSegment(40, 70, BLACK)),
    )

    assert gradient.stops() == [
        (0.0, WHITE),
        (0, WHITE),
        (0, RED),
        (40, RED),
        (40, WHITE),
        (40, WHITE),
        (40, BLACK),
        (70, BLACK),
        (70, WHITE),
        (100.0, WHITE),
    ]
    assert gradient.segments[1].width_percent == 30


def test_next_activity_color_skips_used_colors():
    used = [
        Activity(id=i, name=str(i), rate_hours=1, rate_period=RatePeriod.DAY, color=ACTIVITY_PALETTE[i])
        for i in range(3)
    ]

    assert next_activity_color(used) == ACTIVITY_PALETTE[3]
    assert next_activity_color(default_activities()) == ACTIVITY_PALETTE[0]


def test_next_activity_color_cycles_when_exhausted():
    used = [
        Activity(id=i, name=str(i), rate_hours=1, rate_period=RatePeriod.DAY, color=color)
        for i, color in enumerate(ACTIVITY_PALETTE)
    ]

    assert next_activity_color(used) == ACTIVITY_PALETTE[0]
    assert next_activity_color([*used, used[0]]) == ACTIVITY_PALETTE[1]


def test_default_activities_are_unpainted():
    activities = default_activities()

    assert [a.name for a in activities] == ["Sleeping", "Eating", "Personal Hygiene"]
    assert not any(a.applies_to_past or a.applies_to_future for a in activities)


def test_weeks_annotations():
    annotations = default_annotations(TimeGranularity.WEEKS, 4175, 80)

    assert annotations[0].kind == "grid"
    assert annotations[0].text == ROW_CAPTIONS[TimeGranularity.WEEKS]
    cells = {a.text: a.cell_index for a in annotations if a.kind == "cell"}
    assert cells == {
        "Birth": 0,
        "Turning\n20": 1043,
        "Turning\n40": 2087,
        "Turning\n60": 3130,
        "Turning\n80": 4174,
    }


@pytest.mark.parametrize("granularity", [TimeGranularity.WEEKS, TimeGranularity.MONTHS])
def test_milestone_points_at_the_birthday_cell(granularity):
    """On the 40th birthday the current cell is the "Turning 40" cell."""
    params = LifeParameters(
        birth_date=date(1980, 6, 15),
        lifespan_years=80,
        granularity=granularity,
        reference_now=datetime(2020, 6, 15),
    )

    annotations = default_annotations(granularity, 5000, 80)

    (turning_40,) = [a for a in annotations if a.text == "Turning\n40"]
    assert turning_40.cell_index == age_in_units(params)


def test_milestones_beyond_lifespan_dropped():
    annotations = default_annotations(TimeGranularity.MONTHS, 360, 30)

    texts = [a.text for a in annotations]
    assert "Turning\n20" in texts
    assert "Turning\n40" not in texts
    assert annotations[-1].cell_index == 359


def test_years_view_has_no_milestones():
    texts = [a.text for a in default_annotations(TimeGranularity.YEARS, 80, 80)]

    assert texts == [ROW_CAPTIONS[TimeGranularity.YEARS], "Birth", "Turning\n80"]


def test_empty_grid_only_has_caption():
    assert len(default_annotations(TimeGranularity.DAYS, 0, 80)) == 1


def test_shape_toggle_wraps():
    assert next_shape(ShapeKind.SQUARE) == ShapeKind.CIRCLE
    assert next_shape(ShapeKind.HEXAGON) == ShapeKind.SQUARE
    assert next_shape("heart") == ShapeKind.DIAMOND
