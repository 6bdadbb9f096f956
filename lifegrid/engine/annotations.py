"""Default grid annotations.

Produces annotation anchors (which cell, what text, which color). Placing
the text next to the grid is left to the rendering surface.
"""

import math
from dataclasses import dataclass
from typing import Literal

from lifegrid.engine.constants import UNITS_PER_YEAR
from lifegrid.engine.schemas.activity import Rgb
from lifegrid.engine.schemas.life_parameters import TimeGranularity

AnnotationKind = Literal["cell", "grid"]
AnnotationPosition = Literal["left", "right", "topWithArrows"]

BIRTH_COLOR = Rgb.from_hex("#3B82F6")
LIFESPAN_COLOR = Rgb.from_hex("#8B5CF6")
MILESTONE_COLORS: dict[int, Rgb] = {
    20: Rgb.from_hex("#22C55E"),
    40: Rgb.from_hex("#EAB308"),
    60: Rgb.from_hex("#8B5CF6"),
}

ROW_CAPTIONS: dict[TimeGranularity, str] = {
    TimeGranularity.YEARS: "Each row is one decade",
    TimeGranularity.MONTHS: "Each row is 36 months = 3 years",
    TimeGranularity.WEEKS: "Each row is 52 weeks = 1 year",
    TimeGranularity.DAYS: "Each row is 100 days",
    TimeGranularity.HOURS: "Each row is one day",
}

# Views that carry "Turning N" milestones
MILESTONE_GRANULARITIES = (TimeGranularity.WEEKS, TimeGranularity.MONTHS)


@dataclass(frozen=True)
class GridAnnotation:
    kind: AnnotationKind
    text: str
    color: Rgb
    position: AnnotationPosition
    cell_index: int | None = None


def default_annotations(granularity: TimeGranularity, total_cells: int, lifespan_years: int) -> list[GridAnnotation]:
    """Birth, lifespan end, row caption and age milestones for a view.

    Cell anchors that fall outside the grid are dropped.
    """
    granularity = TimeGranularity(granularity)
    annotations = [
        GridAnnotation(kind="grid", text=ROW_CAPTIONS[granularity], color=BIRTH_COLOR, position="topWithArrows"),
    ]
    if total_cells <= 0:
        return annotations

    annotations.append(GridAnnotation(kind="cell", text="Birth", color=BIRTH_COLOR, position="left", cell_index=0))

    if granularity in MILESTONE_GRANULARITIES:
        for age, color in MILESTONE_COLORS.items():
            # Cell holding the birthday, counted the way lived units are
            index = math.floor(age * UNITS_PER_YEAR[granularity])
            if age < lifespan_years and index < total_cells:
                annotations.append(GridAnnotation(kind="cell", text=f"Turning\n{age}", color=color, position="left", cell_index=index))

    annotations.append(
        GridAnnotation(
            kind="cell",
            text=f"Turning\n{lifespan_years}",
            color=LIFESPAN_COLOR,
            position="right",
            cell_index=total_cells - 1,
        )
    )
    return annotations
