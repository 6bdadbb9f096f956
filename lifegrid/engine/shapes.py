"""Cell shape kinds.

A closed set resolved once per render pass; the rendering surface maps each
kind to its drawing routine.
"""

from enum import StrEnum


class ShapeKind(StrEnum):
    SQUARE = "square"
    CIRCLE = "circle"
    HEART = "heart"
    DIAMOND = "diamond"
    HEXAGON = "hexagon"


SHAPE_CYCLE: tuple[ShapeKind, ...] = tuple(ShapeKind)


def next_shape(kind: ShapeKind) -> ShapeKind:
    """Shape after kind in the toggle order, wrapping to square."""
    index = SHAPE_CYCLE.index(ShapeKind(kind))
    return SHAPE_CYCLE[(index + 1) % len(SHAPE_CYCLE)]
