"""Assembled grid cache.

Keys hold every input of a grid: all LifeParameters fields, the full ordered
activity tuple, the viewport and the baseline colors. Entries are never
mutated, so a stale key can only miss, never return a wrong grid.
"""

from typing import TYPE_CHECKING

from loguru import logger

from lifegrid.config.settings import settings
from lifegrid.engine.schemas.activity import Activity, Rgb
from lifegrid.engine.schemas.life_parameters import LifeParameters
from lifegrid.engine.shapes import ShapeKind

if TYPE_CHECKING:
    from lifegrid.engine.assembler import LifeGrid

GridCacheKey = tuple[LifeParameters, tuple[Activity, ...], float, float | None, Rgb, Rgb, ShapeKind]

_grid_cache: dict[GridCacheKey, "LifeGrid"] = {}


def grid_cache_key(
    params: LifeParameters,
    activities: tuple[Activity, ...],
    viewport_width: float,
    viewport_height: float | None,
    lived_color: Rgb,
    unlived_color: Rgb,
    shape: ShapeKind,
) -> GridCacheKey:
    """Build the cache key for a grid request.

    Args:
        params: Life parameters (every field participates)
        activities: Ordered activities; order is part of the key
        viewport_width: Viewport width used by the layout planner
        viewport_height: Optional viewport height
        lived_color: Lived baseline color
        unlived_color: Unlived baseline color
        shape: Cell shape of the render pass

    Returns:
        Hashable key tuple
    """
    return (params, tuple(activities), float(viewport_width), viewport_height, lived_color, unlived_color, ShapeKind(shape))


def get_cached_grid(key: GridCacheKey) -> "LifeGrid | None":
    cached = _grid_cache.get(key)
    if cached is not None:
        logger.debug(
            "grid_cache: Cache hit",
            granularity=key[0].granularity.value,
            activity_count=len(key[1]),
        )
    return cached


def set_cached_grid(key: GridCacheKey, grid: "LifeGrid") -> None:
    """Store a grid, evicting the oldest entry once the cache is full."""
    if key not in _grid_cache and len(_grid_cache) >= settings.grid_cache_max_entries:
        oldest = next(iter(_grid_cache))
        del _grid_cache[oldest]
        logger.debug("grid_cache: Evicted oldest entry", size=len(_grid_cache))
    _grid_cache[key] = grid
    logger.debug(
        "grid_cache: Cache set",
        granularity=key[0].granularity.value,
        activity_count=len(key[1]),
        size=len(_grid_cache),
    )


def cache_size() -> int:
    return len(_grid_cache)


def clear_cache() -> None:
    """Clear the grid cache."""
    _grid_cache.clear()
    logger.debug("grid_cache: Cache cleared")
