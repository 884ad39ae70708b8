"""Helpers for tile maps whose rows run along negative y.

Tile editors that place row ``y`` of a map at tile coordinate ``(x, -y)``
need their coordinates flipped before they can address a :class:`Grid`.
Boundary maps produced here are boolean walkability arrays indexed
``[x][y]`` with ``True`` for open tiles.
"""

from __future__ import annotations

import math
from typing import Any, Callable, List, Tuple

import numpy as np

from .astar import find_path
from .config import SearchSettings
from .coords import Point
from .grid import Grid

TileCoord = Tuple[int, int]

# up, right, down, left
_TILE_DIRS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def to_tile(point: Point) -> TileCoord:
    return point.x, -point.y


def from_tile(tile: TileCoord) -> Point:
    x, y = tile
    return Point(int(x), -int(y))


def boundary_map(
    width: int, height: int, has_tile: Callable[[TileCoord], bool]
) -> np.ndarray:
    """Return a walkability array where every placed tile is a boundary."""

    walkable = np.zeros((width, height), dtype=bool)
    for x in range(width):
        for y in range(height):
            walkable[x, y] = not has_tile(to_tile(Point(x, y)))
    return walkable


def tile_path(
    boundary: Any,
    start: TileCoord,
    destination: TileCoord,
    *,
    settings: SearchSettings | None = None,
) -> List[TileCoord]:
    """Tile coordinates from ``start`` (exclusive) to ``destination`` (inclusive)."""

    grid = Grid.from_walkable(boundary)
    goal = from_tile(destination)
    if not grid.is_walkable(goal):
        return []
    path = find_path(grid, from_tile(start), goal, settings=settings)
    return [to_tile(p) for p in path]


def furthest_adjacent_tile(
    boundary: Any, tile: TileCoord, reference: TileCoord
) -> TileCoord | None:
    """Open tile next to ``tile`` that lies furthest from ``reference``.

    Candidates are checked up, right, down, left; the first one wins a tie.
    """

    walkable = np.asarray(boundary, dtype=bool)
    width, height = walkable.shape
    best: TileCoord | None = None
    best_distance = -1.0
    for dx, dy in _TILE_DIRS:
        candidate = (tile[0] + dx, tile[1] + dy)
        p = from_tile(candidate)
        if not (0 <= p.x < width and 0 <= p.y < height) or not walkable[p.x, p.y]:
            continue
        distance = math.hypot(candidate[0] - reference[0], candidate[1] - reference[1])
        if distance > best_distance:
            best = candidate
            best_distance = distance
    return best


__all__ = [
    "TileCoord",
    "boundary_map",
    "from_tile",
    "furthest_adjacent_tile",
    "tile_path",
    "to_tile",
]
