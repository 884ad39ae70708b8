from __future__ import annotations

from typing import Iterable

from .coords import Point

# +x, -x, +y, -y; searches rely on this order for reproducible tie-breaking.
_GRID_DIRS = (
    (+1, 0),
    (-1, 0),
    (0, +1),
    (0, -1),
)


def neighbors_point(p: Point) -> Iterable[Point]:
    for dx, dy in _GRID_DIRS:
        yield Point(p.x + dx, p.y + dy)


def neighbors_bounded(p: Point, width: int, height: int) -> Iterable[Point]:
    for n in neighbors_point(p):
        if 0 <= n.x < width and 0 <= n.y < height:
            yield n
