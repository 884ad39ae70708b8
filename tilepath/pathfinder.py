"""
Cached pathfinding facade over a single read-only grid.

Usage:
    grid = Grid.from_walkable(walkable)
    pf = Pathfinder(grid, SearchSettings(heuristic="manhattan"))
    path = pf.path((0, 0), (8, 3))

Results are cached per (start, goal). The grid never changes after
construction, so cached paths stay valid for the facade's lifetime.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import List, Tuple

from .astar import PointLike, find_path
from .config import DEFAULT_SETTINGS, SearchSettings
from .coords import Point
from .grid import Grid
from .heuristics import Heuristic, resolve_heuristic

log = logging.getLogger(__name__)


class Pathfinder:
    """Grid pathfinding facade with an LRU result cache."""

    def __init__(self, grid: Grid, settings: SearchSettings | None = None) -> None:
        self.grid = grid
        self.settings = settings or DEFAULT_SETTINGS
        self._heuristic: Heuristic = resolve_heuristic(
            self.settings.heuristic, grid, self.settings.min_step_cost
        )
        self._cache: OrderedDict[Tuple[Point, Point], List[Point]] = OrderedDict()

    # --------- Public API ---------

    def path(self, start: PointLike, goal: PointLike) -> List[Point]:
        """Compute a path from start to goal. Returns an empty list if unreachable."""

        key = (Point.of(start), Point.of(goal))
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return list(cached)

        path = find_path(
            self.grid, key[0], key[1], settings=self.settings, heuristic=self._heuristic
        )
        self._remember(key, path)
        return list(path)

    def reachable(self, start: PointLike, goal: PointLike) -> bool:
        if Point.of(start) == Point.of(goal):
            self.grid.cell_at(start)
            return True
        return bool(self.path(start, goal))

    def invalidate(self) -> None:
        """Clear the internal path cache."""

        self._cache.clear()

    @property
    def cached_routes(self) -> int:
        return len(self._cache)

    # --------- Internal helpers ---------

    def _remember(self, key: Tuple[Point, Point], path: List[Point]) -> None:
        limit = self.settings.cache_size
        if limit == 0:
            return
        self._cache[key] = path
        self._cache.move_to_end(key)
        while len(self._cache) > limit:
            evicted, _ = self._cache.popitem(last=False)
            log.debug("evicted cached route %s -> %s", *evicted)


__all__ = ["Pathfinder"]
