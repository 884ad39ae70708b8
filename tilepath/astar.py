"""Weighted A* over a :class:`~tilepath.grid.Grid`.

All per-search bookkeeping (g, f, parent) lives in a dictionary keyed by
:class:`~tilepath.coords.Point` that is created for every call, so grid cells
are never mutated and several searches may share one grid.
"""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .config import DEFAULT_SETTINGS, SearchSettings
from .coords import Point
from .grid import Grid
from .heuristics import Heuristic, resolve_heuristic

log = logging.getLogger(__name__)

PointLike = Point | Tuple[int, int]


@dataclass(slots=True)
class SearchNode:
    g: float
    f: float
    parent: Point | None = None


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a single search."""

    path: List[Point] = field(default_factory=list)
    cost: float = math.inf
    expanded: int = 0

    @property
    def found(self) -> bool:
        return math.isfinite(self.cost)


def find_path(
    grid: Grid,
    start: PointLike,
    goal: PointLike,
    *,
    settings: SearchSettings | None = None,
    heuristic: Heuristic | None = None,
) -> List[Point]:
    """Return the cheapest path from ``start`` (exclusive) to ``goal`` (inclusive).

    An empty list means the goal is unreachable, or that ``start == goal``.
    Raises :class:`~tilepath.errors.OutOfBoundsError` for coordinates outside
    the grid.
    """

    return search(grid, start, goal, settings=settings, heuristic=heuristic).path


def search(
    grid: Grid,
    start: PointLike,
    goal: PointLike,
    *,
    settings: SearchSettings | None = None,
    heuristic: Heuristic | None = None,
) -> SearchResult:
    """Run A* and return the path together with its cost and expansion count."""

    settings = settings or DEFAULT_SETTINGS
    start_cell = grid.cell_at(start)
    goal_cell = grid.cell_at(goal)
    start_pt, goal_pt = start_cell.position, goal_cell.position

    if start_pt == goal_pt:
        return SearchResult(path=[], cost=0.0)
    if not goal_cell.walkable:
        log.debug("goal %s is impassable", goal_pt)
        return SearchResult()

    if heuristic is None:
        heuristic = resolve_heuristic(settings.heuristic, grid, settings.min_step_cost)

    h0 = heuristic(start_pt, goal_pt)
    nodes: Dict[Point, SearchNode] = {start_pt: SearchNode(g=0.0, f=h0)}
    closed: set[Point] = set()
    # (f, h, push order, point): lowest f, then lowest h, then first discovered.
    open_heap: list[tuple[float, float, int, Point]] = [(h0, h0, 0, start_pt)]
    push_id = 0

    while open_heap:
        f, _, _, current = heapq.heappop(open_heap)
        node = nodes[current]
        if current in closed or f > node.f:
            continue  # stale entry
        if current == goal_pt:
            path = _reconstruct(nodes, current)
            log.debug(
                "path %s -> %s: %d steps, cost %.3f, %d expanded",
                start_pt,
                goal_pt,
                len(path),
                node.g,
                len(closed),
            )
            return SearchResult(path=path, cost=node.g, expanded=len(closed))

        closed.add(current)
        for neighbor in grid.neighbors(grid.cell(current.x, current.y)):
            pos = neighbor.position
            if not neighbor.walkable or pos in closed:
                continue
            tentative = node.g + neighbor.cost
            known = nodes.get(pos)
            if known is not None and tentative >= known.g:
                continue
            h = heuristic(pos, goal_pt)
            nodes[pos] = SearchNode(g=tentative, f=tentative + h, parent=current)
            push_id += 1
            heapq.heappush(open_heap, (tentative + h, h, push_id, pos))

    log.debug("no path %s -> %s after %d expansions", start_pt, goal_pt, len(closed))
    return SearchResult(expanded=len(closed))


def path_cost(grid: Grid, path: Iterable[PointLike]) -> float:
    """Sum the entry cost of every cell along ``path``."""

    return sum(grid.cost_at(p) for p in path)


def _reconstruct(nodes: Dict[Point, SearchNode], goal: Point) -> List[Point]:
    out: List[Point] = []
    current: Point | None = goal
    while current is not None:
        node = nodes[current]
        if node.parent is None:
            break  # start cell, excluded
        out.append(current)
        current = node.parent
    out.reverse()
    return out


__all__ = ["SearchNode", "SearchResult", "find_path", "path_cost", "search"]
