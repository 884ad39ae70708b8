from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable

from .coords import Point

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import HeuristicKind
    from .grid import Grid

Heuristic = Callable[[Point, Point], float]

log = logging.getLogger(__name__)


def manhattan(a: Point, b: Point) -> float:
    return float(abs(a.x - b.x) + abs(a.y - b.y))


def euclidean(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def scaled(heuristic: Heuristic, factor: float) -> Heuristic:
    """Return ``heuristic`` multiplied by ``factor``.

    Stays admissible as long as ``factor`` does not exceed the cheapest cell
    an agent can step into.
    """

    if factor == 1.0:
        return heuristic

    def _scaled(a: Point, b: Point) -> float:
        return heuristic(a, b) * factor

    return _scaled


def resolve_heuristic(
    kind: HeuristicKind, grid: Grid, min_step_cost: float | None = None
) -> Heuristic:
    """Build the heuristic a search over ``grid`` should use."""

    from .config import HeuristicKind

    base = euclidean if kind == HeuristicKind.EUCLIDEAN else manhattan
    cheapest = grid.min_walkable_cost
    if min_step_cost is None:
        # No walkable cells means nothing is ever expanded.
        factor = cheapest if cheapest is not None else 1.0
    else:
        factor = min_step_cost
        if cheapest is not None and factor > cheapest:
            log.warning(
                "min_step_cost %.3f exceeds cheapest walkable cost %.3f; "
                "heuristic is no longer admissible",
                factor,
                cheapest,
            )
    return scaled(base, factor)


__all__ = ["Heuristic", "euclidean", "manhattan", "resolve_heuristic", "scaled"]
