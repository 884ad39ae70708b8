"""Dense 2-D cost grid with 4-connected topology."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Tuple

import numpy as np

from .coords import Point
from .errors import GridConfigurationError, OutOfBoundsError
from .neighbors import neighbors_bounded

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Cell:
    """A single grid location. ``cost == 0`` marks it impassable."""

    x: int
    y: int
    cost: float

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def walkable(self) -> bool:
        return self.cost > 0.0


class Grid:
    """Read-only ``width`` x ``height`` collection of :class:`Cell` objects.

    ``costs`` is indexed ``costs[x][y]``. Float arrays are used as per-cell
    entry costs; boolean arrays are walkability maps where ``True`` becomes
    cost ``1.0`` and ``False`` becomes ``0.0``.
    """

    def __init__(self, width: int, height: int, costs: Any) -> None:
        if width <= 0 or height <= 0:
            raise GridConfigurationError(
                f"grid dimensions must be positive, got {width}x{height}"
            )
        values = _coerce_costs(costs)
        if values.shape != (width, height):
            raise GridConfigurationError(
                f"cost source shape {values.shape} does not match {width}x{height}"
            )

        self.width = int(width)
        self.height = int(height)
        values.setflags(write=False)
        self._costs = values
        self._cells: Tuple[Tuple[Cell, ...], ...] = tuple(
            tuple(Cell(x, y, float(values[x, y])) for y in range(self.height))
            for x in range(self.width)
        )
        walkable = values[values > 0.0]
        self._min_walkable = float(walkable.min()) if walkable.size else None
        log.debug(
            "built %dx%d grid (%d walkable cells)", self.width, self.height, walkable.size
        )

    @classmethod
    def from_costs(cls, costs: Any) -> Grid:
        values = _coerce_costs(costs)
        width, height = values.shape
        return cls(width, height, values)

    @classmethod
    def from_walkable(cls, walkable: Any) -> Grid:
        values = np.asarray(walkable, dtype=bool)
        if values.ndim != 2:
            raise GridConfigurationError("walkability map must be two-dimensional")
        width, height = values.shape
        return cls(width, height, values)

    # --------- Lookup ---------

    def contains(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self._cells[x][y]

    def cell_at(self, point: Point | Tuple[int, int]) -> Cell:
        p = Point.of(point)
        return self.cell(p.x, p.y)

    def cost_at(self, point: Point | Tuple[int, int]) -> float:
        return self.cell_at(point).cost

    def is_walkable(self, point: Point | Tuple[int, int]) -> bool:
        return self.cell_at(point).walkable

    @property
    def costs(self) -> np.ndarray:
        return self._costs.copy()

    @property
    def min_walkable_cost(self) -> float | None:
        """Cheapest positive cell cost, or ``None`` if nothing is walkable."""

        return self._min_walkable

    # --------- Topology ---------

    def neighbors(self, cell: Cell) -> list[Cell]:
        """Return in-bounds axis-aligned neighbours in ``+x, -x, +y, -y`` order.

        Impassable cells are included; filtering them is up to the caller.
        """

        return [
            self._cells[n.x][n.y]
            for n in neighbors_bounded(cell.position, self.width, self.height)
        ]

    def __len__(self) -> int:
        return self.width * self.height

    def __iter__(self) -> Iterator[Cell]:
        for column in self._cells:
            yield from column

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"


def _coerce_costs(costs: Any) -> np.ndarray:
    try:
        raw = np.asarray(costs)
    except (TypeError, ValueError) as exc:
        raise GridConfigurationError(f"unusable cost source: {exc}") from exc
    if raw.ndim != 2:
        raise GridConfigurationError(
            f"cost source must be two-dimensional, got {raw.ndim} dimension(s)"
        )
    if raw.dtype == np.bool_:
        return np.where(raw, 1.0, 0.0)
    try:
        values = raw.astype(float)
    except (TypeError, ValueError) as exc:
        raise GridConfigurationError(f"cost source is not numeric: {exc}") from exc
    if not np.all(np.isfinite(values)):
        raise GridConfigurationError("cell costs must be finite")
    if np.any(values < 0.0):
        raise GridConfigurationError("cell costs must be non-negative")
    return values


__all__ = ["Cell", "Grid"]
