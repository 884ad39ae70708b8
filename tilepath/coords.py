from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """Integer grid coordinate exchanged with callers."""

    x: int
    y: int

    @classmethod
    def of(cls, value: Point | Tuple[int, int]) -> Point:
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(int(x), int(y))

    def translate(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)

    def manhattan_to(self, other: Point) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def is_adjacent(self, other: Point) -> bool:
        return self.manhattan_to(other) == 1

    def as_tuple(self) -> Tuple[int, int]:
        return self.x, self.y
