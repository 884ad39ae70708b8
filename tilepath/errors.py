"""Exceptions raised by grid construction and path searches."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base class for all pathfinding failures."""


class GridConfigurationError(PathfindingError, ValueError):
    """Raised when a grid cannot be built from the supplied dimensions or costs."""


class OutOfBoundsError(PathfindingError, IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


__all__ = ["GridConfigurationError", "OutOfBoundsError", "PathfindingError"]
