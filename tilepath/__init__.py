"""Cost-weighted A* pathfinding on 4-connected tile grids."""

from .astar import SearchResult, find_path, path_cost, search
from .config import HeuristicKind, SearchSettings
from .coords import Point
from .errors import GridConfigurationError, OutOfBoundsError, PathfindingError
from .grid import Cell, Grid
from .heuristics import euclidean, manhattan
from .neighbors import neighbors_bounded, neighbors_point
from .pathfinder import Pathfinder

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "Grid",
    "GridConfigurationError",
    "HeuristicKind",
    "OutOfBoundsError",
    "PathfindingError",
    "Pathfinder",
    "Point",
    "SearchResult",
    "SearchSettings",
    "euclidean",
    "find_path",
    "manhattan",
    "neighbors_bounded",
    "neighbors_point",
    "path_cost",
    "search",
    "__version__",
]
