import numpy as np
import pytest

from tilepath import Grid, OutOfBoundsError, Pathfinder, Point, SearchSettings, find_path


@pytest.fixture
def grid() -> Grid:
    costs = np.ones((5, 5))
    costs[2, 0:4] = 0.0
    return Grid.from_costs(costs)


def test_path_matches_direct_search(grid: Grid):
    pf = Pathfinder(grid)
    assert pf.path((0, 0), (4, 0)) == find_path(grid, (0, 0), (4, 0))


def test_results_are_cached(grid: Grid):
    pf = Pathfinder(grid)
    first = pf.path(Point(0, 0), Point(4, 0))
    assert pf.cached_routes == 1
    second = pf.path((0, 0), (4, 0))
    assert second == first
    assert pf.cached_routes == 1


def test_returned_paths_are_copies(grid: Grid):
    pf = Pathfinder(grid)
    first = pf.path((0, 0), (4, 0))
    first.clear()
    assert pf.path((0, 0), (4, 0)) != []


def test_cache_evicts_least_recently_used(grid: Grid):
    pf = Pathfinder(grid, SearchSettings(cache_size=2))
    pf.path((0, 0), (4, 0))
    pf.path((0, 0), (0, 4))
    pf.path((0, 0), (4, 0))
    pf.path((0, 0), (1, 1))
    assert pf.cached_routes == 2
    assert (Point(0, 0), Point(0, 4)) not in pf._cache
    assert (Point(0, 0), Point(4, 0)) in pf._cache


def test_cache_can_be_disabled(grid: Grid):
    pf = Pathfinder(grid, SearchSettings(cache_size=0))
    assert pf.path((0, 0), (4, 4))
    assert pf.cached_routes == 0


def test_invalidate_clears_cache(grid: Grid):
    pf = Pathfinder(grid)
    pf.path((0, 0), (4, 4))
    pf.invalidate()
    assert pf.cached_routes == 0


def test_unreachable_results_are_cached_too():
    grid = Grid.from_walkable([[True, False, True]])
    pf = Pathfinder(grid)
    assert pf.path((0, 0), (0, 2)) == []
    assert pf.cached_routes == 1
    assert not pf.reachable((0, 0), (0, 2))


def test_reachable(grid: Grid):
    pf = Pathfinder(grid)
    assert pf.reachable((0, 0), (4, 0))
    assert pf.reachable((3, 3), (3, 3))
    with pytest.raises(OutOfBoundsError):
        pf.reachable((9, 9), (9, 9))
