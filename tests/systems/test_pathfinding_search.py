"""A* search over GridModel snapshots."""

import pytest

from grid_pathfinder import new, search
from grid_pathfinder.core.grid import GridModel
from grid_pathfinder.systems.pathfinding import a_star, heuristic


def _manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _assert_valid_path(grid: GridModel, path) -> None:
    assert path[0] == grid.start and path[-1] == grid.end
    assert len(set(path)) == len(path)
    assert all(_manhattan(p1, p2) == 1 for p1, p2 in zip(path, path[1:]))
    assert all(grid.in_bounds(p) and not grid.is_obstacle(p) for p in path)


def test_heuristic_is_manhattan():
    assert heuristic((0, 0), (3, 4)) == 7
    assert heuristic((5, 2), (1, 2)) == 4


def test_open_three_by_three():
    grid = GridModel(3, 3, (0, 0), (2, 2))
    result = search(grid)
    assert result.found
    assert result.cost == 4
    _assert_valid_path(grid, result.path)


@pytest.mark.parametrize(
    "start, end",
    [((0, 0), (0, 7)), ((7, 7), (0, 0)), ((3, 1), (5, 6)), ((6, 2), (2, 5))],
)
def test_path_length_matches_manhattan_without_obstacles(start, end):
    grid = new(8, 8, start, end)
    result = search(grid)
    assert result.found
    assert result.cost == _manhattan(start, end)
    _assert_valid_path(grid, result.path)


def test_tie_break_is_first_in_open_order():
    grid = GridModel(3, 3, (0, 0), (2, 2))
    result = search(grid)
    assert result.path == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]
    assert result.expanded == [(0, 0), (1, 0), (0, 1), (2, 0), (1, 1), (0, 2), (2, 1), (1, 2)]
    assert result.visited == frozenset(result.expanded)


def test_fully_walled_end_is_unreachable():
    grid = GridModel(5, 5, (0, 0), (2, 2))
    grid.add_obstacles([(1, 2), (3, 2), (2, 1), (2, 3)])
    result = search(grid)
    assert result.found is False
    assert result.path == []
    assert result.cost is None
    reachable = {
        (r, c) for r in range(5) for c in range(5)
    } - grid.obstacles - {grid.end}
    assert result.visited == reachable


def test_wall_with_single_gap_routes_through_it():
    grid = GridModel(5, 5, (0, 0), (0, 4))
    grid.add_obstacles([(r, 2) for r in range(4)])
    result = search(grid)
    assert result.found
    assert (4, 2) in result.path
    assert result.cost == 12
    _assert_valid_path(grid, result.path)


def test_visited_never_contains_obstacles_or_out_of_bounds():
    grid = GridModel(6, 6, (0, 0), (5, 5))
    grid.add_obstacles([(1, 1), (1, 2), (1, 3), (2, 3), (3, 3), (4, 1), (4, 2)])
    result = search(grid)
    assert result.found
    assert not result.visited & grid.obstacles
    assert all(grid.in_bounds(c) for c in result.visited)
    _assert_valid_path(grid, result.path)


def test_search_is_idempotent():
    grid = GridModel(6, 6, (5, 0), (0, 5))
    grid.add_obstacles([(2, 2), (3, 2), (2, 3)])
    first = search(grid)
    second = search(grid)
    assert first.path == second.path
    assert first.visited == second.visited


def test_toggle_twice_restores_result():
    grid = GridModel(6, 6, (0, 0), (5, 5))
    grid.add_obstacles([(2, 2), (2, 3)])
    before = search(grid)
    cell = before.path[2]
    grid.toggle_obstacle(cell)
    changed = search(grid)
    grid.toggle_obstacle(cell)
    after = search(grid)
    assert cell not in changed.path
    assert after == before


def test_no_state_leaks_between_runs():
    grid = GridModel(3, 5, (0, 0), (0, 4))
    search(grid)
    grid.add_obstacles([(0, 2), (1, 2)])
    result = search(grid)
    assert result.cost == 8
    assert (2, 2) in result.path
    _assert_valid_path(grid, result.path)


def test_a_star_with_custom_neighbors():
    def line(cell):
        return [(cell[0], cell[1] + 1)] if cell[1] < 3 else []

    result = a_star((0, 0), (0, 3), line)
    assert result.path == [(0, 0), (0, 1), (0, 2), (0, 3)]


def test_a_star_same_start_goal():
    result = a_star((1, 2), (1, 2), lambda cell: [])
    assert result.found
    assert result.path == [(1, 2)]
    assert result.cost == 0
