import random

import pytest

from maze.generator import generate_maze
from maze.maze_core import (
    bfs_shortest_path, bfs_distances, neighbors_open, to_cell, in_bounds, is_walkable,
    describe_grid, new_grid
)
from utils.constants import WALL, PATH


def test_to_cell_floors():
    assert to_cell((1.7, 2.2)) == (1, 2)
    assert to_cell((-0.2, 0.0)) == (-1, 0)


def test_bounds_and_walkable(corridor_grid):
    assert in_bounds(corridor_grid, 0, 0)
    assert not in_bounds(corridor_grid, 7, 0)
    assert not in_bounds(corridor_grid, 0, -1)
    assert is_walkable(corridor_grid, 3, 1)
    assert not is_walkable(corridor_grid, 3, 3)


def test_neighbors_order(open_grid):
    assert neighbors_open(open_grid, 3, 3) == [(3, 2), (3, 4), (4, 3), (2, 3)]
    assert neighbors_open(open_grid, 1, 1) == [(1, 2), (2, 1)]


def test_corridor_path(corridor_grid):
    path = bfs_shortest_path(corridor_grid, (1, 1), (5, 5))
    assert path[0] == (1, 1)
    assert path[-1] == (5, 5)
    assert len(path) == 9


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_path_is_shortest_and_contiguous(seed):
    layout = generate_maze(15, 15, random.Random(seed))
    path = bfs_shortest_path(layout.grid, layout.start, layout.end)

    assert len(path) == bfs_distances(layout.grid, layout.start)[layout.end] + 1
    for (ax, az), (bx, bz) in zip(path, path[1:]):
        assert abs(ax - bx) + abs(az - bz) == 1
    for x, z in path:
        assert layout.grid[z, x] != WALL


def test_continuous_positions_are_floored(corridor_grid):
    path = bfs_shortest_path(corridor_grid, (1.8, 1.4), (5.2, 5.9))
    assert path[0] == (1, 1)
    assert path[-1] == (5, 5)


def test_same_start_and_goal(corridor_grid):
    assert bfs_shortest_path(corridor_grid, (2, 1), (2, 1)) == [(2, 1)]


def test_unreachable_goal():
    grid = new_grid(7, 7, WALL)
    grid[1, 1] = PATH
    grid[5, 5] = PATH
    assert bfs_shortest_path(grid, (1, 1), (5, 5)) == []


@pytest.mark.parametrize("start,goal", [((-1, 1), (5, 5)), ((1, 1), (7, 5)), ((1, 1), (5, 9.5))])
def test_out_of_bounds_endpoints_raise(corridor_grid, start, goal):
    with pytest.raises(ValueError):
        bfs_shortest_path(corridor_grid, start, goal)


def test_describe_grid(corridor_grid):
    lines = describe_grid(corridor_grid).splitlines()
    assert lines[0] == "#######"
    assert lines[1] == "#.....#"
