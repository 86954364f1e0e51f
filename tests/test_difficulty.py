import pytest

from maze.difficulty import (
    LEVELS, LevelConfig, get_level_config, get_level_name, get_level_description,
    find_empty_spots, in_start_block
)
from maze.maze_core import new_grid
from utils.constants import WALL, PATH, START
from tests.conftest import carve


def test_level_table():
    sizes = [c.size for c in LEVELS]
    assert sizes == [7, 9, 11, 13, 15]
    assert [c.obstacles for c in LEVELS] == [0, 2, 4, 6, 8]
    assert [c.moving_obstacles for c in LEVELS] == [False, False, True, True, True]


def test_levels_past_the_table_keep_growing():
    assert get_level_config(4) == LEVELS[4]
    assert get_level_config(5) == LevelConfig(size=17, obstacles=8, moving_obstacles=True)
    assert get_level_config(7).size == 21


def test_negative_level_rejected():
    with pytest.raises(ValueError):
        get_level_config(-1)


def test_level_names():
    assert get_level_name(0) == "SECTOR 01"
    assert get_level_name(11) == "SECTOR 12"
    assert "Maze: 11x11" in get_level_description(2)


def test_zero_count(open_grid, rng):
    assert find_empty_spots(open_grid, 0, rng=rng) == []
    assert find_empty_spots(open_grid, -3, rng=rng) == []


def test_spots_are_distinct_path_cells_outside_start_block(rng):
    grid = new_grid(15, 15, WALL)
    grid[1:14, 1:14] = PATH
    grid[1, 1] = START

    spots = find_empty_spots(grid, 20, rng=rng)

    assert len(spots) == 20
    assert len(set(spots)) == 20
    for x, z in spots:
        assert grid[z, x] == PATH
        assert not in_start_block(x, z)


def test_start_block_allowed_when_not_excluded(rng):
    grid = new_grid(7, 7, WALL)
    carve(grid, [(1, 2), (2, 1)])

    spots = find_empty_spots(grid, 2, exclude_near_start=False, rng=rng)
    assert sorted(spots) == [(1, 2), (2, 1)]


def test_under_fill_returns_what_it_found(rng):
    grid = new_grid(9, 9, WALL)
    carve(grid, [(1, 1), (2, 1), (3, 1)])   # all inside the start block
    carve(grid, [(6, 6), (7, 6)])

    spots = find_empty_spots(grid, 5, rng=rng)
    assert sorted(spots) == [(6, 6), (7, 6)]


def test_no_candidates(rng):
    grid = new_grid(9, 9, WALL)
    assert find_empty_spots(grid, 3, rng=rng) == []
