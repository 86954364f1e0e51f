import numpy as np

from entities.obstacle import ObstacleType
from game.level_manager import LevelManager, initial_heading
from maze.difficulty import get_level_config, in_start_block
from maze.maze_core import new_grid
from utils.constants import (
    WALL, PATH, HEADING_NORTH, HEADING_SOUTH, HEADING_EAST, HEADING_WEST
)
from tests.conftest import carve


def test_initial_heading_prefers_north_south_east_west():
    grid = new_grid(5, 5, WALL)
    carve(grid, [(2, 2), (2, 1), (2, 3), (3, 2), (1, 2)])
    assert initial_heading(grid, (2, 2)) == HEADING_NORTH

    grid[1, 2] = WALL
    assert initial_heading(grid, (2, 2)) == HEADING_SOUTH

    grid[3, 2] = WALL
    assert initial_heading(grid, (2, 2)) == HEADING_EAST

    grid[2, 3] = WALL
    assert initial_heading(grid, (2, 2)) == HEADING_WEST

    grid[2, 1] = WALL
    assert initial_heading(grid, (2, 2)) == HEADING_NORTH


def test_first_level_has_no_obstacles(rng):
    level = LevelManager(rng).create_level(0)

    assert level.size == 7
    assert level.obstacles == []
    assert len(level.powerups) == 2
    assert level.start_pos == (1, 1)
    assert level.goal_pos == (5, 5)


def test_spawned_entities(rng):
    manager = LevelManager(rng)
    level = manager.create_level(2)
    config = get_level_config(2)

    assert manager.get_current_level() is level
    assert len(level.obstacles) == config.obstacles
    assert [o.id for o in level.obstacles] == [f"obs-{i}" for i in range(config.obstacles)]
    assert [p.id for p in level.powerups] == [f"pwr-{i}" for i in range(config.obstacles, config.obstacles + 2)]

    for i, obstacle in enumerate(level.obstacles):
        expected = ObstacleType.PATROL_ENEMY if i % 2 == 0 else ObstacleType.STATIC_SPIKE
        assert obstacle.type is expected
        assert 1.5 <= obstacle.speed < 2.5

    cells = [tuple(int(c) for c in o.initial_pos) for o in level.obstacles]
    cells += [(int(p.x), int(p.z)) for p in level.powerups]
    assert len(set(cells)) == len(cells)
    for x, z in cells:
        assert level.grid[z, x] == PATH
        assert not in_start_block(x, z)


def test_static_levels_have_no_patrols(rng):
    level = LevelManager(rng).create_level(1)
    assert all(o.type is ObstacleType.STATIC_SPIKE for o in level.obstacles)


def test_grid_is_int8(rng):
    level = LevelManager(rng).create_level(3)
    assert level.grid.dtype == np.int8
    assert level.grid.shape == (13, 13)
