import random

import numpy as np
import pytest

from entities.obstacle import ObstacleManager
from entities.powerup import PowerUpManager
from game.session import GameSession
from maze.maze_core import new_grid
from utils.constants import WALL, PATH


def carve(grid, cells, state=PATH):
    for x, z in cells:
        grid[z, x] = state
    return grid


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def open_grid():
    """7x7 grid: wall ring around a fully open 5x5 interior"""
    grid = new_grid(7, 7, WALL)
    grid[1:6, 1:6] = PATH
    return grid


@pytest.fixture
def corridor_grid():
    """7x7 grid with a single L-shaped corridor (1,1)->(5,1)->(5,5)"""
    grid = new_grid(7, 7, WALL)
    carve(grid, [(x, 1) for x in range(1, 6)])
    carve(grid, [(5, z) for z in range(1, 6)])
    return grid


@pytest.fixture
def session(rng):
    return GameSession(rng=rng)


@pytest.fixture
def playing_session(session):
    """First level, countdown skipped, no entities"""
    session.new_game()
    session.skip_countdown()
    session.level.obstacle_manager = ObstacleManager()
    session.level.powerup_manager = PowerUpManager()
    return session


def assert_int8_grid(grid):
    assert isinstance(grid, np.ndarray)
    assert grid.dtype == np.int8
