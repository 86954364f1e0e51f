"""
Level Manager - handles maze generation and entity spawning
"""

import logging
import random

from maze.generator import generate_maze
from maze.difficulty import get_level_config, find_empty_spots
from entities.obstacle import Obstacle, ObstacleType, ObstacleManager
from entities.powerup import PowerUp, PowerUpType, PowerUpManager
from utils.constants import (
    WALL, HEADING_NORTH, HEADING_SOUTH, HEADING_EAST, HEADING_WEST,
    PATROL_BASE_SPEED, PATROL_RANGE, EXTRA_LIFE_THRESHOLD, EXTRA_POWERUP_SPOTS
)

logger = logging.getLogger(__name__)


def initial_heading(grid, start):
    """
    Face the first open neighbour of the start cell

    Checked in order north, south, east, west. Falls back to north.
    """
    x, z = start
    height, width = grid.shape

    if z > 0 and grid[z - 1, x] != WALL:
        return HEADING_NORTH
    if z < height - 1 and grid[z + 1, x] != WALL:
        return HEADING_SOUTH
    if x < width - 1 and grid[z, x + 1] != WALL:
        return HEADING_EAST
    if x > 0 and grid[z, x - 1] != WALL:
        return HEADING_WEST
    return HEADING_NORTH


class Level:
    """
    Represents a single level/maze with its entities
    """
    def __init__(self, level_index, config, grid, start_pos, goal_pos, start_heading,
                 obstacle_manager, powerup_manager):
        self.level_index = level_index
        self.config = config

        # Maze data
        self.grid = grid
        self.size = grid.shape[1]

        # Positions
        self.start_pos = start_pos
        self.goal_pos = goal_pos
        self.start_heading = start_heading

        # Entities
        self.obstacle_manager = obstacle_manager
        self.powerup_manager = powerup_manager

    @property
    def obstacles(self):
        return self.obstacle_manager.obstacles

    @property
    def powerups(self):
        return self.powerup_manager.powerups

    def __repr__(self):
        return (f"Level(index={self.level_index}, size={self.size}x{self.size}, "
                f"obstacles={len(self.obstacle_manager)}, powerups={len(self.powerup_manager)})")


class LevelManager:
    """
    Builds levels from the level table
    """
    def __init__(self, rng=None):
        self.rng = rng or random
        self.current_level = None

    def create_level(self, level_index):
        """
        Create a new level

        Args:
            level_index: Zero-based level number

        Returns:
            Level object
        """
        config = get_level_config(level_index)
        layout = generate_maze(config.size, config.size, self.rng)
        heading = initial_heading(layout.grid, layout.start)

        spots = find_empty_spots(layout.grid, config.obstacles + EXTRA_POWERUP_SPOTS,
                                 exclude_near_start=True, rng=self.rng)

        obstacle_manager = ObstacleManager()
        for i in range(config.obstacles):
            if i >= len(spots):
                break
            obstacle_manager.add_obstacle(self._make_obstacle(i, spots[i], config))

        powerup_manager = PowerUpManager()
        for i in range(config.obstacles, len(spots)):
            powerup_manager.add_powerup(self._make_powerup(i, spots[i]))

        level = Level(level_index, config, layout.grid, layout.start, layout.end, heading,
                      obstacle_manager, powerup_manager)
        self.current_level = level
        logger.info("Created %r", level)
        return level

    def _make_obstacle(self, i, spot, config):
        is_moving = config.moving_obstacles and i % 2 == 0
        return Obstacle(
            f"obs-{i}",
            spot[0], spot[1],
            ObstacleType.PATROL_ENEMY if is_moving else ObstacleType.STATIC_SPIKE,
            axis='x' if self.rng.random() > 0.5 else 'z',
            speed=PATROL_BASE_SPEED + self.rng.random(),
            patrol_range=PATROL_RANGE,
        )

    def _make_powerup(self, i, spot):
        if self.rng.random() > EXTRA_LIFE_THRESHOLD:
            powerup_type = PowerUpType.EXTRA_LIFE
        else:
            powerup_type = PowerUpType.MAP_REVEAL
        return PowerUp(f"pwr-{i}", spot[0], spot[1], powerup_type)

    def get_current_level(self):
        """Get current level"""
        return self.current_level

    def __repr__(self):
        return f"LevelManager(current_level={self.current_level})"
