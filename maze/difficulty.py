"""
Level configurations for Memory Maze
Fixed table of levels; levels past the end keep growing the maze
"""

import logging
import random

from utils.constants import (
    PATH, SPOT_SAMPLE_ATTEMPTS, START_EXCLUSION, LEVEL_SIZE_STEP
)

logger = logging.getLogger(__name__)


class LevelConfig:
    """Configuration for a single level"""
    def __init__(self, **kwargs):
        # Maze dimensions (odd, square)
        self.size = kwargs.get('size', 7)

        # Hazards
        self.obstacles = kwargs.get('obstacles', 0)
        self.moving_obstacles = kwargs.get('moving_obstacles', False)

    def with_size(self, size):
        """Copy of this config with another maze size"""
        return LevelConfig(size=size, obstacles=self.obstacles,
                           moving_obstacles=self.moving_obstacles)

    def __eq__(self, other):
        if not isinstance(other, LevelConfig):
            return NotImplemented
        return (self.size, self.obstacles, self.moving_obstacles) == \
            (other.size, other.obstacles, other.moving_obstacles)

    def __repr__(self):
        return (f"LevelConfig(size={self.size}, obstacles={self.obstacles}, "
                f"moving_obstacles={self.moving_obstacles})")


# ========== LEVEL DEFINITIONS ==========

LEVELS = [
    LevelConfig(size=7, obstacles=0, moving_obstacles=False),
    LevelConfig(size=9, obstacles=2, moving_obstacles=False),
    LevelConfig(size=11, obstacles=4, moving_obstacles=True),
    LevelConfig(size=13, obstacles=6, moving_obstacles=True),
    LevelConfig(size=15, obstacles=8, moving_obstacles=True),
]


def get_level_config(level_index):
    """
    Get configuration for a level

    Args:
        level_index: Zero-based level number

    Returns:
        LevelConfig; past the table the last entry is reused with the
        maze growing by LEVEL_SIZE_STEP per extra level
    """
    if level_index < 0:
        raise ValueError(f"level index must be >= 0, got {level_index}")

    if level_index < len(LEVELS):
        return LEVELS[level_index]

    last = LEVELS[-1]
    extra = (level_index - len(LEVELS) + 1) * LEVEL_SIZE_STEP
    return last.with_size(last.size + extra)


def get_level_name(level_index):
    """Sector label shown on the HUD"""
    return f"SECTOR {level_index + 1:02d}"


def get_level_description(level_index):
    """Get detailed description of a level"""
    config = get_level_config(level_index)

    desc = f"{get_level_name(level_index)}\n"
    desc += f"Maze: {config.size}x{config.size}\n"
    desc += f"Obstacles: {config.obstacles}\n"
    desc += f"Patrols: {'Yes' if config.moving_obstacles else 'No'}\n"
    return desc


# ========== SPAWN HELPERS ==========

def in_start_block(x, z):
    """True inside the square kept clear around the start corner"""
    return x < START_EXCLUSION and z < START_EXCLUSION


def find_empty_spots(grid, count, exclude_near_start=True, rng=None):
    """
    Pick distinct random PATH cells for obstacles and power-ups

    Rejection sampling with a fixed attempt budget. Running out of attempts
    is not an error: the caller gets fewer spots than asked for.

    Args:
        grid: Maze grid
        count: Number of spots wanted
        exclude_near_start: Skip the block around the start corner
        rng: Random source (defaults to the random module)

    Returns:
        List of (x, z) cells in selection order
    """
    rng = rng or random
    height, width = grid.shape

    spots = []
    chosen = set()
    attempts = 0

    while len(spots) < count and attempts < SPOT_SAMPLE_ATTEMPTS:
        attempts += 1
        x = rng.randrange(width)
        z = rng.randrange(height)

        if grid[z, x] != PATH:
            continue
        if exclude_near_start and in_start_block(x, z):
            continue
        if (x, z) in chosen:
            continue

        chosen.add((x, z))
        spots.append((x, z))

    if len(spots) < count:
        logger.debug("Spot sampler found %d of %d spots in %d attempts",
                     len(spots), count, attempts)
    return spots
