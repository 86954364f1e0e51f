"""
Collision detection and handling
Player footprint vs wall grid, plus per-tick proximity checks
"""

import math

import numpy as np
from numba import njit

from utils.constants import (
    WALL, PLAYER_RADIUS, COLLISION_MARGIN, CELL_HALF_EXTENT,
    ABILITY_RANGE, HIT_RADIUS, PICKUP_RADIUS, WIN_RADIUS
)
from utils.helpers import distance


@njit(cache=True)
def _numba_footprint_blocked(grid, x, z, radius, margin, half_extent, wall):
    """
    Box footprint vs wall cells (Numba JIT compiled)

    Args:
        grid: 2D int8 array indexed [z, x]
        x, z: Footprint centre
        radius: Footprint half size
        margin: Inflation of the candidate cell range
        half_extent: Half size of a wall cell
        wall: Cell state treated as solid

    Returns:
        True on the first overlapping wall cell
    """
    height = grid.shape[0]
    width = grid.shape[1]

    p_min_x = x - radius
    p_max_x = x + radius
    p_min_z = z - radius
    p_max_z = z + radius

    start_x = int(math.floor(p_min_x - margin))
    end_x = int(math.ceil(p_max_x + margin))
    start_z = int(math.floor(p_min_z - margin))
    end_z = int(math.ceil(p_max_z + margin))

    for cz in range(start_z, end_z):
        if cz < 0 or cz >= height:
            continue
        for cx in range(start_x, end_x):
            if cx < 0 or cx >= width:
                continue
            if grid[cz, cx] != wall:
                continue
            if (p_min_x < cx + half_extent and p_max_x > cx - half_extent and
                    p_min_z < cz + half_extent and p_max_z > cz - half_extent):
                return True
    return False


def blocked(x, z, grid, radius=PLAYER_RADIUS):
    """
    Check if the player footprint centred at (x, z) overlaps a wall cell

    Cells are unit squares centred on integer coordinates. The circular
    footprint is tested as its bounding box.

    Raises:
        ValueError: if (x, z) is not inside any grid cell
    """
    height, width = grid.shape
    if not (-CELL_HALF_EXTENT <= x < width - CELL_HALF_EXTENT and
            -CELL_HALF_EXTENT <= z < height - CELL_HALF_EXTENT):
        raise ValueError(f"position ({x}, {z}) is outside the {width}x{height} grid")

    if grid.dtype != np.int8:
        grid = grid.astype(np.int8)
    return _numba_footprint_blocked(grid, float(x), float(z), float(radius),
                                    COLLISION_MARGIN, CELL_HALF_EXTENT, WALL)


def move_with_sliding(x, z, dx, dz, grid, radius=PLAYER_RADIUS):
    """
    Resolve a displacement one axis at a time

    X is tried from the current z, then Z from the possibly updated x, so
    a diagonal push into a wall still slides along the open axis.

    Returns:
        (new_x, new_z)
    """
    new_x, new_z = x, z
    if dx and not blocked(x + dx, z, grid, radius):
        new_x = x + dx
    if dz and not blocked(new_x, z + dz, grid, radius):
        new_z = z + dz
    return new_x, new_z


class CollisionHandler:
    """
    Handles per-tick proximity checks between the player and level entities
    """
    def check_player_position(self, player, obstacle_manager, powerup_manager, end_pos, t):
        """
        Check player's current position against every entity

        Args:
            player: Player object
            obstacle_manager: ObstacleManager object
            powerup_manager: PowerUpManager object
            end_pos: (x, z) end cell
            t: Simulation time used for patrol positions

        Returns:
            Dictionary with collision results:
            {
                'ability_in_range': bool,
                'hit': Obstacle or None,
                'powerups': [PowerUp, ...] uncollected and within reach,
                'reached_goal': bool
            }
        """
        result = {
            'ability_in_range': False,
            'hit': None,
            'powerups': [],
            'reached_goal': False,
        }

        px, pz = player.x, player.z

        for obstacle in obstacle_manager.obstacles:
            ox, oz = obstacle.position_at(t)
            dist = distance(px, pz, ox, oz)
            if dist < ABILITY_RANGE:
                result['ability_in_range'] = True
            if dist < HIT_RADIUS and result['hit'] is None:
                result['hit'] = obstacle

        result['powerups'] = powerup_manager.get_powerups_in_range(px, pz, PICKUP_RADIUS)

        result['reached_goal'] = distance(px, pz, end_pos[0], end_pos[1]) < WIN_RADIUS
        return result

