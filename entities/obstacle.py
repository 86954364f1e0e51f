"""
Obstacle entities
Static spikes and patrols that sway back and forth along one axis
"""

import math
from enum import Enum

from utils.constants import PATROL_BASE_SPEED, PATROL_RANGE
from utils.colors import COLOR_OBSTACLE_SPIKE, COLOR_OBSTACLE_PATROL
from utils.helpers import distance


class ObstacleType(Enum):
    """Obstacle variants"""
    STATIC_SPIKE = 'STATIC_SPIKE'
    PATROL_ENEMY = 'PATROL_ENEMY'


class Obstacle:
    """
    A hazard placed at level start

    Only the motion parameters are stored. The live position is always
    derived from the simulation time, see position_at().
    """
    __slots__ = ('id', 'type', 'initial_pos', 'axis', 'speed', 'range')

    def __init__(self, obstacle_id, x, z, obstacle_type,
                 axis='x', speed=PATROL_BASE_SPEED, patrol_range=PATROL_RANGE):
        """
        Args:
            obstacle_id: Stable identifier ('obs-<n>')
            x, z: Spawn cell
            obstacle_type: ObstacleType
            axis: 'x' or 'z', the axis a patrol sways along
            speed: Angular speed of the sway
            patrol_range: Sway amplitude in grid units
        """
        if axis not in ('x', 'z'):
            raise ValueError(f"axis must be 'x' or 'z', got {axis!r}")

        object.__setattr__(self, 'id', obstacle_id)
        object.__setattr__(self, 'type', obstacle_type)
        object.__setattr__(self, 'initial_pos', (float(x), float(z)))
        object.__setattr__(self, 'axis', axis)
        object.__setattr__(self, 'speed', float(speed))
        object.__setattr__(self, 'range', float(patrol_range))

    def __setattr__(self, name, value):
        raise AttributeError(f"Obstacle is immutable, cannot set {name!r}")

    @property
    def is_patrol(self):
        return self.type is ObstacleType.PATROL_ENEMY

    def position_at(self, t):
        """Live (x, z) position at simulation time t"""
        x, z = self.initial_pos
        if not self.is_patrol:
            return x, z

        offset = math.sin(t * self.speed) * self.range
        if self.axis == 'x':
            return x + offset, z
        return x, z + offset

    def distance_to(self, x, z, t):
        """Distance from a point to the live position at time t"""
        ox, oz = self.position_at(t)
        return distance(x, z, ox, oz)

    def get_color(self):
        """Get RGB color for rendering"""
        if self.is_patrol:
            return COLOR_OBSTACLE_PATROL
        return COLOR_OBSTACLE_SPIKE

    def __repr__(self):
        return f"Obstacle(id={self.id}, type={self.type.name}, pos={self.initial_pos}, axis={self.axis})"


class ObstacleManager:
    """
    Manages all obstacles in the level; the set only ever shrinks
    """
    def __init__(self, obstacles=None):
        self.obstacles = list(obstacles or [])

    def add_obstacle(self, obstacle):
        """Add an obstacle to the level"""
        self.obstacles.append(obstacle)
        return obstacle

    def positions_at(self, t):
        """Live positions keyed by obstacle id"""
        return {o.id: o.position_at(t) for o in self.obstacles}

    def any_in_range(self, x, z, radius, t):
        """Check if at least one obstacle is within radius"""
        return any(o.distance_to(x, z, t) < radius for o in self.obstacles)

    def remove_in_range(self, x, z, radius, t):
        """
        Permanently remove every obstacle within radius at time t

        Returns:
            List of removed obstacles
        """
        removed = []
        kept = []
        for obstacle in self.obstacles:
            if obstacle.distance_to(x, z, t) < radius:
                removed.append(obstacle)
            else:
                kept.append(obstacle)
        self.obstacles = kept
        return removed

    def __len__(self):
        return len(self.obstacles)

    def __repr__(self):
        return f"ObstacleManager(obstacles={len(self.obstacles)})"
