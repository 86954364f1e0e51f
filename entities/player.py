"""
Player entity with continuous position, heading and lives
"""

import math

from utils.constants import (
    PLAYER_SPEED, PLAYER_RADIUS, ROTATION_SPEED, STARTING_LIVES
)
from utils.helpers import normalize_angle
from game.collision import move_with_sliding


class Player:
    """
    First-person player moving freely over the cell grid
    """
    def __init__(self, x, z, heading=0.0, lives=STARTING_LIVES):
        """
        Args:
            x, z: Starting position (cell centres sit on integers)
            heading: View angle in radians (0 = north/-z, pi/2 = west)
            lives: Remaining lives
        """
        self.x = float(x)
        self.z = float(z)
        self.heading = heading
        self.lives = lives

        # Movement settings
        self.move_speed = PLAYER_SPEED
        self.turn_speed = ROTATION_SPEED
        self.radius = PLAYER_RADIUS

        # Hit protection window
        self.invulnerable = False

        # Gameplay tracking
        self.distance_travelled = 0.0

    @property
    def position(self):
        return self.x, self.z

    def rotate(self, look_x, dt):
        """Turn by a look input in [-1, 1]; positive turns right"""
        self.heading -= look_x * self.turn_speed * dt

    def get_direction_vectors(self):
        """
        Forward and right unit vectors for the current heading

        Returns:
            ((fx, fz), (rx, rz))
        """
        sin_h = math.sin(self.heading)
        cos_h = math.cos(self.heading)
        return (-sin_h, -cos_h), (cos_h, -sin_h)

    def move(self, forward, strafe, grid, dt):
        """
        Move player with collision detection

        Args:
            forward: Forward/backward input (-1 to 1)
            strafe: Right/left strafe input (-1 to 1)
            grid: Maze grid
            dt: Delta time in seconds

        Returns:
            True if player moved
        """
        (fx, fz), (rx, rz) = self.get_direction_vectors()
        dx = (forward * fx + strafe * rx) * self.move_speed * dt
        dz = (forward * fz + strafe * rz) * self.move_speed * dt

        new_x, new_z = move_with_sliding(self.x, self.z, dx, dz, grid, self.radius)
        moved = (new_x, new_z) != (self.x, self.z)
        if moved:
            self.distance_travelled += math.hypot(new_x - self.x, new_z - self.z)
        self.x, self.z = new_x, new_z
        return moved

    def take_hit(self):
        """
        Lose a life unless protected

        Returns:
            True if a life was lost
        """
        if self.invulnerable or self.lives <= 0:
            return False
        self.lives -= 1
        return True

    def add_life(self):
        self.lives += 1

    def is_alive(self):
        """Check if player has lives left"""
        return self.lives > 0

    def reset_position(self, x, z, heading):
        """Put the player back on a start cell"""
        self.x = float(x)
        self.z = float(z)
        self.heading = heading
        self.invulnerable = False
        self.distance_travelled = 0.0

    def get_angle_degrees(self):
        """Get view angle in degrees, wrapped to [-180, 180)"""
        return math.degrees(normalize_angle(self.heading))

    def __repr__(self):
        return f"Player(pos=({self.x:.2f}, {self.z:.2f}), heading={self.get_angle_degrees():.1f}°, lives={self.lives})"
