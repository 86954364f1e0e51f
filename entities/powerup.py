"""
Power-up entities
Players collect power-ups by walking over them
"""

from enum import Enum

from utils.helpers import distance


class PowerUpType(Enum):
    """Power-up variants"""
    MAP_REVEAL = 'MAP_REVEAL'
    EXTRA_LIFE = 'EXTRA_LIFE'


class PowerUp:
    """
    Base power-up class
    """
    def __init__(self, powerup_id, x, z, powerup_type):
        """
        Args:
            powerup_id: Stable identifier ('pwr-<n>')
            x, z: Grid position
            powerup_type: PowerUpType
        """
        self.id = powerup_id
        self.x = float(x)
        self.z = float(z)
        self.type = powerup_type
        self.collected = False

    def collect(self):
        """
        Mark the power-up collected

        Returns:
            True the first time, False if it was already collected
        """
        if self.collected:
            return False
        self.collected = True
        return True

    def __repr__(self):
        return f"PowerUp(id={self.id}, pos=({self.x},{self.z}), type={self.type.name}, collected={self.collected})"


class PowerUpManager:
    """
    Manages all power-ups in the level

    Collected power-ups stay in the list and are filtered out on read.
    """
    def __init__(self, powerups=None):
        self.powerups = list(powerups or [])

    def add_powerup(self, powerup):
        """Add a power-up to the level"""
        self.powerups.append(powerup)
        return powerup

    def get_powerups_in_range(self, x, z, radius):
        """Uncollected power-ups strictly within radius of a point"""
        return [p for p in self.get_uncollected_powerups()
                if distance(x, z, p.x, p.z) < radius]

    def get_uncollected_powerups(self):
        """Get list of uncollected power-ups"""
        return [p for p in self.powerups if not p.collected]

    def __len__(self):
        return len(self.powerups)

    def __repr__(self):
        return f"PowerUpManager(powerups={len(self.powerups)}, uncollected={len(self.get_uncollected_powerups())})"
