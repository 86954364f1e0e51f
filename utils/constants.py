"""
Global constants for Memory Maze
"""

import math

# Screen settings (top-down front-end)
CELL_SIZE = 48
FPS = 60

# HUD panel height
PANEL_H = 80

# Cell states
WALL = 0
PATH = 1
START = 2
END = 3

# Carving directions on the room lattice (step 2)
CARVE_DIRS = [
    (0, -2),   # north
    (2, 0),    # east
    (0, 2),    # south
    (-2, 0),   # west
]

# Walkable neighbour order for path search (x, z)
NEIGHBOR_DIRS = [
    (0, -1),   # north
    (0, 1),    # south
    (1, 0),    # east
    (-1, 0),   # west
]

MIN_MAZE_SIZE = 5

# Headings (radians). 0 faces north (-z)
HEADING_NORTH = 0.0
HEADING_SOUTH = math.pi
HEADING_EAST = -math.pi / 2
HEADING_WEST = math.pi / 2

# Player settings
PLAYER_SPEED = 4.0          # Units per second
PLAYER_RADIUS = 0.3
ROTATION_SPEED = 2.5        # Radians per second at full look input
MOVE_DEADZONE = 0.1
LOOK_DEADZONE = 0.05
STARTING_LIVES = 3

# Collision
COLLISION_MARGIN = 0.5      # Cell search inflation around the footprint
CELL_HALF_EXTENT = 0.5

# Proximity radii
ABILITY_RANGE = 3.5
HIT_RADIUS = PLAYER_RADIUS + 0.35
PICKUP_RADIUS = 0.5
WIN_RADIUS = 0.5

# Timing (seconds)
MEMORIZE_TIME = 10
PEEK_TIME = 5
ABILITY_COOLDOWN = 3
INVULNERABILITY_DURATION = 1.5
REVEAL_DURATION = 5.0
MAX_FRAME_DT = 0.1

# Obstacles
PATROL_BASE_SPEED = 1.5
PATROL_RANGE = 1.5

# Power-ups
EXTRA_LIFE_THRESHOLD = 0.6  # rng.random() above this spawns an extra life

# Level construction
SPOT_SAMPLE_ATTEMPTS = 1000
START_EXCLUSION = 4         # Side of the block kept clear at the start corner
EXTRA_POWERUP_SPOTS = 2
LEVEL_SIZE_STEP = 2
