"""
Color palette for Memory Maze
"""

# Background colors
COLOR_BG = (0, 0, 0)              # OLED black
COLOR_MAZE_BG = (17, 17, 17)      # Floor grid
COLOR_PANEL_BG = (26, 26, 26)     # Panel background

# UI colors
COLOR_WALL = (0, 240, 255)        # Cyber cyan
COLOR_TEXT = (255, 255, 255)      # Normal text
COLOR_TEXT_HIGHLIGHT = (251, 255, 0)  # Highlighted text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text

# Entity colors
COLOR_PLAYER = (255, 255, 255)    # Player
COLOR_START = (60, 60, 60)        # Start cell
COLOR_GOAL = (0, 255, 65)         # Exit
COLOR_REVEAL_PATH = (251, 255, 0) # Revealed route

# Obstacle colors
COLOR_OBSTACLE_SPIKE = (255, 0, 60)     # Static spike
COLOR_OBSTACLE_PATROL = (255, 120, 0)   # Patrol enemy

# Power-up colors
COLOR_POWERUP_REVEAL = (0, 240, 255)    # Map reveal
COLOR_POWERUP_LIFE = (255, 0, 60)       # Extra life

# Overlay
COLOR_MENU_OVERLAY = (0, 0, 0, 200)
