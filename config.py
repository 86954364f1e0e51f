"""
Front-end settings for Memory Maze
"""

GAME_TITLE = "Memory Maze"
GAME_VERSION = "1.0.0"

# Window
WINDOW_MAX_W = 960
WINDOW_MAX_H = 900
MIN_CELL_PX = 16

# Cells around the player drawn while PLAYING
VISION_RADIUS = 1.5

# Fonts
FONT_NAME = "consolas"
FONT_SIZE = 18
BIG_FONT_SIZE = 32

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
