"""
Helper utility functions for Memory Maze
"""

import math


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def distance(x1, z1, x2, z2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (z2 - z1) ** 2)


def outside_deadzone(vector, deadzone):
    """True if any component of a 2D input vector exceeds the deadzone"""
    return abs(vector[0]) > deadzone or abs(vector[1]) > deadzone


def normalize_angle(angle):
    """Wrap an angle into [-pi, pi)"""
    return (angle + math.pi) % (2 * math.pi) - math.pi


def format_time(seconds):
    """Format seconds to MM:SS string"""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"
