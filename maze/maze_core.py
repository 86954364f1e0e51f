"""
Core maze functions - grid access and pathfinding
Grids are numpy int8 arrays indexed [z, x]
"""

import math
from collections import deque

import numpy as np

from utils.constants import WALL, PATH, START, END, NEIGHBOR_DIRS


def new_grid(width, height, fill=WALL):
    """Create a height x width grid filled with one cell state"""
    return np.full((height, width), fill, dtype=np.int8)


def grid_size(grid):
    """Return (width, height) of a grid"""
    height, width = grid.shape
    return width, height


def in_bounds(grid, x, z):
    """Check if cell coordinates are within grid bounds"""
    height, width = grid.shape
    return 0 <= x < width and 0 <= z < height


def is_walkable(grid, x, z):
    """Any in-bounds non-wall cell is walkable"""
    return in_bounds(grid, x, z) and grid[z, x] != WALL


def to_cell(position):
    """Floor a continuous (x, z) position to the grid cell addressing it"""
    x, z = position
    return int(math.floor(x)), int(math.floor(z))


def find_cells(grid, state):
    """List every (x, z) cell holding the given state"""
    zs, xs = np.nonzero(grid == state)
    return [(int(x), int(z)) for z, x in zip(zs, xs)]


def walkable_cells(grid):
    """All non-wall cells as (x, z) tuples"""
    zs, xs = np.nonzero(grid != WALL)
    return [(int(x), int(z)) for z, x in zip(zs, xs)]


def neighbors_open(grid, x, z):
    """Get list of walkable 4-neighbours (north, south, east, west)"""
    res = []
    for dx, dz in NEIGHBOR_DIRS:
        nx, nz = x + dx, z + dz
        if is_walkable(grid, nx, nz):
            res.append((nx, nz))
    return res


# ========== PATHFINDING ==========

def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def _require_in_bounds(grid, cell, what):
    if not in_bounds(grid, cell[0], cell[1]):
        width, height = grid_size(grid)
        raise ValueError(f"{what} cell {cell} is outside the {width}x{height} grid")


def bfs_shortest_path(grid, start, goal):
    """
    Breadth-first shortest path between two positions

    Continuous positions are floored to cells first. Walls are impassable,
    every other state is walkable.

    Args:
        grid: Maze grid
        start: (x, z) start position
        goal: (x, z) goal position

    Returns:
        List of (x, z) cells from start to goal inclusive, or [] if unreachable

    Raises:
        ValueError: if start or goal lies outside the grid
    """
    start = to_cell(start)
    goal = to_cell(goal)
    _require_in_bounds(grid, start, "start")
    _require_in_bounds(grid, goal, "goal")

    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        x, z = q.popleft()
        for n in neighbors_open(grid, x, z):
            if n not in prev:
                prev[n] = (x, z)
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return []


def bfs_distances(grid, start):
    """Step count from start to every reachable walkable cell"""
    start = to_cell(start)
    _require_in_bounds(grid, start, "start")

    dist = {start: 0}
    q = deque([start])
    while q:
        x, z = q.popleft()
        for n in neighbors_open(grid, x, z):
            if n not in dist:
                dist[n] = dist[(x, z)] + 1
                q.append(n)
    return dist


def count_open_edges(grid):
    """Number of adjacent walkable cell pairs (4-connectivity)"""
    open_cells = grid != WALL
    horizontal = np.count_nonzero(open_cells[:, :-1] & open_cells[:, 1:])
    vertical = np.count_nonzero(open_cells[:-1, :] & open_cells[1:, :])
    return int(horizontal + vertical)


def describe_grid(grid):
    """ASCII rendering, handy in logs and failing tests"""
    glyphs = {WALL: "#", PATH: ".", START: "S", END: "E"}
    return "\n".join("".join(glyphs.get(int(c), "?") for c in row) for row in grid)
