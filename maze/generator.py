"""
Maze generation
Perfect mazes on an odd-sized cell grid: rooms live on odd coordinates,
the even cells between two rooms are the walls that get knocked out.
"""

import logging
import random
from collections import namedtuple

from utils.constants import WALL, PATH, START, END, CARVE_DIRS, MIN_MAZE_SIZE
from maze.maze_core import new_grid

logger = logging.getLogger(__name__)

MazeLayout = namedtuple("MazeLayout", ["grid", "start", "end"])


def validate_size(width, height):
    """Reject sizes the room lattice cannot be built on"""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"maze {name} must be an integer, got {value!r}")
        if value < MIN_MAZE_SIZE:
            raise ValueError(f"maze {name} must be at least {MIN_MAZE_SIZE}, got {value}")
        if value % 2 == 0:
            raise ValueError(f"maze {name} must be odd, got {value}")


def _carvable(width, height, x, z):
    """Room must stay strictly inside the outer wall ring"""
    return 0 < x < width - 1 and 0 < z < height - 1


def _shuffled_dirs(rng):
    dirs = list(CARVE_DIRS)
    rng.shuffle(dirs)
    return dirs


# ========== GENERATOR: DFS BACKTRACKER ==========

def gen_dfs_backtracker(width, height, rng=None):
    """
    Randomized depth-first backtracker - animated generator

    Each stack frame holds a room and the directions it has not tried yet,
    so large grids never hit the interpreter recursion limit.

    Args:
        width, height: Odd grid dimensions, at least 5
        rng: Random source (defaults to the random module)

    Yields:
        {"grid", "current", "carved", "done"} state dicts; "carved" is the
        ((from_x, from_z), (to_x, to_z)) room pair opened by this step
    """
    validate_size(width, height)
    rng = rng or random

    grid = new_grid(width, height, WALL)
    carved = {(1, 1)}
    grid[1, 1] = PATH

    stack = [((1, 1), _shuffled_dirs(rng))]
    yield {"grid": grid, "current": (1, 1), "carved": None, "done": False}

    while stack:
        (cx, cz), remaining = stack[-1]
        if not remaining:
            stack.pop()
            continue

        dx, dz = remaining.pop(0)
        nx, nz = cx + dx, cz + dz
        if not _carvable(width, height, nx, nz) or (nx, nz) in carved:
            continue

        # Knock out the wall between the two rooms
        grid[cz + dz // 2, cx + dx // 2] = PATH
        grid[nz, nx] = PATH
        carved.add((nx, nz))
        stack.append(((nx, nz), _shuffled_dirs(rng)))

        yield {"grid": grid, "current": (nx, nz), "carved": ((cx, cz), (nx, nz)), "done": False}

    yield {"grid": grid, "current": (1, 1), "carved": None, "done": True}


def place_endpoints(grid):
    """
    Mark START at (1, 1) and END at the walkable cell nearest the far corner

    The END search walks from (width-2, height-2) back toward the start,
    x first, so it always lands on a carved cell without a graph search.

    Returns:
        (start, end) cells
    """
    height, width = grid.shape
    grid[1, 1] = START

    end_x, end_z = width - 2, height - 2
    while grid[end_z, end_x] == WALL:
        if end_x > 1:
            end_x -= 1
        elif end_z > 1:
            end_z -= 1
        else:
            break
    grid[end_z, end_x] = END
    return (1, 1), (end_x, end_z)


def generate_maze(width, height, rng=None):
    """
    Generate a perfect maze instantly

    Returns:
        MazeLayout(grid, start, end)
    """
    last_state = None
    steps = 0
    for state in gen_dfs_backtracker(width, height, rng):
        last_state = state
        if state["carved"] is not None:
            steps += 1

    grid = last_state["grid"]
    start, end = place_endpoints(grid)
    logger.debug("Generated %dx%d maze with %d carves, end at %s", width, height, steps, end)
    return MazeLayout(grid, start, end)
