"""
Grid types and geometry for the EscapeArtist agent.

Pure coordinate arithmetic over the W x H lattice: directions, wall
orientations, neighbor cells and the (cell, edge) pairs a wall blocks.
Integer direction values are shared with the numpy arrays and the JIT
kernels in path_solver.py.

Geometry is total and allocation-free: bounds are checked by callers
(the legality checker), never clamped here.
"""

from collections import namedtuple
from enum import Enum, IntEnum
from typing import List, Tuple

import numpy as np


class Direction(IntEnum):
    """Movement direction. NONE means "no direction yet / unreachable"."""
    NONE = 0
    RIGHT = 1   # x++
    LEFT = 2    # x--
    DOWN = 3    # y++
    UP = 4      # y--

    @property
    def token(self) -> str:
        """Command token sent to the referee."""
        return self.name

    @property
    def opposite(self) -> "Direction":
        return Direction(int(OPPOSITE[self]))


class Orientation(Enum):
    """Wall orientation"""
    HORIZONTAL = "H"
    VERTICAL = "V"

    @classmethod
    def parse(cls, char: str) -> "Orientation":
        """Parse an 'H'/'V' character, failing fast on anything else."""
        try:
            return cls(char.strip().upper())
        except ValueError:
            raise ValueError(f"unknown wall orientation {char!r}") from None


# Coordinates: x = column, y = row/line
Coords = namedtuple('Coords', ['x', 'y'])

# Wall: coords of its upper-left corner cell + orientation
Wall = namedtuple('Wall', ['x', 'y', 'orientation'])


# ═══════════════════════════════════════════════════════════════
# INTEGER TABLES (indexed by Direction value, usable inside @njit)
# ═══════════════════════════════════════════════════════════════
NUM_SLOTS = 5   # NONE + 4 directions

STEP_DX = np.array([0, 1, -1, 0, 0], dtype=np.int32)
STEP_DY = np.array([0, 0, 0, 1, -1], dtype=np.int32)
OPPOSITE = np.array([0, 2, 1, 4, 3], dtype=np.int8)

MOVE_DIRECTIONS = (Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP)

# Distance sentinel for unreachable cells
INFINITE_DISTANCE = np.int32(2 ** 30)


# ═══════════════════════════════════════════════════════════════
# GOAL EDGES (indexed by seat id)
# ═══════════════════════════════════════════════════════════════
# Seat 0 starts on the left and runs right, seat 1 the opposite,
# seat 2 starts at the top and runs down.
GOAL_DIRECTIONS = (Direction.RIGHT, Direction.LEFT, Direction.DOWN)

MIN_PLAYERS = 2
MAX_PLAYERS = len(GOAL_DIRECTIONS)


def goal_direction(player_id: int) -> Direction:
    """Goal edge (as the direction pointing at it) of a seat."""
    if not 0 <= player_id < len(GOAL_DIRECTIONS):
        raise ValueError(f"no goal edge defined for player id {player_id}")
    return GOAL_DIRECTIONS[player_id]


# ═══════════════════════════════════════════════════════════════
# COORDINATE ARITHMETIC
# ═══════════════════════════════════════════════════════════════

def neighbor(coords: Coords, direction: Direction) -> Coords:
    """Cell one step away in direction. Callers check bounds."""
    assert direction != Direction.NONE, "cannot step without a direction"
    return Coords(coords.x + int(STEP_DX[direction]), coords.y + int(STEP_DY[direction]))


def diagonal(coords: Coords, dx: int, dy: int) -> Coords:
    """Diagonal cell used for wall corner arithmetic (dx, dy in {-1, +1})."""
    assert dx in (-1, 1) and dy in (-1, 1), f"not a diagonal step: ({dx}, {dy})"
    return Coords(coords.x + dx, coords.y + dy)


def in_grid(coords: Coords, width: int, height: int) -> bool:
    return 0 <= coords.x < width and 0 <= coords.y < height


def wall_edges(wall: Wall) -> List[Tuple[Coords, Direction]]:
    """
    The four (cell, edge) pairs blocked by a wall.

    Horizontal at (x,y): between (x,y-1)/(x,y) and (x+1,y-1)/(x+1,y).
    Vertical at (x,y): between (x-1,y)/(x,y) and (x-1,y+1)/(x,y+1).

    Each crossing is listed from both sides so the collision map stays
    symmetric.
    """
    x, y = wall.x, wall.y
    if wall.orientation == Orientation.HORIZONTAL:
        return [
            (Coords(x, y), Direction.UP),
            (Coords(x, y - 1), Direction.DOWN),
            (Coords(x + 1, y), Direction.UP),
            (Coords(x + 1, y - 1), Direction.DOWN),
        ]
    return [
        (Coords(x, y), Direction.LEFT),
        (Coords(x - 1, y), Direction.RIGHT),
        (Coords(x, y + 1), Direction.LEFT),
        (Coords(x - 1, y + 1), Direction.RIGHT),
    ]


def blocking_walls(coords: Coords, direction: Direction) -> List[Wall]:
    """
    The two walls able to block the step from coords in direction.

    A horizontal crossing is blocked by the H walls anchored at the lower
    cell and one column to its left; a vertical crossing by the V walls
    anchored at the right cell and one row above it. Some may be out of
    bounds; the legality checker filters them.
    """
    target = neighbor(coords, direction)
    if direction in (Direction.DOWN, Direction.UP):
        lower_y = max(coords.y, target.y)
        return [
            Wall(coords.x, lower_y, Orientation.HORIZONTAL),
            Wall(coords.x - 1, lower_y, Orientation.HORIZONTAL),
        ]
    right_x = max(coords.x, target.x)
    return [
        Wall(right_x, coords.y, Orientation.VERTICAL),
        Wall(right_x, coords.y - 1, Orientation.VERTICAL),
    ]
