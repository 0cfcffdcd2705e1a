"""
Shortest-Path Solver - distance-to-goal field for one player.

Multi-source BFS seeded from every cell of the goal edge, run as a
JIT-compiled kernel over the collision map array. Produces, for every
cell, the exact number of steps to the goal and the outgoing direction
that follows a shortest path.

Tie-break: when two equally short paths reach a cell, the one whose
step points in the player's forward (goal) direction wins, so the
direction field keeps steering toward open lanes instead of zigzagging.

Always recomputed from scratch, never updated incrementally.
"""

from typing import List, Tuple

import numpy as np
from numba import njit

from .grid_types import (
    INFINITE_DISTANCE,
    NUM_SLOTS,
    OPPOSITE,
    STEP_DX,
    STEP_DY,
    Coords,
    Direction,
    in_grid,
)
from .collision_map import CollisionMap


# ═══════════════════════════════════════════════════════════════
# JIT-COMPILED BFS
# ═══════════════════════════════════════════════════════════════

@njit
def is_goal_index(x: int, y: int, goal: int, width: int, height: int) -> bool:
    """Goal-edge test on raw ints (1=RIGHT, 2=LEFT, 3=DOWN, 4=UP)"""
    if goal == 1:
        return x == width - 1
    elif goal == 2:
        return x == 0
    elif goal == 3:
        return y == height - 1
    else:
        return y == 0


@njit
def solve_field_jit(blocked: np.ndarray, goal: int, width: int, height: int) -> tuple:
    """
    Compute (distance, direction) arrays of shape (height, width).

    Cells are dequeued in non-decreasing distance. A neighbor is updated
    when its distance is strictly greater than the candidate, or equal
    and the step back toward the current cell is the goal direction.

    Args:
        blocked: (height, width, 5) edge counters, [y, x, direction]
        goal: Direction value pointing at the goal edge (also the tie-break)
        width, height: grid size

    Returns:
        (distance int32[h, w], direction int8[h, w])
    """
    distance = np.full((height, width), INFINITE_DISTANCE, dtype=np.int32)
    direction = np.zeros((height, width), dtype=np.int8)

    queue_x = np.empty(width * height, dtype=np.int32)
    queue_y = np.empty(width * height, dtype=np.int32)
    head = 0
    tail = 0

    # Seed every goal-edge cell at distance 0 (row-major order)
    for y in range(height):
        for x in range(width):
            if is_goal_index(x, y, goal, width, height):
                distance[y, x] = 0
                queue_x[tail] = x
                queue_y[tail] = y
                tail += 1

    while head < tail:
        x = queue_x[head]
        y = queue_y[head]
        head += 1
        candidate = distance[y, x] + 1

        for step in range(1, 5):
            if blocked[y, x, step] > 0:
                continue
            nx = x + STEP_DX[step]
            ny = y + STEP_DY[step]
            if nx < 0 or nx >= width or ny < 0 or ny >= height:
                continue

            # Direction the neighbor takes to come back here
            back = OPPOSITE[step]

            if distance[ny, nx] > candidate:
                distance[ny, nx] = candidate
                direction[ny, nx] = back
                queue_x[tail] = nx
                queue_y[tail] = ny
                tail += 1
            elif distance[ny, nx] == candidate and back == goal:
                direction[ny, nx] = back

    return distance, direction


def warmup_solver_jit():
    """
    Warm up JIT compilation by solving a dummy board.

    Keeps compilation time out of the first real turn.
    """
    dummy = np.zeros((3, 3, NUM_SLOTS), dtype=np.int8)
    for goal in (1, 2, 3, 4):
        _ = solve_field_jit(dummy, goal, 3, 3)


# ═══════════════════════════════════════════════════════════════
# PYTHON WRAPPER
# ═══════════════════════════════════════════════════════════════

class PathField:
    """Solved distance/direction field of one goal edge."""

    def __init__(self, goal: Direction, distance: np.ndarray, direction: np.ndarray):
        self.goal = goal
        self.distance = distance
        self.direction = direction

    @classmethod
    def solve(cls, collision_map: CollisionMap, goal: Direction) -> "PathField":
        distance, direction = solve_field_jit(
            collision_map.blocked, int(goal), collision_map.width, collision_map.height
        )
        return cls(goal, distance, direction)

    @property
    def width(self) -> int:
        return self.distance.shape[1]

    @property
    def height(self) -> int:
        return self.distance.shape[0]

    def distance_at(self, coords: Coords) -> int:
        assert in_grid(coords, self.width, self.height), f"cell {coords} is off the grid"
        return int(self.distance[coords.y, coords.x])

    def direction_at(self, coords: Coords) -> Direction:
        assert in_grid(coords, self.width, self.height), f"cell {coords} is off the grid"
        return Direction(int(self.direction[coords.y, coords.x]))

    def is_reachable(self, coords: Coords) -> bool:
        return self.distance_at(coords) < INFINITE_DISTANCE

    def path_from(self, coords: Coords) -> List[Tuple[Coords, Direction]]:
        """
        Follow the direction field from coords to the goal edge.

        Returns:
            [(cell, direction taken from that cell), ...], empty when
            coords is already on the goal edge or cannot reach it.
        """
        steps = []
        if not self.is_reachable(coords):
            return steps

        current = coords
        for _ in range(self.distance_at(coords)):
            direction = self.direction_at(current)
            steps.append((current, direction))
            current = Coords(current.x + int(STEP_DX[direction]),
                             current.y + int(STEP_DY[direction]))
        return steps

    def __eq__(self, other) -> bool:
        if not isinstance(other, PathField):
            return NotImplemented
        return self.goal == other.goal and \
            np.array_equal(self.distance, other.distance) and \
            np.array_equal(self.direction, other.direction)

    __hash__ = None
