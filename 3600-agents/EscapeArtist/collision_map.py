"""
Collision Map - per-cell record of which of the four edges are walled.

Stored as an int8 array of shape (height, width, NUM_SLOTS) indexed
[y, x, direction]. Each slot is a counter rather than a flag so that a
hypothetical wall can always be retracted exactly; an edge is blocked
while its counter is non-zero. Slot Direction.NONE is never touched.

Invariant: blocked(x, y, RIGHT) == blocked(x+1, y, LEFT) (and the same
for DOWN/UP), maintained by always writing both sides of a crossing.
Walls must lie on the grid (asserted); conflict checking lives in
wall_legality.py.
"""

from typing import Iterable

import numpy as np

from .grid_types import NUM_SLOTS, Coords, Direction, Wall, in_grid, wall_edges


class CollisionMap:
    """Edge-blocking state of the board for one turn."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.blocked = np.zeros((height, width, NUM_SLOTS), dtype=np.int8)

    @classmethod
    def from_walls(cls, width: int, height: int, walls: Iterable[Wall]) -> "CollisionMap":
        collision_map = cls(width, height)
        for wall in walls:
            collision_map.apply(wall)
        return collision_map

    def apply(self, wall: Wall):
        """Block the two crossings covered by a wall."""
        self._add(wall, 1)

    def retract(self, wall: Wall):
        """Undo a previous apply() of the same wall."""
        self._add(wall, -1)

    def _add(self, wall: Wall, delta: int):
        edges = wall_edges(wall)
        for cell, _ in edges:
            assert in_grid(cell, self.width, self.height), f"wall {wall} leaves the grid at {cell}"
        for cell, edge in edges:
            self.blocked[cell.y, cell.x, edge] += delta

    def is_blocked(self, coords: Coords, direction: Direction) -> bool:
        assert in_grid(coords, self.width, self.height), f"cell {coords} is off the grid"
        return bool(self.blocked[coords.y, coords.x, direction] > 0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CollisionMap):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            np.array_equal(self.blocked > 0, other.blocked > 0)

    __hash__ = None
