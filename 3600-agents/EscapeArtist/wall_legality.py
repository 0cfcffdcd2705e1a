"""
Wall Legality Checker

Two independent checks, both required for a wall to be placeable:

1. Structural bounds: the wall's two-cell span fits on the board and it
   sits on an interior boundary line.
2. Non-conflict: it neither overlaps a placed wall of the same
   orientation (same anchor or one cell apart along the line) nor
   crosses a placed wall of the other orientation at its midpoint.

Walls whose anchors are two or more cells apart never conflict; walls
that only touch end to end are legal.

Whether every player keeps a path to its goal is NOT checked here; the
wall evaluator rejects candidates that strand a player.
"""

from typing import Iterable, List, Set

from .grid_types import Orientation, Wall, diagonal, Coords


def is_in_bounds(wall: Wall, width: int, height: int) -> bool:
    """
    Structural bounds check.

    Horizontal: 0 <= x < width-1 and 1 <= y < height
    Vertical:   1 <= x < width   and 0 <= y < height-1
    """
    if wall.orientation == Orientation.HORIZONTAL:
        return 0 <= wall.x < width - 1 and 1 <= wall.y < height
    return 1 <= wall.x < width and 0 <= wall.y < height - 1


def conflicting_walls(wall: Wall) -> List[Wall]:
    """
    Every placed wall that would forbid this one.

    Same orientation: the same anchor, or the anchor one step before or
    after along the wall's own axis (the two spans would share a segment).
    Opposite orientation: the wall crossing this one's midpoint, anchored
    on the diagonal corner (+1, -1) for a horizontal wall and (-1, +1)
    for a vertical one.
    """
    x, y = wall.x, wall.y
    if wall.orientation == Orientation.HORIZONTAL:
        cross = diagonal(Coords(x, y), 1, -1)
        return [
            Wall(x - 1, y, Orientation.HORIZONTAL),
            Wall(x, y, Orientation.HORIZONTAL),
            Wall(x + 1, y, Orientation.HORIZONTAL),
            Wall(cross.x, cross.y, Orientation.VERTICAL),
        ]
    cross = diagonal(Coords(x, y), -1, 1)
    return [
        Wall(x, y - 1, Orientation.VERTICAL),
        Wall(x, y, Orientation.VERTICAL),
        Wall(x, y + 1, Orientation.VERTICAL),
        Wall(cross.x, cross.y, Orientation.HORIZONTAL),
    ]


class WallLegality:
    """Placeable-wall checks against the walls already on the board."""

    def __init__(self, width: int, height: int, walls: Iterable[Wall] = ()):
        self.width = width
        self.height = height
        self.walls: Set[Wall] = set(walls)

    def is_in_bounds(self, wall: Wall) -> bool:
        return is_in_bounds(wall, self.width, self.height)

    def conflicts(self, wall: Wall) -> bool:
        """True if wall overlaps or crosses an already placed wall."""
        return any(other in self.walls for other in conflicting_walls(wall))

    def is_placeable(self, wall: Wall) -> bool:
        return self.is_in_bounds(wall) and not self.conflicts(wall)
