"""
Per-turn game state handed from the I/O layer to the decision core.
"""

from collections import namedtuple
from typing import List, Optional

from .grid_types import (
    INFINITE_DISTANCE,
    MAX_PLAYERS,
    MIN_PLAYERS,
    Coords,
    Direction,
    Wall,
    goal_direction,
)

# Fixed for the whole game: board size, seats, and our own seat
GameInfo = namedtuple('GameInfo', ['width', 'height', 'player_count', 'my_id'])

# Exactly one of direction / wall is set
Decision = namedtuple('Decision', ['direction', 'wall', 'message'])


def move_decision(direction: Direction, message: str = "") -> Decision:
    assert direction != Direction.NONE, "a move needs a direction"
    return Decision(direction, None, message)


def wall_decision(wall: Wall, message: str = "") -> Decision:
    return Decision(None, wall, message)


def validate_game_info(info: GameInfo) -> GameInfo:
    """Fail fast on seat counts/ids the goal table cannot serve."""
    if not MIN_PLAYERS <= info.player_count <= MAX_PLAYERS:
        raise ValueError(f"unsupported player count {info.player_count}")
    if not 0 <= info.my_id < info.player_count:
        raise ValueError(f"player id {info.my_id} out of range for {info.player_count} players")
    if info.width < 2 or info.height < 2:
        raise ValueError(f"board too small: {info.width}x{info.height}")
    return info


class PlayerState:
    """One seat's status for the current turn."""

    def __init__(self, player_id: int, coords: Optional[Coords], walls_left: int):
        self.id = player_id
        self.coords = coords
        self.walls_left = walls_left
        self.alive = coords is not None
        self.goal = goal_direction(player_id)

        # Filled in by the turn policy
        self.distance = INFINITE_DISTANCE
        self.order = 0
        self.rank = 0

    def __repr__(self):
        status = f"[{self.coords.x}, {self.coords.y}]" if self.alive else "dead"
        return (f"PlayerState(id={self.id}, {status}, walls_left={self.walls_left}, "
                f"goal={self.goal.name}, distance={self.distance})")


class TurnState:
    """Everything read from the referee for one turn."""

    def __init__(self, info: GameInfo, players: List[PlayerState], walls: List[Wall]):
        self.info = info
        self.players = players
        self.walls = walls

    @property
    def me(self) -> PlayerState:
        return self.players[self.info.my_id]

    def live_players(self) -> List[PlayerState]:
        return [p for p in self.players if p.alive]
