"""
Referee I/O for EscapeArtist.

Input (stdin):
    init:  "w h playerCount myId"
    turn:  playerCount lines "x y wallsLeft" (x = y = -1 once eliminated),
           then "wallCount", then wallCount lines "wallX wallY wallOrientation"

Output (stdout): one line per turn, either "RIGHT|LEFT|DOWN|UP [message]"
or "x y H|V [message]".
"""

from typing import List, TextIO

from .game_state import Decision, GameInfo, PlayerState, TurnState, validate_game_info
from .grid_types import Coords, Orientation, Wall


def _read_ints(stream: TextIO, count: int) -> List[int]:
    line = stream.readline()
    if not line:
        raise EOFError("referee closed the input stream")
    fields = line.split()
    if len(fields) < count:
        raise ValueError(f"expected {count} integers, got {line.strip()!r}")
    try:
        return [int(field) for field in fields[:count]]
    except ValueError:
        raise ValueError(f"expected {count} integers, got {line.strip()!r}") from None


def read_init(stream: TextIO) -> GameInfo:
    width, height, player_count, my_id = _read_ints(stream, 4)
    return validate_game_info(GameInfo(width, height, player_count, my_id))


def parse_wall(line: str) -> Wall:
    fields = line.split()
    if len(fields) < 3:
        raise ValueError(f"malformed wall line {line.strip()!r}")
    try:
        x, y = int(fields[0]), int(fields[1])
    except ValueError:
        raise ValueError(f"malformed wall line {line.strip()!r}") from None
    return Wall(x, y, Orientation.parse(fields[2]))


def read_turn(stream: TextIO, info: GameInfo) -> TurnState:
    players = []
    for player_id in range(info.player_count):
        x, y, walls_left = _read_ints(stream, 3)
        coords = Coords(x, y) if x >= 0 and y >= 0 else None
        players.append(PlayerState(player_id, coords, walls_left))

    wall_count, = _read_ints(stream, 1)
    walls = []
    for _ in range(wall_count):
        line = stream.readline()
        if not line:
            raise EOFError("referee closed the input stream")
        walls.append(parse_wall(line))

    return TurnState(info, players, walls)


def format_decision(decision: Decision) -> str:
    if (decision.direction is None) == (decision.wall is None):
        raise ValueError(f"decision must carry exactly one action: {decision!r}")

    if decision.wall is not None:
        wall = decision.wall
        command = f"{wall.x} {wall.y} {wall.orientation.value}"
    else:
        command = decision.direction.token

    if decision.message:
        return f"{command} {decision.message}"
    return command
