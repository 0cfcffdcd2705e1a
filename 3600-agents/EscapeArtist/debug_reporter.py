"""
Debug Output Module for EscapeArtist

stdout carries the commands, so everything here goes to stderr.
Silenced when weights_config.VERBOSE is False.
"""

import sys
from typing import Iterable

from . import weights_config
from .grid_types import INFINITE_DISTANCE, Wall


def debug(message: str):
    """Print one debug line to stderr."""
    if weights_config.VERBOSE:
        print(message, file=sys.stderr, flush=True)


class DebugReporter:
    """
    Formatted per-turn status for the agent's decisions.

    Shows:
    - Player table (position, walls left, distance, rank)
    - Walls on the board
    - Optional dump of a path field (distance + direction per cell)
    """

    DIRECTION_SYMBOLS = {0: '.', 1: '>', 2: '<', 3: 'v', 4: '^'}

    def __init__(self):
        self.turn_count = 0

    def report_turn(self, state):
        self.turn_count += 1
        debug(f"{'=' * 40}")
        debug(f"[Turn {self.turn_count}] {state.info.width}x{state.info.height}, "
              f"{state.info.player_count} players, me={state.info.my_id}")
        for player in state.players:
            if not player.alive:
                debug(f"  _dead_({player.id})")
                continue
            who = "myself" if player.id == state.info.my_id else "player"
            debug(f"  {who}({player.id}): [{player.coords.x}, {player.coords.y}] "
                  f"(left={player.walls_left}, goal={player.goal.name})")
        self.report_walls(state.walls)

    def report_walls(self, walls: Iterable[Wall]):
        for index, wall in enumerate(walls):
            debug(f"  wall({index}): [{wall.x}, {wall.y}] '{wall.orientation.value}'")

    def report_ranking(self, ranked):
        for player in ranked:
            distance = "inf" if player.distance >= INFINITE_DISTANCE else player.distance
            debug(f"  rank {player.rank}: player({player.id}) distance={distance} order={player.order}")

    def dump_field(self, field):
        """Grid of 'distance direction' cells, columns left to right."""
        if not weights_config.VERBOSE:
            return
        header = "  |" + "".join(f"{x:^6}|" for x in range(field.width))
        debug(header)
        for y in range(field.height):
            cells = []
            for x in range(field.width):
                distance = int(field.distance[y, x])
                text = "--" if distance >= INFINITE_DISTANCE else str(distance)
                symbol = self.DIRECTION_SYMBOLS[int(field.direction[y, x])]
                cells.append(f"{text:>3} {symbol} |")
            debug(f"{y:>2}|" + "".join(cells))
