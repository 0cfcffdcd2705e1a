"""
EscapeArtist - Tournament Agent

Races to its goal edge along BFS shortest paths and spends walls on the
leader once the race is close.
"""

import time
from collections.abc import Callable
from typing import Optional

from .debug_reporter import DebugReporter, debug
from .game_state import Decision, GameInfo, TurnState
from .path_solver import warmup_solver_jit
from .turn_policy import SessionState, TurnPolicy
from .weights_config import FIRST_TURN_TIME, MAX_TIME_PER_TURN


class PlayerAgent:
    """
    EscapeArtist

    Per turn:
    - Collision map from the placed walls
    - Multi-source BFS distance field per live player (JIT-compiled)
    - Wall search along the leader's path, scored by distance deltas
    - Fallback: step along our own shortest path
    """

    def __init__(self, info: GameInfo):
        """
        Initialize agent and warm up JIT compilation.

        Compilation happens here rather than on the first turn.
        """
        debug(f"[Init] EscapeArtist: {info.width}x{info.height}, "
              f"{info.player_count} players, id={info.my_id}")

        # The first turn arrives with the init line, so its clock starts here
        self.clock_start = time.time()
        warmup_solver_jit()
        debug(f"[Init] JIT warmup complete in {time.time() - self.clock_start:.2f}s")

        self.info = info
        self.session = SessionState()
        self.reporter = DebugReporter()
        self.policy = TurnPolicy(self.session, self.reporter)
        self.move_count = 0

    def turn_budget(self) -> float:
        """Seconds available for the coming turn."""
        return FIRST_TURN_TIME if self.move_count == 0 else MAX_TIME_PER_TURN

    def play(self, state: TurnState, time_left: Optional[Callable] = None) -> Decision:
        """
        Choose this turn's action.

        Args:
            state: Current turn state
            time_left: Function returning remaining time in seconds
                (defaults to this turn's budget, measured from agent creation
                on the first turn and from now afterwards)

        Returns:
            Decision (direction or wall)
        """
        move_start = time.time()
        if time_left is None:
            budget = self.turn_budget()
            clock_start = self.clock_start if self.move_count == 0 else move_start

            def time_left():
                return budget - (time.time() - clock_start)

        self.move_count += 1
        self.reporter.report_turn(state)

        decision = self.policy.decide(state, time_left)

        action = decision.direction.name if decision.wall is None else \
            f"WALL {decision.wall.x} {decision.wall.y} {decision.wall.orientation.value}"
        debug(f"[Agent] Move selected in {time.time() - move_start:.3f}s: {action}")
        return decision
