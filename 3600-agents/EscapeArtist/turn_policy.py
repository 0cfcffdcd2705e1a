"""
Turn Decision Policy - move or wall?

Per turn: RankPlayers -> ConsiderWall -> Evaluate -> Decide -> EmitMove

1. Rank live players by (distance, turn order from the acting player).
2. No walls left, or already leading: just move.
3. Gating: wall only once the leader is close to its goal (< 4) and the
   last live player is not about to finish (> 2), unless the
   stay-aggressive latch was set by an earlier wall this game.
4. Walk the leader's shortest path from its position toward its goal,
   scoring the walls that block each step.
5. Emit the best valid wall, else step along our own shortest path.

The latch is the only state carried between turns and lives in
SessionState, owned by the agent.
"""

from collections.abc import Callable
from typing import Dict, List, Optional

from .collision_map import CollisionMap
from .debug_reporter import DebugReporter, debug
from .game_state import Decision, PlayerState, TurnState, move_decision, wall_decision
from .grid_types import MOVE_DIRECTIONS, Direction, blocking_walls, in_grid, neighbor
from .path_solver import PathField
from .wall_evaluator import EvaluationResult, WallEvaluator
from .wall_legality import WallLegality
from . import weights_config
from .weights_config import (
    LEADER_DISTANCE_THRESHOLD,
    TIME_SAFETY_MARGIN,
    TRAILING_DISTANCE_THRESHOLD,
)


class SessionState:
    """State carried from turn to turn within one game."""

    def __init__(self):
        self.stay_aggressive = False
        self.walls_placed = 0

    def record_wall(self):
        self.stay_aggressive = True
        self.walls_placed += 1


def turn_order(player_id: int, my_id: int, player_count: int) -> int:
    """How many turns after us this seat plays (0 for ourselves)."""
    return (player_id - my_id) % player_count


def rank_players(players: List[PlayerState], my_id: int, player_count: int) -> List[PlayerState]:
    """Sort live players by distance, then turn order; sets .order and .rank."""
    for player in players:
        player.order = turn_order(player.id, my_id, player_count)
    ranked = sorted(players, key=lambda p: (p.distance, p.order))
    for rank, player in enumerate(ranked):
        player.rank = rank
    return ranked


class TurnPolicy:
    """Chooses exactly one decision per turn."""

    def __init__(self, session: Optional[SessionState] = None,
                 reporter: Optional[DebugReporter] = None):
        self.session = session or SessionState()
        self.reporter = reporter or DebugReporter()

    def decide(self, state: TurnState, time_left: Callable[[], float]) -> Decision:
        """
        Choose this turn's move or wall.

        Args:
            state: parsed turn input
            time_left: returns the seconds left in this turn's budget

        Returns:
            Decision with exactly one of direction / wall set
        """
        info = state.info
        me = state.me
        assert me.alive, "asked to play for an eliminated player"

        collision_map = CollisionMap.from_walls(info.width, info.height, state.walls)
        live = state.live_players()
        fields = self.solve_players(live, collision_map)

        ranked = rank_players(live, info.my_id, info.player_count)
        self.reporter.report_ranking(ranked)
        if weights_config.DUMP_PATH_FIELD:
            self.reporter.dump_field(fields[me.id])

        fallback = self.fallback_move(me, fields[me.id], collision_map)

        if me.walls_left <= 0:
            debug("[TurnPolicy] No walls left, moving")
            return fallback

        leader = ranked[0]
        if leader.id == me.id:
            debug("[TurnPolicy] Leading the race, moving")
            return fallback

        if not self.should_attempt_wall(leader, ranked[-1]):
            debug(f"[TurnPolicy] Wall not worth it yet (leader={leader.distance}, "
                  f"trailing={ranked[-1].distance})")
            return fallback

        best = self.search_wall(state, collision_map, live, leader, fields[leader.id], time_left)
        if best is None:
            debug("[TurnPolicy] No wall slows the leader, moving")
            return fallback

        self.session.record_wall()
        debug(f"[TurnPolicy] Wall [{best.wall.x}, {best.wall.y}] {best.wall.orientation.value}: leader +{best.impact_on_leader}, "
              f"self +{best.impact_on_self}, other +{best.impact_on_other}")
        return wall_decision(best.wall, weights_config.WALL_MESSAGE)

    def solve_players(self, players: List[PlayerState],
                      collision_map: CollisionMap) -> Dict[int, PathField]:
        """Solve each live player's field and store its distance."""
        fields = {}
        for player in players:
            field = PathField.solve(collision_map, player.goal)
            player.distance = field.distance_at(player.coords)
            fields[player.id] = field
        return fields

    def should_attempt_wall(self, leader: PlayerState, trailing: PlayerState) -> bool:
        latched = self.session.stay_aggressive
        leader_close = leader.distance < LEADER_DISTANCE_THRESHOLD
        trailing_far = trailing.distance > TRAILING_DISTANCE_THRESHOLD
        return (leader_close or latched) and (trailing_far or latched)

    def search_wall(self, state: TurnState, collision_map: CollisionMap,
                    live: List[PlayerState], leader: PlayerState,
                    leader_field: PathField,
                    time_left: Callable[[], float]) -> Optional[EvaluationResult]:
        """Best valid wall along the leader's path, or None."""
        evaluator = WallEvaluator(
            collision_map,
            WallLegality(state.info.width, state.info.height, state.walls),
            live,
            leader_id=leader.id,
            my_id=state.info.my_id,
        )

        seen = set()
        for cell, direction in leader_field.path_from(leader.coords):
            for wall in blocking_walls(cell, direction):
                if wall in seen:
                    continue
                if time_left() <= TIME_SAFETY_MARGIN:
                    debug(f"[TurnPolicy] Time budget exhausted after {evaluator.evaluated} walls")
                    return evaluator.best
                seen.add(wall)
                evaluator.consider(wall)

        debug(f"[TurnPolicy] Evaluated {evaluator.evaluated} walls along the leader's path")
        return evaluator.best

    def fallback_move(self, me: PlayerState, field: PathField,
                      collision_map: CollisionMap) -> Decision:
        """Step along our own shortest path."""
        direction = field.direction_at(me.coords)
        if direction != Direction.NONE:
            return move_decision(direction, weights_config.DEFAULT_MESSAGE)

        debug("[TurnPolicy] WARNING: no path to goal, taking any open step")
        for candidate in MOVE_DIRECTIONS:
            if collision_map.is_blocked(me.coords, candidate):
                continue
            if in_grid(neighbor(me.coords, candidate), collision_map.width, collision_map.height):
                return move_decision(candidate, weights_config.DEFAULT_MESSAGE)
        return move_decision(Direction.RIGHT, weights_config.DEFAULT_MESSAGE)
