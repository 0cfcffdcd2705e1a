"""
Wall Evaluator - What-if simulation of a single wall placement.

For a candidate wall: check legality, apply it to the working collision
map, re-solve every live player's path field, measure distance deltas,
then retract the wall. The collision map is left exactly as it was
found, so evaluation is side-effect free for the caller.

Scoring:
    score = 100 * impact_on_leader - 70 * impact_on_self + 40 * impact_on_other

Only valid candidates that slow the leader are kept. Ties go to the
latest candidate, i.e. walls closer to the leader's goal since the
leader's path is walked from its position toward its goal.
"""

from collections import namedtuple
from typing import Dict, Optional, Sequence

from .collision_map import CollisionMap
from .grid_types import INFINITE_DISTANCE, Wall
from .path_solver import PathField
from .wall_legality import WallLegality
from .weights_config import (
    MIN_IMPACT_ON_LEADER,
    WALL_IMPACT_ON_LEADER_WEIGHT,
    WALL_IMPACT_ON_OTHER_WEIGHT,
    WALL_IMPACT_ON_SELF_WEIGHT,
)

EvaluationResult = namedtuple(
    'EvaluationResult',
    ['wall', 'valid', 'impact_on_leader', 'impact_on_self', 'impact_on_other'],
)


def score_result(result: EvaluationResult) -> int:
    """Weighted score of a valid evaluation result."""
    return (WALL_IMPACT_ON_LEADER_WEIGHT * result.impact_on_leader
            - WALL_IMPACT_ON_SELF_WEIGHT * result.impact_on_self
            + WALL_IMPACT_ON_OTHER_WEIGHT * result.impact_on_other)


class WallEvaluator:
    """
    Scores candidate walls for one turn.

    Holds the turn's collision map, legality checker and each live
    player's current distance, and remembers the best candidate seen.
    """

    def __init__(self,
                 collision_map: CollisionMap,
                 legality: WallLegality,
                 players: Sequence,
                 leader_id: int,
                 my_id: int):
        """
        Args:
            collision_map: working collision map (restored after every call)
            legality: checker loaded with the walls already placed
            players: live players (with .id, .coords, .goal, .distance)
            leader_id: id of the player to slow down
            my_id: id of the acting player
        """
        self.collision_map = collision_map
        self.legality = legality
        self.players = list(players)
        self.leader_id = leader_id
        self.my_id = my_id

        self.best: Optional[EvaluationResult] = None
        self.best_score: Optional[int] = None
        self.evaluated = 0

    def evaluate(self, wall: Wall) -> EvaluationResult:
        """Simulate one wall and return its impact on every live player."""
        self.evaluated += 1
        if not self.legality.is_placeable(wall):
            return EvaluationResult(wall, False, 0, 0, 0)

        self.collision_map.apply(wall)
        try:
            new_distances = self._solve_distances()
        finally:
            self.collision_map.retract(wall)

        if any(d >= INFINITE_DISTANCE for d in new_distances.values()):
            return EvaluationResult(wall, False, 0, 0, 0)

        impact_on_leader = 0
        impact_on_self = 0
        impact_on_other = 0
        for player in self.players:
            delta = new_distances[player.id] - player.distance
            if player.id == self.leader_id:
                impact_on_leader = delta
            elif player.id == self.my_id:
                impact_on_self = delta
            else:
                impact_on_other = delta

        return EvaluationResult(wall, True, impact_on_leader, impact_on_self, impact_on_other)

    def consider(self, wall: Wall) -> EvaluationResult:
        """Evaluate a wall and keep it if it beats (or ties) the best so far."""
        result = self.evaluate(wall)
        if result.valid and result.impact_on_leader >= MIN_IMPACT_ON_LEADER:
            score = score_result(result)
            if self.best_score is None or score >= self.best_score:
                self.best = result
                self.best_score = score
        return result

    def _solve_distances(self) -> Dict[int, int]:
        distances = {}
        for player in self.players:
            field = PathField.solve(self.collision_map, player.goal)
            distances[player.id] = field.distance_at(player.coords)
        return distances
