"""Tests for EscapeArtist.path_solver (BFS distance fields)."""

from __future__ import annotations

import numpy as np
import pytest

from EscapeArtist.collision_map import CollisionMap
from EscapeArtist.grid_types import INFINITE_DISTANCE, Coords, Direction, Orientation, Wall, neighbor
from EscapeArtist.path_solver import PathField, warmup_solver_jit

GOALS = [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP]


def expected_manhattan(goal: Direction, x: int, y: int, width: int, height: int) -> int:
    if goal == Direction.RIGHT:
        return width - 1 - x
    if goal == Direction.LEFT:
        return x
    if goal == Direction.DOWN:
        return height - 1 - y
    return y


class TestOpenBoard:
    @pytest.mark.parametrize("goal", GOALS)
    def test_distance_is_manhattan_to_goal_edge(self, goal: Direction) -> None:
        width, height = 9, 7
        field = PathField.solve(CollisionMap(width, height), goal)
        for y in range(height):
            for x in range(width):
                assert field.distance_at(Coords(x, y)) == expected_manhattan(goal, x, y, width, height)

    @pytest.mark.parametrize("goal", GOALS)
    def test_direction_points_forward(self, goal: Direction) -> None:
        field = PathField.solve(CollisionMap(9, 9), goal)
        for y in range(9):
            for x in range(9):
                cell = Coords(x, y)
                expected = Direction.NONE if field.distance_at(cell) == 0 else goal
                assert field.direction_at(cell) == expected

    def test_path_from_walks_to_goal(self) -> None:
        field = PathField.solve(CollisionMap(9, 9), Direction.RIGHT)
        path = field.path_from(Coords(0, 4))
        assert len(path) == 8
        assert path[0] == (Coords(0, 4), Direction.RIGHT)
        assert path[-1] == (Coords(7, 4), Direction.RIGHT)

    def test_path_from_goal_cell_is_empty(self) -> None:
        field = PathField.solve(CollisionMap(9, 9), Direction.LEFT)
        assert field.path_from(Coords(0, 2)) == []


class TestWalls:
    def test_detour_around_wall(self) -> None:
        collision_map = CollisionMap.from_walls(9, 9, [Wall(1, 4, Orientation.VERTICAL)])
        field = PathField.solve(collision_map, Direction.RIGHT)
        # (0,4) must step up to row 3 before heading right
        assert field.distance_at(Coords(0, 4)) == 9
        assert field.direction_at(Coords(0, 4)) == Direction.UP
        assert field.distance_at(Coords(0, 5)) == 9
        assert field.direction_at(Coords(0, 5)) == Direction.DOWN

    def test_tie_break_prefers_goal_direction(self) -> None:
        # V(8,3) closes column 8 on rows 3-4: from (6,4) RIGHT and DOWN both take 3 steps
        collision_map = CollisionMap.from_walls(9, 9, [Wall(8, 3, Orientation.VERTICAL)])
        field = PathField.solve(collision_map, Direction.RIGHT)
        assert field.distance_at(Coords(6, 4)) == 3
        assert field.direction_at(Coords(6, 4)) == Direction.RIGHT
        assert field.direction_at(Coords(7, 4)) == Direction.DOWN
        assert field.direction_at(Coords(7, 3)) == Direction.UP

    def test_enclosed_cells_are_unreachable(self) -> None:
        # On a 4x2 board one vertical wall cuts column 0 off from the right edge
        collision_map = CollisionMap.from_walls(4, 2, [Wall(1, 0, Orientation.VERTICAL)])
        field = PathField.solve(collision_map, Direction.RIGHT)
        for y in range(2):
            cell = Coords(0, y)
            assert not field.is_reachable(cell)
            assert field.distance_at(cell) == INFINITE_DISTANCE
            assert field.direction_at(cell) == Direction.NONE
            assert field.path_from(cell) == []
        assert field.distance_at(Coords(1, 0)) == 2

    @pytest.mark.parametrize("goal", GOALS)
    def test_walls_never_shorten_paths(self, goal: Direction, interior_walls: list[Wall]) -> None:
        base = CollisionMap.from_walls(9, 9, [Wall(3, 3, Orientation.HORIZONTAL)])
        before = PathField.solve(base, goal).distance
        for wall in interior_walls:
            if wall == Wall(3, 3, Orientation.HORIZONTAL):
                continue
            base.apply(wall)
            after = PathField.solve(base, goal).distance
            base.retract(wall)
            assert (after >= before).all(), wall


class TestDeterminism:
    def test_solving_twice_is_identical(self) -> None:
        walls = [
            Wall(2, 2, Orientation.HORIZONTAL),
            Wall(5, 1, Orientation.VERTICAL),
            Wall(6, 6, Orientation.HORIZONTAL),
            Wall(3, 5, Orientation.VERTICAL),
        ]
        collision_map = CollisionMap.from_walls(9, 9, walls)
        first = PathField.solve(collision_map, Direction.DOWN)
        second = PathField.solve(collision_map, Direction.DOWN)
        assert first == second
        assert first.distance.dtype == np.int32
        assert first.direction.dtype == np.int8

    def test_warmup_runs(self) -> None:
        warmup_solver_jit()


class TestOffGrid:
    def test_lookup_past_the_goal_edge_is_fatal(self) -> None:
        field = PathField.solve(CollisionMap(9, 9), Direction.RIGHT)
        off_left = neighbor(Coords(0, 4), Direction.LEFT)
        with pytest.raises(AssertionError):
            field.distance_at(off_left)
        with pytest.raises(AssertionError):
            field.direction_at(off_left)
        with pytest.raises(AssertionError):
            field.distance_at(Coords(9, 4))
