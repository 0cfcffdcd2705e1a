"""Tests for EscapeArtist.grid_types geometry."""

from __future__ import annotations

import pytest

from EscapeArtist.grid_types import (
    GOAL_DIRECTIONS,
    Coords,
    Direction,
    Orientation,
    Wall,
    blocking_walls,
    diagonal,
    goal_direction,
    in_grid,
    neighbor,
    wall_edges,
)


class TestDirection:
    def test_neighbor_steps(self) -> None:
        origin = Coords(4, 4)
        assert neighbor(origin, Direction.RIGHT) == Coords(5, 4)
        assert neighbor(origin, Direction.LEFT) == Coords(3, 4)
        assert neighbor(origin, Direction.DOWN) == Coords(4, 5)
        assert neighbor(origin, Direction.UP) == Coords(4, 3)

    def test_neighbor_does_not_clamp(self) -> None:
        assert neighbor(Coords(0, 0), Direction.LEFT) == Coords(-1, 0)

    def test_neighbor_without_direction_is_fatal(self) -> None:
        with pytest.raises(AssertionError):
            neighbor(Coords(1, 1), Direction.NONE)

    def test_opposites(self) -> None:
        assert Direction.RIGHT.opposite == Direction.LEFT
        assert Direction.LEFT.opposite == Direction.RIGHT
        assert Direction.DOWN.opposite == Direction.UP
        assert Direction.UP.opposite == Direction.DOWN

    def test_tokens(self) -> None:
        assert [d.token for d in (Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP)] == [
            "RIGHT", "LEFT", "DOWN", "UP",
        ]

    def test_diagonal(self) -> None:
        assert diagonal(Coords(2, 2), 1, -1) == Coords(3, 1)
        with pytest.raises(AssertionError):
            diagonal(Coords(2, 2), 0, 1)

    def test_in_grid(self) -> None:
        assert in_grid(Coords(0, 0), 9, 9)
        assert in_grid(Coords(8, 8), 9, 9)
        assert not in_grid(Coords(9, 0), 9, 9)
        assert not in_grid(Coords(0, -1), 9, 9)


class TestOrientation:
    def test_parse(self) -> None:
        assert Orientation.parse("H") is Orientation.HORIZONTAL
        assert Orientation.parse("v") is Orientation.VERTICAL

    def test_parse_unknown_is_fatal(self) -> None:
        with pytest.raises(ValueError):
            Orientation.parse("X")


class TestGoals:
    def test_seat_table(self) -> None:
        assert goal_direction(0) == Direction.RIGHT
        assert goal_direction(1) == Direction.LEFT
        assert goal_direction(2) == Direction.DOWN

    @pytest.mark.parametrize("player_id", [-1, len(GOAL_DIRECTIONS)])
    def test_unknown_seat_fails_fast(self, player_id: int) -> None:
        with pytest.raises(ValueError):
            goal_direction(player_id)


class TestWallEdges:
    def test_horizontal_wall(self) -> None:
        edges = wall_edges(Wall(3, 5, Orientation.HORIZONTAL))
        assert set(edges) == {
            (Coords(3, 5), Direction.UP),
            (Coords(3, 4), Direction.DOWN),
            (Coords(4, 5), Direction.UP),
            (Coords(4, 4), Direction.DOWN),
        }

    def test_vertical_wall(self) -> None:
        edges = wall_edges(Wall(3, 5, Orientation.VERTICAL))
        assert set(edges) == {
            (Coords(3, 5), Direction.LEFT),
            (Coords(2, 5), Direction.RIGHT),
            (Coords(3, 6), Direction.LEFT),
            (Coords(2, 6), Direction.RIGHT),
        }


class TestBlockingWalls:
    @pytest.mark.parametrize("direction", [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP])
    def test_every_candidate_blocks_the_step(self, direction: Direction) -> None:
        cell = Coords(4, 4)
        target = neighbor(cell, direction)
        for wall in blocking_walls(cell, direction):
            edges = wall_edges(wall)
            assert (cell, direction) in edges
            assert (target, direction.opposite) in edges

    def test_right_step(self) -> None:
        assert blocking_walls(Coords(2, 4), Direction.RIGHT) == [
            Wall(3, 4, Orientation.VERTICAL),
            Wall(3, 3, Orientation.VERTICAL),
        ]

    def test_up_step(self) -> None:
        assert blocking_walls(Coords(2, 4), Direction.UP) == [
            Wall(2, 4, Orientation.HORIZONTAL),
            Wall(1, 4, Orientation.HORIZONTAL),
        ]
