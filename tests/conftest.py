"""Shared fixtures for EscapeArtist tests."""

from __future__ import annotations

import pytest

from EscapeArtist import weights_config
from EscapeArtist.grid_types import Orientation, Wall
from EscapeArtist.wall_legality import is_in_bounds

BOARD_SIZE = 9


@pytest.fixture(autouse=True)
def quiet_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(weights_config, "VERBOSE", False)


@pytest.fixture
def every_anchor() -> list[Wall]:
    """Every wall on a 9x9 board, in bounds or not, with a one-cell margin."""
    return [
        Wall(x, y, orientation)
        for orientation in Orientation
        for y in range(-1, BOARD_SIZE + 1)
        for x in range(-1, BOARD_SIZE + 1)
    ]


@pytest.fixture
def interior_walls(every_anchor: list[Wall]) -> list[Wall]:
    """Every structurally placeable wall on an empty 9x9 board."""
    return [w for w in every_anchor if is_in_bounds(w, BOARD_SIZE, BOARD_SIZE)]
