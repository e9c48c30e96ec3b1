from __future__ import annotations
import os

# pygame surfaces only; never open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from dmap.world.grid import DistanceGrid


def all_walkable(x: int, y: int) -> bool:
    return True


def wall_at_x5(x: int, y: int) -> bool:
    return x != 5


@pytest.fixture
def open_predicate():
    return all_walkable


@pytest.fixture
def walled_predicate():
    return wall_at_x5


@pytest.fixture
def grid10():
    return DistanceGrid(10, 10, "manhattan")
