import os

# Headless pygame for surfaces and windows.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from collections import deque

import pytest

from grid_snake.config import BoardConfig
from grid_snake.geometry import Direction, Point
from grid_snake.state import GameState


class ScriptedRng:
    """Stands in for random.Random, replaying fixed randint results."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randint(self, a, b):
        value = self.values[self.calls]
        self.calls += 1
        assert a <= value <= b
        return value


@pytest.fixture
def board():
    return BoardConfig()


@pytest.fixture
def make_state():
    def _make(
        head=(0, 0),
        tail=(),
        food=(-4, -4),
        direction=Direction.NONE,
        queue=(),
    ):
        def _point(p):
            return p if isinstance(p, Point) else Point(*p)

        return GameState(
            head=_point(head),
            food=_point(food),
            tail=deque(_point(p) for p in tail),
            direction=direction,
            pending_directions=deque(queue),
        )

    return _make


@pytest.fixture
def scripted_rng():
    return ScriptedRng
