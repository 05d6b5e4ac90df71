"""Grid coordinates and movement directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """The four movement directions plus standing still; values are (dx, dy)."""

    NONE = (0, 0)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, 1)
    DOWN = (0, -1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


_OPPOSITE: dict[Direction, Direction] = {
    Direction.NONE: Direction.NONE,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


def opposite(direction: Direction) -> Direction:
    """Return the reverse heading; standing still stays still."""
    return _OPPOSITE[direction]


@dataclass(frozen=True, slots=True)
class Point:
    """A cell on the board. y grows upward."""

    x: int
    y: int

    def moved(self, direction: Direction) -> Point:
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)
