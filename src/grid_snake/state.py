"""Mutable game state and the read-only snapshot handed to the renderer."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from .config import BoardConfig
from .geometry import Direction, Point

START_HEAD = Point(0, 0)


class DeathReason(Enum):
    WALL = "wall"
    SELF_COLLISION = "self-collision"
    BOARD_FULL = "board-full"


@dataclass(slots=True)
class GameState:
    """Everything the simulation needs between frames.

    ``tail`` runs from the segment nearest the head to the tail tip.
    ``pending_directions`` holds the newest request at index 0.
    """

    head: Point
    food: Point
    tail: deque[Point] = field(default_factory=deque)
    direction: Direction = Direction.NONE
    elapsed: float = 0.0
    pending_directions: deque[Direction] = field(default_factory=deque)
    death: DeathReason | None = None

    @property
    def alive(self) -> bool:
        return self.death is None

    def occupies(self, point: Point) -> bool:
        """True when the head or any tail segment sits on ``point``."""
        return point == self.head or point in self.tail

    def snapshot(self) -> Snapshot:
        return Snapshot(
            head=self.head,
            tail=tuple(self.tail),
            food=self.food,
            direction=self.direction,
            death=self.death,
        )


@dataclass(frozen=True, slots=True)
class Snapshot:
    head: Point
    tail: tuple[Point, ...]
    food: Point
    direction: Direction
    death: DeathReason | None


def new_game(board: BoardConfig) -> GameState:
    """Create the starting state: lone head at the origin, standing still,
    with food halfway to the right wall."""
    return GameState(head=START_HEAD, food=Point(board.max_x // 2, 0))
