"""Fixed-timestep simulation: movement, collisions, growth and food respawn."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .config import BoardConfig
from .geometry import Point
from .state import DeathReason, GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Continue:
    """The simulation is still running."""


@dataclass(frozen=True, slots=True)
class Terminated:
    """The simulation has halted for good."""

    reason: DeathReason


CONTINUE = Continue()

TickResult = Continue | Terminated


def place_food(
    state: GameState, board: BoardConfig, rng: random.Random | None = None
) -> bool:
    """Move the food to a random free cell; False when no free cell is left.

    Candidates are drawn uniformly over the whole board and redrawn until
    they miss both the head and the tail.
    """
    source = rng or random
    if len(state.tail) + 1 >= board.cell_count:
        return False

    while True:
        candidate = Point(
            source.randint(board.min_x, board.max_x),
            source.randint(board.min_y, board.max_y),
        )
        if not state.occupies(candidate):
            state.food = candidate
            logger.debug("food placed at (%d, %d)", candidate.x, candidate.y)
            return True


def _die(state: GameState, reason: DeathReason) -> Terminated:
    state.death = reason
    logger.debug(
        "terminated: %s at (%d, %d)", reason.value, state.head.x, state.head.y
    )
    return Terminated(reason)


def tick(
    state: GameState,
    elapsed_delta: float,
    board: BoardConfig,
    rng: random.Random | None = None,
) -> TickResult:
    """Advance the snake by one cell once enough time has accumulated.

    Frames shorter than the tick interval only feed the accumulator. A dead
    state is left untouched and keeps reporting its terminal reason.
    """
    if state.death is not None:
        return Terminated(state.death)

    state.elapsed += elapsed_delta
    if state.elapsed < board.tick_interval_seconds:
        return CONTINUE
    state.elapsed = 0.0

    # The back of the queue holds the oldest request.
    if state.pending_directions:
        state.direction = state.pending_directions.pop()

    old_head = state.head
    neck = state.tail[0] if state.tail else None
    vacated: Point | None = None
    if state.tail:
        vacated = state.tail.pop()
        state.tail.appendleft(old_head)

    state.head = old_head.moved(state.direction)

    # Stepping onto the old neck means head and neck swapped places.
    if state.head in state.tail or state.head == neck:
        return _die(state, DeathReason.SELF_COLLISION)

    if not board.contains(state.head):
        return _die(state, DeathReason.WALL)

    if state.head == state.food:
        if vacated is not None:
            state.tail.append(vacated)
        else:
            state.tail.appendleft(old_head)
        if not place_food(state, board, rng):
            return _die(state, DeathReason.BOARD_FULL)

    return CONTINUE
