"""Translate key presses into queued direction changes."""

from __future__ import annotations

import logging

from .config import KEY_TO_DIRECTION
from .geometry import Direction, opposite
from .state import GameState

logger = logging.getLogger(__name__)


def direction_for_key(key: int) -> Direction | None:
    return KEY_TO_DIRECTION.get(key)


def on_key(state: GameState, key: int) -> None:
    """Queue the direction bound to ``key``, dropping fatal reversals.

    The new request goes to the front of ``pending_directions``. Once the
    snake has a body, a request is discarded when it reverses either the
    current heading or the request queued just before it, since either
    would steer the head straight into the neck.
    """
    new_dir = direction_for_key(key)
    if new_dir is None or not state.alive:
        return

    queue = state.pending_directions
    queue.appendleft(new_dir)

    if not state.tail:
        return
    previous = queue[1] if len(queue) > 1 else None
    if queue[0] == opposite(state.direction) or (
        previous is not None and queue[0] == opposite(previous)
    ):
        queue.popleft()
        logger.debug("dropped reversal %s (heading %s)", new_dir.name, state.direction.name)
