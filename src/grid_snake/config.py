"""Board configuration, palette and key bindings for Grid Snake."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, fields, replace
from typing import Iterator, Mapping

import pygame

from .geometry import Direction, Point

DEFAULT_WIDTH: int = 12
DEFAULT_HEIGHT: int = 12
DEFAULT_CELL_SIZE: int = 64  # pixels per cell
DEFAULT_TICK_INTERVAL: float = 0.16  # seconds between moves
MIN_BOARD_CELLS: int = 6  # keeps the starting food off the starting head

FPS: int = 120
FONT_NAME: str = "consolas"
FONT_SIZE: int = 32
WINDOW_TITLE: str = "Grid Snake"

ENV_PREFIX = "GRID_SNAKE_"


@dataclass(frozen=True, slots=True)
class BoardConfig:
    """Startup configuration: grid dimensions, cell pixel size and tick rate.

    The grid is centered on the origin. As in the classic layout the
    playable range on each axis is ``1 - n // 2 .. n // 2 - 1``.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    cell_size: int = DEFAULT_CELL_SIZE
    tick_interval_seconds: float = DEFAULT_TICK_INTERVAL

    def __post_init__(self) -> None:
        if self.width < MIN_BOARD_CELLS:
            raise ValueError(f"width must be at least {MIN_BOARD_CELLS}, got {self.width}")
        if self.height < MIN_BOARD_CELLS:
            raise ValueError(f"height must be at least {MIN_BOARD_CELLS}, got {self.height}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if not math.isfinite(self.tick_interval_seconds) or self.tick_interval_seconds <= 0:
            raise ValueError(
                "tick_interval_seconds must be a positive finite number, "
                f"got {self.tick_interval_seconds}"
            )

    # --- Bounds --------------------------------------------------------

    @property
    def min_x(self) -> int:
        return 1 - self.width // 2

    @property
    def max_x(self) -> int:
        return self.width // 2 - 1

    @property
    def min_y(self) -> int:
        return 1 - self.height // 2

    @property
    def max_y(self) -> int:
        return self.height // 2 - 1

    @property
    def cell_count(self) -> int:
        return (self.max_x - self.min_x + 1) * (self.max_y - self.min_y + 1)

    @property
    def window_size(self) -> tuple[int, int]:
        return self.width * self.cell_size, self.height * self.cell_size

    def contains(self, point: Point) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def cells(self) -> Iterator[Point]:
        """Yield every playable cell, row by row from the bottom."""
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield Point(x, y)

    # --- Loading -------------------------------------------------------

    def with_overrides(self, **options: object) -> BoardConfig:
        """Return a copy with every non-None option applied."""
        known = {f.name for f in fields(self)}
        unknown = set(options) - known
        if unknown:
            raise ValueError(f"unknown board option(s): {', '.join(sorted(unknown))}")
        changes = {name: value for name, value in options.items() if value is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BoardConfig:
        """Build a config from ``GRID_SNAKE_*`` variables, defaulting the rest."""
        env = os.environ if environ is None else environ
        return cls(
            width=_env_value(env, "WIDTH", int, DEFAULT_WIDTH),
            height=_env_value(env, "HEIGHT", int, DEFAULT_HEIGHT),
            cell_size=_env_value(env, "CELL_SIZE", int, DEFAULT_CELL_SIZE),
            tick_interval_seconds=_env_value(
                env, "TICK_INTERVAL", float, DEFAULT_TICK_INTERVAL
            ),
        )


def _env_value(env: Mapping[str, str], name: str, parse, default):
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw.strip())
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name}: invalid value {raw!r}") from None


def _rgb(r: float, g: float, b: float) -> pygame.Color:
    """Convert a unit-float RGB triple to a pygame color."""
    return pygame.Color(round(r * 255), round(g * 255), round(b * 255))


PALETTE = {
    "head": _rgb(0.85, 1.00, 0.80),
    "tail": _rgb(0.08, 0.50, 0.25),
    "food": _rgb(0.65, 0.70, 0.02),
    "bg_1": _rgb(0.00, 0.07, 0.10),
    "bg_2": _rgb(0.00, 0.10, 0.10),
    "text": pygame.Color(216, 239, 255),
    "overlay": pygame.Color(5, 5, 15, 140),
}

KEY_TO_DIRECTION: dict[int, Direction] = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)
RESTART_KEY = pygame.K_r
