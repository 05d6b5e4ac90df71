"""Grid Snake host loop: window, events, fixed-timestep ticking and drawing."""

from __future__ import annotations

import logging
import random

import pygame

from .config import (
    FONT_NAME,
    FONT_SIZE,
    FPS,
    QUIT_KEYS,
    RESTART_KEY,
    WINDOW_TITLE,
    BoardConfig,
)
from .controls import on_key
from .logic import Terminated, tick
from .render import draw_frame, draw_overlay
from .state import GameState, new_game

logger = logging.getLogger(__name__)


class GridSnake:
    """Owns the pygame window and the single GameState it drives."""

    def __init__(self, board: BoardConfig | None = None, rng: random.Random | None = None) -> None:
        self.board = board or BoardConfig()
        self.rng = rng
        pygame.init()
        self.window = pygame.display.set_mode(self.board.window_size)
        pygame.display.set_caption(WINDOW_TITLE)
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)

        self.state: GameState = new_game(self.board)
        self.result: Terminated | None = None
        logger.info(
            "new game on %dx%d board, tick every %.3fs",
            self.board.width,
            self.board.height,
            self.board.tick_interval_seconds,
        )

    def restart(self) -> None:
        """Throw the finished game away and start a fresh one."""
        self.state = new_game(self.board)
        self.result = None
        logger.info("restarted")

    # --- Input ---------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one event; False means the player asked to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            return True
        if event.key in QUIT_KEYS:
            return False
        if self.result is not None:
            if event.key == RESTART_KEY:
                self.restart()
            return True
        on_key(self.state, event.key)
        return True

    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if not self.handle_event(event):
                return False
        return True

    # --- Logic ---------------------------------------------------------

    def update(self, dt: float) -> None:
        """Feed frame time to the simulation; latch the first terminal result."""
        if self.result is not None:
            return
        outcome = tick(self.state, dt, self.board, self.rng)
        if isinstance(outcome, Terminated):
            self.result = outcome
            logger.info(
                "game over (%s) with tail length %d",
                outcome.reason.value,
                len(self.state.tail),
            )

    # --- Draw ----------------------------------------------------------

    def draw(self) -> None:
        draw_frame(self.window, self.state.snapshot(), self.board)
        if self.result is not None:
            draw_overlay(
                self.window,
                self.font,
                [
                    "Game Over",
                    self.result.reason.value.replace("-", " ").capitalize(),
                    "R to restart / Q to quit",
                ],
            )

    def start(self) -> None:
        """Run the main loop: handle events, tick, then render."""
        clock = pygame.time.Clock()
        running = True

        while running:
            dt = clock.tick(FPS) / 1000.0
            running = self.handle_events()
            if not running:
                break
            self.update(dt)
            self.draw()
            pygame.display.update()

        pygame.quit()
