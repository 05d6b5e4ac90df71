"""Draw a game snapshot onto a pygame surface."""

from __future__ import annotations

from typing import Sequence

import pygame

from .config import PALETTE, BoardConfig
from .geometry import Point
from .state import Snapshot

LINE_GAP = 8  # pixels between overlay text lines


def to_screen(point: Point, board: BoardConfig) -> tuple[int, int]:
    """Map a grid cell to the pixel at its center (origin mid-window, y up)."""
    width, height = board.window_size
    return (
        width // 2 + point.x * board.cell_size,
        height // 2 - point.y * board.cell_size,
    )


def draw_background(surface: pygame.Surface, board: BoardConfig) -> None:
    """Fill the playable cells with a two-tone checkerboard."""
    surface.fill((0, 0, 0))
    size = board.cell_size
    for cell in board.cells():
        color = PALETTE["bg_1"] if (cell.x + cell.y) % 2 == 0 else PALETTE["bg_2"]
        rect = pygame.Rect(0, 0, size, size)
        rect.center = to_screen(cell, board)
        pygame.draw.rect(surface, color, rect)


def _capsule(
    surface: pygame.Surface,
    color: pygame.Color,
    start: tuple[int, int],
    end: tuple[int, int],
    weight: float,
) -> None:
    # pygame lines have square ends; cap both with discs.
    width = max(1, int(weight))
    pygame.draw.line(surface, color, start, end, width)
    pygame.draw.circle(surface, color, start, width / 2)
    pygame.draw.circle(surface, color, end, width / 2)


def draw_tail(surface: pygame.Surface, snapshot: Snapshot, board: BoardConfig) -> None:
    """Chain round-capped links from the head through every tail segment.

    The final link is drawn thinner so the body tapers toward the tip.
    """
    size = board.cell_size
    last = len(snapshot.tail) - 1
    previous = snapshot.head
    for idx, segment in enumerate(snapshot.tail):
        weight = size - 10 if idx == last and idx != 0 else size - 5
        _capsule(
            surface,
            PALETTE["tail"],
            to_screen(previous, board),
            to_screen(segment, board),
            weight,
        )
        previous = segment


def draw_frame(surface: pygame.Surface, snapshot: Snapshot, board: BoardConfig) -> None:
    """Render background, food, tail and head; never touches game state."""
    draw_background(surface, board)

    size = board.cell_size
    pygame.draw.circle(
        surface, PALETTE["food"], to_screen(snapshot.food, board), (size - 2.5) / 2
    )
    draw_tail(surface, snapshot, board)
    pygame.draw.circle(
        surface, PALETTE["head"], to_screen(snapshot.head, board), (size + 2) / 2
    )


def draw_overlay(
    surface: pygame.Surface, font: pygame.font.Font, lines: Sequence[str]
) -> None:
    """Dim the frame and center the block of ``lines`` over it."""
    width, height = surface.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill(PALETTE["overlay"])

    step = font.get_linesize() + LINE_GAP
    top = height // 2 - (step * len(lines) - LINE_GAP) // 2
    for idx, text in enumerate(lines):
        surf = font.render(text, True, PALETTE["text"])
        rect = surf.get_rect()
        rect.midtop = (width // 2, top + idx * step)
        overlay.blit(surf, rect)
    surface.blit(overlay, (0, 0))
