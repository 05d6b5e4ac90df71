"""Tests for the pygame host loop, run against the dummy video driver."""

import random

import pygame
import pytest

from grid_snake.config import BoardConfig
from grid_snake.game import GridSnake
from grid_snake.geometry import Direction, Point
from grid_snake.logic import Terminated
from grid_snake.state import DeathReason


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


@pytest.fixture
def game():
    instance = GridSnake(BoardConfig(width=6, height=6, cell_size=20), random.Random(5))
    yield instance
    pygame.quit()


class TestEvents:
    def test_quit_event_stops_the_loop(self, game):
        assert game.handle_event(pygame.event.Event(pygame.QUIT)) is False

    @pytest.mark.parametrize("code", [pygame.K_ESCAPE, pygame.K_q])
    def test_quit_keys_stop_the_loop(self, game, code):
        assert game.handle_event(key(code)) is False

    def test_movement_keys_reach_the_queue(self, game):
        assert game.handle_event(key(pygame.K_UP)) is True
        assert list(game.state.pending_directions) == [Direction.UP]

    def test_non_key_events_are_ignored(self, game):
        assert game.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
        assert list(game.state.pending_directions) == []


class TestLoop:
    def drive_into_wall(self, game):
        game.handle_event(key(pygame.K_RIGHT))
        for _ in range(3):
            game.update(game.board.tick_interval_seconds)

    def test_update_moves_the_snake(self, game):
        game.handle_event(key(pygame.K_UP))
        game.update(game.board.tick_interval_seconds)
        assert game.state.head == Point(0, 1)
        assert game.result is None

    def test_wall_hit_latches_game_over(self, game):
        self.drive_into_wall(game)
        assert game.result == Terminated(DeathReason.WALL)

        head = game.state.head
        game.update(1.0)
        assert game.state.head == head

    def test_input_ignored_after_game_over(self, game):
        self.drive_into_wall(game)
        game.handle_event(key(pygame.K_UP))
        assert list(game.state.pending_directions) == []

    def test_restart_builds_a_fresh_state(self, game):
        self.drive_into_wall(game)
        game.handle_event(key(pygame.K_r))
        assert game.result is None
        assert game.state.alive
        assert game.state.head == Point(0, 0)

    def test_draw_runs_while_playing_and_after_game_over(self, game):
        game.draw()
        self.drive_into_wall(game)
        game.draw()
