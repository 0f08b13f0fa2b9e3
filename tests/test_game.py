import random

import pygame
import pytest

from swing_game.config import GameConfig
from swing_game.game import SwingJumpGame
from swing_game.state import SessionState


@pytest.fixture
def game():
    instance = SwingJumpGame(GameConfig(window_size=(640, 480)), rng=random.Random(8))
    yield instance
    pygame.quit()


def click(kind):
    return pygame.event.Event(kind, button=1, pos=(200, 240))


def key(kind, code):
    return pygame.event.Event(kind, key=code)


def test_click_starts_the_session(game):
    game._handle_events([click(pygame.MOUSEBUTTONDOWN), click(pygame.MOUSEBUTTONUP)])

    assert game.loop.session_snapshot.state is SessionState.PLAYING


def test_advance_runs_fixed_ticks_with_catchup_limit(game):
    game.loop.start()

    game._advance(2 / 60 + 1e-6)
    assert game.loop.state.tick == 2

    game._advance(1.0)
    assert game.loop.state.tick == 2 + game.config.session.max_catchup_ticks


def test_pause_key_stops_ticks(game):
    game.loop.start()
    game._handle_events([key(pygame.KEYDOWN, pygame.K_p)])

    game._advance(0.5)

    assert game.loop.paused
    assert game.loop.state.tick == 0
    game._handle_events([key(pygame.KEYDOWN, pygame.K_p)])
    assert not game.loop.paused


def test_restart_key_resets(game):
    game.loop.start()
    game._advance(3 / 60 + 1e-6)

    game._handle_events([key(pygame.KEYDOWN, pygame.K_r)])

    assert game.loop.state.tick == 0
    assert game.loop.session_snapshot.state is SessionState.PLAYING


def test_quit_and_escape_stop_the_loop(game):
    game._handle_events([pygame.event.Event(pygame.QUIT)])
    assert not game.running

    game.running = True
    game._handle_events([key(pygame.KEYDOWN, pygame.K_ESCAPE)])
    assert not game.running


def test_held_press_grabs_during_play(game):
    game.loop.start()
    game._handle_events([click(pygame.MOUSEBUTTONDOWN)])
    game._advance(1 / 60 + 1e-6)

    assert game.loop.world_snapshot.tether is not None

    game._handle_events([click(pygame.MOUSEBUTTONUP)])
    game._advance(1 / 60 + 1e-6)

    assert game.loop.world_snapshot.tether is None


def test_restart_key_forgets_held_press(game):
    game.loop.start()
    game._handle_events([click(pygame.MOUSEBUTTONDOWN)])

    game._handle_events([key(pygame.KEYDOWN, pygame.K_r)])

    assert game.input_provider.translate(click(pygame.MOUSEBUTTONUP), 0.0, 0.0) is None
    assert game.loop.state.tick == 0
