from dataclasses import replace

import pygame
import pytest

from swing_game.input import GrabAttempt
from swing_game.render import Renderer
from swing_game.simulation import SessionSnapshot
from swing_game.state import SessionState


@pytest.fixture
def surface():
    pygame.init()
    yield pygame.Surface((640, 480))
    pygame.quit()


def make_renderer(surface, loop) -> Renderer:
    return Renderer(surface, loop.config.render, loop.config.world)


def test_player_drawn_at_world_position(surface, loop):
    loop.start()
    renderer = make_renderer(surface, loop)

    renderer.draw(loop.world_snapshot, loop.session_snapshot)

    assert tuple(surface.get_at((100, 300)))[:3] == loop.config.render.player_color


def test_camera_offset_shifts_drawn_player(surface, loop):
    loop.start()
    renderer = make_renderer(surface, loop)
    world = replace(loop.world_snapshot, camera_offset=40.0)

    renderer.draw(world, loop.session_snapshot)

    assert tuple(surface.get_at((60, 300)))[:3] == loop.config.render.player_color


def test_draws_idle_playing_paused_and_game_over(surface, loop):
    renderer = make_renderer(surface, loop)
    assert loop.session_snapshot.state is SessionState.IDLE
    renderer.draw(loop.world_snapshot, loop.session_snapshot)

    loop.start()
    loop.machine.grab(GrabAttempt(world_position=(0.0, 0.0)))
    for _ in range(5):
        loop.tick(640, 480)
    assert loop.world_snapshot.tether is not None
    renderer.draw(loop.world_snapshot, loop.session_snapshot)
    renderer.draw(loop.world_snapshot, loop.session_snapshot, paused=True)

    over = SessionSnapshot(state=SessionState.GAME_OVER, score=2500.0, pickup_count=3, display_score=25)
    renderer.draw(loop.world_snapshot, over)


def test_background_cache_follows_surface_size(surface, loop):
    renderer = make_renderer(surface, loop)
    renderer.draw(loop.world_snapshot, loop.session_snapshot)
    assert renderer._bg_cache[0] == (640, 480)

    renderer.surface = pygame.Surface((300, 150))
    renderer.draw(loop.world_snapshot, loop.session_snapshot)

    assert renderer._bg_cache[0] == (300, 150)
