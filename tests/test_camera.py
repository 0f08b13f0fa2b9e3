import random

import pytest
from pygame.math import Vector2

from swing_game.camera import CameraController
from swing_game.config import CameraConfig
from swing_game.entities import Player


def test_camera_follows_with_lead_fraction():
    camera = CameraController(CameraConfig(lead_fraction=0.3))
    player = Player(position=Vector2(1000, 300), velocity=Vector2())

    assert camera.update(0.0, player, 1000.0) == pytest.approx(700.0)


def test_camera_never_moves_backward():
    camera = CameraController(CameraConfig())
    player = Player(position=Vector2(0, 300), velocity=Vector2())
    offset = 0.0
    rng = random.Random(5)

    for _ in range(500):
        player.position.x += rng.uniform(-40.0, 50.0)
        new_offset = camera.update(offset, player, 800.0)
        assert new_offset >= offset
        offset = new_offset


def test_to_screen_subtracts_offset():
    assert CameraController.to_screen(250.0, 300.0, 40.0) == (50.0, 40.0)
