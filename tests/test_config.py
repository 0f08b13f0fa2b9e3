import logging
from dataclasses import replace

import pytest

from swing_game.config import (
    CameraConfig,
    ConfigError,
    GameConfig,
    GrabConfig,
    PhysicsConfig,
    SessionConfig,
)
from swing_game.logging_config import setup_logging


def test_defaults_are_valid():
    config = GameConfig()

    assert config.physics.gravity == 0.25
    assert config.world.chunk_size == 10
    assert config.grab.grab_radius == 300.0
    assert config.camera.lead_fraction == 0.3


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: PhysicsConfig(swing_damping=1.5),
        lambda: PhysicsConfig(swing_damping=0.0),
        lambda: PhysicsConfig(gravity=-1.0),
        lambda: PhysicsConfig(player_radius=0.0),
        lambda: GrabConfig(grab_radius=0.0),
        lambda: GrabConfig(forward_bias=-5.0),
        lambda: CameraConfig(lead_fraction=1.0),
        lambda: SessionConfig(ticks_per_second=0),
        lambda: SessionConfig(max_catchup_ticks=0),
        lambda: GameConfig(window_size=(0, 720)),
    ],
)
def test_invalid_values_raise(factory):
    with pytest.raises(ConfigError):
        factory()


def test_replace_revalidates():
    with pytest.raises(ConfigError):
        replace(GameConfig(), target_fps=0)


def test_setup_logging_does_not_stack_handlers(tmp_path):
    log_file = tmp_path / "game.log"

    setup_logging(logging.DEBUG, str(log_file))
    logger = setup_logging(logging.DEBUG, str(log_file))

    assert logger.name == "swing_game"
    assert len(logger.handlers) == 2
    logging.getLogger("swing_game.world").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_writes_level_and_logger_name(tmp_path):
    log_file = tmp_path / "game.log"
    logger = setup_logging(logging.INFO, str(log_file))

    logging.getLogger("swing_game.state").info("Session over")
    logging.getLogger("swing_game.state").debug("hidden")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    text = log_file.read_text(encoding="utf-8")
    assert "INFO    swing_game.state: Session over" in text
    assert "hidden" not in text
