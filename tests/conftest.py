import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from swing_game.config import GameConfig  # noqa: E402
from swing_game.simulation import SimulationLoop  # noqa: E402


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def loop(config: GameConfig) -> SimulationLoop:
    return SimulationLoop(config, seed=42)
