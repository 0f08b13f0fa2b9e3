"""Swing Jump endless swinging game package."""

from .config import ConfigError, GameConfig
from .input import Cancel, GrabAttempt, PointerInput, Release
from .simulation import SessionSnapshot, SimulationLoop, WorldSnapshot
from .state import SessionState, TetherState

__all__ = [
    "SimulationLoop",
    "GameConfig",
    "ConfigError",
    "WorldSnapshot",
    "SessionSnapshot",
    "SessionState",
    "TetherState",
    "GrabAttempt",
    "Release",
    "Cancel",
    "PointerInput",
]
