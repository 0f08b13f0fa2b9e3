"""Side-scrolling camera that only ever moves forward."""

from __future__ import annotations

from .config import CameraConfig
from .entities import Player


class CameraController:
    """Keeps the player ``lead_fraction`` of the viewport from the left edge."""

    def __init__(self, config: CameraConfig) -> None:
        self.cfg = config

    def target(self, player: Player, viewport_width: float) -> float:
        return player.position.x - viewport_width * self.cfg.lead_fraction

    def update(self, camera_offset: float, player: Player, viewport_width: float) -> float:
        return max(camera_offset, self.target(player, viewport_width))

    @staticmethod
    def to_screen(camera_offset: float, x: float, y: float) -> tuple[float, float]:
        return x - camera_offset, y
