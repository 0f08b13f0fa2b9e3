"""Contact checks between the player and the world."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import CollisionConfig
from .entities import Obstacle, Player, World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollisionReport:
    """Outcome of one tick of collision checks."""

    pickups_collected: int = 0
    obstacle: Optional[Obstacle] = None
    fell_off: bool = False

    @property
    def fatal(self) -> bool:
        return self.obstacle is not None or self.fell_off


def circle_overlaps_square(player: Player, obstacle: Obstacle) -> bool:
    """Bounding-box test of the player's circle against the obstacle square.

    Touching edges do not count as an overlap.
    """
    left, top, right, bottom = obstacle.bounds()
    px, py = player.position
    r = player.radius
    return px - r < right and left < px + r and py - r < bottom and top < py + r


class CollisionSystem:
    """Runs pickup, obstacle and fall-off checks in that order."""

    def __init__(self, config: CollisionConfig) -> None:
        self.cfg = config

    def check(self, player: Player, world: World, viewport_height: float) -> CollisionReport:
        collected = self.collect_pickups(player, world)

        obstacle = self.first_obstacle_hit(player, world)
        if obstacle is not None:
            logger.debug("Player hit obstacle at (%.1f, %.1f)", obstacle.x, obstacle.y)
            return CollisionReport(pickups_collected=collected, obstacle=obstacle)

        if self.fell_off(player, viewport_height):
            logger.debug("Player fell below the viewport at y=%.1f", player.position.y)
            return CollisionReport(pickups_collected=collected, fell_off=True)

        return CollisionReport(pickups_collected=collected)

    @staticmethod
    def collect_pickups(player: Player, world: World) -> int:
        remaining = []
        collected = 0
        for pickup in world.pickups:
            if player.position.distance_to(pickup.position) < player.radius + pickup.size:
                collected += 1
            else:
                remaining.append(pickup)
        world.pickups = remaining
        return collected

    @staticmethod
    def first_obstacle_hit(player: Player, world: World) -> Optional[Obstacle]:
        for obstacle in world.obstacles:
            if circle_overlaps_square(player, obstacle):
                return obstacle
        return None

    def fell_off(self, player: Player, viewport_height: float) -> bool:
        return player.position.y > viewport_height + self.cfg.fall_margin
