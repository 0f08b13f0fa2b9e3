"""Procedural generation and retirement of bars, obstacles and diamonds."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Optional

from .config import GrabConfig, PhysicsConfig, WorldConfig
from .entities import Anchor, Obstacle, Pickup, World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reach:
    """Largest gap and climb a player can be expected to cross between bars."""

    max_gap: float
    max_rise: float


def traversable_reach(physics: PhysicsConfig, grab: GrabConfig) -> Reach:
    """Estimate the reach of one release jump followed by a grab.

    The release impulse is treated as a ballistic launch from rest: the player
    covers ``impulse_x * airtime`` before returning to release height, and can
    then grab anything within ``grab_radius``. The climb is the apex height of
    that launch.
    """
    impulse_x, impulse_y = physics.release_impulse
    lift = max(0.0, -impulse_y)
    if physics.gravity <= 0:
        return Reach(max_gap=math.inf, max_rise=math.inf)
    airtime = 2.0 * lift / physics.gravity
    return Reach(
        max_gap=grab.grab_radius + max(0.0, impulse_x) * airtime,
        max_rise=lift * lift / (2.0 * physics.gravity),
    )


@dataclass(frozen=True)
class VisibleEntities:
    anchors: tuple[Anchor, ...]
    obstacles: tuple[Obstacle, ...]
    pickups: tuple[Pickup, ...]


class WorldGenerator:
    """Keeps the world populated ahead of the camera."""

    def __init__(
        self,
        config: WorldConfig,
        rng: Optional[random.Random] = None,
        reach: Optional[Reach] = None,
    ) -> None:
        self.cfg = config
        self.rng = rng or random.Random()
        self.distance_max = config.distance_max
        self.max_rise = config.max_height_delta
        if config.enforce_reachability and reach is not None:
            self.distance_max = max(config.distance_min, min(config.distance_max, reach.max_gap))
            self.max_rise = min(config.max_height_delta, reach.max_rise)
            logger.info(
                "Reachability bounds applied: gap <= %.1f, climb <= %.1f",
                self.distance_max,
                self.max_rise,
            )

    def reset(self, world: World) -> None:
        """Clear ``world`` and lay down the opening bar plus one chunk."""
        world.clear()
        self._seed(world)
        self.generate_chunk(world)

    def ensure_frontier(self, world: World, camera_offset: float, viewport_width: float) -> int:
        """Generate chunks until the frontier is far enough ahead; return anchors added."""
        added = 0
        if world.tail is None:
            self._seed(world)
            added += 1
        lookahead = self.cfg.frontier_viewports * viewport_width
        while world.frontier_x - camera_offset < lookahead:
            added += self.generate_chunk(world)
        return added

    def generate_chunk(self, world: World) -> int:
        if world.tail is None:
            self._seed(world)
        for _ in range(self.cfg.chunk_size):
            self._append_anchor(world)
        assert world.is_sorted(), "anchors must stay sorted by x"
        logger.debug(
            "Generated chunk of %d bars, frontier now %.1f",
            self.cfg.chunk_size,
            world.frontier_x,
        )
        return self.cfg.chunk_size

    def _seed(self, world: World) -> None:
        x, y = self.cfg.first_anchor
        anchor = Anchor(x, y, self.cfg.anchor_radius)
        world.anchors.append(anchor)
        world.tail = anchor

    def _append_anchor(self, world: World) -> None:
        cfg = self.cfg
        last = world.tail
        assert last is not None

        distance = self.rng.uniform(cfg.distance_min, self.distance_max)
        height_delta = self.rng.uniform(-cfg.max_height_delta, cfg.max_height_delta)
        # Screen y grows downward, so a climb is a negative delta.
        height_delta = max(-self.max_rise, height_delta)
        new_y = min(cfg.max_y, max(cfg.min_y, last.y + height_delta))
        new_x = last.x + distance

        anchor = Anchor(new_x, new_y, cfg.anchor_radius)
        world.anchors.append(anchor)
        world.tail = anchor

        mid_x = new_x - distance / 2
        if self.rng.random() < cfg.pickup_chance:
            world.pickups.append(Pickup(mid_x, new_y - cfg.pickup_offset, cfg.pickup_size))
        if self.rng.random() < cfg.obstacle_chance:
            world.obstacles.append(Obstacle(mid_x, new_y + cfg.obstacle_offset, cfg.obstacle_size))

    def cleanup(self, world: World, camera_offset: float) -> int:
        """Drop entities more than ``cleanup_margin`` behind the camera; return count removed."""
        limit = camera_offset - self.cfg.cleanup_margin
        before = len(world.anchors) + len(world.obstacles) + len(world.pickups)
        world.anchors = [a for a in world.anchors if a.x >= limit]
        world.obstacles = [o for o in world.obstacles if o.x >= limit]
        world.pickups = [p for p in world.pickups if p.x >= limit]
        return before - (len(world.anchors) + len(world.obstacles) + len(world.pickups))

    @staticmethod
    def visible(
        world: World,
        camera_offset: float,
        viewport_width: float,
        margin: float = 50.0,
    ) -> VisibleEntities:
        left = camera_offset - margin
        right = camera_offset + viewport_width + margin
        return VisibleEntities(
            anchors=tuple(a for a in world.anchors if left < a.x < right),
            obstacles=tuple(o for o in world.obstacles if left < o.x < right),
            pickups=tuple(p for p in world.pickups if left < p.x < right),
        )
