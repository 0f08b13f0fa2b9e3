"""Per-tick integration of the player body."""

from __future__ import annotations

import logging
from typing import Optional

from pygame.math import Vector2

from .config import PhysicsConfig
from .entities import Player, Tether

logger = logging.getLogger(__name__)


class PhysicsEngine:
    """Advances the player under free-fall or tethered-swing rules.

    The swing is an arcade approximation rather than a rigid pendulum: every tick
    the body is pulled back onto the rope circle and its velocity is projected
    onto the circle's tangent, so no radial motion survives the step.
    """

    def __init__(self, config: PhysicsConfig) -> None:
        self.cfg = config

    def step(
        self,
        player: Player,
        tether: Optional[Tether],
        dt: float = 1.0,
        gravity: Optional[float] = None,
    ) -> None:
        """Advance ``player`` by ``dt`` ticks in place."""
        g = self.cfg.gravity if gravity is None else gravity
        if tether is None:
            self._free_fall(player, g, dt)
        else:
            self._swing(player, tether, g, dt)

    @staticmethod
    def _free_fall(player: Player, gravity: float, dt: float) -> None:
        player.velocity.y += gravity * dt
        player.position += player.velocity * dt

    def _swing(self, player: Player, tether: Tether, gravity: float, dt: float) -> None:
        player.velocity.y += gravity * dt

        anchor = tether.anchor.position
        position = player.position
        if self.cfg.advance_while_swinging:
            position = position + player.velocity * dt
        offset = position - anchor
        if offset.length_squared() == 0.0:
            # Sitting exactly on the bar: no direction to project onto this tick.
            logger.debug("Skipping swing projection, player coincides with anchor %s", anchor)
            player.velocity *= self.cfg.swing_damping
            return

        direction = offset.normalize()
        player.position = anchor + direction * tether.rope_length

        player.velocity *= self.cfg.swing_damping
        tangent = Vector2(-direction.y, direction.x)
        player.velocity = tangent * player.velocity.dot(tangent)
