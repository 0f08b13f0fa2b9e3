"""Session and tether state machine."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from pygame.math import Vector2

from .config import GameConfig
from .entities import Anchor, Player, Tether, World
from .input import Cancel, GrabAttempt, Release
from .world import WorldGenerator

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class TetherState(enum.Enum):
    FREE = "free"
    TETHERED = "tethered"


@dataclass
class SimulationState:
    """Mutable state of one session, owned by the simulation loop."""

    player: Player
    world: World = field(default_factory=World)
    tether: Optional[Tether] = None
    camera_offset: float = 0.0
    score: float = 0.0
    pickup_count: int = 0
    session: SessionState = SessionState.IDLE
    tick: int = 0
    game_over_reason: Optional[str] = None

    @property
    def tether_state(self) -> TetherState:
        return TetherState.TETHERED if self.tether is not None else TetherState.FREE


def find_grab_target(
    anchors: Iterable[Anchor],
    position: Vector2,
    grab_radius: float,
    forward_bias: float,
) -> Optional[tuple[Anchor, float]]:
    """Return the nearest grabbable anchor and its distance, or None.

    An anchor qualifies when it lies strictly within ``grab_radius`` and is not
    more than ``forward_bias`` behind ``position``.
    """
    nearest: Optional[Anchor] = None
    best = grab_radius
    for anchor in anchors:
        if anchor.x <= position.x - forward_bias:
            continue
        dist = position.distance_to(anchor.position)
        if dist < best:
            best = dist
            nearest = anchor
    if nearest is None or best <= 0.0:
        return None
    return nearest, best


class GameStateMachine:
    """Owns the session lifecycle and the tether sub-state."""

    def __init__(self, config: GameConfig, generator: WorldGenerator) -> None:
        self.config = config
        self.generator = generator
        self.state = SimulationState(player=self._spawn_player())
        # Populate the idle screen with an opening stretch of bars.
        self.generator.reset(self.state.world)

    def _spawn_player(self) -> Player:
        physics = self.config.physics
        return Player.spawn(physics.start_position, physics.start_velocity, physics.player_radius)

    @property
    def session(self) -> SessionState:
        return self.state.session

    @property
    def playing(self) -> bool:
        return self.state.session is SessionState.PLAYING

    def start(self) -> None:
        """Begin a session from Idle; from GameOver this is a restart."""
        if self.state.session is SessionState.PLAYING:
            return
        if self.state.session is SessionState.GAME_OVER:
            self.restart()
            return
        self._reset()
        self.state.session = SessionState.PLAYING
        logger.info("Session started")

    def restart(self) -> None:
        """Throw away the current session and start a fresh one."""
        self.state.session = SessionState.IDLE
        self._reset()
        self.state.session = SessionState.PLAYING
        logger.info("Session restarted")

    def _reset(self) -> None:
        world = self.state.world
        self.generator.reset(world)
        self.state = SimulationState(player=self._spawn_player(), world=world)

    def grab(self, event: GrabAttempt) -> bool:
        """Attach to the nearest eligible bar; return True when a tether was made."""
        if not self.playing or self.state.tether is not None:
            return False
        player = self.state.player
        target = find_grab_target(
            self.state.world.anchors,
            player.position,
            self.config.grab.grab_radius,
            self.config.grab.forward_bias,
        )
        if target is None:
            logger.debug("Grab at %s found no bar in reach", event.world_position)
            return False
        anchor, rope_length = target
        self.state.tether = Tether(anchor=anchor, rope_length=rope_length)
        logger.debug("Grabbed bar at (%.1f, %.1f), rope %.1f", anchor.x, anchor.y, rope_length)
        return True

    def release(self, event: Release) -> bool:
        """Let go of the bar and apply the release kick."""
        if not self.playing or self.state.tether is None:
            return False
        self.state.tether = None
        self.state.player.velocity += Vector2(self.config.physics.release_impulse)
        logger.debug("Released at t=%.3f", event.time)
        return True

    def cancel(self, event: Cancel) -> bool:
        """Drop the tether without the release kick."""
        if not self.playing or self.state.tether is None:
            return False
        self.state.tether = None
        return True

    def pointer_down(self, event: GrabAttempt) -> None:
        """Press from the input layer: start outside play, grab during play."""
        if self.playing:
            self.grab(event)
        else:
            self.start()

    def game_over(self, reason: str) -> None:
        if not self.playing:
            return
        self.state.session = SessionState.GAME_OVER
        self.state.tether = None
        self.state.game_over_reason = reason
        logger.info(
            "Game over (%s): score %.0f, diamonds %d",
            reason,
            self.state.score,
            self.state.pickup_count,
        )
