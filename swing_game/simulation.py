"""Fixed-tick orchestration of the swing game core."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from .camera import CameraController
from .collision import CollisionSystem
from .config import GameConfig
from .input import Cancel, GrabAttempt, InputEvent, Release
from .physics import PhysicsEngine
from .state import GameStateMachine, SessionState, SimulationState, TetherState
from .world import WorldGenerator, traversable_reach

logger = logging.getLogger(__name__)

Point = tuple[float, float]


@dataclass(frozen=True)
class TetherSnapshot:
    anchor: Point
    rope_length: float


@dataclass(frozen=True)
class WorldSnapshot:
    """Read-only view of the world handed to the renderer."""

    tick: int
    player_position: Point
    player_velocity: Point
    player_radius: float
    camera_offset: float
    anchors: tuple[Point, ...]
    obstacles: tuple[Point, ...]
    pickups: tuple[Point, ...]
    tether: Optional[TetherSnapshot]
    viewport: tuple[float, float]


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only session summary for the HUD."""

    state: SessionState
    score: float
    pickup_count: int
    display_score: int
    tether_state: TetherState = TetherState.FREE


class SimulationLoop:
    """Runs one complete, atomic update per tick.

    Input events submitted while a session is running are queued and applied at
    the start of the next tick; outside a running session they are applied
    straight away.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(seed)
        self.physics = PhysicsEngine(self.config.physics)
        self.generator = WorldGenerator(
            self.config.world,
            self.rng,
            reach=traversable_reach(self.config.physics, self.config.grab),
        )
        self.collisions = CollisionSystem(self.config.collision)
        self.camera = CameraController(self.config.camera)
        self.machine = GameStateMachine(self.config, self.generator)
        self.paused = False
        self._pending: Deque[InputEvent] = deque()
        self.viewport = tuple(float(v) for v in self.config.window_size)
        self._world_snapshot = self._make_world_snapshot()
        self._session_snapshot = self._make_session_snapshot()

    @property
    def state(self) -> SimulationState:
        return self.machine.state

    @property
    def running(self) -> bool:
        return self.machine.playing and not self.paused

    @property
    def world_snapshot(self) -> WorldSnapshot:
        return self._world_snapshot

    @property
    def session_snapshot(self) -> SessionSnapshot:
        return self._session_snapshot

    def start(self) -> None:
        self._pending.clear()
        self.paused = False
        self.machine.start()
        self._publish()

    def restart(self) -> None:
        self._pending.clear()
        self.paused = False
        self.machine.restart()
        self._publish()

    def pause(self) -> None:
        if self.machine.playing and not self.paused:
            self.paused = True
            logger.info("Paused at tick %d", self.state.tick)

    def resume(self) -> None:
        if self.paused:
            self.paused = False
            logger.info("Resumed at tick %d", self.state.tick)

    def submit(self, event: InputEvent) -> None:
        """Queue ``event`` for the next tick while playing (paused included)."""
        if self.machine.playing:
            self._pending.append(event)
        else:
            self._apply(event)
            self._publish()

    def pointer_down(self, event: GrabAttempt) -> None:
        """Press from the input layer: starts a session when none is running."""
        if self.machine.playing:
            self.submit(event)
        else:
            self.machine.pointer_down(event)
            self._pending.clear()
            self.paused = False
            self._publish()

    def _apply(self, event: InputEvent) -> None:
        if isinstance(event, GrabAttempt):
            self.machine.grab(event)
        elif isinstance(event, Release):
            self.machine.release(event)
        elif isinstance(event, Cancel):
            self.machine.cancel(event)

    def tick(
        self,
        viewport_width: Optional[float] = None,
        viewport_height: Optional[float] = None,
    ) -> tuple[WorldSnapshot, SessionSnapshot]:
        """Advance the simulation by one fixed tick and return fresh snapshots."""
        if viewport_width is not None and viewport_height is not None:
            self.viewport = (float(viewport_width), float(viewport_height))
        if not self.running:
            return self._world_snapshot, self._session_snapshot

        width, height = self.viewport
        while self._pending:
            self._apply(self._pending.popleft())

        state = self.state
        state.tick += 1
        self.physics.step(state.player, state.tether)

        self.generator.ensure_frontier(state.world, state.camera_offset, width)
        self.generator.cleanup(state.world, state.camera_offset)

        report = self.collisions.check(state.player, state.world, height)
        state.pickup_count += report.pickups_collected
        if report.obstacle is not None:
            self.machine.game_over("obstacle")
        elif report.fell_off:
            self.machine.game_over("fell")

        if self.machine.playing:
            state.camera_offset = self.camera.update(state.camera_offset, state.player, width)
            state.score = max(state.score, state.player.position.x)

        return self._publish()

    def _publish(self) -> tuple[WorldSnapshot, SessionSnapshot]:
        self._world_snapshot = self._make_world_snapshot()
        self._session_snapshot = self._make_session_snapshot()
        return self._world_snapshot, self._session_snapshot

    def _make_world_snapshot(self) -> WorldSnapshot:
        state = self.state
        width, _ = self.viewport
        visible = WorldGenerator.visible(
            state.world,
            state.camera_offset,
            width,
            self.config.render.cull_margin,
        )
        tether = None
        if state.tether is not None:
            tether = TetherSnapshot(
                anchor=(state.tether.anchor.x, state.tether.anchor.y),
                rope_length=state.tether.rope_length,
            )
        return WorldSnapshot(
            tick=state.tick,
            player_position=(state.player.position.x, state.player.position.y),
            player_velocity=(state.player.velocity.x, state.player.velocity.y),
            player_radius=state.player.radius,
            camera_offset=state.camera_offset,
            anchors=tuple((a.x, a.y) for a in visible.anchors),
            obstacles=tuple((o.x, o.y) for o in visible.obstacles),
            pickups=tuple((p.x, p.y) for p in visible.pickups),
            tether=tether,
            viewport=self.viewport,
        )

    def _make_session_snapshot(self) -> SessionSnapshot:
        state = self.state
        return SessionSnapshot(
            state=state.session,
            score=state.score,
            pickup_count=state.pickup_count,
            display_score=int(state.score // self.config.session.score_divisor),
            tether_state=state.tether_state,
        )
