"""pygame application shell for Swing Jump."""

from __future__ import annotations

import logging
import random
from typing import Optional

import pygame

from .config import GameConfig
from .input import GrabAttempt, InputProvider, PointerInput
from .render import Renderer
from .simulation import SimulationLoop

logger = logging.getLogger(__name__)


class SwingJumpGame:
    """High-level game orchestration: window, clock, input and drawing."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_provider: Optional[InputProvider] = None,
        rng: Optional[random.Random] = None,
        fullscreen: bool = False,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.config = config or GameConfig()
        flags = pygame.FULLSCREEN if fullscreen else pygame.RESIZABLE
        self.screen = pygame.display.set_mode(self.config.window_size, flags)
        pygame.display.set_caption("Swing Jump")

        self.clock = pygame.time.Clock()
        self.loop = SimulationLoop(self.config, rng=rng)
        self.renderer = Renderer(self.screen, self.config.render, self.config.world)
        self.input_provider = input_provider or PointerInput(self.screen.get_size())

        self.running = True
        self.tick_seconds = 1.0 / self.config.session.ticks_per_second
        self._accumulator = 0.0
        self._elapsed = 0.0

    def run(self) -> None:
        logger.info("Starting main loop at %d fps", self.config.target_fps)
        while self.running:
            dt = self.clock.tick(self.config.target_fps) / 1000.0
            self._elapsed += dt
            self._handle_events(pygame.event.get())
            self._advance(dt)

            world, session = self.loop.world_snapshot, self.loop.session_snapshot
            self.renderer.draw(world, session, paused=self.loop.paused)
            pygame.display.flip()

        pygame.quit()
        logger.info("Main loop stopped")

    def _advance(self, dt: float) -> None:
        if not self.loop.running:
            self._accumulator = 0.0
            return
        self._accumulator += dt
        width, height = self.screen.get_size()
        steps = 0
        while self._accumulator >= self.tick_seconds and steps < self.config.session.max_catchup_ticks:
            self.loop.tick(width, height)
            self._accumulator -= self.tick_seconds
            steps += 1
        if steps == self.config.session.max_catchup_ticks:
            # Too far behind; drop the backlog instead of spiralling.
            self._accumulator = 0.0

    def _handle_events(self, events: list[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
                continue
            if event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.get_surface()
                self.renderer.surface = self.screen
                if isinstance(self.input_provider, PointerInput):
                    self.input_provider.resize(self.screen.get_size())
                continue
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    continue
                if event.key == pygame.K_p:
                    if self.loop.paused:
                        self.loop.resume()
                    else:
                        self.loop.pause()
                    continue
                if event.key == pygame.K_r:
                    self.input_provider.reset()
                    self.loop.restart()
                    continue

            translated = self.input_provider.translate(event, self.loop.state.camera_offset, self._elapsed)
            if translated is None:
                continue
            if isinstance(translated, GrabAttempt):
                self.loop.pointer_down(translated)
            else:
                self.loop.submit(translated)
