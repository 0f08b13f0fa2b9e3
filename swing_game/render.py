"""Draws simulation snapshots with pygame."""

from __future__ import annotations

from typing import Optional

import pygame

from .camera import CameraController
from .config import RenderingConfig, WorldConfig
from .simulation import SessionSnapshot, WorldSnapshot
from .state import SessionState


class Renderer:
    """Handles all rendering operations; never touches simulation state."""

    def __init__(
        self,
        surface: pygame.Surface,
        config: RenderingConfig,
        world: WorldConfig,
    ) -> None:
        self.surface = surface
        self.cfg = config
        self.world_cfg = world
        self._bg_cache: Optional[tuple[tuple[int, int], pygame.Surface]] = None
        self.font, self.large_font = self._load_fonts()

    def draw(self, world: WorldSnapshot, session: SessionSnapshot, paused: bool = False) -> None:
        self._draw_background()
        self._draw_grid(world.camera_offset)
        self._draw_rope(world)
        self._draw_bars(world)
        self._draw_obstacles(world)
        self._draw_diamonds(world)
        self._draw_player(world)
        self._draw_hud(session)

        if session.state is not SessionState.PLAYING:
            self._draw_panel(session)
        elif paused:
            self._draw_paused()

    @staticmethod
    def _load_fonts() -> tuple[pygame.font.Font, pygame.font.Font]:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, 32), pygame.font.Font(None, 64)

    def _to_screen(self, camera_offset: float, point: tuple[float, float]) -> tuple[int, int]:
        x, y = CameraController.to_screen(camera_offset, point[0], point[1])
        return int(x), int(y)

    def _draw_background(self) -> None:
        size = self.surface.get_size()
        if self._bg_cache is None or self._bg_cache[0] != size:
            width, height = size
            gradient = pygame.Surface(size)
            top = pygame.Color(*self.cfg.background_top)
            bottom = pygame.Color(*self.cfg.background_bottom)
            for y in range(height):
                blend = y / max(1, height - 1)
                pygame.draw.line(gradient, top.lerp(bottom, blend), (0, y), (width, y))
            self._bg_cache = (size, gradient)
        self.surface.blit(self._bg_cache[1], (0, 0))

    def _draw_grid(self, camera_offset: float) -> None:
        width, height = self.surface.get_size()
        spacing = self.cfg.grid_spacing
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        x = -(camera_offset % spacing)
        while x < width:
            pygame.draw.line(overlay, self.cfg.grid_color, (int(x), 0), (int(x), height), 1)
            x += spacing
        self.surface.blit(overlay, (0, 0))

    def _draw_rope(self, world: WorldSnapshot) -> None:
        if world.tether is None:
            return
        start = self._to_screen(world.camera_offset, world.tether.anchor)
        end = self._to_screen(world.camera_offset, world.player_position)
        pygame.draw.line(self.surface, self.cfg.rope_color, start, end, 2)

    def _draw_bars(self, world: WorldSnapshot) -> None:
        for bar in world.anchors:
            centre = self._to_screen(world.camera_offset, bar)
            pygame.draw.circle(self.surface, self.cfg.bar_color, centre, int(self.world_cfg.anchor_radius * 0.8))
            pygame.draw.circle(self.surface, self.cfg.bar_centre_color, centre, 3)

    def _draw_obstacles(self, world: WorldSnapshot) -> None:
        size = int(self.world_cfg.obstacle_size)
        for obstacle in world.obstacles:
            rect = pygame.Rect(0, 0, size, size)
            rect.center = self._to_screen(world.camera_offset, obstacle)
            pygame.draw.rect(self.surface, self.cfg.obstacle_color, rect)

    def _draw_diamonds(self, world: WorldSnapshot) -> None:
        half = int(self.world_cfg.pickup_size * 0.5)
        for diamond in world.pickups:
            cx, cy = self._to_screen(world.camera_offset, diamond)
            points = [(cx, cy - half), (cx + half, cy), (cx, cy + half), (cx - half, cy)]
            pygame.draw.polygon(self.surface, self.cfg.diamond_color, points)

    def _draw_player(self, world: WorldSnapshot) -> None:
        cx, cy = self._to_screen(world.camera_offset, world.player_position)
        radius = int(world.player_radius)

        trail = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        pygame.draw.circle(trail, self.cfg.trail_color, (cx - 5, cy), int(radius * 0.8), 2)
        pygame.draw.circle(trail, self.cfg.trail_color, (cx - 10, cy), int(radius * 0.55), 2)
        self.surface.blit(trail, (0, 0))

        pygame.draw.circle(self.surface, self.cfg.player_color, (cx, cy), radius)

    def _draw_hud(self, session: SessionSnapshot) -> None:
        score = self.large_font.render(f"Score: {session.display_score}", True, self.cfg.ui_color)
        self.surface.blit(score, (16, 16))
        diamonds = self.font.render(f"Diamonds: {session.pickup_count}", True, self.cfg.accent_color)
        self.surface.blit(diamonds, (16, 16 + score.get_height() + 4))

    def _draw_panel(self, session: SessionSnapshot) -> None:
        width, height = self.surface.get_size()
        over = session.state is SessionState.GAME_OVER

        lines: list[tuple[pygame.Surface, int]] = []
        title_color = self.cfg.danger_color if over else self.cfg.accent_color
        lines.append((self.large_font.render("GAME OVER" if over else "SWING JUMP", True, title_color), 24))
        if over:
            lines.append((self.font.render(f"Final Score: {session.display_score}", True, self.cfg.ui_color), 32))
        prompt = "TRY AGAIN" if over else "TAP TO START"
        lines.append((self.font.render(prompt, True, self.cfg.accent_color), 16))
        lines.append((self.font.render("Hold to swing, release to fly", True, (200, 200, 200)), 0))

        panel_w = max(surf.get_width() for surf, _ in lines) + 64
        panel_h = sum(surf.get_height() + gap for surf, gap in lines) + 64
        panel = pygame.Rect(0, 0, panel_w, panel_h)
        panel.center = (width // 2, height // 2)

        overlay = pygame.Surface(panel.size, pygame.SRCALPHA)
        pygame.draw.rect(overlay, self.cfg.panel_color, overlay.get_rect(), border_radius=20)
        self.surface.blit(overlay, panel.topleft)
        pygame.draw.rect(self.surface, self.cfg.accent_color, panel, width=2, border_radius=20)

        y = panel.top + 32
        for surf, gap in lines:
            self.surface.blit(surf, surf.get_rect(midtop=(panel.centerx, y)))
            y += surf.get_height() + gap

    def _draw_paused(self) -> None:
        width, height = self.surface.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 120))
        self.surface.blit(overlay, (0, 0))
        text = self.large_font.render("PAUSED", True, self.cfg.ui_color)
        self.surface.blit(text, text.get_rect(center=(width // 2, height // 2)))
