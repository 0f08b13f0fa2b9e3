"""Input events and providers for the swing game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Union

import pygame


@dataclass(frozen=True)
class GrabAttempt:
    """Player pressed to grab; position is in world coordinates."""

    world_position: tuple[float, float]
    time: float = 0.0


@dataclass(frozen=True)
class Release:
    """Player let go of the bar."""

    time: float = 0.0


@dataclass(frozen=True)
class Cancel:
    """The press was interrupted (focus lost, gesture cancelled)."""

    time: float = 0.0


InputEvent = Union[GrabAttempt, Release, Cancel]


class InputProvider(Protocol):
    """Interface for turning raw window events into abstract input events."""

    def translate(self, event: pygame.event.Event, camera_offset: float, now: float) -> Optional[InputEvent]:
        """Return the InputEvent represented by ``event``, if any."""

    def reset(self) -> None:
        """Drop any press state carried over from an earlier session."""


class PointerInput(InputProvider):
    """Mouse, touch and keyboard controller: press to grab, let go to fly.

    Space and Up arrow behave like a press at the player's side of the screen.
    """

    GRAB_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)

    def __init__(self, window_size: tuple[int, int]) -> None:
        self.window_size = window_size
        self._pressed = False

    def resize(self, window_size: tuple[int, int]) -> None:
        self.window_size = window_size

    def translate(self, event: pygame.event.Event, camera_offset: float, now: float) -> Optional[InputEvent]:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._press(event.pos, camera_offset, now)
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return self._lift(now)
        if event.type == pygame.FINGERDOWN:
            width, height = self.window_size
            return self._press((event.x * width, event.y * height), camera_offset, now)
        if event.type == pygame.FINGERUP:
            return self._lift(now)
        if event.type == pygame.KEYDOWN and event.key in self.GRAB_KEYS:
            width, height = self.window_size
            return self._press((width * 0.3, height * 0.5), camera_offset, now)
        if event.type == pygame.KEYUP and event.key in self.GRAB_KEYS:
            return self._lift(now)
        if event.type == pygame.WINDOWFOCUSLOST and self._pressed:
            self._pressed = False
            return Cancel(time=now)
        return None

    def _press(self, screen_pos: tuple[float, float], camera_offset: float, now: float) -> GrabAttempt:
        self._pressed = True
        x, y = screen_pos
        return GrabAttempt(world_position=(x + camera_offset, y), time=now)

    def _lift(self, now: float) -> Optional[Release]:
        if not self._pressed:
            return None
        self._pressed = False
        return Release(time=now)

    def reset(self) -> None:
        """Forget any press in progress."""
        self._pressed = False
