"""World entities shared by the simulation components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pygame.math import Vector2


@dataclass(frozen=True, eq=False)
class Anchor:
    """A swing bar the player can grab."""

    x: float
    y: float
    radius: float = 10.0

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)


@dataclass(frozen=True, eq=False)
class Obstacle:
    """Square hazard centred on (x, y); touching it ends the run."""

    x: float
    y: float
    size: float = 30.0

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (left, top, right, bottom) of the square."""
        half = self.size * 0.5
        return self.x - half, self.y - half, self.x + half, self.y + half


@dataclass(frozen=True, eq=False)
class Pickup:
    """Diamond collected on contact."""

    x: float
    y: float
    size: float = 20.0

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)


@dataclass
class Player:
    """The swinging body; position and velocity change every tick."""

    position: Vector2
    velocity: Vector2
    radius: float = 15.0

    @classmethod
    def spawn(cls, position: tuple[float, float], velocity: tuple[float, float], radius: float) -> "Player":
        return cls(position=Vector2(position), velocity=Vector2(velocity), radius=radius)


@dataclass(frozen=True)
class Tether:
    """Active rope between the player and a grabbed anchor."""

    anchor: Anchor
    rope_length: float

    def __post_init__(self) -> None:
        assert self.rope_length > 0, f"rope length must be positive, got {self.rope_length}"


@dataclass
class World:
    """Everything generated ahead of (and not yet retired behind) the camera."""

    anchors: list[Anchor] = field(default_factory=list)
    obstacles: list[Obstacle] = field(default_factory=list)
    pickups: list[Pickup] = field(default_factory=list)
    tail: Optional[Anchor] = None  # last generated anchor, survives cleanup

    def clear(self) -> None:
        self.anchors.clear()
        self.obstacles.clear()
        self.pickups.clear()
        self.tail = None

    @property
    def frontier_x(self) -> float:
        return self.tail.x if self.tail is not None else 0.0

    def is_sorted(self) -> bool:
        """True when anchor x coordinates are strictly increasing."""
        return all(a.x < b.x for a, b in zip(self.anchors, self.anchors[1:]))
