"""Configuration data structures for the swing game."""

from __future__ import annotations

from dataclasses import dataclass, field


class ConfigError(ValueError):
    """Raised when a configuration block holds unusable values."""


def _require_range(name: str, low: float, high: float) -> None:
    if low > high:
        raise ConfigError(f"{name}: minimum {low} exceeds maximum {high}")


def _require_positive(name: str, value: float) -> None:
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")


def _require_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigError(f"{name} must lie in [0, 1], got {value}")


@dataclass(frozen=True)
class PhysicsConfig:
    """Tunable physics parameters for the swing model.

    Velocities are expressed in world units per tick and gravity as a per-tick
    velocity increment.
    """

    gravity: float = 0.25
    swing_damping: float = 0.995  # air resistance applied every tethered tick
    release_impulse: tuple[float, float] = (2.0, -4.0)  # small forward/upward kick
    player_radius: float = 15.0
    start_position: tuple[float, float] = (100.0, 300.0)
    start_velocity: tuple[float, float] = (6.0, -5.0)
    # Project the velocity-advanced position instead of the current one while tethered.
    advance_while_swinging: bool = False

    def __post_init__(self) -> None:
        if self.gravity < 0:
            raise ConfigError(f"gravity must not be negative, got {self.gravity}")
        if not 0.0 < self.swing_damping <= 1.0:
            raise ConfigError(f"swing_damping must lie in (0, 1], got {self.swing_damping}")
        _require_positive("player_radius", self.player_radius)


@dataclass(frozen=True)
class WorldConfig:
    """Parameters of the procedural bar/obstacle/diamond generator."""

    first_anchor: tuple[float, float] = (300.0, 200.0)
    chunk_size: int = 10
    distance_min: float = 200.0
    distance_max: float = 350.0
    max_height_delta: float = 100.0
    min_y: float = 100.0
    max_y: float = 500.0
    pickup_chance: float = 0.5
    pickup_offset: float = 50.0  # placed above the midpoint
    obstacle_chance: float = 0.3
    obstacle_offset: float = 100.0  # placed below the midpoint
    frontier_viewports: float = 2.0
    cleanup_margin: float = 200.0
    anchor_radius: float = 10.0
    obstacle_size: float = 30.0
    pickup_size: float = 20.0
    enforce_reachability: bool = False

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ConfigError(f"chunk_size must be at least 1, got {self.chunk_size}")
        _require_positive("distance_min", self.distance_min)
        _require_range("distance", self.distance_min, self.distance_max)
        if self.max_height_delta < 0:
            raise ConfigError(f"max_height_delta must not be negative, got {self.max_height_delta}")
        _require_range("anchor height", self.min_y, self.max_y)
        _require_probability("pickup_chance", self.pickup_chance)
        _require_probability("obstacle_chance", self.obstacle_chance)
        _require_positive("frontier_viewports", self.frontier_viewports)
        if self.cleanup_margin < 0:
            raise ConfigError(f"cleanup_margin must not be negative, got {self.cleanup_margin}")
        _require_positive("anchor_radius", self.anchor_radius)
        _require_positive("obstacle_size", self.obstacle_size)
        _require_positive("pickup_size", self.pickup_size)


@dataclass(frozen=True)
class GrabConfig:
    """Rules for choosing which bar a grab attaches to."""

    grab_radius: float = 300.0
    forward_bias: float = 50.0  # bars this far behind the player are still grabbable

    def __post_init__(self) -> None:
        _require_positive("grab_radius", self.grab_radius)
        if self.forward_bias < 0:
            raise ConfigError(f"forward_bias must not be negative, got {self.forward_bias}")


@dataclass(frozen=True)
class CollisionConfig:
    """Thresholds for the end-of-run checks."""

    fall_margin: float = 100.0  # distance below the viewport before the player is lost


@dataclass(frozen=True)
class CameraConfig:
    """Camera placement settings relative to the player."""

    lead_fraction: float = 0.3  # 0..1 of the viewport kept behind the player

    def __post_init__(self) -> None:
        if not 0.0 <= self.lead_fraction < 1.0:
            raise ConfigError(f"lead_fraction must lie in [0, 1), got {self.lead_fraction}")


@dataclass(frozen=True)
class SessionConfig:
    """Fixed-step scheduling of the simulation."""

    ticks_per_second: int = 60
    max_catchup_ticks: int = 5
    score_divisor: float = 100.0  # world units per displayed score point

    def __post_init__(self) -> None:
        _require_positive("ticks_per_second", self.ticks_per_second)
        if self.max_catchup_ticks < 1:
            raise ConfigError(f"max_catchup_ticks must be at least 1, got {self.max_catchup_ticks}")
        _require_positive("score_divisor", self.score_divisor)


@dataclass(frozen=True)
class RenderingConfig:
    """Visual parameters for the side-on renderer."""

    background_top: tuple[int, int, int] = (26, 26, 46)
    background_bottom: tuple[int, int, int] = (22, 33, 62)
    grid_color: tuple[int, int, int, int] = (255, 255, 255, 13)
    grid_spacing: int = 100
    rope_color: tuple[int, int, int] = (255, 255, 255)
    bar_color: tuple[int, int, int] = (158, 158, 158)
    bar_centre_color: tuple[int, int, int] = (255, 255, 255)
    obstacle_color: tuple[int, int, int] = (255, 82, 82)
    diamond_color: tuple[int, int, int] = (24, 255, 255)
    player_color: tuple[int, int, int] = (255, 171, 64)
    trail_color: tuple[int, int, int, int] = (255, 171, 64, 77)
    ui_color: tuple[int, int, int] = (255, 255, 255)
    panel_color: tuple[int, int, int, int] = (0, 0, 0, 204)
    accent_color: tuple[int, int, int] = (24, 255, 255)
    danger_color: tuple[int, int, int] = (255, 82, 82)
    cull_margin: float = 50.0


@dataclass(frozen=True)
class GameConfig:
    """High-level configuration of the game."""

    window_size: tuple[int, int] = (1280, 720)
    target_fps: int = 60
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    world: WorldConfig = field(default_factory=WorldConfig)
    grab: GrabConfig = field(default_factory=GrabConfig)
    collision: CollisionConfig = field(default_factory=CollisionConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    render: RenderingConfig = field(default_factory=RenderingConfig)

    def __post_init__(self) -> None:
        width, height = self.window_size
        _require_positive("window width", width)
        _require_positive("window height", height)
        _require_positive("target_fps", self.target_fps)
