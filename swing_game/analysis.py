"""Offline statistics over generated worlds."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .config import GameConfig
from .entities import World
from .world import Reach, WorldGenerator, traversable_reach

_TOLERANCE = 1e-9


@dataclass
class GapStats:
    mean: float
    std: float
    median: float
    p10: float
    p90: float
    maximum: float

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "GapStats":
        return cls(
            mean=float(np.mean(arr)),
            std=float(np.std(arr)),
            median=float(np.median(arr)),
            p10=float(np.percentile(arr, 10)),
            p90=float(np.percentile(arr, 90)),
            maximum=float(np.max(arr)),
        )


@dataclass
class GenerationReport:
    gaps: GapStats
    climbs: GapStats
    reach: Reach
    worlds: int
    bars: int
    pickups_per_bar: float
    obstacles_per_bar: float
    unreachable_gaps: int
    unreachable_climbs: int


def generate_world(config: GameConfig, seed: int, chunks: int) -> World:
    """Build a world from ``seed`` without any cleanup."""
    generator = WorldGenerator(
        config.world,
        random.Random(seed),
        reach=traversable_reach(config.physics, config.grab),
    )
    world = World()
    generator.reset(world)
    for _ in range(chunks - 1):
        generator.generate_chunk(world)
    return world


def collect_steps(world: World) -> tuple[np.ndarray, np.ndarray]:
    """Horizontal gaps and climbs (positive = upward) between consecutive bars."""
    xs = np.asarray([a.x for a in world.anchors], dtype=np.float64)
    ys = np.asarray([a.y for a in world.anchors], dtype=np.float64)
    return np.diff(xs), -np.diff(ys)


def analyze(config: GameConfig, seeds: Iterable[int], chunks: int) -> GenerationReport:
    gap_parts: list[np.ndarray] = []
    climb_parts: list[np.ndarray] = []
    pickups = obstacles = bars = worlds = 0

    for seed in seeds:
        world = generate_world(config, seed, chunks)
        gaps, climbs = collect_steps(world)
        gap_parts.append(gaps)
        climb_parts.append(climbs)
        pickups += len(world.pickups)
        obstacles += len(world.obstacles)
        bars += len(world.anchors)
        worlds += 1

    if not worlds:
        raise ValueError("at least one seed is required")

    gaps = np.concatenate(gap_parts)
    climbs = np.concatenate(climb_parts)
    reach = traversable_reach(config.physics, config.grab)
    steps = max(1, bars - worlds)
    return GenerationReport(
        gaps=GapStats.from_array(gaps),
        climbs=GapStats.from_array(climbs),
        reach=reach,
        worlds=worlds,
        bars=bars,
        pickups_per_bar=pickups / steps,
        obstacles_per_bar=obstacles / steps,
        unreachable_gaps=int(np.count_nonzero(gaps > reach.max_gap + _TOLERANCE)),
        unreachable_climbs=int(np.count_nonzero(climbs > reach.max_rise + _TOLERANCE)),
    )
