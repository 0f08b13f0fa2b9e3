from dataclasses import replace

import numpy as np

from swing_game.analysis import analyze, collect_steps, generate_world
from swing_game.config import GameConfig


def test_collect_steps_matches_anchor_spacing(config):
    world = generate_world(config, seed=9, chunks=3)

    gaps, climbs = collect_steps(world)

    assert gaps.shape == climbs.shape == (len(world.anchors) - 1,)
    assert np.all(gaps >= config.world.distance_min)
    assert np.all(gaps <= config.world.distance_max)
    assert np.all(np.abs(climbs) <= config.world.max_height_delta + 1e-9)


def test_default_generation_never_exceeds_gap_reach(config):
    report = analyze(config, range(20), chunks=5)

    assert report.worlds == 20
    assert report.bars == 20 * 51
    assert report.unreachable_gaps == 0
    assert report.gaps.maximum <= config.world.distance_max


def test_enforced_reachability_removes_unreachable_climbs():
    config = GameConfig()
    clamped = replace(config, world=replace(config.world, enforce_reachability=True))

    faithful = analyze(config, range(20), chunks=5)
    bounded = analyze(clamped, range(20), chunks=5)

    assert faithful.unreachable_climbs > 0
    assert bounded.unreachable_climbs == 0
