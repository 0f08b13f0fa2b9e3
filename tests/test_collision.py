from pygame.math import Vector2

from swing_game.collision import CollisionSystem, circle_overlaps_square
from swing_game.config import CollisionConfig
from swing_game.entities import Obstacle, Pickup, Player, World


def player_at(x, y, radius=15.0) -> Player:
    return Player(position=Vector2(x, y), velocity=Vector2(0, 0), radius=radius)


def test_centred_obstacle_overlaps():
    assert circle_overlaps_square(player_at(500, 300), Obstacle(500.0, 300.0, 30.0))


def test_touching_edges_do_not_overlap():
    # Square spans 485..515, the circle's box starts at 515.
    assert not circle_overlaps_square(player_at(530, 300), Obstacle(500.0, 300.0, 30.0))
    assert circle_overlaps_square(player_at(529.9, 300), Obstacle(500.0, 300.0, 30.0))


def test_pickups_are_collected_once_and_removed():
    system = CollisionSystem(CollisionConfig())
    near = Pickup(110.0, 300.0, 20.0)
    far = Pickup(400.0, 300.0, 20.0)
    world = World(pickups=[near, far])
    player = player_at(100, 300)

    first = system.check(player, world, viewport_height=720)
    second = system.check(player, world, viewport_height=720)

    assert first.pickups_collected == 1
    assert second.pickups_collected == 0
    assert world.pickups == [far]


def test_pickup_counts_even_when_obstacle_hits_same_tick():
    system = CollisionSystem(CollisionConfig())
    world = World(pickups=[Pickup(500.0, 290.0)], obstacles=[Obstacle(500.0, 300.0)])

    report = system.check(player_at(500, 300), world, viewport_height=720)

    assert report.pickups_collected == 1
    assert report.fatal
    assert report.obstacle is world.obstacles[0]


def test_first_obstacle_hit_wins():
    system = CollisionSystem(CollisionConfig())
    first = Obstacle(500.0, 300.0)
    second = Obstacle(505.0, 300.0)
    world = World(obstacles=[first, second])

    report = system.check(player_at(502, 300), world, viewport_height=720)

    assert report.obstacle is first
    assert not report.fell_off


def test_fall_off_below_margin():
    system = CollisionSystem(CollisionConfig(fall_margin=100.0))
    world = World()

    assert not system.check(player_at(0, 820), world, viewport_height=720).fatal
    report = system.check(player_at(0, 820.5), world, viewport_height=720)
    assert report.fell_off
    assert report.fatal


def test_clear_path_reports_nothing():
    report = CollisionSystem(CollisionConfig()).check(player_at(0, 0), World(), viewport_height=720)

    assert report.pickups_collected == 0
    assert not report.fatal
