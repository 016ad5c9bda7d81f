import random

import pytest

from platfx.asteroids import (
    SHIP_HEIGHT,
    Asteroid,
    AsteroidsGame,
    Bullet,
    wrap_around,
)
from platfx.geometry import Vec2

W = 800.0
H = 600.0


@pytest.fixture
def game():
    g = AsteroidsGame(W, H, rng=random.Random(11), now=0.0)
    g.restart()
    return g


def _lone_asteroid(game, sides, pos=Vec2(100.0, 100.0), size=30.0):
    game.asteroids = [Asteroid(pos=pos, vel=Vec2(0.0, 0.0), rot=0.0, rot_speed=0.0, size=size, sides=sides)]


def test_wrap_around():
    assert wrap_around(Vec2(W + 1.0, 50.0), W, H) == Vec2(0.0, 50.0)
    assert wrap_around(Vec2(-1.0, 50.0), W, H) == Vec2(W, 50.0)
    assert wrap_around(Vec2(10.0, -2.0), W, H) == Vec2(10.0, H)
    assert wrap_around(Vec2(10.0, 20.0), W, H) == Vec2(10.0, 20.0)


def test_restart_spawns_ring(game):
    assert len(game.asteroids) == 10
    center = Vec2(W / 2.0, H / 2.0)
    for asteroid in game.asteroids:
        assert 3 <= asteroid.sides <= 7
        assert asteroid.size == pytest.approx(min(W, H) / 10.0)
        assert (asteroid.pos - center).length() == pytest.approx(min(W, H) / 2.0)
    assert not game.gameover


def test_empty_field_is_a_win():
    g = AsteroidsGame(W, H, rng=random.Random(1))
    g.update(0.1)
    assert g.gameover
    assert g.won


def test_shooting_cooldown(game):
    game.update(1.0, shoot=True)
    assert len(game.bullets) == 1
    game.update(1.2, shoot=True)
    assert len(game.bullets) == 1
    game.update(1.6, shoot=True)
    assert len(game.bullets) == 2


def test_bullets_expire(game):
    _lone_asteroid(game, 5)
    game.update(1.0, shoot=True)
    assert len(game.bullets) == 1
    game.update(2.6)
    assert game.bullets == []


def test_bullet_splits_asteroid(game):
    _lone_asteroid(game, 5)
    bullet_vel = Vec2(0.0, -7.0)
    game.bullets = [Bullet(pos=Vec2(100.0, 100.0) - bullet_vel, vel=bullet_vel, shot_at=0.0)]
    game.update(0.1)
    assert game.bullets == []
    assert len(game.asteroids) == 2
    for child in game.asteroids:
        assert child.sides == 4
        assert child.size == pytest.approx(30.0 * 0.8)
        assert 1.0 <= child.vel.length() <= 3.0
        assert child.vel.x * bullet_vel.x + child.vel.y * bullet_vel.y == pytest.approx(0.0, abs=1e-9)
    assert not game.gameover


def test_triangle_asteroid_is_destroyed(game):
    _lone_asteroid(game, 3)
    bullet_vel = Vec2(7.0, 0.0)
    game.bullets = [Bullet(pos=Vec2(100.0, 100.0) - bullet_vel, vel=bullet_vel, shot_at=0.0)]
    game.update(0.1)
    assert game.asteroids == []
    assert game.won


def test_ship_collision_ends_game(game):
    _lone_asteroid(game, 5, pos=game.ship.pos)
    game.update(0.1)
    assert game.gameover
    assert not game.won
    game.update(0.2, thrust=True)
    assert game.ship.vel == Vec2(0.0, 0.0)


def test_thrust_and_speed_cap(game):
    _lone_asteroid(game, 5)
    game.update(0.1, thrust=True)
    assert game.ship.vel.y < 0.0
    for step in range(100):
        _lone_asteroid(game, 5, pos=Vec2(game.ship.pos.x + 200.0, game.ship.pos.y + 200.0))
        game.update(0.2 + step * 0.01, thrust=True)
    assert game.ship.vel.length() <= 5.0 + 1e-9


def test_steering(game):
    _lone_asteroid(game, 5)
    game.update(0.1, right=True)
    assert game.ship.rot == 5.0
    game.update(0.2, left=True)
    assert game.ship.rot == 0.0


def test_ship_triangle_points_up(game):
    nose, left, right = game.ship_triangle()
    pos = game.ship.pos
    assert nose.x == pytest.approx(pos.x)
    assert nose.y == pytest.approx(pos.y - SHIP_HEIGHT / 2.0)
    assert left.y == pytest.approx(right.y)
    assert left.x < pos.x < right.x


def test_bad_screen_rejected():
    with pytest.raises(ValueError):
        AsteroidsGame(0.0, 100.0)