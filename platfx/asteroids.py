"""Asteroids game: a rotating ship shooting asteroids that split when hit."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from .geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
MAX_SPEED = 5.0
SHOT_COOLDOWN = 0.5
BULLET_LIFETIME = 1.5
BULLET_SPEED = 7.0
ASTEROID_COUNT = 10


def wrap_around(pos: Vec2, width: float, height: float) -> Vec2:
    """Wrap a position that left the screen to the opposite edge."""
    x, y = pos.x, pos.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


@dataclass
class Ship:
    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = Vec2(0.0, 0.0)


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


class AsteroidsGame:
    """Game state; starts empty, call :meth:`restart` to populate the field."""

    def __init__(
        self,
        width: float,
        height: float,
        rng: Optional[random.Random] = None,
        now: float = 0.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.ship = Ship(self._center())
        self.bullets: list[Bullet] = []
        self.asteroids: list[Asteroid] = []
        self.last_shot = now
        self.gameover = False

    def _center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        """True when the game ended with every asteroid destroyed."""
        return self.gameover and not self.asteroids

    def _random_direction(self) -> Vec2:
        while True:
            v = Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0))
            if v.length() > 0.0:
                return v.normalize()

    def restart(self) -> None:
        """Reset the ship and spawn a ring of asteroids around the centre."""
        rng = self._rng
        center = self._center()
        radius = min(self.width, self.height)
        self.ship = Ship(center)
        self.bullets = []
        self.asteroids = []
        self.gameover = False
        for _ in range(ASTEROID_COUNT):
            self.asteroids.append(
                Asteroid(
                    pos=center + self._random_direction() * radius / 2.0,
                    vel=Vec2(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)),
                    rot=0.0,
                    rot_speed=rng.uniform(-2.0, 2.0),
                    size=radius / 10.0,
                    sides=rng.randint(3, 7),
                )
            )

    def _fragment(self, parent: Asteroid, direction: Vec2) -> Asteroid:
        rng = self._rng
        return Asteroid(
            pos=parent.pos,
            vel=direction.normalize() * rng.uniform(1.0, 3.0),
            rot=rng.uniform(0.0, 360.0),
            rot_speed=rng.uniform(-2.0, 2.0),
            size=parent.size * 0.8,
            sides=parent.sides - 1,
        )

    def update(
        self,
        frame_t: float,
        thrust: bool = False,
        left: bool = False,
        right: bool = False,
        shoot: bool = False,
    ) -> None:
        """Advance one frame at time ``frame_t``; nothing happens once the game is over."""
        if self.gameover:
            return
        ship = self.ship
        rotation = math.radians(ship.rot)
        heading = Vec2(math.sin(rotation), -math.cos(rotation))

        acc = -ship.vel / 100.0
        if thrust:
            acc = heading / 3.0

        if shoot and frame_t - self.last_shot > SHOT_COOLDOWN:
            self.bullets.append(
                Bullet(
                    pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                    vel=heading * BULLET_SPEED,
                    shot_at=frame_t,
                )
            )
            self.last_shot = frame_t

        if right:
            ship.rot += 5.0
        elif left:
            ship.rot -= 5.0

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel
        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > frame_t]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.gameover = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        fragments.append(self._fragment(asteroid, Vec2(bullet.vel.y, -bullet.vel.x)))
                        fragments.append(self._fragment(asteroid, Vec2(-bullet.vel.y, bullet.vel.x)))
                    break

        self.bullets = [
            b for b in self.bullets if b.shot_at + BULLET_LIFETIME > frame_t and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided] + fragments

        if not self.asteroids:
            self.gameover = True

    def ship_triangle(self) -> tuple[Vec2, Vec2, Vec2]:
        """The ship's outline: nose, then the two rear corners."""
        rotation = math.radians(self.ship.rot)
        sin_r, cos_r = math.sin(rotation), math.cos(rotation)
        pos = self.ship.pos
        nose = Vec2(pos.x + sin_r * SHIP_HEIGHT / 2.0, pos.y - cos_r * SHIP_HEIGHT / 2.0)
        left = Vec2(
            pos.x - cos_r * SHIP_BASE / 2.0 - sin_r * SHIP_HEIGHT / 2.0,
            pos.y - sin_r * SHIP_BASE / 2.0 + cos_r * SHIP_HEIGHT / 2.0,
        )
        right = Vec2(
            pos.x + cos_r * SHIP_BASE / 2.0 - sin_r * SHIP_HEIGHT / 2.0,
            pos.y + sin_r * SHIP_BASE / 2.0 + cos_r * SHIP_HEIGHT / 2.0,
        )
        return nose, left, right