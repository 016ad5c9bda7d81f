"""Camera controllers: a smoothed 2D orbit camera and a first-person 3D camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from .geometry import Vec2

ZOOM_STEP = 1.1
ROTATION_STEP = 10.0
ROTATION_SMOOTHING = 0.1

MOVE_SPEED = 0.1
LOOK_SPEED = 0.1
PITCH_LIMIT = 1.5
INITIAL_YAW = 1.18


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; a zero vector has no direction."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def cross(self, other: Vec3) -> Vec3:
        """Right-handed cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest distance in degrees from ``a0`` to ``a1``."""
    da = math.fmod(a1 - a0, 360.0)
    return math.fmod(2.0 * da, 360.0) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate from ``a0`` towards ``a1`` along the shortest arc."""
    return a0 + short_angle_dist(a0, a1) * t


@dataclass
class OrbitCamera2D:
    """A 2D camera whose rotation and zoom are driven by the mouse wheel."""

    target: Vec2 = Vec2(0.0, 0.0)
    offset: Vec2 = Vec2(0.0, 0.0)
    zoom: float = 1.0
    rotation: float = 0.0
    smooth_rotation: float = 0.0

    def scroll(self, y: float, zoom_modifier: bool = False) -> None:
        """Apply a wheel step: zoom with the modifier held, otherwise rotate."""
        if y == 0.0:
            return
        if zoom_modifier:
            self.zoom *= ZOOM_STEP ** y
            return
        rotation = self.rotation + ROTATION_STEP * y
        if rotation >= 360.0:
            rotation -= 360.0
        elif rotation < 0.0:
            rotation += 360.0
        self.rotation = rotation

    def update(self) -> None:
        """Ease the displayed rotation towards the requested one."""
        self.smooth_rotation = angle_lerp(
            self.smooth_rotation, self.rotation, ROTATION_SMOOTHING
        )


def _front(yaw: float, pitch: float) -> Vec3:
    return Vec3(
        math.cos(yaw) * math.cos(pitch),
        math.sin(pitch),
        math.sin(yaw) * math.cos(pitch),
    ).normalize()


@dataclass
class FirstPersonCamera:
    """Mouse-look camera moving in the direction it faces."""

    position: Vec3 = Vec3(0.0, 1.0, 0.0)
    yaw: float = INITIAL_YAW
    pitch: float = 0.0
    world_up: Vec3 = Vec3(0.0, 1.0, 0.0)
    front: Vec3 = field(init=False)
    right: Vec3 = field(init=False)
    up: Vec3 = field(init=False)

    def __post_init__(self) -> None:
        self._orient()

    def _orient(self) -> None:
        self.front = _front(self.yaw, self.pitch)
        self.right = self.front.cross(self.world_up).normalize()
        self.up = self.right.cross(self.front).normalize()

    def look(self, mouse_dx: float, mouse_dy: float, dt: float) -> None:
        """Turn by a mouse movement over ``dt`` seconds; pitch stays within ±1.5 rad."""
        self.yaw += mouse_dx * dt * LOOK_SPEED
        pitch = self.pitch + mouse_dy * dt * -LOOK_SPEED
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, pitch))
        self._orient()

    def move(
        self,
        forward: bool = False,
        back: bool = False,
        left: bool = False,
        right: bool = False,
    ) -> None:
        """Step along the view direction and its right-hand side for held keys."""
        if forward:
            self.position = self.position + self.front * MOVE_SPEED
        if back:
            self.position = self.position - self.front * MOVE_SPEED
        if left:
            self.position = self.position - self.right * MOVE_SPEED
        if right:
            self.position = self.position + self.right * MOVE_SPEED

    def target(self) -> Vec3:
        """Point the camera looks at."""
        return self.position + self.front