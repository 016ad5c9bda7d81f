"""Small 2D vector and rectangle types used by the physics and effects code."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; a zero vector has no direction."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def rotated(self, angle: float) -> Vec2:
        """This vector rotated counter-clockwise by ``angle`` radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return Vec2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def overlaps(self, other: Rect) -> bool:
        """True when the rectangles intersect; touching edges count."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top <= other.bottom
            and self.bottom >= other.top
        )

    def contains(self, point: Vec2) -> bool:
        """True when the point lies inside; right and bottom edges are excluded."""
        return (
            self.x <= point.x < self.x + self.w
            and self.y <= point.y < self.y + self.h
        )


def polar_to_cartesian(rho: float, theta: float) -> Vec2:
    """Convert polar coordinates to a cartesian vector."""
    return Vec2(rho * math.cos(theta), rho * math.sin(theta))