"""Configuration types for particle emitters: curves, colours, shapes and atlases."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from .geometry import Vec2, polar_to_cartesian


class Interpolation(Enum):
    """How a curve is interpolated between its key points."""

    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass(frozen=True)
class BatchedCurve:
    """A curve sampled at evenly spaced steps."""

    points: tuple[float, ...]

    def get(self, t: float) -> float:
        """Value of the curve at ``t`` in 0..1, interpolated between samples."""
        if not self.points:
            raise ValueError("batched curve has no points")
        count = len(self.points)
        t_scaled = t * count
        previous_ix = min(max(int(t_scaled), 0), count - 1)
        next_ix = min(previous_ix + 1, count - 1)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """A curve given by key points ``(x, y)`` with x rising from 0 to 1."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve at ``1 / resolution`` steps."""
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("only linear interpolation is supported")
        if self.resolution <= 0:
            raise ValueError("curve resolution must be positive")

        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for start, end in zip(self.points, self.points[1:]):
            while x <= end[0]:
                t = (x - start[0]) / (end[0] - start[0])
                samples.append(start[1] + (end[1] - start[1]) * t)
                x += step
        return BatchedCurve(tuple(samples))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels in 0..1."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def _lerp(self, other: Color, t: float) -> Color:
        return Color(
            *(s * (1.0 - t) + o * t for s, o in zip(self.to_tuple(), other.to_tuple()))
        )


@dataclass(frozen=True)
class ColorCurve:
    """Colour of a particle at the start, middle and end of its life."""

    start: Color = Color()
    mid: Color = Color()
    end: Color = Color()

    def at(self, t: float) -> Color:
        """Colour at life fraction ``t``: start to mid over the first half, mid to end after."""
        if t < 0.5:
            return self.start._lerp(self.mid, t * 2.0)
        return self.mid._lerp(self.end, (t - 0.5) * 2.0)


@dataclass(frozen=True)
class EmissionPoint:
    """Particles are emitted from a single point."""

    def gen_random_point(self, rng: random.Random) -> Vec2:
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class EmissionRect:
    """Particles are emitted inside a rectangle centred on the emitter."""

    width: float
    height: float

    def gen_random_point(self, rng: random.Random) -> Vec2:
        return Vec2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class EmissionSphere:
    """Particles are emitted uniformly inside a circle centred on the emitter."""

    radius: float

    def gen_random_point(self, rng: random.Random) -> Vec2:
        rho = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return polar_to_cartesian(rho, phi)


EmissionShape = Union[EmissionPoint, EmissionRect, EmissionSphere]

Mesh = tuple[list[float], list[int]]


@dataclass(frozen=True)
class RectangleShape:
    """A quad particle; vertices are position (3), uv (2) and colour (4)."""

    aspect_ratio: float = 1.0

    def mesh(self) -> Mesh:
        a = self.aspect_ratio
        vertices = [
            -1.0 * a, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            1.0 * a, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            1.0 * a, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
            -1.0 * a, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        ]
        return vertices, [0, 1, 2, 0, 2, 3]


@dataclass(frozen=True)
class CircleShape:
    """A triangle-fan circle with the given number of subdivisions."""

    subdivisions: int

    def mesh(self) -> Mesh:
        if self.subdivisions <= 0:
            raise ValueError("circle needs at least one subdivision")
        vertices = [0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend([rx, ry, 0.0, rx, ry, 1.0, 1.0, 1.0, 1.0])
            if i != self.subdivisions:
                indices.extend([0, i + 1, i + 2])
        return vertices, indices


@dataclass(frozen=True)
class CustomMeshShape:
    """A user-supplied mesh in the same vertex layout."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]

    def mesh(self) -> Mesh:
        return list(self.vertices), list(self.indices)


ParticleShape = Union[RectangleShape, CircleShape, CustomMeshShape]


class BlendMode(Enum):
    """How overlapping particles are combined."""

    ALPHA = "alpha"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom shader sources used to shade each particle."""

    vertex: str
    fragment: str


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite-sheet layout: ``n`` columns, ``m`` rows, animating frames start..end."""

    n: int
    m: int
    start_index: int = 0
    end_index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.n <= 0 or self.m <= 0:
            raise ValueError("atlas dimensions must be positive")
        if self.end_index is None:
            object.__setattr__(self, "end_index", self.n * self.m)

    @staticmethod
    def from_range(
        n: int,
        m: int,
        start: Optional[int],
        end: Optional[int],
        inclusive: bool,
    ) -> AtlasConfig:
        """Build from a frame range; a missing bound means the start or end of the sheet."""
        start_index = 0 if start is None else start
        if end is None:
            end_index = n * m
        elif inclusive:
            end_index = end - 1
        else:
            end_index = end
        return AtlasConfig(n, m, start_index, end_index)

    def frame_uv(self, frame: int) -> tuple[float, float, float, float]:
        """UV rectangle ``(x, y, w, h)`` of a frame."""
        x = frame % self.n
        y = frame // self.n
        return (x / self.n, y / self.m, 1.0 / self.n, 1.0 / self.m)


@dataclass(frozen=True)
class PostProcessing:
    """Render particles to an offscreen target before drawing them."""


@dataclass
class EmitterConfig:
    """All parameters of a particle emitter."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=EmissionPoint)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=RectangleShape)
    emitting: bool = True
    initial_direction: Vec2 = Vec2(0.0, -1.0)
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Optional[Curve] = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = Vec2(0.0, 0.0)
    texture: Any = None
    atlas: Optional[AtlasConfig] = None
    material: Optional[ParticleMaterial] = None
    post_processing: Optional[PostProcessing] = None