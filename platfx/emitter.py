"""Particle emitters: spawning, simulating and recycling particles."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from typing import Optional

from .geometry import Vec2
from .particle_config import BatchedCurve, Color, EmitterConfig, Mesh


@dataclass
class Particle:
    """State of one live particle."""

    pos: Vec2
    rotation: float
    size: float
    initial_size: float
    velocity: Vec2
    angular_velocity: float
    lifetime: float
    color: Color
    spawn_index: int
    lived: float = 0.0
    life_fraction: float = 0.0
    frame: int = 0
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)


class Emitter:
    """Spawns particles according to an :class:`EmitterConfig` and advances them."""

    def __init__(self, config: EmitterConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self._rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.position = Vec2(0.0, 0.0)
        self.particles_spawned = 0
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.mesh: Mesh = config.shape.mesh()
        self.blend_mode = config.blend_mode
        self.batched_size_curve: Optional[BatchedCurve] = None
        self._mesh_dirty = False
        self.rebuild_size_curve()

    def reset(self) -> None:
        """Drop every particle and restart the emission cycle."""
        self.particles.clear()
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0

    def rebuild_size_curve(self) -> None:
        """Resample the size curve after the configuration changed."""
        curve = self.config.size_curve
        self.batched_size_curve = curve.batch() if curve is not None else None

    def update_particle_mesh(self) -> None:
        """Rebuild the particle mesh from the configured shape on the next update."""
        self._mesh_dirty = True

    def _emit_particle(self, offset: Vec2) -> None:
        config = self.config
        rng = self._rng
        offset = offset + config.emission_shape.gen_random_point(rng)

        size = config.size - config.size * rng.uniform(0.0, config.size_randomness)
        rotation = config.initial_rotation - config.initial_rotation * rng.uniform(
            0.0, config.initial_rotation_randomness
        )
        pos = offset if config.local_coords else self.position + offset

        spread = config.initial_direction_spread
        angle = rng.uniform(-spread / 2.0, spread / 2.0)
        speed = config.initial_velocity - config.initial_velocity * rng.uniform(
            0.0, config.initial_velocity_randomness
        )
        velocity = config.initial_direction.rotated(angle) * speed

        angular_velocity = config.initial_angular_velocity - (
            config.initial_angular_velocity
            * rng.uniform(0.0, config.initial_angular_velocity_randomness)
        )
        lifetime = config.lifetime - config.lifetime * rng.uniform(
            0.0, config.lifetime_randomness
        )

        self.particles.append(
            Particle(
                pos=pos,
                rotation=rotation,
                size=size,
                initial_size=size,
                velocity=velocity,
                angular_velocity=angular_velocity,
                lifetime=lifetime,
                color=config.colors_curve.start,
                spawn_index=self.particles_spawned,
            )
        )
        self.particles_spawned += 1

    def emit(self, pos: Vec2, n: int) -> None:
        """Immediately emit ``n`` particles, ignoring ``emitting`` and ``amount``."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _spawn_amount(self) -> int:
        config = self.config
        if config.amount == 0:
            return 0
        gap = (config.lifetime / config.amount) * (1.0 - config.explosiveness)
        if gap < 0.001:
            return config.amount
        return max(0, int((self.time_passed - self.last_emit_time) / gap))

    def _spawn(self, dt: float) -> None:
        config = self.config
        self.time_passed += dt
        for _ in range(self._spawn_amount()):
            self.last_emit_time = self.time_passed
            if self.particles_spawned < config.amount:
                self._emit_particle(Vec2(0.0, 0.0))
            elif len(self.particles) < config.amount:
                # Nothing more can be emitted in this call.
                break
            if len(self.particles) >= config.amount:
                break

    def _advance(self, particle: Particle, dt: float) -> None:
        config = self.config
        particle.velocity = particle.velocity + particle.velocity * (config.linear_accel * dt)
        particle.angular_velocity += particle.angular_velocity * config.angular_accel * dt
        particle.angular_velocity *= 1.0 - config.angular_damping

        t = particle.lived / particle.lifetime if particle.lifetime != 0.0 else 1.0
        particle.color = config.colors_curve.at(t)
        particle.pos = particle.pos + particle.velocity * dt
        particle.rotation += particle.angular_velocity * dt

        curve = self.batched_size_curve
        particle.size = particle.initial_size * (curve.get(t) if curve is not None else 1.0)

        if particle.lifetime != 0.0:
            particle.life_fraction = t

        particle.lived += dt
        particle.velocity = particle.velocity + config.gravity * dt

        atlas = config.atlas
        if atlas is not None:
            if particle.lifetime != 0.0:
                span = atlas.end_index - atlas.start_index
                frame = int(particle.lived / particle.lifetime * span) + atlas.start_index
                particle.frame = max(frame, 0)
            particle.uv = atlas.frame_uv(particle.frame)
        else:
            particle.uv = (0.0, 0.0, 1.0, 1.0)

    def update(self, dt: float, position: Vec2) -> None:
        """Advance the emitter by ``dt`` seconds with the emitter placed at ``position``."""
        config = self.config
        self.position = position
        self.blend_mode = config.blend_mode

        if self._mesh_dirty:
            self.mesh = config.shape.mesh()
            self._mesh_dirty = False

        if config.emitting:
            self._spawn(dt)

        if config.one_shot and self.time_passed > config.lifetime:
            self.time_passed = 0.0
            self.last_emit_time = 0.0
            config.emitting = False

        for particle in self.particles:
            self._advance(particle, dt)

        survivors: list[Particle] = []
        for particle in self.particles:
            expired = particle.lived >= particle.lifetime or particle.lived > config.lifetime
            if expired:
                if particle.lived != particle.lifetime:
                    self.particles_spawned -= 1
            else:
                survivors.append(particle)
        self.particles = survivors


class EmittersCache:
    """Many short-lived emitters sharing one configuration, recycled when finished."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self._rng = rng if rng is not None else random.Random()
        self.cached: list[Emitter] = [
            Emitter(dataclasses.replace(config, emitting=False), self._rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self.active: list[tuple[Emitter, Vec2]] = []

    def spawn(self, pos: Vec2) -> None:
        """Start a fresh emitter at ``pos``, reusing a cached one when available."""
        if self.cached:
            emitter = self.cached.pop()
        else:
            emitter = Emitter(dataclasses.replace(self.config), self._rng)
        emitter.update_particle_mesh()
        emitter.config.emitting = True
        emitter.reset()
        self.active.append((emitter, pos))

    def update(self, dt: float) -> None:
        """Advance every active emitter; finished ones go back to the cache."""
        still_active: list[tuple[Emitter, Vec2]] = []
        for emitter, pos in self.active:
            emitter.update(dt, pos)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self.cached.append(emitter)
        self.active = still_active