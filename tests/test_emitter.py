import random

import pytest

from platfx.emitter import Emitter, EmittersCache
from platfx.geometry import Vec2
from platfx.particle_config import (
    AtlasConfig,
    CircleShape,
    Color,
    ColorCurve,
    Curve,
    EmitterConfig,
    RectangleShape,
)


def make(**kwargs):
    return Emitter(EmitterConfig(**kwargs), random.Random(1))


def test_emit_places_particles_at_position():
    emitter = make(emitting=False)
    emitter.emit(Vec2(3.0, 4.0), 5)
    assert len(emitter.particles) == 5
    assert emitter.particles_spawned == 10
    assert all(p.pos == Vec2(3.0, 4.0) for p in emitter.particles)


def test_emitted_color_is_curve_start():
    start = Color(0.2, 0.3, 0.4, 1.0)
    emitter = make(emitting=False, colors_curve=ColorCurve(start=start))
    emitter.emit(Vec2(0.0, 0.0), 1)
    assert emitter.particles[0].color == start


def test_particle_count_never_exceeds_amount():
    emitter = make(amount=8)
    for _ in range(100):
        emitter.update(0.05, Vec2(0.0, 0.0))
        assert len(emitter.particles) <= 8


def test_full_explosiveness_spawns_whole_amount_at_once():
    emitter = make(amount=6, explosiveness=1.0)
    emitter.update(0.01, Vec2(0.0, 0.0))
    assert len(emitter.particles) == 6


def test_zero_amount_spawns_nothing():
    emitter = make(amount=0)
    emitter.update(0.5, Vec2(0.0, 0.0))
    assert emitter.particles == []


def test_particles_expire_after_lifetime():
    emitter = make(emitting=False, lifetime=1.0)
    emitter.emit(Vec2(0.0, 0.0), 3)
    emitter.update(2.0, Vec2(0.0, 0.0))
    assert emitter.particles == []


def test_particles_move_along_initial_direction():
    emitter = make(emitting=False, initial_velocity=50.0, initial_direction=Vec2(0.0, -1.0))
    emitter.emit(Vec2(0.0, 0.0), 1)
    emitter.update(0.1, Vec2(0.0, 0.0))
    particle = emitter.particles[0]
    assert particle.pos.x == pytest.approx(0.0)
    assert particle.pos.y < 0.0


def test_gravity_changes_velocity():
    emitter = make(emitting=False, initial_velocity=0.0, gravity=Vec2(0.0, 10.0))
    emitter.emit(Vec2(0.0, 0.0), 1)
    emitter.update(0.1, Vec2(0.0, 0.0))
    assert emitter.particles[0].velocity.y > 0.0


def test_world_coords_include_emitter_position():
    emitter = make(amount=1, explosiveness=1.0, local_coords=False, initial_velocity=0.0)
    emitter.update(0.01, Vec2(100.0, 50.0))
    assert emitter.particles[0].pos == Vec2(100.0, 50.0)


def test_local_coords_ignore_emitter_position():
    emitter = make(amount=1, explosiveness=1.0, local_coords=True, initial_velocity=0.0)
    emitter.update(0.01, Vec2(100.0, 50.0))
    assert emitter.particles[0].pos == Vec2(0.0, 0.0)


def test_one_shot_stops_emitting():
    emitter = make(one_shot=True, lifetime=0.5, amount=4, explosiveness=1.0)
    emitter.update(0.1, Vec2(0.0, 0.0))
    assert emitter.config.emitting
    emitter.update(1.0, Vec2(0.0, 0.0))
    assert emitter.config.emitting is False
    assert emitter.time_passed == 0.0


def test_reset_clears_state():
    emitter = make(amount=4, explosiveness=1.0)
    emitter.update(0.1, Vec2(0.0, 0.0))
    emitter.reset()
    assert emitter.particles == []
    assert emitter.particles_spawned == 0
    assert emitter.time_passed == 0.0


def test_rebuild_size_curve_follows_config():
    emitter = make()
    assert emitter.batched_size_curve is None
    emitter.config.size_curve = Curve(points=[(0.0, 1.0), (1.0, 1.0)])
    emitter.rebuild_size_curve()
    assert emitter.batched_size_curve is not None
    assert emitter.batched_size_curve.get(0.5) == pytest.approx(1.0)


def test_size_curve_scales_size():
    emitter = make(emitting=False, size=10.0, size_curve=Curve(points=[(0.0, 0.5), (1.0, 0.5)]))
    emitter.emit(Vec2(0.0, 0.0), 1)
    emitter.update(0.1, Vec2(0.0, 0.0))
    assert emitter.particles[0].size == pytest.approx(5.0)


def test_mesh_rebuilt_after_update_particle_mesh():
    emitter = make(emitting=False)
    assert emitter.mesh == RectangleShape().mesh()
    emitter.config.shape = CircleShape(6)
    emitter.update_particle_mesh()
    assert emitter.mesh == RectangleShape().mesh()
    emitter.update(0.01, Vec2(0.0, 0.0))
    assert emitter.mesh == CircleShape(6).mesh()


def test_atlas_sets_uv():
    atlas = AtlasConfig(4, 4)
    emitter = make(emitting=False, atlas=atlas)
    emitter.emit(Vec2(0.0, 0.0), 1)
    emitter.update(0.01, Vec2(0.0, 0.0))
    particle = emitter.particles[0]
    assert particle.uv == atlas.frame_uv(particle.frame)


def test_no_atlas_uses_whole_texture():
    emitter = make(emitting=False)
    emitter.emit(Vec2(0.0, 0.0), 1)
    emitter.update(0.01, Vec2(0.0, 0.0))
    assert emitter.particles[0].uv == (0.0, 0.0, 1.0, 1.0)


def test_cache_spawn_uses_cached_emitter():
    cache = EmittersCache(EmitterConfig(), random.Random(2))
    assert len(cache.cached) == EmittersCache.CACHE_DEFAULT_SIZE
    cache.spawn(Vec2(1.0, 2.0))
    assert len(cache.cached) == EmittersCache.CACHE_DEFAULT_SIZE - 1
    emitter, pos = cache.active[0]
    assert pos == Vec2(1.0, 2.0)
    assert emitter.config.emitting


def test_cache_recycles_finished_one_shot_emitters():
    cache = EmittersCache(EmitterConfig(one_shot=True, lifetime=0.2), random.Random(3))
    cache.spawn(Vec2(0.0, 0.0))
    cache.update(0.1)
    assert len(cache.active) == 1
    cache.update(0.5)
    assert cache.active == []
    assert len(cache.cached) == EmittersCache.CACHE_DEFAULT_SIZE


def test_cache_creates_new_emitter_when_empty():
    cache = EmittersCache(EmitterConfig(), random.Random(4))
    for _ in range(EmittersCache.CACHE_DEFAULT_SIZE + 2):
        cache.spawn(Vec2(0.0, 0.0))
    assert cache.cached == []
    assert len(cache.active) == EmittersCache.CACHE_DEFAULT_SIZE + 2