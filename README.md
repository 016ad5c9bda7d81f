# platfx

This is game logic in plain Python. Nothing in it draws anything. You supply the
drawing and the input, and the package keeps the state and applies the rules.
It has no dependencies outside the standard library.

## Modules

- `platfx.geometry` provides `Vec2`, with arithmetic, `length`, `normalize` and
  `rotated`. It also provides `Rect`, with `overlaps` and `contains`, and the
  function `polar_to_cartesian`.
- `platfx.platformer` is pixel-exact platformer physics. A `World` holds three
  kinds of things:
  - static tile layers, added with `add_static_tiled_layer`;
  - moving solids (`add_solid`, `solid_move`);
  - actors (`add_actor`, `move_h`, `move_v`).

  Actors can stand on `Tile.JUMP_THROUGH` tiles, drop through them with
  `descent`, and get squished by solids (`squished`). Queries are
  `collide_solids`, `collide_tag`, `collide_check`, `solid_at` and `tag_at`.
- `platfx.particle_config` holds the emitter configuration, `EmitterConfig`. It
  has these parts:
  - emission shapes: `EmissionPoint`, `EmissionRect`, `EmissionSphere`;
  - particle meshes: `RectangleShape`, `CircleShape`, `CustomMeshShape`;
  - size curves: `Curve`, `BatchedCurve`;
  - colour curves: `ColorCurve`, `Color`;
  - sprite atlases: `AtlasConfig`;
  - `BlendMode`, `ParticleMaterial` and `PostProcessing`.
- `platfx.emitter` simulates particles on the CPU.
  - `Emitter.update(dt, position)` spawns particles and advances them. Each one
    is a `Particle` with a position, size, colour, atlas UV and so on.
  - `Emitter.emit` spawns particles immediately.
  - `EmittersCache` runs many short-lived emitters and recycles the ones that
    have finished.
- `platfx.life` is Conway's game of life on a bounded grid. It provides
  `LifeBoard` (`random`, `from_rows`, `to_rows`, `neighbors`, `step`) and
  `CellState`.
- `platfx.arkanoid` is a brick breaker in a 20 x 20 world (`Arkanoid`). You drive
  it with `update(dt, left, right, launch)`.
- `platfx.asteroids` is an asteroids game (`AsteroidsGame`, `Ship`, `Bullet`,
  `Asteroid`, `wrap_around`). Call `restart` to populate the field. Then call
  `update(frame_t, thrust, left, right, shoot)` once per frame.
  `ship_triangle` gives the ship's outline.
- `platfx.camera` provides:
  - `Vec3`;
  - `short_angle_dist` and `angle_lerp`;
  - `OrbitCamera2D`, where the wheel rotates or zooms and the rotation is
    smoothed;
  - `FirstPersonCamera`, with mouse look and movement along the view direction.
- `platfx.inventory` is a slot and inventory fitting model (`Fitting`, `Slot`).
  Drops are recorded as `Fit`, `Unfit` or `Refit` commands and applied with
  `apply` or `apply_pending`.
- `platfx.audio` is a sound registry (`AudioContext`, `Sound`,
  `PlaySoundParams`). It tracks which sounds are loaded, which are playing, and
  with what volume and looping.

## Installing

```
pip install .
```

## Example: a platformer world

```python
from platfx.geometry import Vec2
from platfx.platformer import Tile, World

world = World()
tiles = [Tile.EMPTY] * 80 + [Tile.SOLID] * 40   # two empty rows, then a floor
world.add_static_tiled_layer(tiles, 8.0, 8.0, 40, 1)

player = world.add_actor(Vec2(16.0, 0.0), 8, 8)
landed = not world.move_v(player, 20.0)         # blocked by the floor
print(landed, world.actor_pos(player))           # True Vec2(x=16.0, y=8.0)
```

## Example: particles

```python
from platfx.emitter import Emitter
from platfx.geometry import Vec2
from platfx.particle_config import EmitterConfig

emitter = Emitter(EmitterConfig(amount=20, lifetime=0.8))
for _ in range(60):
    emitter.update(1 / 60, Vec2(100.0, 100.0))
print(len(emitter.particles))
```

## What this package does not do

- It opens no window and renders nothing. It does not read the keyboard, mouse
  or touch input.
- It has no game loop and no command-line program. Every game advances only
  when you call its `update` or `step` method.
- `platfx.audio` does not decode or play sound. It only keeps the bytes and the
  playback state.
- `platfx.emitter` produces particle data and mesh vertices. Turning them into
  pixels is left to you.

## Running the tests

```
pip install .[test]
pytest
```