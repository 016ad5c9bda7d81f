"""Game logic for platformer physics, particle emitters, small arcade games, cameras, inventory and sound bookkeeping."""

__version__ = "0.1.0"
__all__ = [
    "geometry",
    "platformer",
    "particle_config",
    "emitter",
    "life",
    "arkanoid",
    "asteroids",
    "camera",
    "inventory",
    "audio",
]