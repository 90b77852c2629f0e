"""Scene module.

Components:
    light: Point lights
    precompute: Per-hit shading data and refractive index bookkeeping
    world: Shape and light container with recursive color resolution
    loader: YAML scene description loader
"""

from .light import PointLight
from .loader import SceneError, load_scene, parse_scene
from .precompute import PrecomputedHitData, prepare_computations, refractive_indices
from .world import World, default_world

__all__ = [
    "PointLight",
    "PrecomputedHitData",
    "prepare_computations",
    "refractive_indices",
    "World",
    "default_world",
    "SceneError",
    "load_scene",
    "parse_scene",
]
