"""Geometry module for shape primitives.

Components:
    shape: Base class holding transform, material and world/object space mapping
    sphere: Unit sphere at the origin
    plane: Infinite xz plane

Shapes are immutable. Use ``with_transform`` and ``with_material`` to derive
modified copies.
"""

from .plane import Plane
from .shape import Shape
from .sphere import Sphere, glass_sphere

__all__ = [
    "Shape",
    "Sphere",
    "Plane",
    "glass_sphere",
]
