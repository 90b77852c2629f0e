"""Infinite plane primitive.

The canonical plane is the local xz plane (y = 0) with normal (0, 1, 0).
A ray whose local direction has no y component (within EPSILON) is parallel
to the plane and never hits it. Rays lying inside the plane are treated the
same way: zero intersections.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vec3
from whitted.geometry.shape import Shape

_NORMAL = Vec3(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Plane(Shape):
    """An infinite plane through the local origin, facing +y."""

    def local_intersect(self, local_ray: Ray) -> tuple[float, ...]:
        if abs(local_ray.direction.y) < EPSILON:
            return ()
        return (-local_ray.origin.y / local_ray.direction.y,)

    def local_normal_at(self, local_point: Point) -> Vec3:
        return _NORMAL
