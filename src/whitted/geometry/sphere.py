"""Sphere primitive.

The canonical sphere is centered at the local origin with radius 1. Other
sizes and positions come from the shape transform.

The ray-sphere intersection solves:
    |origin + t * direction|^2 = 1

which expands to the quadratic a*t^2 + b*t + c = 0 with:
    a = dot(direction, direction)
    b = 2 * dot(direction, origin - center)
    c = dot(origin - center, origin - center) - 1

Both roots are returned, including roots behind the ray origin. The caller
decides which of them is visible; the refractive-index bookkeeping needs the
entry and the exit even when the ray starts inside the sphere.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import Point, Vec3
    >>> from whitted.geometry.sphere import Sphere
    >>> xs = Sphere().intersect(Ray(Point(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0)))
    >>> [ix.t for ix in xs]
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import Point, Vec3
from whitted.geometry.shape import Shape
from whitted.materials.material import Material

_ORIGIN = Point(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Sphere(Shape):
    """A unit sphere centered at the local origin."""

    def local_intersect(self, local_ray: Ray) -> tuple[float, ...]:
        sphere_to_ray = local_ray.origin - _ORIGIN
        direction = local_ray.direction

        a = direction.dot(direction)
        if a == 0.0:
            return ()
        b = 2.0 * direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return ()

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return (t1, t2)

    def local_normal_at(self, local_point: Point) -> Vec3:
        return local_point - _ORIGIN


def glass_sphere() -> Sphere:
    """A unit sphere with a fully transparent material of index 1.5."""
    return Sphere(material=Material(transparency=1.0, refractive_index=1.5))
