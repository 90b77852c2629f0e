"""Ray data structure.

A ray is an origin point and a direction vector. Rather than moving shapes
around the scene, rays are transformed into each shape's local space with
the shape's inverse transform, which keeps every intersection routine working
against a canonical unit shape.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import Point, Vec3
    >>> ray = Ray(Point(2.0, 3.0, 4.0), Vec3(1.0, 0.0, 0.0))
    >>> ray.position(2.5)
    Point(4.5, 3.0, 4.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.matrix import Matrix
from whitted.core.tuples import Point, Vec3


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Primary, shadow and reflection
            rays are built normalized, but a transformed ray generally is not
            (scaling stretches it), and intersection code does not assume it.
    """

    origin: Point
    direction: Vec3

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter ``t``."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Apply ``matrix`` to both origin and direction."""
        return Ray(matrix @ self.origin, matrix @ self.direction)
