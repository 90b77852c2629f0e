"""Common contract for renderable shapes.

Every shape is defined in its own local space as a canonical unit primitive
and placed in the world by a transform. The base class handles the parts
shared by all shapes:

- caching the inverse (and inverse-transpose) transform once at construction
- moving world-space rays into local space before intersection
- mapping local normals back to world space with the inverse-transpose

Concrete shapes only implement ``local_intersect`` and ``local_normal_at``.
The set of shapes is closed: Sphere and Plane.

A singular transform makes a shape unrenderable rather than an error:
``intersect`` returns an empty list and ``normal_at`` returns None.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from whitted.core.intersection import Intersection, IntersectionList
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Point, Vec3
from whitted.materials.material import Material


@dataclass(frozen=True)
class Shape(ABC):
    """Base class for shapes.

    Shapes are immutable and compared structurally (same kind, transform and
    material), which is what the refractive-index bookkeeping relies on to
    recognize a shape it has already entered.

    Attributes:
        transform: Object-to-world transform. Defaults to the identity.
        material: Surface material. Defaults to the baseline material.
    """

    transform: Matrix = field(default_factory=Matrix.identity)
    material: Material = field(default_factory=Material)
    _inverse: Matrix | None = field(init=False, repr=False, compare=False)
    _inverse_transpose: Matrix | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        inverse = self.transform.inverse()
        object.__setattr__(self, "_inverse", inverse)
        object.__setattr__(
            self, "_inverse_transpose", None if inverse is None else inverse.transpose()
        )

    @property
    def inverse_transform(self) -> Matrix | None:
        """World-to-object transform, or None if the transform is singular."""
        return self._inverse

    def with_transform(self, transform: Matrix) -> Shape:
        """Return a copy of this shape with a different transform."""
        return dataclasses.replace(self, transform=transform)

    def with_material(self, material: Material) -> Shape:
        """Return a copy of this shape with a different material."""
        return dataclasses.replace(self, material=material)

    def intersect(self, ray: Ray) -> IntersectionList:
        """Intersect a world-space ray with this shape.

        Args:
            ray: The ray in world space.

        Returns:
            The intersections in the order the shape produces them. Empty if
            the ray misses or the transform cannot be inverted.
        """
        if self._inverse is None:
            return IntersectionList()
        local_ray = ray.transform(self._inverse)
        return IntersectionList(Intersection(t, self) for t in self.local_intersect(local_ray))

    def normal_at(self, world_point: Point) -> Vec3 | None:
        """Compute the unit surface normal at a world-space point.

        Args:
            world_point: A point on the surface, in world space.

        Returns:
            The world-space unit normal, or None if the transform is singular.
        """
        if self._inverse is None or self._inverse_transpose is None:
            return None
        local_point = self._inverse @ world_point
        local_normal = self.local_normal_at(local_point)
        # Vec3.from_array drops the w the inverse-transpose may have introduced.
        world_normal = self._inverse_transpose @ local_normal
        return world_normal.normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> tuple[float, ...]:
        """Return the ``t`` values where a local-space ray meets the shape."""

    @abstractmethod
    def local_normal_at(self, local_point: Point) -> Vec3:
        """Return the (unnormalized) local-space normal at ``local_point``."""
