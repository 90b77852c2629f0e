"""Per-hit geometry precomputed for shading.

Once the visible intersection along a ray is known, everything the shading
code needs about that hit is derived once and bundled into a
``PrecomputedHitData``:

- the hit point and the over point (nudged along the normal by EPSILON so
  shadow and reflection rays do not re-hit the surface they start on)
- the eye vector (pointing back along the ray)
- the surface normal, flipped when the ray hits the inside of a surface
- the reflection vector
- the refractive indices on either side of the surface (n1: the medium being
  exited, n2: the medium being entered)

Refractive indices come from walking the full sorted intersection list with a
stack of the shapes the ray is currently inside. The walk only gives
meaningful answers for shapes whose intersections come in entry/exit pairs
(spheres); a plane contributes a single intersection and simply toggles in or
out of the stack.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.intersection import Intersection, IntersectionList
from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vec3
from whitted.geometry.shape import Shape

# Refractive index of the empty space outside every shape.
VACUUM_INDEX = 1.0


@dataclass(frozen=True)
class PrecomputedHitData:
    """Derived, read-only data for shading one hit.

    Attributes:
        t: Ray parameter of the hit.
        shape: The shape that was hit.
        point: World-space hit point.
        over_point: Hit point offset along the normal, used as the origin of
            shadow and reflection rays.
        eyev: Unit vector from the hit point toward the ray origin.
        normalv: Unit normal facing the eye.
        inside: True if the ray hit the surface from inside.
        reflectv: Ray direction reflected about the normal.
        n1: Refractive index of the medium being exited.
        n2: Refractive index of the medium being entered.
    """

    t: float
    shape: Shape
    point: Point
    over_point: Point
    eyev: Vec3
    normalv: Vec3
    inside: bool
    reflectv: Vec3
    n1: float
    n2: float


def prepare_computations(
    hit: Intersection,
    ray: Ray,
    intersections: IntersectionList,
) -> PrecomputedHitData | None:
    """Precompute shading data for ``hit``.

    Args:
        hit: The intersection being shaded.
        ray: The ray that produced it.
        intersections: All intersections along the ray, sorted by ``t``;
            used for the refractive-index walk.

    Returns:
        The precomputed data, or None if the shape's normal cannot be
        computed because its transform is singular.
    """
    point = ray.position(hit.t)
    normalv = hit.shape.normal_at(point)
    if normalv is None:
        return None

    eyev = -ray.direction
    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    n1, n2 = refractive_indices(hit, intersections)

    return PrecomputedHitData(
        t=hit.t,
        shape=hit.shape,
        point=point,
        over_point=point + normalv * EPSILON,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=ray.direction.reflect(normalv),
        n1=n1,
        n2=n2,
    )


def refractive_indices(hit: Intersection, intersections: IntersectionList) -> tuple[float, float]:
    """Find the refractive indices on both sides of ``hit``.

    Walks the intersections in order, maintaining the stack of shapes the ray
    is inside. Entering a shape pushes it; meeting a shape already on the
    stack means the ray is leaving it, so it is removed.

    Args:
        hit: The intersection of interest. Compared by value.
        intersections: Sorted intersections along the same ray.

    Returns:
        ``(n1, n2)``. Either side defaults to the vacuum index when the ray
        is not inside any shape.
    """
    containers: list[Shape] = []
    n1 = VACUUM_INDEX
    n2 = VACUUM_INDEX

    for intersection in intersections:
        is_hit = intersection == hit
        if is_hit:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        if intersection.shape in containers:
            containers.remove(intersection.shape)
        else:
            containers.append(intersection.shape)

        if is_hit:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            break

    return n1, n2
