"""Scene container and recursive color resolution.

The world owns the shapes and lights of a scene and answers the questions the
renderer asks about a ray:

- ``intersect``: every intersection with every shape, sorted by ``t``.
- ``color_at``: the color seen along a ray.
- ``shade_hit``: the color at a precomputed hit (direct light + reflection).
- ``reflected_color``: the mirror contribution at a hit.
- ``is_shadowed``: whether a point is occluded from a given light.

``color_at``, ``shade_hit`` and ``reflected_color`` call each other
recursively. Each reflection bounce consumes one unit of the ``remaining``
budget and a budget of zero makes the reflected color black, so two facing
mirrors terminate after ``remaining`` bounces.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import Point, Vec3
    >>> from whitted.scene.world import default_world
    >>> world = default_world()
    >>> color = world.color_at(Ray(Point(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0)), 5)
"""

from __future__ import annotations

from collections.abc import Iterable

from whitted.core.color import Color
from whitted.core.intersection import IntersectionList
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Point
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere
from whitted.materials.material import Material
from whitted.materials.phong import lighting
from whitted.scene.light import PointLight
from whitted.scene.precompute import PrecomputedHitData, prepare_computations


class World:
    """A collection of shapes and lights.

    Args:
        shapes: Shapes in the scene. Order only matters to the
            refractive-index walk when intersections share a ``t``.
        lights: Light sources. Contributions of several lights add up.
    """

    def __init__(
        self,
        shapes: Iterable[Shape] = (),
        lights: Iterable[PointLight] = (),
    ) -> None:
        self.shapes: list[Shape] = list(shapes)
        self.lights: list[PointLight] = list(lights)

    def add_shape(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def add_light(self, light: PointLight) -> None:
        self.lights.append(light)

    def intersect(self, ray: Ray) -> IntersectionList:
        """Intersect a ray with every shape in the world.

        Returns:
            All intersections sorted by ``t``. Empty (but present) on a miss.
        """
        intersections = IntersectionList()
        for shape in self.shapes:
            intersections.extend(shape.intersect(ray))
        return intersections.sort()

    def color_at(self, ray: Ray, remaining: int) -> Color:
        """Compute the color seen along a ray.

        Args:
            ray: The ray to trace.
            remaining: Reflection bounces still allowed.

        Returns:
            The shaded color of the nearest visible hit, or black when the ray
            hits nothing (or hits a shape whose normal cannot be computed).
        """
        intersections = self.intersect(ray)
        hit = intersections.hit()
        if hit is None:
            return Color.black()
        comps = prepare_computations(hit, ray, intersections)
        if comps is None:
            return Color.black()
        return self.shade_hit(comps, remaining)

    def shade_hit(self, comps: PrecomputedHitData, remaining: int) -> Color:
        """Combine direct lighting from every light with the reflected color.

        Each light is shadow-tested on its own. The result is not clamped.
        """
        surface = Color.black()
        for light in self.lights:
            in_shadow = self.is_shadowed(comps.over_point, light)
            surface = surface + lighting(
                comps.shape,
                light,
                comps.over_point,
                comps.eyev,
                comps.normalv,
                in_shadow,
            )
        return surface + self.reflected_color(comps, remaining)

    def reflected_color(self, comps: PrecomputedHitData, remaining: int) -> Color:
        """Trace the mirror reflection at a hit.

        Returns:
            Black when the budget is exhausted or the surface is not
            reflective; otherwise the color seen along the reflection vector,
            scaled by the material's reflectivity.
        """
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return Color.black()
        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def is_shadowed(self, point: Point, light: PointLight) -> bool:
        """Check whether anything lies between ``point`` and ``light``.

        Hits beyond the light do not cast shadows.
        """
        to_light = light.position - point
        distance = to_light.magnitude()
        shadow_ray = Ray(point, to_light.normalize())
        hit = self.intersect(shadow_ray).hit()
        return hit is not None and hit.t < distance

    def __repr__(self) -> str:
        return f"World(shapes={len(self.shapes)}, lights={len(self.lights)})"


def default_world() -> World:
    """Two concentric spheres lit from the upper left front.

    - light: white, at (-10, 10, -10)
    - outer sphere: unit sphere, color (0.8, 1.0, 0.6), diffuse 0.7,
      specular 0.2
    - inner sphere: baseline material, scaled by 0.5
    """
    light = PointLight(Point(-10.0, 10.0, -10.0), Color.white())
    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=Matrix.scaling(0.5, 0.5, 0.5))
    return World([outer, inner], [light])
