"""Phong reflection model.

Computes the color of a surface point lit by one light as the sum of three
terms:

    ambient  = effective_color * ambient
    diffuse  = effective_color * diffuse * dot(light_dir, normal)
    specular = light_intensity * specular * dot(reflect(-light_dir, normal), eye)^shininess

where ``effective_color`` is the surface color filtered by the light's
intensity. A point in shadow receives the ambient term only. A light behind
the surface contributes no diffuse or specular light, and a highlight
reflecting away from the eye contributes no specular light.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from whitted.core.color import Color
from whitted.core.tuples import Point, Vec3

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape
    from whitted.scene.light import PointLight


def surface_color(shape: Shape, world_point: Point) -> Color:
    """Resolve the base color of a shape at a world-space point.

    The material's pattern wins over its flat color. If the pattern cannot be
    evaluated because a transform is singular, the flat color is used.
    """
    material = shape.material
    if material.pattern is not None:
        patterned = material.pattern.color_at_object(shape, world_point)
        if patterned is not None:
            return patterned
    return material.color


def lighting(
    shape: Shape,
    light: PointLight,
    point: Point,
    eyev: Vec3,
    normalv: Vec3,
    in_shadow: bool,
) -> Color:
    """Shade a surface point with the Phong model.

    Args:
        shape: The shape being shaded (supplies material and pattern space).
        light: The light source.
        point: Shading point in world space.
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal at the point.
        in_shadow: Whether the point is occluded from this light.

    Returns:
        The unclamped color contributed by this light.
    """
    material = shape.material
    effective_color = surface_color(shape, point) * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    lightv = (light.position - point).normalize()
    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflectv = (-lightv).reflect(normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0.0:
        return ambient + diffuse

    factor = reflect_dot_eye ** int(material.shininess)
    specular = light.intensity * material.specular * factor
    return ambient + diffuse + specular
