"""Phong surface material.

A material describes how a surface responds to light:

- color / pattern: the base surface color. A pattern, when present,
  overrides the flat color.
- ambient, diffuse, specular, shininess: Phong reflection coefficients.
  Values between 0 and 1 are typical for the first three; shininess is an
  exponent (10 is a very broad highlight, 200 a very tight one) and is
  truncated to an integer when applied.
- reflective: fraction of the mirror-reflected color added on top of the
  surface color, in [0, 1].
- transparency, refractive_index: stored for the refractive-index
  bookkeeping. No transmitted rays are cast, so they do not change the
  rendered color.

Materials are immutable. Shapes hold their own material value, so the same
Material may be given to several shapes without them affecting each other.

Example:
    >>> from whitted.core.color import Color
    >>> from whitted.materials.material import Material
    >>> floor = Material(color=Color(1.0, 0.9, 0.9), specular=0.0)
    >>> mirror = floor.with_reflective(0.8)
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whitted.core.color import Color

if TYPE_CHECKING:
    from whitted.materials.patterns import Pattern


@dataclass(frozen=True)
class Material:
    """Phong material parameters.

    Defaults form the baseline material: white, ambient 0.1, diffuse 0.9,
    specular 0.9, shininess 200, not reflective, opaque, refractive index 1.

    Raises:
        ValueError: If a coefficient is not finite, negative, or outside its
            allowed range.
    """

    color: Color = field(default_factory=Color.white)
    pattern: Pattern | None = None
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0.0:
                raise ValueError(f"Material {name} = {value} must be finite and non-negative.")

        for name in ("reflective", "transparency"):
            value = getattr(self, name)
            if not math.isfinite(value) or not 0.0 <= value <= 1.0:
                raise ValueError(f"Material {name} = {value} is outside [0, 1].")

        if not math.isfinite(self.refractive_index) or self.refractive_index < 1.0:
            raise ValueError(
                f"Refractive index = {self.refractive_index} must be finite and >= 1.0."
            )

        if not all(math.isfinite(channel) for channel in self.color):
            raise ValueError(f"Material color {self.color} has a non-finite channel.")

    def with_color(self, color: Color) -> Material:
        return dataclasses.replace(self, color=color)

    def with_pattern(self, pattern: Pattern | None) -> Material:
        return dataclasses.replace(self, pattern=pattern)

    def with_ambient(self, ambient: float) -> Material:
        return dataclasses.replace(self, ambient=ambient)

    def with_diffuse(self, diffuse: float) -> Material:
        return dataclasses.replace(self, diffuse=diffuse)

    def with_specular(self, specular: float) -> Material:
        return dataclasses.replace(self, specular=specular)

    def with_shininess(self, shininess: float) -> Material:
        return dataclasses.replace(self, shininess=shininess)

    def with_reflective(self, reflective: float) -> Material:
        return dataclasses.replace(self, reflective=reflective)

    def with_transparency(self, transparency: float) -> Material:
        return dataclasses.replace(self, transparency=transparency)

    def with_refractive_index(self, refractive_index: float) -> Material:
        return dataclasses.replace(self, refractive_index=refractive_index)
