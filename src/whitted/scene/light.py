"""Light sources.

Only point lights are supported: a position and an intensity, with no size
or shape. Shadows cast by a point light are therefore hard-edged.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.color import Color
from whitted.core.tuples import Point


@dataclass(frozen=True)
class PointLight:
    """A point light source.

    Attributes:
        position: Light position in world space.
        intensity: Light color and brightness. Channels may exceed 1.0.
    """

    position: Point
    intensity: Color
