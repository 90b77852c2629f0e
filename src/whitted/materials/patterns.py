"""Procedural color patterns.

A pattern is a color field defined in its own pattern space. Each pattern
owns a transform, applied independently of the shape it decorates:

    pattern_point = inverse(pattern.transform) @ inverse(shape.transform) @ world_point

The set of patterns is closed:

- Stripes: cycles through any number of colors along x.
- Gradient: linear blend between two colors along x (not clamped outside
  [0, 1)).
- Rings: concentric rings around the y axis, cycling through colors.
- Checkers: 3D checkerboard of two colors.
- Blended: average of two patterns, each evaluated in its own pattern space.

``color_at`` returns None only when a transform along the way cannot be
inverted (shape, pattern, or a Blended child's).

Example:
    >>> from whitted.core.color import Color
    >>> from whitted.core.tuples import Point
    >>> from whitted.materials.patterns import Stripes
    >>> stripes = Stripes([Color.white(), Color.black()])
    >>> stripes.color_at(Point(1.5, 0.0, 0.0))
    Color(0.0, 0.0, 0.0)
"""

from __future__ import annotations

import dataclasses
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whitted.core.color import Color
from whitted.core.matrix import Matrix
from whitted.core.tuples import Point

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape


@dataclass(frozen=True)
class Pattern(ABC):
    """Base class for patterns.

    Subclasses declare a ``transform`` field; the base caches its inverse.
    """

    _inverse: Matrix | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_inverse", self.transform.inverse())

    @property
    def inverse_transform(self) -> Matrix | None:
        """Object-to-pattern transform, or None if the transform is singular."""
        return self._inverse

    def with_transform(self, transform: Matrix) -> Pattern:
        """Return a copy of this pattern with a different transform."""
        return dataclasses.replace(self, transform=transform)

    def color_at_object(self, shape: Shape, world_point: Point) -> Color | None:
        """Evaluate the pattern on a shape at a world-space point.

        Args:
            shape: The shape carrying the pattern.
            world_point: Point on the shape's surface, in world space.

        Returns:
            The pattern color, or None if the shape or pattern transform is
            singular.
        """
        shape_inverse = shape.inverse_transform
        if shape_inverse is None or self._inverse is None:
            return None
        object_point = shape_inverse @ world_point
        return self.color_at(self._inverse @ object_point)

    @abstractmethod
    def color_at(self, point: Point) -> Color | None:
        """Evaluate the pattern at a point already in pattern space."""


def _as_palette(colors: Sequence[Color], kind: str) -> tuple[Color, ...]:
    palette = tuple(colors)
    if not palette:
        raise ValueError(f"{kind} pattern needs at least one color.")
    return palette


def _band(value: float) -> int:
    """Integer band index: |floor(value)|."""
    return abs(math.floor(value))


@dataclass(frozen=True)
class Stripes(Pattern):
    """Stripes along x, cycling through ``colors``."""

    colors: tuple[Color, ...]
    transform: Matrix = field(default_factory=Matrix.identity)

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", _as_palette(self.colors, "Stripes"))
        super().__post_init__()

    def color_at(self, point: Point) -> Color:
        return self.colors[_band(point.x) % len(self.colors)]


@dataclass(frozen=True)
class Gradient(Pattern):
    """Linear interpolation from ``start`` at x = 0 to ``end`` at x = 1."""

    start: Color
    end: Color
    transform: Matrix = field(default_factory=Matrix.identity)

    def color_at(self, point: Point) -> Color:
        return self.start + (self.end - self.start) * point.x


@dataclass(frozen=True)
class Rings(Pattern):
    """Concentric rings around the y axis, cycling through ``colors``."""

    colors: tuple[Color, ...]
    transform: Matrix = field(default_factory=Matrix.identity)

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", _as_palette(self.colors, "Rings"))
        super().__post_init__()

    def color_at(self, point: Point) -> Color:
        distance = math.sqrt(point.x * point.x + point.z * point.z)
        return self.colors[_band(distance) % len(self.colors)]


@dataclass(frozen=True)
class Checkers(Pattern):
    """Alternating cubes of two colors."""

    first: Color
    second: Color
    transform: Matrix = field(default_factory=Matrix.identity)

    def color_at(self, point: Point) -> Color:
        parity = (_band(point.x) + _band(point.y) + _band(point.z)) % 2
        return self.first if parity == 0 else self.second


@dataclass(frozen=True)
class Blended(Pattern):
    """The average of two patterns.

    Each child is evaluated at the point mapped through that child's own
    inverse transform, so children can be scaled or rotated independently.
    """

    first: Pattern
    second: Pattern
    transform: Matrix = field(default_factory=Matrix.identity)

    def color_at(self, point: Point) -> Color | None:
        first = _child_color(self.first, point)
        second = _child_color(self.second, point)
        if first is None or second is None:
            return None
        return (first + second) / 2.0


def _child_color(pattern: Pattern, point: Point) -> Color | None:
    inverse = pattern.inverse_transform
    if inverse is None:
        return None
    return pattern.color_at(inverse @ point)
