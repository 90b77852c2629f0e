"""Points and direction vectors in homogeneous coordinates.

This module provides the two tuple kinds the renderer works with:

- Point: a location in space (homogeneous w = 1). Affected by translation.
- Vec3: a direction or offset (homogeneous w = 0). Unaffected by translation.

Both store their components in a 4-element NumPy array so that a single
4x4 matrix multiply handles points and vectors uniformly. The kind of a tuple
is preserved by every operation that makes geometric sense:

    Point - Point -> Vec3
    Point + Vec3  -> Point
    Point - Vec3  -> Point
    Vec3 +/- Vec3 -> Vec3

Example:
    >>> from whitted.core.tuples import Point, Vec3
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vec3(0.0, 1.0, 0.0)
    >>> p + v * 2.0
    Point(1.0, 4.0, 3.0)
    >>> (Point(3.0, 2.0, 1.0) - Point(5.0, 6.0, 7.0))
    Vec3(-2.0, -4.0, -6.0)
"""

from __future__ import annotations

import math
from numbers import Real

import numpy as np
import numpy.typing as npt

# Tolerance used for approximate comparisons and for nudging hit points off
# surfaces (shadow acne correction).
EPSILON = 1e-5


class _Tuple:
    """Shared storage and comparison for Point and Vec3.

    Attributes:
        W: Homogeneous coordinate for the concrete kind.
    """

    __slots__ = ("_data",)

    W = 0.0

    def __init__(self, x: float, y: float, z: float) -> None:
        self._data = np.array([x, y, z, self.W], dtype=np.float64)

    @classmethod
    def from_array(cls, data: npt.ArrayLike) -> _Tuple:
        """Build a tuple from an array of 3 or 4 components.

        The homogeneous coordinate is always reset to the kind's own ``W``,
        so the result of an affine transform keeps its kind.

        Args:
            data: Array-like with at least 3 components.

        Returns:
            A new tuple of the calling class.
        """
        values = np.asarray(data, dtype=np.float64)
        obj = cls.__new__(cls)
        obj._data = np.array([values[0], values[1], values[2], cls.W], dtype=np.float64)
        return obj

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return a copy of the homogeneous components as a (4,) array."""
        return self._data.copy()

    def isclose(self, other: _Tuple, eps: float = EPSILON) -> bool:
        """Check whether two tuples of the same kind agree within ``eps``."""
        if type(self) is not type(other):
            return False
        return bool(np.all(np.abs(self._data[:3] - other._data[:3]) < eps))

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < 3:
            raise IndexError(f"index {index} out of range for a 3-component tuple")
        return float(self._data[index])

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self._data.tolist())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"


class Point(_Tuple):
    """A position in 3D space (w = 1)."""

    __slots__ = ()

    W = 1.0

    def __add__(self, other: object) -> Point:
        if isinstance(other, Vec3):
            return Point.from_array(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Point):
            return Vec3.from_array(self._data - other._data)
        if isinstance(other, Vec3):
            return Point.from_array(self._data - other._data)
        return NotImplemented

    def __mul__(self, scalar: object) -> Point:
        if isinstance(scalar, Real):
            return Point.from_array(self._data * float(scalar))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Point:
        if isinstance(scalar, Real):
            return Point.from_array(self._data / float(scalar))
        return NotImplemented


class Vec3(_Tuple):
    """A direction or displacement in 3D space (w = 0)."""

    __slots__ = ()

    W = 0.0

    def __add__(self, other: object):
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data + other._data)
        if isinstance(other, Point):
            return Point.from_array(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data - other._data)
        return NotImplemented

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __mul__(self, scalar: object) -> Vec3:
        if isinstance(scalar, Real):
            return Vec3.from_array(self._data * float(scalar))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vec3:
        if isinstance(scalar, Real):
            return Vec3.from_array(self._data / float(scalar))
        return NotImplemented

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction.

        Normalizing the zero vector yields NaN components, which the hit
        selection later filters out.
        """
        return self / self.magnitude()

    def dot(self, other: Vec3) -> float:
        """Dot product of two vectors."""
        return float(np.dot(self._data[:3], other._data[:3]))

    def cross(self, other: Vec3) -> Vec3:
        """Cross product ``self x other``."""
        return Vec3.from_array(np.cross(self._data[:3], other._data[:3]))

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect this vector about ``normal``.

        Args:
            normal: Surface normal (should be unit length).

        Returns:
            ``self - normal * 2 * dot(self, normal)``.
        """
        return self - normal * (2.0 * self.dot(normal))
