"""RGB color values.

Colors are unclamped floating point triples. Lighting may push channels
above 1.0 (several lights add up without clamping); clamping only happens
when a canvas is quantized for export.
"""

from __future__ import annotations

from numbers import Real

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import EPSILON


class Color:
    """An RGB triple supporting the arithmetic used in shading.

    ``Color * Color`` is the Hadamard (channel-wise) product, used to filter
    a light's intensity by a surface color.
    """

    __slots__ = ("_data",)

    def __init__(self, r: float, g: float, b: float) -> None:
        self._data = np.array([r, g, b], dtype=np.float64)

    @classmethod
    def from_array(cls, data: npt.ArrayLike) -> Color:
        obj = cls.__new__(cls)
        obj._data = np.array(data, dtype=np.float64).reshape(3)
        return obj

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0)

    @property
    def r(self) -> float:
        return float(self._data[0])

    @property
    def g(self) -> float:
        return float(self._data[1])

    @property
    def b(self) -> float:
        return float(self._data[2])

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return a copy of the channels as a (3,) array."""
        return self._data.copy()

    def isclose(self, other: Color, eps: float = EPSILON) -> bool:
        return bool(np.all(np.abs(self._data - other._data) < eps))

    def __add__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color.from_array(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color.from_array(self._data - other._data)
        return NotImplemented

    def __mul__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color.from_array(self._data * other._data)
        if isinstance(other, Real):
            return Color.from_array(self._data * float(other))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Color:
        if isinstance(scalar, Real):
            return Color.from_array(self._data / float(scalar))
        return NotImplemented

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data.tolist()))

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
