"""4x4 transformation matrices.

Matrices are thin wrappers around a (4, 4) NumPy array. They compose with the
``@`` operator, both with other matrices and with Point/Vec3 tuples:

    transform = Matrix.translation(10, 5, 7) @ Matrix.scaling(5, 5, 5)
    moved = transform @ Point(1, 0, 1)

Inversion never raises. A singular matrix has no inverse, which is reported
as ``None`` so callers can skip the computation that needed it (a shape that
cannot be hit, a pixel that is left as background).

Example:
    >>> from whitted.core.matrix import Matrix
    >>> from whitted.core.tuples import Point
    >>> Matrix.translation(5.0, -3.0, 2.0) @ Point(-3.0, 4.0, 5.0)
    Point(2.0, 1.0, 7.0)
    >>> Matrix([[0.0] * 4] * 4).inverse() is None
    True
"""

from __future__ import annotations

import math
from enum import Enum

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import EPSILON, Point, Vec3, _Tuple


class Axis(Enum):
    """Coordinate axis for rotation matrices."""

    X = "x"
    Y = "y"
    Z = "z"


class Matrix:
    """A 4x4 matrix of float64 values.

    Args:
        rows: Optional 4x4 nested sequence. Defaults to the identity.

    Raises:
        ValueError: If ``rows`` is not 4x4.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: npt.ArrayLike | None = None) -> None:
        if rows is None:
            data = np.identity(4, dtype=np.float64)
        else:
            data = np.array(rows, dtype=np.float64)
        if data.shape != (4, 4):
            raise ValueError(f"Matrix must be 4x4, got shape {data.shape}")
        self._data = data

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def identity(cls) -> Matrix:
        return cls()

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix:
        """Translate points by (x, y, z). Vectors are unaffected."""
        m = cls()
        m._data[0, 3] = x
        m._data[1, 3] = y
        m._data[2, 3] = z
        return m

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix:
        m = cls()
        m._data[0, 0] = x
        m._data[1, 1] = y
        m._data[2, 2] = z
        return m

    @classmethod
    def rotation(cls, axis: Axis, radians: float) -> Matrix:
        """Rotate about a coordinate axis (left-handed, as seen from +axis).

        Args:
            axis: Axis to rotate around.
            radians: Rotation angle.

        Returns:
            The rotation matrix.
        """
        c = math.cos(radians)
        s = math.sin(radians)
        if axis is Axis.X:
            rows = [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, -s, 0.0],
                [0.0, s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        elif axis is Axis.Y:
            rows = [
                [c, 0.0, s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [-s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        else:
            rows = [
                [c, -s, 0.0, 0.0],
                [s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        return cls(rows)

    @classmethod
    def shear(
        cls,
        xy: float,
        xz: float,
        yx: float,
        yz: float,
        zx: float,
        zy: float,
    ) -> Matrix:
        """Shear each coordinate in proportion to the other two.

        For example ``xy=1`` moves x by 1 for every unit of y, so
        ``Matrix.shear(1, 0, 0, 0, 0, 0) @ Point(2, 3, 4)`` is ``Point(5, 3, 4)``.
        """
        return cls(
            [
                [1.0, xy, xz, 0.0],
                [yx, 1.0, yz, 0.0],
                [zx, zy, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def view_transform(cls, from_point: Point, to_point: Point, up: Vec3) -> Matrix:
        """Build the world-to-camera transform for an eye looking at a point.

        Builds an orthonormal basis (left, true_up, -forward) from the view
        direction and the approximate up vector, then moves the world so the
        eye sits at the origin.

        Args:
            from_point: Eye position.
            to_point: Point the eye looks at.
            up: Approximate up direction; need not be normalized or
                perpendicular to the view direction.

        Returns:
            The view transformation matrix.
        """
        forward = (to_point - from_point).normalize()
        left = forward.cross(up.normalize())
        true_up = left.cross(forward)
        orientation = cls(
            [
                [left.x, left.y, left.z, 0.0],
                [true_up.x, true_up.y, true_up.z, 0.0],
                [-forward.x, -forward.y, -forward.z, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return orientation @ cls.translation(-from_point.x, -from_point.y, -from_point.z)

    # =========================================================================
    # Algebra
    # =========================================================================

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    def determinant(self) -> float:
        return float(np.linalg.det(self._data))

    def inverse(self) -> Matrix | None:
        """Compute the inverse matrix.

        Returns:
            The inverse, or None if the matrix is singular (zero or
            non-finite determinant).
        """
        det = self.determinant()
        if det == 0.0 or not math.isfinite(det):
            return None
        try:
            inverted = np.linalg.inv(self._data)
        except np.linalg.LinAlgError:
            return None
        if not np.all(np.isfinite(inverted)):
            return None
        return Matrix(inverted)

    def __matmul__(self, other: object):
        if isinstance(other, Matrix):
            return Matrix(self._data @ other._data)
        if isinstance(other, _Tuple):
            return type(other).from_array(self._data @ other._data)
        return NotImplemented

    # =========================================================================
    # Comparison and access
    # =========================================================================

    def allclose(self, other: Matrix, atol: float = EPSILON) -> bool:
        """Check element-wise agreement within ``atol``."""
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=atol))

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return a copy of the underlying (4, 4) array."""
        return self._data.copy()

    def __getitem__(self, index):
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data.ravel().tolist()))

    def __repr__(self) -> str:
        rows = ", ".join(str(row) for row in self._data.tolist())
        return f"Matrix([{rows}])"
