"""Core math and rendering module.

Components:
    tuples: Points and vectors in homogeneous coordinates
    matrix: 4x4 transforms, including the view transform
    color: RGB colors
    ray: Rays and their transformation
    intersection: Intersections and hit selection
    scheduler: Row-parallel render loop

All geometry is computed in double precision with NumPy.
"""

from .color import Color
from .intersection import Intersection, IntersectionList
from .matrix import Axis, Matrix
from .ray import Ray
from .tuples import EPSILON, Point, Vec3

# Note: scheduler is NOT imported here to avoid circular imports.
# Import it directly from whitted.core.scheduler when needed.

__all__ = [
    "EPSILON",
    "Point",
    "Vec3",
    "Axis",
    "Matrix",
    "Color",
    "Ray",
    "Intersection",
    "IntersectionList",
]
