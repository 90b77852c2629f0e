"""Pinhole camera and image rendering.

The camera sits at the origin of its own space looking down -z, with the
image plane at z = -1. Its transform maps world space to camera space (a
view transform), so rays are generated by mapping camera-space points
through the inverse of that transform.

Image plane extents:

    half_view = tan(fov / 2)
    aspect = hsize / vsize
    aspect >= 1: half_width = half_view, half_height = half_view / aspect
    aspect <  1: half_width = half_view * aspect, half_height = half_view
    pixel_size = 2 * half_width / hsize

Pixel (0, 0) is the top-left corner; x grows to the right, y grows down.

Example:
    >>> import math
    >>> from whitted.camera.camera import Camera
    >>> from whitted.core.matrix import Matrix
    >>> from whitted.core.tuples import Point, Vec3
    >>> from whitted.scene.world import default_world
    >>> camera = Camera(11, 11, math.pi / 2).with_transform(
    ...     Matrix.view_transform(Point(0, 0, -5), Point(0, 0, 0), Vec3(0, 1, 0))
    ... )
    >>> canvas = camera.render(default_world(), depth=5, workers=1)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from whitted import config
from whitted.camera.antialias import AntiAliasing
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.scheduler import render_image
from whitted.core.tuples import Point

if TYPE_CHECKING:
    from whitted.preview.canvas import Canvas
    from whitted.scene.world import World

_CAMERA_ORIGIN = Point(0.0, 0.0, 0.0)


class Camera:
    """A pinhole camera with a fixed image size and field of view.

    Args:
        hsize: Image width in pixels.
        vsize: Image height in pixels.
        fov: Horizontal field of view in radians (vertical when the image is
            taller than wide).
        transform: View transform (world to camera).
        antialiasing: Anti-aliasing configuration. The default traces a
            single ray through each pixel center.

    Raises:
        ValueError: If a size is not positive or the field of view is not in
            (0, pi).
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        fov: float,
        transform: Matrix | None = None,
        antialiasing: AntiAliasing | None = None,
    ) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        if not 0.0 < fov < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {fov}")

        self._hsize = int(hsize)
        self._vsize = int(vsize)
        self._fov = float(fov)
        self._transform = transform if transform is not None else Matrix.identity()
        self._inverse = self._transform.inverse()
        self._antialiasing = antialiasing if antialiasing is not None else AntiAliasing()

        half_view = math.tan(self._fov / 2.0)
        aspect = self._hsize / self._vsize
        if aspect >= 1.0:
            self._half_width = half_view
            self._half_height = half_view / aspect
        else:
            self._half_width = half_view * aspect
            self._half_height = half_view
        self._pixel_size = self._half_width * 2.0 / self._hsize

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def hsize(self) -> int:
        return self._hsize

    @property
    def vsize(self) -> int:
        return self._vsize

    @property
    def fov(self) -> float:
        return self._fov

    @property
    def transform(self) -> Matrix:
        return self._transform

    @property
    def antialiasing(self) -> AntiAliasing:
        return self._antialiasing

    @property
    def pixel_size(self) -> float:
        """World-space size of one pixel on the image plane."""
        return self._pixel_size

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    # =========================================================================
    # Builders
    # =========================================================================

    def with_transform(self, transform: Matrix) -> Camera:
        """Return a copy of this camera with a different view transform."""
        return Camera(self._hsize, self._vsize, self._fov, transform, self._antialiasing)

    def with_antialiasing(self, antialiasing: AntiAliasing) -> Camera:
        """Return a copy of this camera with a different anti-aliasing configuration."""
        return Camera(self._hsize, self._vsize, self._fov, self._transform, antialiasing)

    # =========================================================================
    # Rays and rendering
    # =========================================================================

    def ray_for_pixel(
        self,
        px: int,
        py: int,
        x_offset: float = 0.5,
        y_offset: float = 0.5,
    ) -> Ray | None:
        """Build the world-space ray through a point inside pixel ``(px, py)``.

        Args:
            px: Pixel column.
            py: Pixel row.
            x_offset: Horizontal position inside the pixel, in [0, 1).
            y_offset: Vertical position inside the pixel, in [0, 1).

        Returns:
            The ray, or None if the camera transform is singular.
        """
        if self._inverse is None:
            return None

        world_x = self._half_width - (px + x_offset) * self._pixel_size
        world_y = self._half_height - (py + y_offset) * self._pixel_size

        pixel = self._inverse @ Point(world_x, world_y, -1.0)
        origin = self._inverse @ _CAMERA_ORIGIN
        return Ray(origin, (pixel - origin).normalize())

    def render(
        self,
        world: World,
        depth: int = config.RECURSION_DEPTH,
        *,
        workers: int | None = None,
        seed: int | None = None,
    ) -> Canvas:
        """Render ``world`` into a new canvas.

        Args:
            world: The scene to render.
            depth: Reflection recursion budget.
            workers: Number of worker processes. Defaults to
                ``WHITTED_RENDER_WORKERS``.
            seed: Seed for the anti-aliasing sample offsets. A fixed seed
                gives the same image on every run.

        Returns:
            A ``hsize`` by ``vsize`` canvas.

        Raises:
            RenderError: If computing any row failed.
        """
        return render_image(self, world, depth, workers=workers, seed=seed)

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self._hsize}, vsize={self._vsize}, fov={self._fov}, "
            f"antialiasing={self._antialiasing!r})"
        )
