"""Float RGB pixel buffer.

The canvas stores linear, unclamped color values in a NumPy array of shape
(height, width, 3). Values above 1.0 are kept as-is; clamping only happens
when the canvas is quantized for export.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from whitted.core.color import Color
from whitted.preview.export import image_to_uint8


class Canvas:
    """A width by height grid of RGB colors, initialised to black.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Raises:
        ValueError: If either dimension is not positive.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._pixels = np.zeros((self._height, self._width, 3), dtype=np.float64)

    @property
    def width(self) -> int:
        """Get the image width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self._height

    @property
    def pixels(self) -> npt.NDArray[np.float64]:
        """The backing (height, width, 3) array. Writes go through to the canvas."""
        return self._pixels

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the color of pixel ``(x, y)``.

        Raises:
            ValueError: If the pixel lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = color.to_array()

    def read_pixel(self, x: int, y: int) -> Color:
        """Get the color of pixel ``(x, y)``.

        Raises:
            ValueError: If the pixel lies outside the canvas.
        """
        self._check_bounds(x, y)
        return Color.from_array(self._pixels[y, x])

    def write_row(self, y: int, row: npt.ArrayLike) -> None:
        """Replace row ``y`` with a (width, 3) array of colors.

        Raises:
            ValueError: If ``y`` is out of range or ``row`` has the wrong shape.
        """
        if not 0 <= y < self._height:
            raise ValueError(f"Row {y} is outside a canvas of height {self._height}")
        values = np.asarray(row, dtype=np.float64)
        if values.shape != (self._width, 3):
            raise ValueError(
                f"Row shape must be ({self._width}, 3), got {values.shape}"
            )
        self._pixels[y] = values

    def to_uint8(self) -> npt.NDArray[np.uint8]:
        """Quantize to 8 bits per channel: ``int(256 * clamp(c, 0, 0.999))``."""
        return image_to_uint8(self._pixels)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise ValueError(
                f"Pixel ({x}, {y}) is outside a {self._width}x{self._height} canvas"
            )

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
