"""Preview module for render output.

Components:
    canvas: Float RGB pixel buffer
    export: PNG (Pillow) and plain PPM export

Example:
    >>> from whitted.preview import save_png
    >>> canvas = camera.render(world)
    >>> save_png(canvas, "output.png")
"""

from .canvas import Canvas
from .export import canvas_to_ppm, compute_rmse, image_to_uint8, save_png, save_ppm

__all__ = [
    "Canvas",
    "image_to_uint8",
    "save_png",
    "canvas_to_ppm",
    "save_ppm",
    "compute_rmse",
]
