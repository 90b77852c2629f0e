"""Image export utilities for rendered canvases.

Supported formats:
    - PNG (8-bit RGB via Pillow)
    - PPM (plain-text P3)

Both formats share the same quantization: each channel is clamped to
[0, 0.999] and scaled by 256, so 1.0 and anything brighter map to 255 and
0.5 maps to 128.

Example:
    >>> from whitted.preview.canvas import Canvas
    >>> from whitted.preview.export import save_png
    >>>
    >>> canvas = camera.render(world)
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from whitted.preview.canvas import Canvas

# Upper clamp bound before scaling; keeps 256 * c below 256.
_CLAMP_MAX = 0.999

# Plain PPM readers may reject lines longer than this.
PPM_LINE_LIMIT = 70


def image_to_uint8(image: npt.NDArray[np.floating[npt.NBitBase]]) -> npt.NDArray[np.uint8]:
    """Quantize a linear float image to 8 bits per channel.

    Args:
        image: Array of shape (H, W, 3). Values outside [0, 1] are clamped.

    Returns:
        Array of the same shape with dtype uint8.
    """
    clamped = np.clip(np.nan_to_num(image, nan=0.0), 0.0, _CLAMP_MAX)
    return (clamped * 256.0).astype(np.uint8)


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Save a canvas as an 8-bit RGB PNG.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).
    """
    pil_image = PILImage.fromarray(canvas.to_uint8())
    pil_image.save(filepath)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as a plain-text (P3) PPM image.

    Pixel rows are written one per block of lines; no line exceeds
    ``PPM_LINE_LIMIT`` characters. The text ends with a newline.
    """
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]
    quantized = canvas.to_uint8()
    for row in quantized:
        line = ""
        for value in row.reshape(-1):
            token = str(int(value))
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_LINE_LIMIT:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)
    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Save a canvas as a plain-text PPM file."""
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")


def compute_rmse(first: Canvas, second: Canvas, quantized: bool = False) -> float:
    """Root mean squared difference between two canvases of the same size.

    With ``quantized`` set, both canvases are first reduced to the 8-bit
    values an export would write, and the error is measured in those units.

    Raises:
        ValueError: If the canvases differ in width or height.
    """
    if (first.width, first.height) != (second.width, second.height):
        raise ValueError(
            f"Cannot compare a {first.width}x{first.height} canvas "
            f"with a {second.width}x{second.height} one"
        )

    if quantized:
        a = first.to_uint8().astype(np.float64)
        b = second.to_uint8().astype(np.float64)
    else:
        a, b = first.pixels, second.pixels
    return float(np.sqrt(np.mean((a - b) ** 2)))
