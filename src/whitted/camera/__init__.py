"""Camera module.

Components:
    camera: Pinhole camera, pixel ray generation and rendering
    antialias: Stochastic and adaptive multisampling anti-aliasing
"""

from .antialias import AAMethod, AntiAliasing
from .camera import Camera

__all__ = [
    "Camera",
    "AAMethod",
    "AntiAliasing",
]
