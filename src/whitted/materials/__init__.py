"""Materials module for surface appearance.

Components:
    material: Phong material coefficients plus reflectivity and refraction data
    patterns: Procedural color patterns (stripes, gradient, rings, checkers, blended)
    phong: The Phong lighting model
"""

from .material import Material
from .patterns import Blended, Checkers, Gradient, Pattern, Rings, Stripes
from .phong import lighting, surface_color

__all__ = [
    # Material
    "Material",
    # Patterns
    "Pattern",
    "Stripes",
    "Gradient",
    "Rings",
    "Checkers",
    "Blended",
    # Lighting
    "lighting",
    "surface_color",
]
