"""Anti-aliasing estimators.

A pixel is anti-aliased by averaging the colors of several rays through
random points inside it. Two strategies are available:

- ``STOCHASTIC``: exactly ``level`` jittered samples, averaged.
- ``MULTISAMPLING``: ``level`` jittered warm-up samples, then one more sample
  at a time until the variance of the mean color drops to
  ``tolerance ** 2``.

The configuration is a single immutable value; method, level and tolerance
are always set together, so there is no ordering between them to get wrong.

Example:
    >>> from whitted.camera.antialias import AAMethod, AntiAliasing
    >>> aa = AntiAliasing(AAMethod.MULTISAMPLING, level=4, tolerance=0.05)
    >>> aa.enabled
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from whitted import config
from whitted.core.color import Color

if TYPE_CHECKING:
    from whitted.camera.camera import Camera
    from whitted.scene.world import World


class AAMethod(Enum):
    """Pixel sampling strategy."""

    STOCHASTIC = "stochastic"
    MULTISAMPLING = "multisampling"


@dataclass(frozen=True)
class AntiAliasing:
    """Anti-aliasing configuration.

    Attributes:
        method: Sampling strategy.
        level: Samples per pixel (stochastic) or warm-up samples
            (multisampling). 0 disables anti-aliasing; the renderer then
            traces one ray through each pixel center.
        tolerance: Target standard error of the mean color for
            multisampling. Ignored by the stochastic strategy.
        max_samples: Upper bound on the number of multisampling samples per
            pixel. None lets the adaptive loop run until it converges.
    """

    method: AAMethod = AAMethod.STOCHASTIC
    level: int = 0
    tolerance: float = 1.0
    max_samples: int | None = config.AA_MAX_SAMPLES

    def __post_init__(self) -> None:
        if not isinstance(self.method, AAMethod):
            raise ValueError(f"Unknown anti-aliasing method: {self.method!r}")
        if self.level < 0:
            raise ValueError(f"Anti-aliasing level must be >= 0, got {self.level}")
        if not math.isfinite(self.tolerance) or self.tolerance <= 0.0:
            raise ValueError(f"Anti-aliasing tolerance must be > 0, got {self.tolerance}")
        if self.max_samples is not None and self.max_samples < self.level:
            raise ValueError(
                f"max_samples ({self.max_samples}) must be at least the level ({self.level})"
            )

    @property
    def enabled(self) -> bool:
        """True if pixels are supersampled."""
        return self.level > 0

    def sample(
        self,
        px: int,
        py: int,
        world: World,
        depth: int,
        camera: Camera,
        rng: np.random.Generator,
    ) -> Color | None:
        """Estimate the color of pixel ``(px, py)`` with the configured strategy.

        Returns:
            The averaged color, or None if no sample produced a ray.
        """
        if self.method is AAMethod.MULTISAMPLING:
            return multisampling(
                px, py, world, depth, camera, rng, self.level, self.tolerance, self.max_samples
            )
        return stochastic(px, py, world, depth, camera, rng, self.level)


def stochastic(
    px: int,
    py: int,
    world: World,
    depth: int,
    camera: Camera,
    rng: np.random.Generator,
    level: int,
) -> Color | None:
    """Average ``level`` samples at uniform random offsets inside the pixel.

    A sample whose ray is None contributes black but still counts toward the
    average. If no sample produced a ray at all the pixel is skipped.
    """
    total = Color.black()
    traced = 0
    for _ in range(level):
        x_offset, y_offset = rng.random(2)
        ray = camera.ray_for_pixel(px, py, x_offset, y_offset)
        if ray is not None:
            total = total + world.color_at(ray, depth)
            traced += 1
    if traced == 0:
        return None
    return total / level


def multisampling(
    px: int,
    py: int,
    world: World,
    depth: int,
    camera: Camera,
    rng: np.random.Generator,
    level: int,
    tolerance: float,
    max_samples: int | None = None,
) -> Color | None:
    """Adaptive sampling driven by the variance of the mean color.

    Every warm-up draw counts toward ``n``, even when its ray is None. In the
    adaptive phase only draws that produce a ray count. The loop stops once

        sum over channels of (sumsq / n - mean ** 2), divided by n

    is at most ``tolerance ** 2``, or when ``max_samples`` draws have been
    counted.
    """
    tolerance_sq = tolerance * tolerance
    color_sum = np.zeros(3)
    squared_sum = np.zeros(3)
    n = 0
    traced = 0

    for _ in range(level):
        x_offset, y_offset = rng.random(2)
        ray = camera.ray_for_pixel(px, py, x_offset, y_offset)
        if ray is not None:
            color = world.color_at(ray, depth).to_array()
            color_sum += color
            squared_sum += color * color
            traced += 1
        n += 1

    if traced == 0:
        # The transform that produced no rays will not produce any later.
        return None

    while _mean_variance(n, color_sum, squared_sum) > tolerance_sq:
        if max_samples is not None and n >= max_samples:
            break
        x_offset, y_offset = rng.random(2)
        ray = camera.ray_for_pixel(px, py, x_offset, y_offset)
        if ray is None:
            continue
        color = world.color_at(ray, depth).to_array()
        color_sum += color
        squared_sum += color * color
        n += 1

    return Color.from_array(color_sum / n)


def _mean_variance(n: int, color_sum: np.ndarray, squared_sum: np.ndarray) -> float:
    mean = color_sum / n
    variance = squared_sum / n - mean * mean
    return float(variance.sum()) / n
