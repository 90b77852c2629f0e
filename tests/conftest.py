"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: the default
two-sphere world, a glass sphere factory, a seeded random generator, and
cleanup of the package logger between tests.
"""

import logging
import math

import numpy as np
import pytest

from whitted.core.matrix import Matrix
from whitted.core.tuples import Point, Vec3
from whitted.geometry.sphere import Sphere, glass_sphere
from whitted.scene.world import World, default_world


@pytest.fixture
def world() -> World:
    """The default world: two concentric spheres and one white light."""
    return default_world()


@pytest.fixture
def make_glass_sphere():
    """Factory for glass spheres with a given transform and refractive index."""

    def _make(transform: Matrix | None = None, refractive_index: float = 1.5) -> Sphere:
        sphere = glass_sphere()
        material = sphere.material.with_refractive_index(refractive_index)
        return Sphere(transform=transform or Matrix.identity(), material=material)

    return _make


@pytest.fixture
def rng() -> np.random.Generator:
    """A seeded generator so sampling tests are repeatable."""
    return np.random.default_rng(12345)


@pytest.fixture
def front_view() -> Matrix:
    """View transform for an eye at (0, 0, -5) looking at the origin."""
    return Matrix.view_transform(Point(0.0, 0.0, -5.0), Point(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))


@pytest.fixture
def sqrt2_2() -> float:
    return math.sqrt(2.0) / 2.0


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers attached by setup_logging so tests stay isolated."""
    yield
    logger = logging.getLogger("whitted")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
