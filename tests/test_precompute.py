"""Unit tests for hit precomputation.

Tests cover:
- Point, eye vector and normal at a hit
- Inside/outside detection and normal flipping
- The over point used to avoid shadow acne
- The reflection vector
- Refractive indices from the container stack walk
"""

import math

import pytest

from whitted.core.intersection import Intersection, IntersectionList
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vec3
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.scene.precompute import prepare_computations, refractive_indices


class TestPrepareComputations:
    """Tests for prepare_computations."""

    def test_outside_hit(self):
        """Test the precomputed state of a hit from outside."""
        ray = Ray(Point(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0))
        shape = Sphere()
        hit = Intersection(4.0, shape)
        comps = prepare_computations(hit, ray, IntersectionList([hit]))

        assert comps.t == 4.0
        assert comps.shape == shape
        assert comps.point == Point(0.0, 0.0, -1.0)
        assert comps.eyev == Vec3(0.0, 0.0, -1.0)
        assert comps.normalv == Vec3(0.0, 0.0, -1.0)
        assert comps.inside is False

    def test_inside_hit_flips_normal(self):
        """Test that a hit from inside reports inside and flips the normal."""
        ray = Ray(Point(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0))
        hit = Intersection(1.0, Sphere())
        comps = prepare_computations(hit, ray, IntersectionList([hit]))

        assert comps.point == Point(0.0, 0.0, 1.0)
        assert comps.eyev == Vec3(0.0, 0.0, -1.0)
        assert comps.inside is True
        assert comps.normalv == Vec3(0.0, 0.0, -1.0)

    def test_over_point_is_above_surface(self):
        """Test that the over point sits just off the surface along the normal."""
        ray = Ray(Point(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0))
        shape = Sphere(transform=Matrix.translation(0.0, 0.0, 1.0))
        hit = Intersection(5.0, shape)
        comps = prepare_computations(hit, ray, IntersectionList([hit]))

        assert comps.over_point.z < -EPSILON / 2
        assert comps.point.z > comps.over_point.z

    def test_reflection_vector(self, sqrt2_2):
        """Test the reflection vector off a plane hit at 45 degrees."""
        shape = Plane()
        ray = Ray(Point(0.0, 1.0, -1.0), Vec3(0.0, -sqrt2_2, sqrt2_2))
        hit = Intersection(math.sqrt(2.0), shape)
        comps = prepare_computations(hit, ray, IntersectionList([hit]))

        assert comps.reflectv.isclose(Vec3(0.0, sqrt2_2, sqrt2_2))

    def test_singular_shape_gives_none(self):
        """Test that a hit on a shape without a normal cannot be prepared."""
        ray = Ray(Point(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0))
        hit = Intersection(4.0, Sphere(transform=Matrix.scaling(0.0, 0.0, 0.0)))
        assert prepare_computations(hit, ray, IntersectionList([hit])) is None


class TestRefractiveIndices:
    """Tests for n1/n2 at each boundary along a ray through nested spheres."""

    @pytest.fixture
    def nested(self, make_glass_sphere):
        a = make_glass_sphere(Matrix.scaling(2.0, 2.0, 2.0), 1.5)
        b = make_glass_sphere(Matrix.translation(0.0, 0.0, -0.25), 2.0)
        c = make_glass_sphere(Matrix.translation(0.0, 0.0, 0.25), 2.5)
        ray = Ray(Point(0.0, 0.0, -4.0), Vec3(0.0, 0.0, 1.0))
        xs = IntersectionList(
            [
                Intersection(2.0, a),
                Intersection(2.75, b),
                Intersection(3.25, c),
                Intersection(4.75, b),
                Intersection(5.25, c),
                Intersection(6.0, a),
            ]
        )
        return ray, xs

    @pytest.mark.parametrize(
        "index, n1, n2",
        [
            (0, 1.0, 1.5),
            (1, 1.5, 2.0),
            (2, 2.0, 2.5),
            (3, 2.5, 2.5),
            (4, 2.5, 1.5),
            (5, 1.5, 1.0),
        ],
    )
    def test_n1_n2_at_each_boundary(self, nested, index, n1, n2):
        """Test the refractive indices on each side of every boundary."""
        ray, xs = nested
        comps = prepare_computations(xs[index], ray, xs)
        assert comps.n1 == n1
        assert comps.n2 == n2

    def test_single_sphere(self, make_glass_sphere):
        """Test entering and leaving a lone sphere."""
        s = make_glass_sphere()
        xs = IntersectionList([Intersection(4.0, s), Intersection(6.0, s)])
        assert refractive_indices(xs[0], xs) == (1.0, 1.5)
        assert refractive_indices(xs[1], xs) == (1.5, 1.0)

    def test_plane_toggles_containment(self):
        """Test that a plane's single intersection enters its medium."""
        p = Plane(material=Plane().material.with_refractive_index(1.33))
        xs = IntersectionList([Intersection(1.0, p)])
        assert refractive_indices(xs[0], xs) == (1.0, 1.33)
