"""Unit tests for points and vectors.

Tests cover:
- Homogeneous coordinate of each kind
- Kind-preserving arithmetic (point/vector addition and subtraction)
- Scaling, negation, magnitude and normalization
- Dot, cross and reflection
- Equality and approximate comparison
"""

import math

import pytest

from whitted.core.tuples import EPSILON, Point, Vec3


class TestTupleKinds:
    """Tests for the homogeneous w component and component access."""

    def test_point_has_w_one(self):
        """Test that a point carries w = 1."""
        p = Point(4.3, -4.2, 3.1)
        assert p.x == 4.3
        assert p.y == -4.2
        assert p.z == 3.1
        assert p.w == 1.0

    def test_vector_has_w_zero(self):
        """Test that a vector carries w = 0."""
        v = Vec3(4.3, -4.2, 3.1)
        assert v.w == 0.0

    def test_indexing_and_iteration(self):
        """Test that tuples index and unpack as three components."""
        v = Vec3(1.0, 2.0, 3.0)
        assert v[0] == 1.0
        assert v[2] == 3.0
        assert tuple(v) == (1.0, 2.0, 3.0)
        with pytest.raises(IndexError):
            v[3]

    def test_point_and_vector_are_not_equal(self):
        """Test that equal components of different kinds compare unequal."""
        assert Point(1.0, 2.0, 3.0) != Vec3(1.0, 2.0, 3.0)
        assert not Point(1.0, 2.0, 3.0).isclose(Vec3(1.0, 2.0, 3.0))

    def test_isclose_within_epsilon(self):
        """Test approximate equality within EPSILON."""
        a = Point(1.0, 2.0, 3.0)
        b = Point(1.0 + EPSILON / 2, 2.0, 3.0)
        assert a.isclose(b)
        assert a != b
        assert not a.isclose(Point(1.0 + EPSILON * 2, 2.0, 3.0))

    def test_signed_zero_hashes_like_zero(self):
        """Test that tuples equal up to the sign of zero share a hash."""
        negated = -Vec3(0.0, 1.0, 0.0)
        assert negated == Vec3(0.0, -1.0, 0.0)
        assert hash(negated) == hash(Vec3(0.0, -1.0, 0.0))
        assert Point(-0.0, 0.0, 0.0) in {Point(0.0, 0.0, 0.0)}

    def test_kinds_hash_apart(self):
        """Test that a point and a vector can both be set members."""
        assert len({Point(1.0, 2.0, 3.0), Vec3(1.0, 2.0, 3.0)}) == 2


class TestArithmetic:
    """Tests for kind-preserving arithmetic."""

    def test_point_plus_vector_is_point(self):
        """Test Point + Vec3 -> Point."""
        result = Point(3.0, -2.0, 5.0) + Vec3(-2.0, 3.0, 1.0)
        assert isinstance(result, Point)
        assert result == Point(1.0, 1.0, 6.0)

    def test_vector_plus_point_is_point(self):
        """Test Vec3 + Point -> Point."""
        result = Vec3(-2.0, 3.0, 1.0) + Point(3.0, -2.0, 5.0)
        assert result == Point(1.0, 1.0, 6.0)

    def test_point_minus_point_is_vector(self):
        """Test Point - Point -> Vec3."""
        result = Point(3.0, 2.0, 1.0) - Point(5.0, 6.0, 7.0)
        assert result == Vec3(-2.0, -4.0, -6.0)

    def test_point_minus_vector_is_point(self):
        """Test Point - Vec3 -> Point."""
        result = Point(3.0, 2.0, 1.0) - Vec3(5.0, 6.0, 7.0)
        assert result == Point(-2.0, -4.0, -6.0)

    def test_vector_minus_vector(self):
        """Test Vec3 - Vec3 -> Vec3."""
        assert Vec3(3.0, 2.0, 1.0) - Vec3(5.0, 6.0, 7.0) == Vec3(-2.0, -4.0, -6.0)

    def test_point_plus_point_is_rejected(self):
        """Test that adding two points is a type error."""
        with pytest.raises(TypeError):
            Point(1.0, 2.0, 3.0) + Point(1.0, 2.0, 3.0)

    def test_vector_minus_point_is_rejected(self):
        """Test that subtracting a point from a vector is a type error."""
        with pytest.raises(TypeError):
            Vec3(1.0, 2.0, 3.0) - Point(1.0, 2.0, 3.0)

    def test_negation(self):
        """Test vector negation."""
        assert -Vec3(1.0, -2.0, 3.0) == Vec3(-1.0, 2.0, -3.0)

    def test_scalar_multiply_and_divide(self):
        """Test scaling by a scalar on either side and dividing."""
        v = Vec3(1.0, -2.0, 3.0)
        assert v * 3.5 == Vec3(3.5, -7.0, 10.5)
        assert 0.5 * v == Vec3(0.5, -1.0, 1.5)
        assert v / 2.0 == Vec3(0.5, -1.0, 1.5)
        assert Point(1.0, -2.0, 3.0) * 2.0 == Point(2.0, -4.0, 6.0)


class TestVectorOperations:
    """Tests for magnitude, normalize, dot, cross and reflect."""

    @pytest.mark.parametrize(
        "vector, expected",
        [
            (Vec3(1.0, 0.0, 0.0), 1.0),
            (Vec3(0.0, 1.0, 0.0), 1.0),
            (Vec3(1.0, 2.0, 3.0), math.sqrt(14.0)),
            (Vec3(-1.0, -2.0, -3.0), math.sqrt(14.0)),
        ],
    )
    def test_magnitude(self, vector, expected):
        """Test vector magnitude."""
        assert vector.magnitude() == pytest.approx(expected)

    def test_normalize(self):
        """Test normalization to unit length."""
        assert Vec3(4.0, 0.0, 0.0).normalize() == Vec3(1.0, 0.0, 0.0)
        n = Vec3(1.0, 2.0, 3.0).normalize()
        assert n.isclose(Vec3(0.26726, 0.53452, 0.80178))
        assert n.magnitude() == pytest.approx(1.0)

    def test_dot(self):
        """Test dot product."""
        assert Vec3(1.0, 2.0, 3.0).dot(Vec3(2.0, 3.0, 4.0)) == 20.0

    def test_cross(self):
        """Test cross product and its anti-symmetry."""
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(2.0, 3.0, 4.0)
        assert a.cross(b) == Vec3(-1.0, 2.0, -1.0)
        assert b.cross(a) == Vec3(1.0, -2.0, 1.0)

    def test_reflect_at_45_degrees(self):
        """Test reflecting a vector approaching at 45 degrees."""
        reflected = Vec3(1.0, -1.0, 0.0).reflect(Vec3(0.0, 1.0, 0.0))
        assert reflected == Vec3(1.0, 1.0, 0.0)

    def test_reflect_off_slanted_surface(self, sqrt2_2):
        """Test reflecting off a surface tilted 45 degrees."""
        reflected = Vec3(0.0, -1.0, 0.0).reflect(Vec3(sqrt2_2, sqrt2_2, 0.0))
        assert reflected.isclose(Vec3(1.0, 0.0, 0.0))
