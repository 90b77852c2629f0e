"""Unit tests for materials and the Phong lighting model.

Tests cover:
- Baseline material and parameter validation
- Phong terms for the classic eye/light configurations
- Shadowed points receive only ambient light
- Patterns overriding the flat color, with fallback on singular transforms
- Shininess truncation
"""

import math

import pytest

from whitted.core.color import Color
from whitted.core.matrix import Matrix
from whitted.core.tuples import Point, Vec3
from whitted.geometry.sphere import Sphere
from whitted.materials.material import Material
from whitted.materials.patterns import Stripes
from whitted.materials.phong import lighting, surface_color
from whitted.scene.light import PointLight


class TestMaterial:
    """Tests for material defaults and validation."""

    def test_baseline(self):
        """Test the baseline material values."""
        m = Material()
        assert m.color == Color.white()
        assert m.pattern is None
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.reflective == 0.0
        assert m.transparency == 0.0
        assert m.refractive_index == 1.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"ambient": -0.1},
            {"diffuse": math.nan},
            {"specular": math.inf},
            {"shininess": -1.0},
            {"reflective": 1.5},
            {"reflective": -0.1},
            {"transparency": 2.0},
            {"refractive_index": 0.5},
            {"refractive_index": math.nan},
            {"color": Color(math.nan, 0.0, 0.0)},
        ],
    )
    def test_invalid_parameters(self, kwargs):
        """Test that out-of-range or non-finite parameters are rejected."""
        with pytest.raises(ValueError):
            Material(**kwargs)

    def test_builders(self):
        """Test that with_* builders copy and validate."""
        m = Material()
        assert m.with_reflective(0.5).reflective == 0.5
        assert m.reflective == 0.0
        with pytest.raises(ValueError):
            m.with_transparency(1.5)


class TestLighting:
    """Tests for the Phong lighting function."""

    @pytest.fixture
    def sphere(self):
        return Sphere()

    @pytest.fixture
    def position(self):
        return Point(0.0, 0.0, 0.0)

    def test_eye_between_light_and_surface(self, sphere, position):
        """Test full ambient, diffuse and specular contribution."""
        eyev = Vec3(0.0, 0.0, -1.0)
        normalv = Vec3(0.0, 0.0, -1.0)
        light = PointLight(Point(0.0, 0.0, -10.0), Color.white())
        result = lighting(sphere, light, position, eyev, normalv, False)
        assert result.isclose(Color(1.9, 1.9, 1.9))

    def test_eye_offset_45_degrees(self, sphere, position, sqrt2_2):
        """Test that moving the eye off the reflection removes specular."""
        eyev = Vec3(0.0, sqrt2_2, -sqrt2_2)
        normalv = Vec3(0.0, 0.0, -1.0)
        light = PointLight(Point(0.0, 0.0, -10.0), Color.white())
        result = lighting(sphere, light, position, eyev, normalv, False)
        assert result.isclose(Color(1.0, 1.0, 1.0))

    def test_light_offset_45_degrees(self, sphere, position):
        """Test reduced diffuse with the light at 45 degrees."""
        eyev = Vec3(0.0, 0.0, -1.0)
        normalv = Vec3(0.0, 0.0, -1.0)
        light = PointLight(Point(0.0, 10.0, -10.0), Color.white())
        result = lighting(sphere, light, position, eyev, normalv, False)
        expected = 0.1 + 0.9 * math.sqrt(2.0) / 2.0
        assert result.isclose(Color(expected, expected, expected))

    def test_eye_in_reflection_path(self, sphere, position, sqrt2_2):
        """Test full specular with the eye on the reflection vector."""
        eyev = Vec3(0.0, -sqrt2_2, -sqrt2_2)
        normalv = Vec3(0.0, 0.0, -1.0)
        light = PointLight(Point(0.0, 10.0, -10.0), Color.white())
        result = lighting(sphere, light, position, eyev, normalv, False)
        expected = 0.1 + 0.9 * math.sqrt(2.0) / 2.0 + 0.9
        assert result.isclose(Color(expected, expected, expected))

    def test_light_behind_surface(self, sphere, position):
        """Test that a light behind the surface leaves only ambient."""
        eyev = Vec3(0.0, 0.0, -1.0)
        normalv = Vec3(0.0, 0.0, -1.0)
        light = PointLight(Point(0.0, 0.0, 10.0), Color.white())
        result = lighting(sphere, light, position, eyev, normalv, False)
        assert result.isclose(Color(0.1, 0.1, 0.1))

    def test_surface_in_shadow(self, sphere, position):
        """Test that a shadowed point receives only ambient light."""
        eyev = Vec3(0.0, 0.0, -1.0)
        normalv = Vec3(0.0, 0.0, -1.0)
        light = PointLight(Point(0.0, 0.0, -10.0), Color.white())
        result = lighting(sphere, light, position, eyev, normalv, True)
        assert result.isclose(Color(0.1, 0.1, 0.1))

    def test_light_intensity_filters_color(self, position):
        """Test that the light color multiplies the surface color."""
        shape = Sphere(material=Material(color=Color(1.0, 0.5, 0.0), ambient=1.0, diffuse=0.0, specular=0.0))
        light = PointLight(Point(0.0, 0.0, -10.0), Color(0.5, 1.0, 1.0))
        result = lighting(
            shape, light, position, Vec3(0.0, 0.0, -1.0), Vec3(0.0, 0.0, -1.0), False
        )
        assert result.isclose(Color(0.5, 0.5, 0.0))

    def test_shininess_is_truncated(self, position):
        """Test that a fractional shininess acts as its integer part."""
        eyev = Vec3(0.0, 0.0, -1.0)
        normalv = Vec3(0.0, 0.0, -1.0)
        light = PointLight(Point(0.0, 10.0, -10.0), Color.white())

        def shade(shininess):
            shape = Sphere(material=Material(shininess=shininess))
            return lighting(shape, light, position, eyev, normalv, False)

        assert shade(10.9) == shade(10.0)
        assert not shade(10.9).isclose(shade(11.0))


class TestPatternedLighting:
    """Tests for patterns feeding the lighting model."""

    def test_pattern_overrides_color(self):
        """Test that stripes decide the surface color under flat ambient light."""
        material = Material(
            pattern=Stripes((Color.white(), Color.black())),
            ambient=1.0,
            diffuse=0.0,
            specular=0.0,
        )
        shape = Sphere(material=material)
        eyev = Vec3(0.0, 0.0, -1.0)
        normalv = Vec3(0.0, 0.0, -1.0)
        light = PointLight(Point(0.0, 0.0, -10.0), Color.white())

        c1 = lighting(shape, light, Point(0.9, 0.0, 0.0), eyev, normalv, False)
        c2 = lighting(shape, light, Point(1.1, 0.0, 0.0), eyev, normalv, False)
        assert c1 == Color.white()
        assert c2 == Color.black()

    def test_singular_pattern_falls_back_to_color(self):
        """Test that an unusable pattern leaves the flat color in place."""
        red = Color(1.0, 0.0, 0.0)
        broken = Stripes((Color.white(), Color.black()), Matrix.scaling(0.0, 0.0, 0.0))
        shape = Sphere(material=Material(color=red, pattern=broken))
        assert surface_color(shape, Point(0.0, 0.0, 0.0)) == red
