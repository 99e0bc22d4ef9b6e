"""Unit tests for the pinhole camera.

Tests cover:
- Field-of-view scale factor
- Primary ray origin and direction
- Unit-length directions for arbitrary coordinates
"""

import math

import pytest

from src.minitrace.camera.pinhole import DEFAULT_FOV, PinholeCamera, RayGenerator
from src.minitrace.core.ray import Ray
from src.minitrace.core.vector import Vector3


class TestPinholeCameraConfig:
    """Tests for camera configuration."""

    def test_defaults(self):
        camera = PinholeCamera()
        assert camera.fov == DEFAULT_FOV == 30.0
        assert camera.position == Vector3(0.0, 0.0, 0.0)

    def test_default_positions_are_independent(self):
        a = PinholeCamera()
        b = PinholeCamera()
        assert a.position is not b.position

    @pytest.mark.parametrize("fov", [30.0, 60.0, 90.0, 120.0])
    def test_factor_is_tan_half_fov(self, fov):
        camera = PinholeCamera(fov=fov)
        assert camera.factor == pytest.approx(math.tan(math.radians(fov) / 2))

    def test_satisfies_ray_generator_protocol(self):
        camera: RayGenerator = PinholeCamera()
        assert isinstance(camera.primary_ray(0.0, 0.0), Ray)


class TestPrimaryRay:
    """Tests for primary ray generation."""

    def test_center_ray_looks_down_negative_z(self):
        ray = PinholeCamera(fov=30.0).primary_ray(0.0, 0.0)
        assert ray.origin == Vector3(0.0, 0.0, 0.0)
        assert ray.direction == Vector3(0.0, 0.0, -1.0)

    def test_origin_is_camera_position(self):
        position = Vector3(1.0, 2.0, 3.0)
        ray = PinholeCamera(position=position).primary_ray(0.5, -0.5)
        assert ray.origin == position

    @pytest.mark.parametrize("x, y", [(1.0, 1.0), (-1.7, 0.3), (0.2, -1.0), (3.0, 0.0)])
    def test_direction_is_unit_length(self, x, y):
        ray = PinholeCamera(fov=45.0).primary_ray(x, y)
        assert ray.direction.length() == pytest.approx(1.0, abs=1e-12)

    def test_corner_ray_at_90_degrees(self):
        """Test that with fov 90 the edge ray leaves at 45 degrees."""
        ray = PinholeCamera(fov=90.0).primary_ray(0.0, 1.0)
        d = ray.direction
        assert d.x == 0.0
        assert d.y == pytest.approx(math.sqrt(0.5))
        assert d.z == pytest.approx(-math.sqrt(0.5))

    def test_direction_signs_follow_coordinates(self):
        ray = PinholeCamera().primary_ray(0.5, -0.25)
        assert ray.direction.x > 0.0
        assert ray.direction.y < 0.0
        assert ray.direction.z < 0.0
