r"""Pinhole camera model for primary ray generation.

The camera sits at a fixed position looking down the -Z axis. Normalized
device coordinates (x, y), already corrected for the aspect ratio, are
scaled by tan(fov / 2) and turned into a unit direction:

              _
              /|
             / |
            /  |
           / a
    camera -----+  image plane at z = -1
           \ a
            \  |
             \ |
              _\|

    fov = 2a

Example:
    >>> from src.minitrace.camera.pinhole import PinholeCamera
    >>> camera = PinholeCamera(fov=90.0)
    >>> ray = camera.primary_ray(0.0, 0.0)
    >>> ray.direction
    Vector3(0.0, 0.0, -1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol

from src.minitrace.core.ray import Ray
from src.minitrace.core.vector import Vector3

# Default field of view in degrees
DEFAULT_FOV = 30.0


class RayGenerator(Protocol):
    """Anything that produces a primary ray for normalized coordinates."""

    def primary_ray(self, x: float, y: float) -> Ray: ...


@dataclass
class PinholeCamera:
    """Configuration for a pinhole (perspective) camera.

    Attributes:
        fov: Field of view in degrees, spanning y in [-1, 1].
        position: Camera position in world space.
    """

    fov: float = DEFAULT_FOV
    position: Vector3[float] = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))

    @property
    def factor(self) -> float:
        """Scale applied to normalized coordinates: tan(fov / 2)."""
        return math.tan(math.pi * 0.5 * self.fov / 180)

    def primary_ray(self, x: float, y: float) -> Ray:
        """Generate the ray through normalized device coordinates (x, y).

        Args:
            x: Horizontal coordinate, already multiplied by the aspect ratio.
            y: Vertical coordinate in [-1, 1], positive up.

        Returns:
            A ray from the camera position with a unit-length direction.
        """
        factor = self.factor
        direction = Vector3(x * factor, y * factor, -1.0).normalized()
        return Ray(origin=self.position, direction=direction)
