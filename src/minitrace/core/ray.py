"""Ray and hit record data structures.

This module provides the Ray and Hit dataclasses exchanged between the
camera, the geometric primitives and the tracer, plus the two small
operations defined directly on rays.

Example:
    >>> from src.minitrace.core.ray import Ray, ray_at
    >>> from src.minitrace.core.vector import Vector3
    >>> ray = Ray(origin=Vector3(0.0, 0.0, 0.0), direction=Vector3(0.0, 0.0, -1.0))
    >>> ray_at(ray, 5.0)
    Vector3(0.0, 0.0, -5.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.minitrace.core.vector import Vector3

if TYPE_CHECKING:
    from src.minitrace.geometry.base import Object


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Cameras hand out unit-length
            directions; intersection distances are measured in multiples of
            this vector's length, so it is not renormalized here.
    """

    origin: Vector3[float]
    direction: Vector3[float]


@dataclass
class Hit:
    """Record of a ray-object intersection.

    Attributes:
        position: The point where the ray met the surface.
        normal: The unit surface normal at position, pointing away from the
            object's center.
        object: The intersected object. This is a reference into the scene
            that owns it and must not outlive that scene.
    """

    position: Vector3[float]
    normal: Vector3[float]
    object: Object


def ray_at(ray: Ray, t: float) -> Vector3[float]:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + ray.direction * t.
    """
    return ray.origin + ray.direction * t


def reflect(direction: Vector3[float], normal: Vector3[float]) -> Vector3[float]:
    """Mirror a direction about a surface normal.

    Args:
        direction: The incoming direction (pointing toward the surface).
        normal: The surface normal (should be unit length).

    Returns:
        direction - normal * 2 * dot(direction, normal).
    """
    return direction - normal * 2 * direction.dot(normal)
