"""Sphere primitive with geometric ray-sphere intersection.

The intersection is solved geometrically rather than through the quadratic
formula. With l the vector from the ray origin to the sphere center:

                    * center
                  / |
             l  /   | l_sin
              /     |
      origin *------+--------> ray
              l_cos

l_cos is the projection of l onto the ray and l_sin the distance from the
center to the ray line. The ray hits when l_sin <= radius, and the near
intersection lies at l_cos - sqrt(radius^2 - l_sin^2) along the ray.

Spheres whose center is not strictly in front of the ray origin are
reported as a miss, including the case of an origin inside the sphere
looking away from the center.

Example:
    >>> from src.minitrace.core.ray import Ray
    >>> from src.minitrace.core.vector import Vector3
    >>> from src.minitrace.geometry.sphere import Sphere
    >>> sphere = Sphere(Vector3(0.0, 0.0, -20.0), 4.0, Vector3(1.0, 0.32, 0.36))
    >>> hit = sphere.intersect(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)))
    >>> hit.position
    Vector3(0.0, 0.0, -16.0)
"""

from __future__ import annotations

import math

from src.minitrace.core.ray import Hit, Ray, ray_at
from src.minitrace.core.vector import Vector3
from src.minitrace.geometry.base import Object


class Sphere(Object):
    """A sphere defined by center, radius and colors.

    Attributes:
        radius: The sphere radius. Expected to be positive; degenerate radii
            are not rejected and produce degenerate hits.
    """

    def __init__(
        self,
        position: Vector3[float],
        radius: float,
        surface_color: Vector3[float],
        emission_color: Vector3[float] | None = None,
    ) -> None:
        super().__init__(position, surface_color, emission_color)
        self._radius = radius

    @property
    def radius(self) -> float:
        return self._radius

    def intersect(self, ray: Ray) -> Hit | None:
        """Find the near intersection of a ray with this sphere.

        Args:
            ray: The ray to test. Its direction should be unit length for the
                hit distance to be in world units.

        Returns:
            A Hit at the near intersection with the outward unit normal, or
            None when the center lies behind the origin or the ray passes
            outside the sphere. A tangent ray counts as a hit.
        """
        l = self.position - ray.origin
        l_cos = l.dot(ray.direction)

        if l_cos <= 0:
            return None

        l_sin_sqr = l.sqr_length() - l_cos * l_cos
        radius_sqr = self.radius * self.radius

        if l_sin_sqr > radius_sqr:
            return None

        distance = l_cos - math.sqrt(radius_sqr - l_sin_sqr)

        position = ray_at(ray, distance)
        normal = (position - self.position).normalized()

        return Hit(position=position, normal=normal, object=self)

    def __repr__(self) -> str:
        return (
            f"Sphere(position={self.position!r}, radius={self.radius}, "
            f"surface_color={self.surface_color!r}, "
            f"emission_color={self.emission_color!r})"
        )
