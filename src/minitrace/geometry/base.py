"""Abstract intersectable object.

Every primitive the tracer can render derives from Object and answers a
single query, intersect(ray). The tracer only talks to this interface, so
adding a primitive never requires touching the shading code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.minitrace.core.ray import Hit, Ray
from src.minitrace.core.vector import Vector3


class Object(ABC):
    """Base class for primitives placed in a scene.

    Objects are not modified after construction; the attributes are exposed
    as read-only properties.

    Attributes:
        position: Reference point of the primitive (the center for spheres).
        surface_color: Albedo multiplied with light reflected off the surface.
        emission_color: Light emitted by the surface. Zero for objects that
            are not light sources.
    """

    def __init__(
        self,
        position: Vector3[float],
        surface_color: Vector3[float],
        emission_color: Vector3[float] | None = None,
    ) -> None:
        self._position = position
        self._surface_color = surface_color
        self._emission_color = (
            emission_color if emission_color is not None else Vector3.splat(0.0)
        )

    @property
    def position(self) -> Vector3[float]:
        return self._position

    @property
    def surface_color(self) -> Vector3[float]:
        return self._surface_color

    @property
    def emission_color(self) -> Vector3[float]:
        return self._emission_color

    @abstractmethod
    def intersect(self, ray: Ray) -> Hit | None:
        """Intersect a ray with this object.

        Args:
            ray: The ray to test.

        Returns:
            A Hit referencing this object, or None if the ray misses.
        """
