"""Geometry module for intersectable primitives.

Components:
    base: Object, the abstract interface every primitive implements
    sphere: Sphere primitive with geometric ray-sphere intersection

Ray-object intersection follows the pattern:
    hit = obj.intersect(ray)  # Hit or None
"""

from .base import Object
from .sphere import Sphere

__all__ = [
    "Object",
    "Sphere",
]
