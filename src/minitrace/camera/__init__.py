"""Camera module for primary ray generation.

Components:
    pinhole: Pinhole camera looking down -Z with a field-of-view scale

Ray generation uses normalized device coordinates:
    x in [-aspect_ratio, aspect_ratio]: left to right across the image
    y in [-1, 1]: bottom to top across the image
"""

from .pinhole import DEFAULT_FOV, PinholeCamera, RayGenerator

__all__ = [
    "DEFAULT_FOV",
    "PinholeCamera",
    "RayGenerator",
]
