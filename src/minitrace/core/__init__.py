"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Vector3 value type and free vector functions
    ray: Ray and Hit records, ray evaluation and reflection
    tracer: Nearest-hit resolution and the recursive shading algorithm
    canvas: Pixel grid sampling and the Taichi pixel buffer

The tracer is a pure function of (ray, scene, depth). It reads the scene
without modifying it, so every pixel can be traced independently.
"""

from .ray import Hit, Ray, ray_at, reflect
from .tracer import (
    AMBIENT_BIAS,
    BACKGROUND_COLOR,
    DEFAULT_MAX_DEPTH,
    create_renderer,
    nearest_hit,
    trace,
)
from .vector import (
    Vector3,
    distance,
    dot,
    element_epsilon,
    length,
    normalize,
    sqr_distance,
    sqr_length,
    to_string,
)

# Note: canvas is NOT imported here because it declares Taichi fields,
# which must not be created before ti.init(). Import it directly:
#   from src.minitrace.core.canvas import Canvas

__all__ = [
    "Vector3",
    "dot",
    "sqr_length",
    "length",
    "sqr_distance",
    "distance",
    "element_epsilon",
    "normalize",
    "to_string",
    "Ray",
    "Hit",
    "ray_at",
    "reflect",
    "nearest_hit",
    "trace",
    "create_renderer",
    "AMBIENT_BIAS",
    "BACKGROUND_COLOR",
    "DEFAULT_MAX_DEPTH",
]
