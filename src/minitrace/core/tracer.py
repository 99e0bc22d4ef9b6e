"""Recursive mirror-reflection tracer.

This module implements the shading algorithm: for a ray it finds the
nearest object in the scene, recursively traces the mirror reflection off
that object up to a depth budget, and combines the result with the
object's surface and emission colors.

Shading of a hit is

    reflection * surface_color + AMBIENT_BIAS + emission_color

where reflection is the color traced along the mirrored ray. Once the depth
budget is exhausted the first two terms are dropped and only the emission
remains. Rays that hit nothing return BACKGROUND_COLOR.

Degenerate geometry (zero-length directions, zero radii) is not validated;
it propagates as inf/nan components in the returned color.

Example:
    >>> from src.minitrace.core.ray import Ray
    >>> from src.minitrace.core.tracer import trace
    >>> from src.minitrace.core.vector import Vector3
    >>> from src.minitrace.geometry.sphere import Sphere
    >>> from src.minitrace.scene.scene import Scene
    >>> scene = Scene([Sphere(Vector3(0.0, 0.0, -20.0), 4.0, Vector3(0.0, 0.0, 0.0))])
    >>> ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
    >>> trace(ray, scene, 1)
    Vector3(0.3, 0.3, 0.3)
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TYPE_CHECKING

from src.minitrace.core.ray import Hit, Ray, reflect
from src.minitrace.core.vector import Vector3, distance

if TYPE_CHECKING:
    from src.minitrace.camera.pinhole import RayGenerator
    from src.minitrace.scene.scene import Scene

# =============================================================================
# Shading Constants
# =============================================================================

# Maximum number of reflection bounces used by the renderer by default
DEFAULT_MAX_DEPTH = 5

# Color returned for rays that escape the scene (no sky, no ambient term)
BACKGROUND_COLOR = Vector3(0.0, 0.0, 0.0)

# Flat term added to every reflected surface color for visual effect
AMBIENT_BIAS = Vector3(0.3, 0.3, 0.3)


def nearest_hit(ray: Ray, scene: Scene) -> Hit | None:
    """Find the intersection closest to the ray origin.

    Every object is tested. The distance of each hit is measured from the
    ray origin to the hit position. Only a strictly smaller distance
    replaces the current best, so on ties the object added to the scene
    first is kept.

    Args:
        ray: The ray to cast.
        scene: The scene to query.

    Returns:
        The nearest Hit, or None if no object was hit.
    """
    min_distance = math.inf
    first_hit = None

    for obj in scene:
        hit = obj.intersect(ray)
        if hit is not None:
            hit_distance = distance(ray.origin, hit.position)
            if hit_distance < min_distance:
                first_hit = hit
                min_distance = hit_distance

    return first_hit


def trace(ray: Ray, scene: Scene, max_depth: int) -> Vector3[float]:
    """Compute the color seen along a ray.

    Args:
        ray: The ray to trace.
        scene: The scene to render. Only read, never modified.
        max_depth: Remaining reflection bounces. At 0 no reflection ray is
            cast and a hit contributes only its emission.

    Returns:
        The unclamped RGB color. Components may exceed 1.0, and degenerate
        inputs yield non-finite components.
    """
    hit = nearest_hit(ray, scene)

    if hit is None:
        return BACKGROUND_COLOR

    # Face the normal against the incoming ray
    normal = hit.normal
    if ray.direction.dot(normal) > 0:
        normal = -normal

    if max_depth > 0:
        reflect_ray = Ray(origin=hit.position, direction=reflect(ray.direction, normal))
        reflection = trace(reflect_ray, scene, max_depth - 1)
        surface_color = reflection * hit.object.surface_color + AMBIENT_BIAS
    else:
        surface_color = Vector3(0.0, 0.0, 0.0)

    return surface_color + hit.object.emission_color


def create_renderer(
    scene: Scene,
    camera: RayGenerator,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Callable[[float, float], Vector3[float]]:
    """Bind a scene and camera into a per-pixel render function.

    Args:
        scene: The scene to render.
        camera: Produces the primary ray for normalized coordinates.
        max_depth: Reflection bounces per primary ray.

    Returns:
        A function mapping normalized device coordinates (x, y) to a color.

    Example:
        >>> from src.minitrace.camera.pinhole import PinholeCamera
        >>> from src.minitrace.scene.scene import Scene
        >>> render = create_renderer(Scene(), PinholeCamera(), max_depth=5)
        >>> render(0.0, 0.0)
        Vector3(0.0, 0.0, 0.0)
    """

    def render(x: float, y: float) -> Vector3[float]:
        return trace(camera.primary_ray(x, y), scene, max_depth)

    return render
