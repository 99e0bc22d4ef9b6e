"""Scene module for object storage and demo scenes.

Components:
    scene: Ordered container of objects queried by the tracer
    spheres: Factory for the five-sphere demo scene
"""

from .scene import Scene
from .spheres import SpheresSceneParams, create_spheres_scene

__all__ = [
    "Scene",
    "SpheresSceneParams",
    "create_spheres_scene",
]
