"""A minimal recursive ray tracer.

This package renders scenes of spheres by casting one primary ray per pixel
through a pinhole camera and recursively tracing mirror reflections up to a
fixed depth, with Taichi-backed pixel buffers and Pillow image export.

Subpackages:
    core: Vector algebra, rays and hits, the recursive tracer and the canvas
    geometry: Intersectable object interface and the sphere primitive
    scene: Scene container and the demo scene factory
    camera: Pinhole camera producing primary rays
    preview: Image export utilities
"""

__version__ = "0.1.0"
