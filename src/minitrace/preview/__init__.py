"""Preview module for image output.

Components:
    export: Pillow-based PPM/PNG export of rendered canvases

Example:
    >>> from src.minitrace.core.canvas import Canvas
    >>> from src.minitrace.preview import save_canvas
    >>>
    >>> canvas = Canvas(320, 180)
    >>> canvas.draw(render)
    >>> save_canvas("spheres.ppm")
"""

from src.minitrace.preview.export import (
    image_to_uint8,
    save_canvas,
    save_image_from_array,
)

__all__ = [
    "image_to_uint8",
    "save_canvas",
    "save_image_from_array",
]
