"""Image export utilities for rendered canvases.

This module saves 8-bit images through Pillow. The output format follows
the file suffix:
    - .ppm: binary PPM (P6) with a "P6\\n<width> <height>\\n255\\n" header
    - .png: 8-bit RGB PNG
    - any other suffix Pillow can write

Example:
    >>> from src.minitrace.core.canvas import Canvas
    >>> from src.minitrace.preview.export import save_image_from_array
    >>>
    >>> canvas = Canvas(320, 180)
    >>> canvas.draw(render)
    >>> save_image_from_array(canvas.get_image_uint8(), "spheres.ppm")
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to uint8.

    Each channel is clamped to [0, 1], scaled by 255 and truncated, so 1.0
    maps to 255 and 0.999 to 254. nan and -inf map to 0, +inf to 255.

    Args:
        image: Linear image array of shape (H, W, 3).

    Returns:
        8-bit image array of shape (H, W, 3) with dtype uint8.
    """
    image = np.nan_to_num(image.astype(np.float32), nan=0.0, posinf=1.0, neginf=0.0)
    return (np.clip(image, 0.0, 1.0) * 255).astype(np.uint8)


def save_image_from_array(image: npt.NDArray[np.uint8], filepath: str) -> None:
    """Save an 8-bit RGB array to an image file.

    Args:
        image: Image array of shape (H, W, 3) with dtype uint8, first row at
            the top.
        filepath: Output file path. The suffix selects the format.

    Raises:
        ValueError: If the array is not an (H, W, 3) uint8 image.
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 image, got dtype {image.dtype}")

    pil_image = PILImage.fromarray(np.ascontiguousarray(image))
    pil_image.save(filepath)


def save_canvas(filepath: str) -> None:
    """Quantize the active canvas and save it to a file.

    Args:
        filepath: Output file path. The suffix selects the format.

    Raises:
        RuntimeError: If the canvas has not been set up.
    """
    # Lazy import: the canvas module declares Taichi fields
    from src.minitrace.core.canvas import get_image_uint8

    save_image_from_array(get_image_uint8(), filepath)
