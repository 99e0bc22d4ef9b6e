"""Canvas: pixel grid sampling and the pixel buffer.

This module owns the render target. The pixel buffer and the grid of
normalized device coordinates live in Taichi fields, preallocated to the
maximum canvas size so the kernels never need recompiling when the canvas
is resized.

Pixel (i, j) is column i counted from the left and row j counted from the
top. It is sampled at the normalized device coordinates

    x = ((i / width) * 2 - 1) * aspect_ratio
    y = 1 - 2 * (j / height)

so x spans [-aspect_ratio, aspect_ratio) and y spans (-1, 1].

The tracer itself is plain recursive Python, so drawing evaluates the
render function on the host for each pixel and uploads the finished
buffer. Only the active region of the fields is copied to and from the host.
Quantization to 8-bit runs as a Taichi kernel.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.minitrace.core.canvas import Canvas
    >>> from src.minitrace.core.vector import Vector3
    >>> canvas = Canvas(64, 32)
    >>> canvas.draw(lambda x, y: Vector3(0.5, 0.5, 0.5))
    >>> canvas.get_image_uint8()[0, 0]
    array([127, 127, 127], dtype=uint8)
"""

from collections.abc import Callable, Generator

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from src.minitrace.core.vector import Vector3

# Type alias for the per-pixel render function
RenderFunction = Callable[[float, float], Vector3[float]]

# Type alias for progress callback
# Callback receives (columns_done, total_columns)
ProgressCallback = Callable[[int, int], None]

# =============================================================================
# Canvas Buffers
# =============================================================================

# Maximum supported canvas dimensions (preallocated to avoid kernel recompilation)
MAX_CANVAS_WIDTH = 4096
MAX_CANVAS_HEIGHT = 2160

# Canvas dimensions (actual active size)
_canvas_width = ti.field(dtype=ti.i32, shape=())
_canvas_height = ti.field(dtype=ti.i32, shape=())

# Linear RGB colors as returned by the tracer, unclamped
_pixels = ti.Vector.field(3, dtype=ti.f32, shape=(MAX_CANVAS_WIDTH, MAX_CANVAS_HEIGHT))

# Normalized device coordinates sampled by each pixel
_ndc = ti.Vector.field(2, dtype=ti.f32, shape=(MAX_CANVAS_WIDTH, MAX_CANVAS_HEIGHT))

# 8-bit quantized colors for encoding
_pixel_bytes = ti.Vector.field(3, dtype=ti.u8, shape=(MAX_CANVAS_WIDTH, MAX_CANVAS_HEIGHT))

# Flag to track if the canvas is initialized
_canvas_initialized = ti.field(dtype=ti.i32, shape=())


@ti.kernel
def _compute_ndc(width: ti.i32, height: ti.i32, aspect_ratio: ti.f32):
    inv_width = 1.0 / width
    inv_height = 1.0 / height
    for i, j in ti.ndrange(width, height):
        x = ((i * inv_width) * 2.0 - 1.0) * aspect_ratio
        y = 1.0 - 2.0 * (j * inv_height)
        _ndc[i, j] = tm.vec2(x, y)


@ti.kernel
def _quantize(width: ti.i32, height: ti.i32):
    for i, j in ti.ndrange(width, height):
        color = tm.clamp(_pixels[i, j], 0.0, 1.0)
        _pixel_bytes[i, j] = ti.cast(color * 255.0, ti.u8)


# Transfers between host arrays and the active (width, height) region of the
# fields, so only the pixels in use cross the host boundary

@ti.kernel
def _load_pixels(colors: ti.types.ndarray(), width: ti.i32, height: ti.i32):
    for i, j in ti.ndrange(width, height):
        _pixels[i, j] = tm.vec3(colors[i, j, 0], colors[i, j, 1], colors[i, j, 2])


@ti.kernel
def _read_pixels(out: ti.types.ndarray(), width: ti.i32, height: ti.i32):
    for i, j in ti.ndrange(width, height):
        for c in ti.static(range(3)):
            out[i, j, c] = _pixels[i, j][c]


@ti.kernel
def _read_pixel_bytes(out: ti.types.ndarray(), width: ti.i32, height: ti.i32):
    for i, j in ti.ndrange(width, height):
        for c in ti.static(range(3)):
            out[i, j, c] = _pixel_bytes[i, j][c]


@ti.kernel
def _read_ndc(out: ti.types.ndarray(), width: ti.i32, height: ti.i32):
    for i, j in ti.ndrange(width, height):
        for c in ti.static(range(2)):
            out[i, j, c] = _ndc[i, j][c]


def setup_canvas(width: int, height: int) -> None:
    """Initialize the canvas buffers.

    Sets the active dimensions, clears the pixel buffer and computes the
    normalized device coordinates of every pixel.

    Args:
        width: Canvas width in pixels (max MAX_CANVAS_WIDTH).
        height: Canvas height in pixels (max MAX_CANVAS_HEIGHT).

    Raises:
        ValueError: If a dimension is not positive or exceeds the maximum.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
    if width > MAX_CANVAS_WIDTH or height > MAX_CANVAS_HEIGHT:
        raise ValueError(
            f"Canvas dimensions ({width}x{height}) exceed maximum supported "
            f"({MAX_CANVAS_WIDTH}x{MAX_CANVAS_HEIGHT})"
        )

    _canvas_width[None] = width
    _canvas_height[None] = height
    _canvas_initialized[None] = 1

    clear_canvas()
    _compute_ndc(width, height, width / height)


def clear_canvas() -> None:
    """Clear the pixel buffers to black."""
    _pixels.fill(0.0)
    _pixel_bytes.fill(0)


def reset_canvas() -> None:
    """Clear the buffers and return the canvas to the uninitialized state."""
    _canvas_width[None] = 0
    _canvas_height[None] = 0
    _canvas_initialized[None] = 0
    clear_canvas()


def _check_canvas_initialized() -> None:
    """Check if the canvas is initialized and raise if not."""
    if _canvas_initialized[None] == 0:
        raise RuntimeError("Canvas not set up. Call setup_canvas() first.")


def get_canvas_dimensions() -> tuple[int, int]:
    """Get the active canvas dimensions.

    Returns:
        Tuple of (width, height).
    """
    return int(_canvas_width[None]), int(_canvas_height[None])


def get_aspect_ratio() -> float:
    """Get width / height of the active canvas.

    Raises:
        RuntimeError: If the canvas has not been set up.
    """
    _check_canvas_initialized()
    width, height = get_canvas_dimensions()
    return width / height


def get_ndc_numpy() -> npt.NDArray[np.float32]:
    """Get the normalized device coordinates of the active canvas.

    Returns:
        NumPy array of shape (width, height, 2) holding (x, y) per pixel.

    Raises:
        RuntimeError: If the canvas has not been set up.
    """
    _check_canvas_initialized()
    width, height = get_canvas_dimensions()
    ndc = np.zeros((width, height, 2), dtype=np.float32)
    _read_ndc(ndc, width, height)
    return ndc


def draw_progressive(render: RenderFunction) -> Generator[tuple[int, int], None, None]:
    """Evaluate a render function for every pixel, yielding after each column.

    Pixels are visited column by column, top to bottom within a column. The
    colors are kept unclamped and uploaded to the pixel buffer once the last
    column is done.

    Args:
        render: Maps normalized device coordinates (x, y) to a color.

    Yields:
        Tuple of (columns_done, total_columns).

    Raises:
        RuntimeError: If the canvas has not been set up.
    """
    _check_canvas_initialized()
    width, height = get_canvas_dimensions()

    ndc = get_ndc_numpy()
    buffer = np.zeros((width, height, 3), dtype=np.float32)

    for i in range(width):
        for j in range(height):
            x, y = ndc[i, j]
            color = render(float(x), float(y))
            buffer[i, j] = (color.x, color.y, color.z)
        yield (i + 1, width)

    _load_pixels(buffer, width, height)


def draw(render: RenderFunction, callback: ProgressCallback | None = None) -> None:
    """Evaluate a render function for every pixel of the canvas.

    Args:
        render: Maps normalized device coordinates (x, y) to a color.
        callback: Optional callback called after each column with
            (columns_done, total_columns).

    Raises:
        RuntimeError: If the canvas has not been set up.
    """
    for done, total in draw_progressive(render):
        if callback is not None:
            callback(done, total)


def get_image_numpy() -> npt.NDArray[np.float32]:
    """Get the canvas as a linear float image.

    Values are not clamped, so colors brighter than 1.0 or non-finite
    colors are preserved.

    Returns:
        NumPy array of shape (height, width, 3) with dtype float32, first
        row at the top.

    Raises:
        RuntimeError: If the canvas has not been set up.
    """
    _check_canvas_initialized()
    width, height = get_canvas_dimensions()

    image = np.zeros((width, height, 3), dtype=np.float32)
    _read_pixels(image, width, height)

    # (width, height, 3) -> (height, width, 3); row 0 is already the top row
    return np.ascontiguousarray(np.transpose(image, (1, 0, 2)))


def get_image_uint8() -> npt.NDArray[np.uint8]:
    """Get the canvas as an 8-bit image.

    Each channel is clamped to [0, 1], scaled by 255 and truncated.

    Returns:
        NumPy array of shape (height, width, 3) with dtype uint8.

    Raises:
        RuntimeError: If the canvas has not been set up.
    """
    _check_canvas_initialized()
    width, height = get_canvas_dimensions()

    _quantize(width, height)
    image = np.zeros((width, height, 3), dtype=np.uint8)
    _read_pixel_bytes(image, width, height)
    return np.ascontiguousarray(np.transpose(image, (1, 0, 2)))


class Canvas:
    """A drawable canvas backed by the module-level pixel buffers.

    There is a single render target, so creating a Canvas resets any
    previously drawn content.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize the canvas.

        Args:
            width: Canvas width in pixels (max MAX_CANVAS_WIDTH).
            height: Canvas height in pixels (max MAX_CANVAS_HEIGHT).

        Raises:
            ValueError: If dimensions are not positive or exceed the maximum.
        """
        self._width = width
        self._height = height
        setup_canvas(width, height)

    @property
    def width(self) -> int:
        """Get the canvas width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the canvas height."""
        return self._height

    @property
    def aspect_ratio(self) -> float:
        """Get width / height."""
        return self._width / self._height

    def clear(self) -> None:
        """Reset every pixel to black."""
        clear_canvas()

    def resize(self, width: int, height: int) -> None:
        """Resize the canvas and clear its content.

        Raises:
            ValueError: If dimensions are not positive or exceed the maximum.
        """
        setup_canvas(width, height)
        self._width = width
        self._height = height

    def draw(self, render: RenderFunction, callback: ProgressCallback | None = None) -> None:
        """Evaluate render(x, y) for every pixel.

        Example:
            >>> def progress(done, total):
            ...     print(f"Progress: {done}/{total} columns")
            >>> canvas.draw(render, callback=progress)
        """
        draw(render, callback)

    def draw_progressive(self, render: RenderFunction) -> Generator[tuple[int, int], None, None]:
        """Generator twin of draw(), yielding (columns_done, total_columns)."""
        return draw_progressive(render)

    def get_ndc_numpy(self) -> npt.NDArray[np.float32]:
        return get_ndc_numpy()

    def get_image_numpy(self) -> npt.NDArray[np.float32]:
        return get_image_numpy()

    def get_image_uint8(self) -> npt.NDArray[np.uint8]:
        return get_image_uint8()

    def save(self, filepath: str) -> None:
        """Save the canvas to an image file (format from the suffix)."""
        from src.minitrace.preview.export import save_image_from_array

        save_image_from_array(self.get_image_uint8(), filepath)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"
