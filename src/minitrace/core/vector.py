"""Three-component vector algebra used for points, directions and colors.

This module provides the Vector3 value type and the free functions the
tracer builds on. A single type serves as point, direction and RGB color,
so componentwise multiplication doubles as color modulation.

Two normalization flavors exist on purpose:
    - Vector3.normalized(): divides by the length unconditionally. A zero
      vector produces non-finite components.
    - normalize(v): returns v unchanged when its length is below the machine
      epsilon of the element type.

Arithmetic follows IEEE-754 semantics for division, so dividing by zero
yields inf or nan instead of raising ZeroDivisionError.

Example:
    >>> from src.minitrace.core.vector import Vector3, distance
    >>> a = Vector3(0.0, 3.0, 0.0)
    >>> b = Vector3(4.0, 0.0, 0.0)
    >>> distance(a, b)
    5.0
    >>> (a - b).normalized()
    Vector3(-0.8, 0.6, 0.0)
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Generic, Iterator, TypeVar

import numpy as np

T = TypeVar("T")


def _divide(numerator: Any, denominator: Any) -> Any:
    """Divide two scalars with IEEE-754 results for a zero denominator."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(numerator) / np.float64(denominator))


def _is_vector(value: Any) -> bool:
    return hasattr(value, "x") and hasattr(value, "y") and hasattr(value, "z")


class Vector3(Generic[T]):
    """A 3D vector with x, y, z components of a numeric element type.

    Instances behave as values: operators always return new vectors and
    equality compares components exactly, without tolerance.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    __slots__ = ("x", "y", "z")

    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, x: T, y: T, z: T) -> None:
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def splat(cls, scalar: T) -> Vector3[T]:
        """Create a vector with all three components set to scalar."""
        return cls(scalar, scalar, scalar)

    # -------------------------------------------------------------------------
    # Array-like access
    # -------------------------------------------------------------------------

    def __getitem__(self, index: int) -> T:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> Vector3[T]:
        if not _is_vector(other):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Any) -> Vector3[T]:
        if not _is_vector(other):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Any) -> Vector3[T]:
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        if _is_vector(other):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector3[T]:
        if isinstance(other, Real):
            return Vector3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: Any) -> Vector3[T]:
        if isinstance(other, Real):
            return Vector3(
                _divide(self.x, other),
                _divide(self.y, other),
                _divide(self.z, other),
            )
        if _is_vector(other):
            return Vector3(
                _divide(self.x, other.x),
                _divide(self.y, other.y),
                _divide(self.z, other.z),
            )
        return NotImplemented

    def __neg__(self) -> Vector3[T]:
        return Vector3(-self.x, -self.y, -self.z)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not _is_vector(other):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __ne__(self, other: object) -> bool:
        if not _is_vector(other):
            return NotImplemented
        return self.x != other.x or self.y != other.y or self.z != other.z

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def dot(self, other: Vector3[T]) -> T:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def sqr_length(self) -> T:
        """Compute the squared length (dot product with itself)."""
        return self.dot(self)

    def length(self) -> float:
        """Compute the Euclidean length."""
        return math.sqrt(self.sqr_length())

    def normalized(self) -> Vector3[T]:
        """Return this vector divided by its length.

        There is no guard against zero length: a zero vector yields nan
        components. Use normalize() for the epsilon-checked variant.
        """
        return self / self.length()

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def __str__(self) -> str:
        return to_string(self)


# =============================================================================
# Free Functions
# =============================================================================


def dot(a: Vector3[T], b: Vector3[T]) -> T:
    """Compute the standard dot product a . b."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def sqr_length(vector: Vector3[T]) -> T:
    """Compute the squared length of a vector."""
    return dot(vector, vector)


def length(vector: Vector3[T]) -> float:
    """Compute the Euclidean length of a vector."""
    return math.sqrt(sqr_length(vector))


def sqr_distance(a: Vector3[T], b: Vector3[T]) -> T:
    """Compute the squared distance between two points."""
    return sqr_length(a - b)


def distance(a: Vector3[T], b: Vector3[T]) -> float:
    """Compute the Euclidean distance between two points."""
    return math.sqrt(sqr_distance(a, b))


def element_epsilon(vector: Vector3[Any]) -> float:
    """Return the machine epsilon of a vector's element type.

    Integer element types have no epsilon, so 0.0 is returned for them.

    Args:
        vector: The vector whose components determine the element type.

    Returns:
        The epsilon of the common floating-point type of the components.
    """
    dtype = np.result_type(vector.x, vector.y, vector.z)
    if not np.issubdtype(dtype, np.inexact):
        return 0.0
    return float(np.finfo(dtype).eps)


def normalize(vector: Vector3[T]) -> Vector3[T]:
    """Normalize a vector, leaving near-zero vectors untouched.

    Args:
        vector: The vector to normalize.

    Returns:
        A unit vector in the direction of vector, or vector itself if its
        length is below the machine epsilon of its element type.
    """
    vector_length = vector.length()
    if vector_length < element_epsilon(vector):
        return vector
    return vector / vector_length


def to_string(vector: Vector3[Any]) -> str:
    """Format a vector as "[x, y, z]"."""
    return f"[{vector.x}, {vector.y}, {vector.z}]"
