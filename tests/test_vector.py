"""Unit tests for the vector module.

Tests cover:
- Componentwise and scalar arithmetic, including scalar-on-left
- Exact equality semantics
- Dot product, lengths and distances
- Guarded normalize() versus unguarded normalized()
- IEEE-754 results for division by zero
"""

import math

import numpy as np
import pytest

from src.minitrace.core.vector import (
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


class TestVectorConstruction:
    """Tests for constructing and accessing vectors."""

    def test_components(self):
        """Test that components are stored in order."""
        v = Vector3(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_splat(self):
        """Test the single-scalar constructor fills every component."""
        assert Vector3.splat(0.3) == Vector3(0.3, 0.3, 0.3)

    def test_index_access(self):
        """Test array-like element access."""
        v = Vector3(4.0, 5.0, 6.0)
        assert v[0] == 4.0
        assert v[1] == 5.0
        assert v[2] == 6.0
        with pytest.raises(IndexError):
            v[3]

    def test_iteration_and_length(self):
        """Test that vectors unpack like a 3-sequence."""
        x, y, z = Vector3(1, 2, 3)
        assert (x, y, z) == (1, 2, 3)
        assert len(Vector3(0, 0, 0)) == 3

    def test_integer_elements(self):
        """Test that integer vectors keep integer arithmetic."""
        v = Vector3(1, 2, 3) + Vector3(4, 5, 6)
        assert v == Vector3(5, 7, 9)
        assert isinstance(v.x, int)


class TestVectorArithmetic:
    """Tests for vector operators."""

    def test_add(self):
        assert Vector3(1.0, 2.0, 3.0) + Vector3(0.5, 0.5, 0.5) == Vector3(1.5, 2.5, 3.5)

    def test_subtract(self):
        assert Vector3(1.0, 2.0, 3.0) - Vector3(1.0, 1.0, 1.0) == Vector3(0.0, 1.0, 2.0)

    def test_multiply_componentwise(self):
        """Test vector * vector multiplies per component (color modulation)."""
        assert Vector3(2.0, 3.0, 4.0) * Vector3(0.5, 0.0, 2.0) == Vector3(1.0, 0.0, 8.0)

    def test_multiply_scalar(self):
        assert Vector3(1.0, -2.0, 3.0) * 2 == Vector3(2.0, -4.0, 6.0)

    def test_multiply_scalar_on_left(self):
        assert 2.0 * Vector3(1.0, -2.0, 3.0) == Vector3(2.0, -4.0, 6.0)

    def test_multiply_numpy_scalar_on_left(self):
        """Test that a numpy scalar on the left still produces a Vector3."""
        result = np.float64(2.0) * Vector3(1.0, 2.0, 3.0)
        assert isinstance(result, Vector3)
        assert result == Vector3(2.0, 4.0, 6.0)

    def test_divide_scalar(self):
        assert Vector3(2.0, 4.0, 8.0) / 2 == Vector3(1.0, 2.0, 4.0)

    def test_divide_componentwise(self):
        assert Vector3(2.0, 9.0, 8.0) / Vector3(2.0, 3.0, 4.0) == Vector3(1.0, 3.0, 2.0)

    def test_negate(self):
        assert -Vector3(1.0, -2.0, 0.0) == Vector3(-1.0, 2.0, -0.0)

    def test_operators_return_new_vectors(self):
        """Test that operators never modify their operands."""
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(1.0, 1.0, 1.0)
        _ = a + b
        _ = a * 3.0
        assert a == Vector3(1.0, 2.0, 3.0)
        assert b == Vector3(1.0, 1.0, 1.0)

    def test_unsupported_operand_raises_type_error(self):
        with pytest.raises(TypeError):
            Vector3(1.0, 2.0, 3.0) + 1.0
        with pytest.raises(TypeError):
            Vector3(1.0, 2.0, 3.0) * "abc"


class TestVectorDivisionByZero:
    """Tests for IEEE-754 semantics on division by zero."""

    def test_nonzero_over_zero_is_signed_infinity(self):
        v = Vector3(1.0, -2.0, 3.0) / 0.0
        assert v.x == math.inf
        assert v.y == -math.inf
        assert v.z == math.inf

    def test_zero_over_zero_is_nan(self):
        v = Vector3(0.0, 0.0, 0.0) / 0.0
        assert math.isnan(v.x)
        assert math.isnan(v.y)
        assert math.isnan(v.z)

    def test_integer_division_by_zero_does_not_raise(self):
        v = Vector3(1, 0, -1) / 0
        assert v.x == math.inf
        assert math.isnan(v.y)
        assert v.z == -math.inf


class TestVectorEquality:
    """Tests for exact componentwise equality."""

    def test_equal_vectors(self):
        assert Vector3(1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0)
        assert not (Vector3(1.0, 2.0, 3.0) != Vector3(1.0, 2.0, 3.0))

    def test_no_tolerance(self):
        """Test that tiny floating-point differences break equality."""
        a = Vector3(0.1 + 0.2, 0.0, 0.0)
        b = Vector3(0.3, 0.0, 0.0)
        assert a != b
        assert not (a == b)

    def test_single_component_difference(self):
        assert Vector3(1.0, 2.0, 3.0) != Vector3(1.0, 2.0, 3.5)

    def test_nan_is_never_equal(self):
        v = Vector3(math.nan, 0.0, 0.0)
        assert v != v

    def test_compares_with_other_types_as_not_equal(self):
        assert Vector3(1.0, 2.0, 3.0) != (1.0, 2.0, 3.0)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector3(1.0, 2.0, 3.0))


class TestVectorGeometry:
    """Tests for dot products, lengths and distances."""

    def test_dot_member_and_free_function_agree(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, -5.0, 6.0)
        assert a.dot(b) == 12.0
        assert dot(a, b) == 12.0

    def test_dot_orthogonal_is_zero(self):
        assert dot(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)) == 0.0

    def test_sqr_length(self):
        v = Vector3(1.0, 2.0, 2.0)
        assert v.sqr_length() == 9.0
        assert sqr_length(v) == 9.0

    def test_length(self):
        v = Vector3(3.0, 4.0, 0.0)
        assert v.length() == 5.0
        assert length(v) == 5.0

    def test_distance(self):
        a = Vector3(1.0, 1.0, 1.0)
        b = Vector3(4.0, 5.0, 1.0)
        assert sqr_distance(a, b) == 25.0
        assert distance(a, b) == 5.0

    def test_distance_is_symmetric(self):
        a = Vector3(0.5, -2.0, 7.0)
        b = Vector3(-3.0, 1.5, 2.0)
        assert distance(a, b) == distance(b, a)


class TestNormalization:
    """Tests for normalized() and normalize()."""

    def test_normalized_unit_length(self):
        v = Vector3(0.0, 3.0, 4.0).normalized()
        assert v == Vector3(0.0, 0.6, 0.8)
        assert abs(v.length() - 1.0) < 1e-12

    def test_normalize_unit_length(self):
        v = normalize(Vector3(0.0, 0.0, -20.0))
        assert v == Vector3(0.0, 0.0, -1.0)

    def test_normalized_zero_vector_is_nan(self):
        """Test that the unguarded member produces nan for a zero vector."""
        v = Vector3(0.0, 0.0, 0.0).normalized()
        assert math.isnan(v.x)
        assert math.isnan(v.y)
        assert math.isnan(v.z)

    def test_normalize_zero_vector_returns_input(self):
        """Test that the guarded function leaves a zero vector unchanged."""
        zero = Vector3(0.0, 0.0, 0.0)
        result = normalize(zero)
        assert result is zero

    def test_normalize_below_epsilon_returns_input(self):
        tiny = Vector3(2.0**-60, 0.0, 0.0)
        assert normalize(tiny) is tiny

    def test_normalized_below_epsilon_still_divides(self):
        tiny = Vector3(2.0**-60, 0.0, 0.0)
        assert tiny.normalized() == Vector3(1.0, 0.0, 0.0)

    def test_normalize_float32_uses_float32_epsilon(self):
        """Test that the guard threshold follows the element type."""
        v = Vector3(np.float32(1e-8), np.float32(0.0), np.float32(0.0))
        assert normalize(v) is v

    def test_element_epsilon(self):
        assert element_epsilon(Vector3(1.0, 2.0, 3.0)) == np.finfo(np.float64).eps
        f32 = np.float32
        assert element_epsilon(Vector3(f32(1), f32(2), f32(3))) == np.finfo(np.float32).eps
        assert element_epsilon(Vector3(1, 2, 3)) == 0.0


class TestVectorFormatting:
    """Tests for string conversion."""

    def test_to_string(self):
        assert to_string(Vector3(1.0, 2.5, -3.0)) == "[1.0, 2.5, -3.0]"

    def test_str_uses_to_string(self):
        assert str(Vector3(1, 2, 3)) == "[1, 2, 3]"

    def test_repr(self):
        assert repr(Vector3(1.0, 2.0, 3.0)) == "Vector3(1.0, 2.0, 3.0)"
