"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_1d / check_vector: dimensionality checks
    - check_consistent_length: multi-sequence length matching
    - check_int: integral values, negative sentinels
    - check_dof: NaN residual df mapped to the undefined sentinel
"""

import numpy as np
import pytest

from regtables.core.exceptions import DimensionError, ValidationError
from regtables.core.validation import (
    DOF_UNDEFINED,
    check_1d,
    check_array,
    check_consistent_length,
    check_dof,
    check_int,
    check_vector,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "coefvalues")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_tuple_accepted(self):
        result = check_array((0.5, 1.5), "coefvalues")
        np.testing.assert_array_equal(result, [0.5, 1.5])

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "coefvalues")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "coefvalues")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")

    def test_nan_allowed(self):
        result = check_array([1.0, np.nan], "coefstderrors")
        assert np.isnan(result[1])


# ═══════════════════════════════════════════════════════════════════════
# check_1d / check_vector
# ═══════════════════════════════════════════════════════════════════════


class TestCheckVector:

    def test_1d_passes(self):
        check_1d(np.array([1.0, 2.0]), "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.ones((2, 2)), "x")

    def test_vector_from_list(self):
        result = check_vector([1, 2], "x")
        assert result.shape == (2,)

    def test_empty_vector(self):
        result = check_vector([], "x")
        assert result.shape == (0,)

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError):
            check_vector(3.0, "x")


# ═══════════════════════════════════════════════════════════════════════
# check_consistent_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:

    def test_same_lengths_pass(self):
        check_consistent_length(
            ("a", "b"), np.array([1.0, 2.0]), [0.1, 0.2],
            names=("coefnames", "coefvalues", "coefstderrors"),
        )

    def test_mismatch_reports_all_lengths(self):
        with pytest.raises(DimensionError, match="coefnames=3, coefvalues=2"):
            check_consistent_length(
                ("a", "b", "c"), np.array([1.0, 2.0]),
                names=("coefnames", "coefvalues"),
            )

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError, match="must match"):
            check_consistent_length([1], [2], names=("a",))

    def test_single_sequence_passes(self):
        check_consistent_length([1, 2, 3], names=("a",))


# ═══════════════════════════════════════════════════════════════════════
# check_int
# ═══════════════════════════════════════════════════════════════════════


class TestCheckInt:

    def test_int(self):
        assert check_int(10, "df") == 10

    def test_numpy_int(self):
        assert check_int(np.int64(7), "df") == 7

    def test_integral_float(self):
        assert check_int(12.0, "df") == 12

    def test_negative_sentinel_kept(self):
        assert check_int(-1, "df") == -1

    def test_fractional_float_rejected(self):
        with pytest.raises(ValidationError, match="df"):
            check_int(10.5, "df")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_int(True, "df")

    def test_string_rejected(self):
        with pytest.raises(ValidationError):
            check_int("10", "df")


# ═══════════════════════════════════════════════════════════════════════
# check_dof
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDof:

    def test_int(self):
        assert check_dof(10, "df_residual") == 10

    def test_nan_is_undefined(self):
        assert check_dof(float("nan"), "df_residual") == DOF_UNDEFINED
        assert check_dof(np.float64("nan"), "df_residual") == -1

    def test_negative_sentinel_kept(self):
        assert check_dof(-2, "df_residual") == -2

    def test_fractional_rejected(self):
        with pytest.raises(ValidationError, match="df_residual"):
            check_dof(10.5, "df_residual")
