"""
Input validation utilities for regtables.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent. They guard the structural
invariants of a result record; statistic extraction never goes through
here.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sized
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from regtables.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float numpy array.

    Rejects inputs that result in object dtype (indicating mixed types
    or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_vector(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert to a 1D float array, raising if that is not possible."""
    result = check_array(array, name)
    check_1d(result, name)
    return result


def check_consistent_length(
    *sequences: Sized,
    names: tuple[str, ...]
) -> None:
    """
    Verify all sequences have the same length.

    Works for numpy arrays, lists and tuples alike.

    Args:
        *sequences: Sequences to check
        names: Parameter names for error messages (must match number of sequences)

    Raises:
        ValueError: If number of names doesn't match number of sequences
        DimensionError: If sequences have inconsistent lengths
    """
    if len(sequences) != len(names):
        raise ValueError(
            f"Number of sequences ({len(sequences)}) must match number of names ({len(names)})"
        )

    if len(sequences) < 2:
        return

    lengths = [len(seq) for seq in sequences]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_int(value: Any, name: str) -> int:
    """
    Verify value is integral and return it as int.

    Negative values are accepted; upstream models use them as sentinels.

    Raises:
        ValidationError: If value is not integral
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got bool")
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    raise ValidationError(f"{name}: expected an integer, got {value!r}")


# Residual degrees of freedom reported as undefined (NaN) by a model
DOF_UNDEFINED = -1


def check_dof(value: Any, name: str) -> int:
    """
    Verify residual degrees of freedom and return them as int.

    Models report undefined residual df as NaN; that becomes the
    DOF_UNDEFINED sentinel. Negative sentinels are kept as given.

    Raises:
        ValidationError: If value is neither integral nor NaN
    """
    if isinstance(value, (float, np.floating)) and np.isnan(value):
        return DOF_UNDEFINED
    return check_int(value, name)
