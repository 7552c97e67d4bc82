"""
Input validation and numeric parsing utilities.

The parse_* functions convert editor text into numbers and report
failure with None rather than raising, because the interactive loops
treat a bad cell as "keep editing", not as an error. The check_*
functions follow the "fail fast, fail loud" principle for programmatic
callers: they raise immediately with the parameter name and the actual
values in the message.
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pychisq.core.exceptions import ValidationError, DimensionError


def _is_clean(text: str) -> bool:
    # float()/int() tolerate surrounding whitespace and digit separators;
    # editor text is only accepted if it is a bare literal.
    return bool(text) and text == text.strip() and '_' not in text


def parse_float(text: str) -> float | None:
    """
    Parse editor text as a finite real number.

    Args:
        text: Raw cell or field text

    Returns:
        The parsed value, or None if the text is not a finite number
    """
    if not _is_clean(text):
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_int(text: str) -> int | None:
    """
    Parse editor text as an integer ("+3", "-2" and "7" are accepted).

    Returns:
        The parsed value, or None if the text is not an integer literal
    """
    if not _is_clean(text):
        return None
    try:
        return int(text, 10)
    except ValueError:
        return None


def parse_count(text: str) -> int | None:
    """Parse editor text as a non-negative integer count."""
    value = parse_int(text)
    if value is None or value < 0:
        return None
    return value


def parse_probability(text: str) -> float | None:
    """Parse editor text as a probability in [0, 1]."""
    value = parse_float(text)
    if value is None or not 0.0 <= value <= 1.0:
        return None
    return value


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of float64 (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
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

    return result.astype(np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_non_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        DimensionError: If the array is empty
    """
    if array.size == 0:
        raise DimensionError(f"{name}: must not be empty, got shape {array.shape}")


def check_non_negative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every entry is >= 0.

    Raises:
        ValidationError: If any entry is negative
    """
    negative = np.flatnonzero(array.ravel() < 0)
    if len(negative) > 0:
        raise ValidationError(
            f"{name}: entries must be non-negative, "
            f"got negative values at flat indices {negative.tolist()}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")
