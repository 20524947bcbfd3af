"""
Input validation utilities for pylinstat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Shape checks read only the two integer shape fields (rows, columns) of a
value, never its bulk data.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinstat.core.exceptions import ValidationError, ShapeError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

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

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    return np.array(result, dtype=np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

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
        ShapeError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise ShapeError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_vector_shape(rows: int, columns: int, name: str) -> None:
    """
    Verify a (rows, columns) shape describes a row or column vector.

    Raises:
        ShapeError: If neither dimension equals 1
    """
    if rows != 1 and columns != 1:
        raise ShapeError(
            f"{name}: expected a row or column vector, got shape ({rows}, {columns})",
            actual=(rows, columns),
        )


def check_min_elements(n: int, minimum: int, name: str) -> None:
    """
    Verify an operand has at least `minimum` elements.

    Args:
        n: Element count of the operand
        minimum: Minimum required element count
        name: Parameter name for error messages

    Raises:
        ShapeError: If n < minimum
    """
    if n < minimum:
        raise ShapeError(
            f"{name}: requires at least {minimum} elements, got {n}",
            expected=minimum,
            actual=n,
        )


def check_equal_length(*lengths: int, names: tuple[str, ...]) -> None:
    """
    Verify all operands have the same element count.

    Args:
        *lengths: Element counts to compare
        names: Parameter names for error messages (must match number of lengths)

    Raises:
        ValueError: If number of names doesn't match number of lengths
        ShapeError: If lengths differ
    """
    if len(lengths) != len(names):
        raise ValueError(
            f"Number of lengths ({len(lengths)}) must match number of names ({len(names)})"
        )

    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise ShapeError(f"Inconsistent lengths: {details}", actual=tuple(lengths))


def check_tall(rows: int, columns: int, name: str) -> None:
    """
    Verify a matrix has at least as many rows as columns.

    Raises:
        ShapeError: If rows < columns
    """
    if rows < columns:
        raise ShapeError(
            f"{name}: requires rows >= columns, got shape ({rows}, {columns})",
            actual=(rows, columns),
        )
