"""
Input validation utilities for pyudr.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyudr.core.exceptions import (
    ValidationError,
    DimensionError,
    NotPositiveDefiniteError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

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

    # Complex input is numeric but meaningless for these routines
    if not (np.issubdtype(result.dtype, np.integer)
            or np.issubdtype(result.dtype, np.floating)
            or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_inplace_target(array: Any, name: str) -> None:
    """
    Verify an argument can be mutated in place.

    In-place routines write their result back into the caller's container,
    so the argument must already be a writeable floating-point ndarray.
    Lists and integer arrays cannot hold the result.

    Raises:
        ValidationError: If array is not a writeable floating ndarray
    """
    if not isinstance(array, np.ndarray):
        raise ValidationError(
            f"{name}: in-place operation requires a numpy.ndarray, "
            f"got {type(array).__name__}"
        )
    if not np.issubdtype(array.dtype, np.floating):
        raise ValidationError(
            f"{name}: in-place operation requires a floating dtype, got {array.dtype}"
        )
    if not array.flags.writeable:
        raise ValidationError(f"{name}: array is read-only")


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


def check_no_nan(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN values. Infinite values are allowed.

    Raises:
        ValidationError: If array contains NaN
    """
    n_nan = int(np.sum(np.isnan(array)))
    if n_nan > 0:
        raise ValidationError(f"{name}: contains {n_nan} NaN values")


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

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


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        ValidationError: If array has size 0
    """
    if array.size == 0:
        raise ValidationError(f"{name}: must be non-empty, got shape {array.shape}")


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If array is not n x n
    """
    check_2d(array, name)
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise DimensionError(
            f"{name}: expected square matrix, got shape {array.shape}"
        )


def check_length_matches(
    vector: NDArray[np.floating[Any]],
    expected: int,
    name: str,
    target: str,
) -> None:
    """
    Verify a vector's length agrees with a dimension of another argument.

    Args:
        vector: 1D array to check
        expected: Required length
        name: Parameter name of the vector
        target: Description of what the length must match, e.g. "rows of A"

    Raises:
        DimensionError: If lengths disagree
    """
    if vector.shape[0] != expected:
        raise DimensionError(
            f"{name}: length {vector.shape[0]} does not match {target} ({expected})"
        )


def check_nonnegative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every entry is >= 0.

    Raises:
        ValidationError: If any entry is negative
    """
    n_negative = int(np.sum(array < 0))
    if n_negative > 0:
        raise ValidationError(
            f"{name}: expected nonnegative entries, found {n_negative} negative "
            f"(min={float(np.min(array))})"
        )


def check_lower_triangular(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a square matrix has only zeros strictly above the diagonal.

    Factors produced by a Cholesky routine have exact zeros there, so no
    tolerance is applied.

    Raises:
        ValidationError: If any entry above the diagonal is non-zero
    """
    upper = np.triu(array, k=1)
    n_nonzero = int(np.count_nonzero(upper))
    if n_nonzero > 0:
        raise ValidationError(
            f"{name}: expected lower-triangular matrix, found {n_nonzero} "
            f"non-zero entries above the diagonal"
        )


def check_positive_diagonal(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every diagonal entry of a Cholesky factor is strictly positive.

    Raises:
        NotPositiveDefiniteError: If any diagonal entry is <= 0 or NaN
    """
    diag = np.diag(array)
    if diag.size == 0:
        return
    # `not (d > 0)` also catches NaN
    if not np.all(diag > 0):
        min_diag = float(np.min(diag))
        raise NotPositiveDefiniteError(
            f"{name}: Cholesky factor must have strictly positive diagonal, "
            f"min diagonal entry is {min_diag}",
            matrix_name=name,
            min_diagonal=min_diag,
        )
