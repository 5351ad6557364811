"""
Row scaling and cross-product of dense matrices.

    scale_rows: A ← diag(b) A, in place
    crossprod:  X' X (Gram matrix of the columns of X)
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyudr.core.validation import (
    check_array,
    check_inplace_target,
    check_1d,
    check_2d,
    check_length_matches,
)


def scale_rows(A: NDArray[np.floating[Any]], b: ArrayLike) -> None:
    """
    Scale each row A[i, :] by b[i], in place.

    Equivalent to A ← diag(b) A without forming the diagonal matrix.

    Args:
        A: Matrix (m x n). Must be a writeable floating-point ndarray;
           it is overwritten with the result.
        b: Scale factors (m,). Not modified.

    Raises:
        ValidationError: If A cannot be mutated in place
        DimensionError: If A is not 2D, b is not 1D, or len(b) != rows(A)
    """
    check_inplace_target(A, "A")
    check_2d(A, "A")
    b = check_array(b, "b")
    check_1d(b, "b")
    check_length_matches(b, A.shape[0], "b", "number of rows of A")

    A *= b[:, np.newaxis]


def crossprod(X: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Return the cross-product X' X.

    The result is n x n, symmetric and positive semidefinite. A matrix
    with zero rows gives the all-zero n x n matrix.

    Args:
        X: Matrix (m x n). Not modified.

    Returns:
        New array of shape (n, n)

    Raises:
        DimensionError: If X is not 2D
    """
    X = check_array(X, "X")
    check_2d(X, "X")
    return X.T @ X
