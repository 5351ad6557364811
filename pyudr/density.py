"""
Probability helpers: softmax, safe normalization, and the log-density
of a zero-mean multivariate normal given a Cholesky factor.

All three guard against the floating-point failure modes that show up
in mixture-model updates: exp() overflow on large log-weights, 0/0 on
all-zero weights, and the cost and instability of inverting a
covariance matrix.
"""

import logging
import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyudr.core.compute.linalg import forward_solve, cholesky_logdet
from pyudr.core.exceptions import ValidationError
from pyudr.core.validation import (
    check_array,
    check_inplace_target,
    check_1d,
    check_finite,
    check_no_nan,
    check_nonempty,
    check_nonnegative,
    check_square,
    check_length_matches,
    check_lower_triangular,
    check_positive_diagonal,
)

logger = logging.getLogger(__name__)

_LOG_2PI = math.log(2.0 * math.pi)


def softmax(x: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Numerically stable softmax, y_i = exp(x_i) / Σ_j exp(x_j).

    Computed as exp(x - max(x)) / Σ exp(x - max(x)): the largest term
    becomes exp(0) = 1, so nothing overflows and the denominator is at
    least 1. Entries equal to -inf are allowed and map to 0.

    Args:
        x: Vector (n,), n >= 1. Not modified.

    Returns:
        New vector (n,) with entries in [0, 1] summing to 1

    Raises:
        ValidationError: If x is empty, contains NaN, or max(x) is not
            finite (+inf present, or every entry -inf)
        DimensionError: If x is not 1D
    """
    x = check_array(x, "x")
    check_1d(x, "x")
    check_nonempty(x, "x")
    check_no_nan(x, "x")

    x_max = np.max(x)
    if not np.isfinite(x_max):
        raise ValidationError(
            f"x: softmax requires a finite maximum entry, got max(x)={x_max}"
        )

    y = np.exp(x - x_max)
    y /= np.sum(y)
    return y


def safenormalize(x: NDArray[np.floating[Any]]) -> None:
    """
    Normalize a nonnegative vector to sum to 1, in place.

    x ← x / Σx. When Σx <= 0 (every entry is zero) the vector carries no
    information, so it is replaced by the uniform distribution 1/n
    instead of producing 0/0.

    Args:
        x: Vector (n,), n >= 1, nonnegative. Must be a writeable
           floating-point ndarray; it is overwritten with the result.

    Raises:
        ValidationError: If x cannot be mutated in place, is empty,
            contains NaN or Inf, or has negative entries
        DimensionError: If x is not 1D
    """
    check_inplace_target(x, "x")
    check_1d(x, "x")
    check_nonempty(x, "x")
    check_finite(x, "x")
    check_nonnegative(x, "x")

    # Scale by the largest entry first so the sum cannot overflow
    x_max = np.max(x)
    if x_max <= 0:
        n = x.shape[0]
        logger.debug("safenormalize: all %d entries are zero, using uniform 1/n", n)
        x.fill(1.0 / n)
    else:
        x /= x_max
        x /= np.sum(x)


def ldmvnorm(
    x: ArrayLike,
    L: ArrayLike,
    check_factor: bool = True,
) -> float:
    """
    Log-density of N(0, S) at x, where S = L L'.

        log p(x) = -½ ||L⁻¹x||² - Σ_i log(√(2π) L_ii)

    The quadratic form x' S⁻¹ x is computed as ||z||² with L z = x solved
    by forward substitution, and the normalizing constant from the log of
    the diagonal of L, so neither S⁻¹ nor det(S) is ever formed.

    Args:
        x: Point at which to evaluate the density (n,)
        L: Lower-triangular Cholesky factor of the covariance (n x n),
           e.g. scipy.linalg.cholesky(S, lower=True)
        check_factor: If True, verify that L is lower triangular with a
            strictly positive diagonal. Set to False only when L comes
            straight from a Cholesky routine.

    Returns:
        The log-density as a Python float

    Raises:
        DimensionError: If x is not 1D, L is not square, or len(x) != n
        ValidationError: If x or L contain non-finite values, or L has
            non-zero entries above the diagonal (check_factor=True)
        NotPositiveDefiniteError: If a diagonal entry of L is <= 0
            (check_factor=True)
    """
    x = check_array(x, "x")
    L = check_array(L, "L")
    check_1d(x, "x")
    check_square(L, "L")
    check_length_matches(x, L.shape[0], "x", "dimension of L")
    check_finite(x, "x")
    check_finite(L, "L")

    if check_factor:
        check_lower_triangular(L, "L")
        check_positive_diagonal(L, "L")

    n = x.shape[0]
    z = forward_solve(L, x)
    quad = float(z @ z)
    # Σ log(√(2π) L_ii) = (n/2) log(2π) + ½ log det(S)
    return -0.5 * quad - 0.5 * n * _LOG_2PI - 0.5 * cholesky_logdet(L)
