"""
Exception hierarchy for pyudr.

All exceptions inherit from PyUDRError so callers can catch any
library-specific error with a single clause.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyUDRError(Exception):
    """Base exception for all pyudr errors."""
    pass


class ValidationError(PyUDRError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class NumericalError(PyUDRError):
    """
    Numerical precondition failed.

    Base class for errors arising from inputs that are well-shaped but
    numerically invalid for the requested computation.
    """
    pass


class NotPositiveDefiniteError(NumericalError):
    """
    Cholesky factor does not describe a positive definite matrix.

    Raised when a lower-triangular factor L is expected to satisfy
    S = L L' with S positive definite, but some diagonal entry of L is
    zero, negative or NaN.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        min_diagonal: Smallest diagonal entry of the factor, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        min_diagonal: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.min_diagonal = min_diagonal
