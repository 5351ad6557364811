"""
Core infrastructure for pyudr.

Shared abstractions used by the public numeric routines.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance tiers and linear algebra kernels
"""

from pyudr.core.exceptions import (
    PyUDRError,
    ValidationError,
    DimensionError,
    NumericalError,
    NotPositiveDefiniteError,
)

__all__ = [
    "PyUDRError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "NotPositiveDefiniteError",
]
