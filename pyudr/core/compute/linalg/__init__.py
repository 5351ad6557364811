"""
Linear algebra kernels for pyudr.

All functions follow these conventions:
    - Functions use NumPy/SciPy (LAPACK/BLAS under the hood)
    - Kernels do not validate; public routines validate before calling
    - Results are returned as NumPy arrays or Python floats

Submodules:
    triangular: Forward substitution and log-determinant from a Cholesky factor
"""

from pyudr.core.compute.linalg.triangular import (
    forward_solve,
    cholesky_logdet,
)

__all__ = [
    "forward_solve",
    "cholesky_logdet",
]
