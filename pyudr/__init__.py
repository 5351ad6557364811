"""
pyudr: numerically careful linear-algebra and probability helpers.

Building blocks for fitting multivariate normal mixture ("Ultimate
Deconvolution") models:

    scale_rows:    A ← diag(b) A, in place
    crossprod:     X' X
    softmax:       overflow-safe softmax
    safenormalize: x ← x / Σx in place, uniform when Σx = 0
    ldmvnorm:      log N(x; 0, L L') from a Cholesky factor L
"""

__version__ = "0.1.0"

from pyudr.matrix import scale_rows, crossprod
from pyudr.density import softmax, safenormalize, ldmvnorm
from pyudr.core.exceptions import (
    PyUDRError,
    ValidationError,
    DimensionError,
    NumericalError,
    NotPositiveDefiniteError,
)

__all__ = [
    "__version__",
    "scale_rows",
    "crossprod",
    "softmax",
    "safenormalize",
    "ldmvnorm",
    "PyUDRError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "NotPositiveDefiniteError",
]
