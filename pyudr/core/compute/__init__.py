"""
Shared compute infrastructure for pyudr.

Submodules:
    tolerances: Numerical tolerance tiers
    linalg: Linear algebra kernels (triangular solve, log-determinant)
"""

from pyudr.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    ILL_CONDITIONED_THRESHOLD,
    select_tolerance,
)

__all__ = [
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "ILL_CONDITIONED_THRESHOLD",
    "select_tolerance",
]
