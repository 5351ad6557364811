"""
Tolerance tiers for numerical validation.

Defines precision expectations for the double-precision compute path:
- CPU FP64 (reference): agreement with closed-form results to near
  machine precision
- CPU FP64, ill-conditioned: relaxed for badly scaled factors

Used by the test suite when comparing against closed-form densities.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU reference: closed-form agreement to machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision — matches closed form',
)

# CPU reference, ill-conditioned problems (cond(L) > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Condition number above which a factor counts as ill-conditioned.
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a problem."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
