"""
Tolerance tiers for numerical validation.

Defines precision expectations for the double-precision compute paths:
- exact-arithmetic statistics: machine precision
- Householder QR: reconstruction, orthogonality and triangularity checks

Used by the rank determination in the QR kernel and by the test suite.
"""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form statistics: must match hand-computed values to machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, closed-form reductions',
)

# Q·R ≈ A, QᵗQ ≈ I, |R[i, j]| for i > j
QR_RECONSTRUCTION = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='qr_reconstruction',
    description='Householder QR factor identities in double precision',
)


def rank_tolerance(r_diag: np.ndarray, shape: tuple[int, int]) -> float:
    """
    Threshold below which a diagonal entry of R counts as a zero pivot.

    max(m, n) * eps * max|R[i, i]|, the LAPACK-style relative cutoff.
    """
    if len(r_diag) == 0:
        return 0.0
    return max(shape) * np.finfo(np.float64).eps * float(np.max(np.abs(r_diag)))
