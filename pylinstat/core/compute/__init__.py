"""
Shared compute infrastructure for pylinstat.

Domain-specific backends live in {domain}/backends/. This module contains
shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance tiers
    linalg: Linear algebra kernels (Householder QR, back-substitution)
"""

from pylinstat.core.compute.timing import Timer, timed
from pylinstat.core.compute.tolerances import ToleranceTier, CPU_FP64, QR_RECONSTRUCTION

__all__ = [
    "Timer",
    "timed",
    "ToleranceTier",
    "CPU_FP64",
    "QR_RECONSTRUCTION",
]
