"""
Linear algebra kernels for pylinstat.

Conventions:
    - Kernels take and return NumPy arrays; the Matrix value type is
      handled by the public entry points
    - Each decomposition returns a structured result dataclass
    - Shape errors are raised immediately; numeric conditions propagate

Submodules:
    qr: Householder QR decomposition and least-squares solve
"""

from pylinstat.core.compute.linalg.qr import (
    QRResult,
    householder_vector,
    householder_reflector,
    embed_reflector,
    householder_qr,
    back_substitute,
    qr_solve,
)

__all__ = [
    "QRResult",
    "householder_vector",
    "householder_reflector",
    "embed_reflector",
    "householder_qr",
    "back_substitute",
    "qr_solve",
]
