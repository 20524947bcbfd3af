"""
pylinstat: dense-matrix numerical algorithms for Python.

Householder QR factorization for linear least squares, and a descriptive
statistics engine over numeric vectors.

Submodules:
    core: Matrix value type, exceptions, validation, compute kernels
    leastsq: QR factorization and least-squares solve
    descriptive: Central tendency, dispersion, moments, quantiles,
        weighted and bivariate measures
"""

__version__ = "0.1.0"

from pylinstat import leastsq
from pylinstat import descriptive
from pylinstat.core.matrix import Matrix

__all__ = [
    "__version__",
    "Matrix",
    "leastsq",
    "descriptive",
]
