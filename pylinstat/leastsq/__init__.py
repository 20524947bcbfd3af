"""
Householder QR factorization and linear least squares.

Public API:
    qr_factor(A) -> (Q, R)
    fit(A, b, ...) -> LeastSquaresSolution

Example:
    >>> from pylinstat.leastsq import qr_factor, fit
    >>> Q, R = qr_factor(A)
    >>> solution = fit(A, b)
    >>> print(solution.coefficients)
    >>> print(solution.summary())
"""

from pylinstat.leastsq.design import LeastSquaresDesign
from pylinstat.leastsq.solution import LeastSquaresSolution, LeastSquaresParams
from pylinstat.leastsq.solvers import qr_factor, fit

__all__ = [
    "qr_factor",
    "fit",
    "LeastSquaresDesign",
    "LeastSquaresSolution",
    "LeastSquaresParams",
]
