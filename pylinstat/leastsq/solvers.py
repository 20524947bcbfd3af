"""
Solver dispatch for least squares.

This module provides the public API: qr_factor() and fit().
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pylinstat.core.matrix import Matrix, as_matrix
from pylinstat.core.exceptions import ValidationError
from pylinstat.core.compute.linalg.qr import householder_qr
from pylinstat.leastsq.design import LeastSquaresDesign
from pylinstat.leastsq.solution import LeastSquaresSolution
from pylinstat.leastsq.backends.cpu import CPUHouseholderBackend


BackendChoice = Literal['auto', 'cpu', 'cpu_householder']


def qr_factor(A: Matrix | ArrayLike) -> tuple[Matrix, Matrix]:
    """
    Factor A = QR by Householder reflections.

    Args:
        A: Matrix to decompose (m x n) with m >= n. A Matrix or any
            2D array-like.

    Returns:
        (Q, R): Q is m x m orthogonal, R is m x n upper triangular, and
        Q @ R reproduces A within floating tolerance.

    Raises:
        ValidationError: If A is not numeric
        ShapeError: If A is not 2D or has fewer rows than columns

    Non-finite entries and rank deficiency do not raise; they propagate
    into Q and R.

    Example:
        >>> Q, R = qr_factor([[12, -51, 4], [6, 167, -68], [-4, 24, -41]])
        >>> (Q @ R).allclose(Matrix.new([[12, -51, 4], [6, 167, -68], [-4, 24, -41]]))
        True
    """
    qr = householder_qr(as_matrix(A, 'A'))
    return Matrix.from_array(qr.Q), Matrix.from_array(qr.R)


def fit(
    A: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
    check_rank: bool = True,
) -> LeastSquaresSolution:
    """
    Solve the linear least-squares problem min_x ||b - Ax||².

    Factors A with Householder QR, then back-substitutes R x = Qᵗb.

    Args:
        A: Coefficient matrix (m x n), m >= n
        b: Right-hand side (m,), any vector orientation
        backend: Computational backend ('auto', 'cpu', 'cpu_householder')
        check_rank: If True, a numerically rank-deficient A raises
            SingularMatrixError. If False, a warning is issued instead and
            only an exact zero pivot raises.

    Returns:
        LeastSquaresSolution with coefficients, residuals and diagnostics

    Raises:
        ValidationError: If inputs are non-numeric or non-finite
        ShapeError: If A and b have inconsistent dimensions or m < n
        SingularMatrixError: If A is rank-deficient (see check_rank)

    Example:
        >>> A = [[1, 0], [1, 1], [1, 2]]
        >>> np.round(fit(A, [1, 2, 3]).coefficients, 6)
        array([1., 1.])
    """
    design = LeastSquaresDesign.build(A, b)
    backend_impl = _get_backend(backend, check_rank)
    result = backend_impl.solve(design)
    return LeastSquaresSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice, check_rank: bool) -> CPUHouseholderBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_householder'):
        return CPUHouseholderBackend(check_rank=check_rank)
    raise ValidationError(f"Unknown backend: {choice!r}")
