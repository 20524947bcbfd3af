"""
Householder QR decomposition.

Factors an m x n matrix A (m >= n) as A = QR, with Q an m x m orthogonal
matrix and R an m x n upper-triangular matrix, by applying one Householder
reflection per column. Used by the least-squares solver.

Each reflection step is a pure function of the (Q, R) pair left by the
previous step, so the factorization is a fold over column indices. The
iterations are inherently sequential.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgError, solve_triangular

from pylinstat.core.compute.tolerances import rank_tolerance
from pylinstat.core.exceptions import SingularMatrixError
from pylinstat.core.validation import check_2d, check_tall, check_1d, check_equal_length


@dataclass(frozen=True)
class QRResult:
    """
    Result of Householder QR decomposition.

    Attributes:
        Q: Orthogonal matrix (m x m)
        R: Upper triangular matrix (m x n)
        rank: Numerical rank determined from R diagonal
        reflections: Number of reflections applied
        skipped: Column indices whose segment was already zero below the
            pivot (no reflection applied)
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int
    reflections: int
    skipped: tuple[int, ...]


def householder_vector(x: NDArray[np.floating[Any]]) -> tuple[NDArray[np.floating[Any]], float]:
    """
    Householder vector v for the column segment x.

    alpha = -sign(x[0]) * ||x||, v = x with v[0] = x[0] - alpha, so that the
    reflector built from v maps x onto alpha * e1. The sign is taken
    opposite the leading component so x[0] - alpha never subtracts values
    of equal sign. sign(0) is +1.

    Returns:
        (v, alpha)
    """
    sign = 1.0 if x[0] >= 0.0 else -1.0
    alpha = -sign * float(np.linalg.norm(x))
    v = x.copy()
    v[0] = x[0] - alpha
    return v, alpha


def householder_reflector(v: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """H = I - 2 v vᵗ / (vᵗ v). v must be nonzero."""
    k = v.shape[0]
    return np.eye(k) - (2.0 / (v @ v)) * np.outer(v, v)


def embed_reflector(h_sub: NDArray[np.floating[Any]], i: int, m: int) -> NDArray[np.floating[Any]]:
    """m x m identity with the block [i:, i:] replaced by h_sub."""
    H = np.eye(m)
    H[i:, i:] = h_sub
    return H


def householder_qr(A: NDArray[np.floating[Any]]) -> QRResult:
    """
    Full QR decomposition by Householder reflections.

    For i = 0 .. k-1 (k = n - 1 for square A, n otherwise):
        x = R[i:, i]
        v = householder_vector(x)        (skip if ||v|| == 0)
        H = embed_reflector(I - 2vvᵗ/vᵗv, i, m)
        Q <- Q H,  R <- H R

    The last column of a square matrix needs no reflection: once the
    previous columns are eliminated its sub-diagonal segment is empty.

    Non-finite input propagates into Q and R; a zero segment (rank
    deficiency) only skips its iteration. Neither raises.

    Args:
        A: Matrix to decompose (m x n), m >= n

    Returns:
        QRResult with Q (m x m), R (m x n), numerical rank and the
        indices of skipped columns
    """
    check_2d(A, 'A')
    m, n = A.shape
    check_tall(m, n, 'A')

    k = n - 1 if m == n else n

    Q = np.eye(m)
    R = np.array(A, dtype=np.float64, copy=True)
    skipped = []

    for i in range(k):
        v, _ = householder_vector(R[i:, i])
        if np.linalg.norm(v) == 0.0:
            skipped.append(i)
            continue

        H = embed_reflector(householder_reflector(v), i, m)
        Q = Q @ H
        R = H @ R

    # Determine numerical rank from R diagonal
    diag_R = np.abs(np.diag(R))
    if np.max(diag_R) > 0:
        rank = int(np.sum(diag_R > rank_tolerance(diag_R, A.shape)))
    else:
        rank = 0

    return QRResult(
        Q=Q,
        R=R,
        rank=rank,
        reflections=k - len(skipped),
        skipped=tuple(skipped),
    )


def back_substitute(
    R: NDArray[np.floating[Any]],
    c: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Solve the upper-triangular system R x = c (R is n x n)."""
    return solve_triangular(R, c, lower=False, check_finite=False)


def qr_solve(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    check_rank: bool,
    qr: QRResult | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Solve least squares via Householder QR.

    Solves: min_x ||b - Ax||² via
        A = QR
        x = R⁻¹ Qᵗb   (back-substitution on the leading n x n block of R)

    Args:
        A: Coefficient matrix (m x n), m >= n
        b: Right-hand side (m,)
        check_rank: If True, raise SingularMatrixError on rank-deficient A
        qr: Precomputed factorization of A, if available

    Returns:
        Solution vector x (n,)

    Raises:
        SingularMatrixError: If A is rank-deficient and check_rank=True,
            or R has an exact zero pivot
    """
    check_1d(b, 'b')
    check_equal_length(A.shape[0], b.shape[0], names=('A rows', 'b'))
    n = A.shape[1]
    if qr is None:
        qr = householder_qr(A)

    if check_rank and qr.rank < n:
        raise SingularMatrixError(
            f"Coefficient matrix is rank-deficient: rank={qr.rank}, expected={n}. "
            f"R has a zero pivot and cannot be back-substituted.",
            matrix_name='A',
            rank=qr.rank,
            expected_rank=n,
        )

    Qtb = qr.Q.T @ b
    try:
        return back_substitute(qr.R[:n, :n], Qtb[:n])
    except LinAlgError as e:
        raise SingularMatrixError(
            f"R has an exact zero pivot: {e}",
            matrix_name='R',
            rank=qr.rank,
            expected_rank=n,
        ) from e
