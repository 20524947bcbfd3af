"""
CPU backend for least squares.

Factors A with the Householder QR kernel and back-substitutes
R x = Qᵗb on the leading n x n block of R.
"""

from typing import Any
import warnings
import numpy as np

from pylinstat.core.result import Result
from pylinstat.core.compute.timing import Timer
from pylinstat.core.compute.linalg.qr import householder_qr, qr_solve
from pylinstat.leastsq.design import LeastSquaresDesign
from pylinstat.leastsq.solution import LeastSquaresParams


class CPUHouseholderBackend:
    """
    CPU backend using Householder QR decomposition.

    Implements the Backend protocol for LeastSquaresDesign -> LeastSquaresParams.
    """

    def __init__(self, check_rank: bool = True):
        self._check_rank = check_rank

    @property
    def name(self) -> str:
        return 'cpu_householder'

    def solve(self, design: LeastSquaresDesign) -> Result[LeastSquaresParams]:
        """
        Solve A x ≈ b via Householder QR.

        Algorithm:
            1. Compute QR decomposition: A = QR
            2. Solve: x = R⁻¹ Qᵗb
            3. Compute residuals, fitted values, and sums of squares

        Raises:
            SingularMatrixError: If A is rank-deficient and check_rank is set,
                or R has an exact zero pivot
        """
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        A = design.A
        b = design.b
        n = design.n

        with timer.section('qr_decomposition'):
            qr = householder_qr(A)

        if qr.rank < n and not self._check_rank:
            msg = f"A is rank-deficient (rank={qr.rank}, expected={n}); coefficients are unreliable"
            warnings.warn(msg, UserWarning, stacklevel=3)
            warnings_list.append(msg)

        with timer.section('solve'):
            coefficients = qr_solve(A, b, check_rank=self._check_rank, qr=qr)

        with timer.section('residuals'):
            fitted_values = A @ coefficients
            residuals = b - fitted_values
            rss = float(residuals @ residuals)
            tss = float(np.sum((b - np.mean(b)) ** 2))

        timer.stop()

        params = LeastSquaresParams(
            coefficients=coefficients,
            residuals=residuals,
            fitted_values=fitted_values,
            Q=qr.Q,
            R=qr.R,
            rss=rss,
            tss=tss,
            rank=qr.rank,
            df_residual=design.m - qr.rank,
        )

        info: dict[str, Any] = {
            'method': 'householder_qr',
            'rank': qr.rank,
            'reflections': qr.reflections,
            'skipped_columns': qr.skipped,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
