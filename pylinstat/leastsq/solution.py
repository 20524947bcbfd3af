"""
Least-squares solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinstat.core.matrix import Matrix
from pylinstat.core.result import Result

if TYPE_CHECKING:
    from pylinstat.leastsq.design import LeastSquaresDesign


@dataclass(frozen=True)
class LeastSquaresParams:
    """
    Parameter payload for a least-squares solve.

    This is the immutable data computed by backends.
    """
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rss: float
    tss: float
    rank: int
    df_residual: int


@dataclass
class LeastSquaresSolution:
    """
    User-facing least-squares results.

    Wraps the backend Result and provides accessors for the solution,
    the factorization and fit diagnostics.
    """
    _result: Result[LeastSquaresParams]
    _design: 'LeastSquaresDesign'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def Q(self) -> Matrix:
        """Orthogonal factor of A (m x m)."""
        return Matrix.from_array(self._result.params.Q)

    @property
    def R(self) -> Matrix:
        """Upper-triangular factor of A (m x n)."""
        return Matrix.from_array(self._result.params.R)

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text summary of the solve."""
        lines = [
            "Least Squares (Householder QR)",
            f"Equations: {self._design.m}   Unknowns: {self._design.n}   Rank: {self.rank}",
            "",
            f"{'':>6}  {'Coefficient':>14}",
        ]
        for i, c in enumerate(self.coefficients):
            lines.append(f"{'x' + str(i + 1):>6}  {c:>14.6g}")
        lines.append("")
        lines.append(f"Residual sum of squares: {self.rss:.6g} on {self.df_residual} degrees of freedom")
        lines.append(f"R-squared: {self.r_squared:.6f}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LeastSquaresSolution(m={self._design.m}, n={self._design.n}, "
            f"rank={self.rank}, rss={self.rss:.6g})"
        )
