"""
Least-squares design.

Holds the coefficient matrix A (m x n) and right-hand side b (m,) of an
overdetermined system A x ≈ b, validated once at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinstat.core.matrix import Matrix, as_matrix, as_vector
from pylinstat.core.validation import check_finite, check_equal_length, check_tall


@dataclass(frozen=True)
class LeastSquaresDesign:
    """
    Least-squares problem definition. Immutable after construction.

    Construction:
        LeastSquaresDesign.build(A, b)   # Matrix or array-likes
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _m: int
    _n: int

    @classmethod
    def build(cls, A: Matrix | ArrayLike, b: Matrix | ArrayLike) -> LeastSquaresDesign:
        """
        Validate and build a design.

        Raises:
            ValidationError: If A or b is non-numeric or non-finite
            ShapeError: If A is not 2D, b is not a vector, their lengths
                differ, or A has fewer rows than columns
        """
        A_arr = as_matrix(A, 'A')
        b_arr = as_vector(b, 'b')

        check_finite(A_arr, 'A')
        check_finite(b_arr, 'b')

        m, n = A_arr.shape
        check_equal_length(m, b_arr.shape[0], names=('A rows', 'b'))
        check_tall(m, n, 'A')

        A_arr.setflags(write=False)
        b_arr.setflags(write=False)
        return cls(_A=A_arr, _b=b_arr, _m=m, _n=n)

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (m x n)."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (m,)."""
        return self._b

    @property
    def m(self) -> int:
        """Number of equations."""
        return self._m

    @property
    def n(self) -> int:
        """Number of unknowns."""
        return self._n

    def __repr__(self) -> str:
        return f"LeastSquaresDesign(m={self._m}, n={self._n})"
