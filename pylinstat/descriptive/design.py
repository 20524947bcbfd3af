"""
VectorDesign: data wrapper for descriptive statistics.

Wraps the flattened elements of a vector and provides validation and
metadata for the describe()/summary() pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinstat.core.matrix import Matrix, as_vector


@dataclass(frozen=True)
class VectorDesign:
    """
    Design for descriptive statistics.

    Holds the n >= 1 elements of a row or column vector, flattened and
    read-only. Orientation is recorded for display only; every statistic
    operates on the flat element sequence.

    Construction:
        VectorDesign.from_array([1, 2, 3])
        VectorDesign.from_matrix(Matrix.column([1, 2, 3]))
    """
    _values: NDArray[np.floating[Any]]
    _rows: int
    _columns: int

    @classmethod
    def from_array(cls, data: Matrix | ArrayLike) -> VectorDesign:
        """
        Build VectorDesign from a Matrix or plain numeric sequence.

        Raises:
            ValidationError: If data is not numeric
            ShapeError: If data is empty or not vector-shaped
        """
        if isinstance(data, Matrix):
            return cls.from_matrix(data)
        values = as_vector(data, 'x')
        return cls._build(values, rows=1, columns=values.size)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> VectorDesign:
        values = as_vector(matrix, 'x')
        return cls._build(values, rows=matrix.rows, columns=matrix.columns)

    @classmethod
    def _build(cls, values: NDArray, rows: int, columns: int) -> VectorDesign:
        values.setflags(write=False)
        return cls(_values=values, _rows=rows, _columns=columns)

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Flattened elements, shape (n,)."""
        return self._values

    @property
    def n(self) -> int:
        """Number of elements."""
        return self._values.size

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def has_nonfinite(self) -> bool:
        """Whether any element is NaN or infinite."""
        return not bool(np.all(np.isfinite(self._values)))

    def __repr__(self) -> str:
        return f"VectorDesign(n={self.n}, shape=({self._rows}, {self._columns}))"
