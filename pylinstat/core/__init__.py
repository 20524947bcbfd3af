"""
Core infrastructure for pylinstat.

Shared abstractions and numeric kernels used by the domain subpackages
(leastsq, descriptive).

Key components:
    matrix: Immutable Matrix value type and vector promotion
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pylinstat.core.matrix import Matrix, as_vector, as_matrix, read_shape
from pylinstat.core.result import Result
from pylinstat.core.exceptions import (
    PyLinStatError,
    ValidationError,
    ShapeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Data model
    "Matrix",
    "as_vector",
    "as_matrix",
    "read_shape",
    # Result
    "Result",
    # Exceptions
    "PyLinStatError",
    "ValidationError",
    "ShapeError",
    "NumericalError",
    "SingularMatrixError",
]
