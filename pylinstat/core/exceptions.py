"""
Exception hierarchy for pylinstat.

All exceptions inherit from PyLinStatError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinStatError(Exception):
    """Base exception for all pylinstat errors."""
    pass


class ValidationError(PyLinStatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    Operand shapes or lengths are incorrect or inconsistent.

    Raised when operands of a bivariate operation differ in length, when an
    operand has fewer elements than the operation requires, or when a value
    does not have the expected dimensionality.

    Attributes:
        expected: Expected size or shape, if known
        actual: Actual size or shape, if known
    """

    def __init__(
        self,
        message: str,
        expected: object | None = None,
        actual: object | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(PyLinStatError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Triangular factor is singular or numerically rank-deficient.

    Raised by least-squares solves when a zero pivot of R makes
    back-substitution impossible. The factorization itself never raises.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (number of columns)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
