"""
Immutable dense matrix value type.

Matrix is the shared data model of the QR and descriptive statistics
components: a (rows x columns) block of float64 values stored row-major.
NumPy supplies the primitive arithmetic; Matrix only guarantees shape
invariants and immutability. Every operation returns a new value.

A Vector is a Matrix with rows == 1 or columns == 1.

Interchange layout:
    bytes 0..3   rows     (unsigned 32-bit little-endian)
    bytes 4..7   columns  (unsigned 32-bit little-endian)
    bytes 8..    rows*columns float64 values, little-endian, row-major
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinstat.core.exceptions import ShapeError
from pylinstat.core.validation import check_array, check_vector_shape, check_min_elements

HEADER_DTYPE = np.dtype('<u4')
DATA_DTYPE = np.dtype('<f8')
HEADER_BYTES = 2 * HEADER_DTYPE.itemsize


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Immutable dense matrix of float64 values.

    Construction:
        Matrix.new([[1, 2], [3, 4]])    # from nested sequence
        Matrix.new([1, 2, 3])           # flat sequence -> 1 x 3 row vector
        Matrix.column([1, 2, 3])        # 3 x 1 column vector
        Matrix.eye(3)                   # identity
        Matrix.from_array(ndarray)
        Matrix.from_bytes(buf)          # interchange layout

    Equality and hashing are value-based: two matrices are equal when they
    have the same shape and the same elements.
    """
    _data: NDArray[np.floating[Any]]

    @classmethod
    def new(cls, values: ArrayLike) -> Matrix:
        """Build a Matrix from a nested (2D) or flat (1D, row vector) sequence."""
        arr = check_array(values, 'values')
        if arr.ndim == 1:
            arr = arr.reshape(1, -1)
        return cls._build(arr)

    @classmethod
    def column(cls, values: ArrayLike) -> Matrix:
        """Build a column vector from a flat sequence."""
        arr = check_array(values, 'values')
        return cls._build(arr.reshape(-1, 1))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """Build a Matrix from a 1D or 2D array (1D becomes a row vector)."""
        return cls.new(array)

    @classmethod
    def eye(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        check_min_elements(n, 1, 'n')
        return cls._build(np.eye(n, dtype=np.float64))

    @classmethod
    def from_bytes(cls, buf: bytes) -> Matrix:
        """
        Parse the interchange layout.

        Raises:
            ShapeError: If the buffer is shorter than the header, the header
                declares an empty shape, or the payload length disagrees
                with the header.
        """
        rows, columns = read_shape(buf)
        expected = HEADER_BYTES + rows * columns * DATA_DTYPE.itemsize
        if len(buf) != expected:
            raise ShapeError(
                f"Matrix payload is {len(buf)} bytes, header ({rows}, {columns}) "
                f"requires {expected}",
                expected=expected,
                actual=len(buf),
            )
        data = np.frombuffer(buf, dtype=DATA_DTYPE, offset=HEADER_BYTES)
        return cls._build(data.astype(np.float64).reshape(rows, columns))

    @classmethod
    def _build(cls, data: NDArray) -> Matrix:
        """Internal builder with validation. Takes ownership of `data`."""
        if data.ndim != 2:
            raise ShapeError(
                f"Matrix data must be 2D, got {data.ndim}D", expected=2, actual=data.ndim
            )
        rows, columns = data.shape
        if rows < 1 or columns < 1:
            raise ShapeError(
                f"Matrix must have at least one row and one column, got ({rows}, {columns})",
                actual=(rows, columns),
            )
        data = np.ascontiguousarray(data, dtype=np.float64)
        data.setflags(write=False)
        return cls(_data=data)

    # === Shape ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def size(self) -> int:
        """Element count, always rows * columns."""
        return self._data.size

    @property
    def is_vector(self) -> bool:
        return self.rows == 1 or self.columns == 1

    # === Element access ===

    @property
    def items(self) -> tuple[float, ...]:
        """Flat row-major tuple of elements."""
        return tuple(self._data.ravel().tolist())

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Read-only (rows x columns) view of the data."""
        return self._data

    def flatten(self) -> NDArray[np.floating[Any]]:
        """Read-only 1D view of the elements in row-major order."""
        return self._data.reshape(-1)

    # === Transformations ===

    def transpose(self) -> Matrix:
        return Matrix._build(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def __add__(self, other: Matrix) -> Matrix:
        return Matrix._build(self._data + _operand(other))

    def __sub__(self, other: Matrix) -> Matrix:
        return Matrix._build(self._data - _operand(other))

    def __mul__(self, other: Matrix | float) -> Matrix:
        """Element-wise product (or scaling by a scalar)."""
        return Matrix._build(self._data * _operand(other))

    def __matmul__(self, other: Matrix) -> Matrix:
        return Matrix._build(self._data @ _operand(other))

    def allclose(self, other: Matrix, atol: float = 1e-8, rtol: float = 0.0) -> bool:
        """True if shapes match and every element is within tolerance."""
        return self.shape == other.shape and bool(
            np.allclose(self._data, other._data, rtol=rtol, atol=atol)
        )

    # === Interchange ===

    def to_bytes(self) -> bytes:
        header = np.array([self.rows, self.columns], dtype=HEADER_DTYPE).tobytes()
        return header + self._data.astype(DATA_DTYPE).tobytes(order='C')

    # === Value semantics ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((self.shape, self._data.tobytes()))

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, columns={self.columns})"


def _operand(other: Matrix | float) -> NDArray | float:
    if isinstance(other, Matrix):
        return other._data
    return other


def read_shape(buf: bytes) -> tuple[int, int]:
    """
    Read (rows, columns) from the header of an interchange buffer.

    Raises:
        ShapeError: If the buffer is shorter than the header or declares
            a zero dimension.
    """
    if len(buf) < HEADER_BYTES:
        raise ShapeError(
            f"Matrix header requires {HEADER_BYTES} bytes, got {len(buf)}",
            expected=HEADER_BYTES,
            actual=len(buf),
        )
    rows, columns = (int(v) for v in np.frombuffer(buf, dtype=HEADER_DTYPE, count=2))
    if rows < 1 or columns < 1:
        raise ShapeError(
            f"Matrix must have at least one row and one column, got ({rows}, {columns})",
            actual=(rows, columns),
        )
    return rows, columns


def as_vector(x: Matrix | ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Promote a vector-shaped Matrix or a plain numeric sequence to a flat
    float64 array of its elements.

    Orientation is discarded: row and column vectors give the same result.
    The returned array is always a fresh copy.

    Raises:
        ValidationError: If the data is not numeric
        ShapeError: If the value is not vector-shaped or has no elements
    """
    if isinstance(x, Matrix):
        check_vector_shape(x.rows, x.columns, name)
        return x.flatten().copy()

    arr = check_array(x, name)
    if arr.ndim == 2:
        check_vector_shape(arr.shape[0], arr.shape[1], name)
    elif arr.ndim != 1:
        raise ShapeError(
            f"{name}: expected a 1D sequence or a vector, got {arr.ndim}D with shape {arr.shape}",
            actual=arr.shape,
        )
    values = arr.reshape(-1)
    check_min_elements(values.size, 1, name)
    return values


def as_matrix(x: Matrix | ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Promote a Matrix or 2D array-like to a fresh float64 2D array."""
    if isinstance(x, Matrix):
        return x.to_numpy().copy()
    arr = check_array(x, name)
    if arr.ndim != 2:
        raise ShapeError(
            f"{name}: expected 2D array, got {arr.ndim}D with shape {arr.shape}",
            expected=2,
            actual=arr.ndim,
        )
    return arr
