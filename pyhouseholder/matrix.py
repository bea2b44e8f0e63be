"""
Dense real matrix container.

A thin, bounds-checked wrapper around a float64 ndarray. Every operation that
returns a Matrix returns an independent copy; the backing array is never
handed out by reference.
"""

import numpy as np
import pandas as pd
from typing import Optional, Sequence, Tuple

from ._utils import check_array, check_dimension, check_index, check_range
from .exceptions import DimensionMismatchError


class Matrix:
    """
    Rectangular matrix of double-precision values.

    Indexing is zero-based and bounds-checked: negative indices are rejected
    rather than wrapping around.

    Examples
    --------
    >>> A = Matrix([[8.1, 2.3, -1.5],
    ...             [0.5, -6.23, 0.87],
    ...             [2.5, 1.5, 10.2]])
    >>> A.rows, A.columns
    (3, 3)
    >>> A[1, 2]
    0.87
    >>> B = A.submatrix(0, 1, 1, 2)   # inclusive ranges
    >>> B.shape
    (2, 2)
    """

    __slots__ = ('_data',)

    # NumPy operands defer to the Matrix operators below.
    __array_ufunc__ = None

    def __init__(self, data):
        """
        Parameters
        ----------
        data : array-like, shape (rows, columns)
            Values to copy into the matrix. Nested sequences and ndarrays are
            accepted; an empty sequence gives a 0 x 0 matrix.
        """
        self._data = check_array(data, name='data')

    @classmethod
    def _wrap(cls, array: np.ndarray) -> 'Matrix':
        # Takes ownership of `array` without copying; callers pass fresh arrays.
        obj = cls.__new__(cls)
        obj._data = array
        return obj

    @classmethod
    def zeros(cls, rows: int, columns: int) -> 'Matrix':
        """Matrix of the given shape filled with 0.0."""
        rows = check_dimension(rows, 'rows')
        columns = check_dimension(columns, 'columns')
        return cls._wrap(np.zeros((rows, columns), dtype=np.float64))

    @classmethod
    def identity(cls, n: int) -> 'Matrix':
        """n x n identity matrix."""
        n = check_dimension(n, 'n')
        return cls._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, columns: Optional[Sequence[str]] = None) -> 'Matrix':
        """
        Build a matrix from a DataFrame.

        Parameters
        ----------
        frame : DataFrame
            Table of numeric values; one matrix row per frame row.
        columns : list of str, optional
            Subset and order of columns to use. Defaults to all columns.
        """
        if columns is not None:
            frame = frame[list(columns)]
        return cls(frame.to_numpy(dtype=np.float64))

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _check_key(self, key) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair")
        row = check_index(key[0], self.rows, 'row')
        column = check_index(key[1], self.columns, 'column')
        return row, column

    def __getitem__(self, key) -> float:
        return float(self._data[self._check_key(key)])

    def __setitem__(self, key, value: float):
        self._data[self._check_key(key)] = value

    def get(self, row: int, column: int) -> float:
        """Element at (row, column)."""
        return self[row, column]

    def set(self, row: int, column: int, value: float):
        """Set the element at (row, column)."""
        self[row, column] = value

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------

    def clone(self) -> 'Matrix':
        """Deep copy with independent storage."""
        return Matrix._wrap(self._data.copy())

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    def submatrix(self, row_start: int, row_end: int, col_start: int, col_end: int) -> 'Matrix':
        """
        Copy of the block [row_start, row_end] x [col_start, col_end].

        Both ranges are inclusive. Raises MatrixIndexError if a bound falls
        outside the matrix or a start exceeds its end.
        """
        row_start, row_end = check_range(row_start, row_end, self.rows, 'row')
        col_start, col_end = check_range(col_start, col_end, self.columns, 'column')
        return Matrix._wrap(self._data[row_start:row_end + 1, col_start:col_end + 1].copy())

    def to_numpy(self) -> np.ndarray:
        """Copy of the values as a float64 ndarray."""
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype, copy=True)

    def to_frame(self, index=None, columns=None) -> pd.DataFrame:
        """Copy of the values as a DataFrame."""
        return pd.DataFrame(self._data.copy(), index=index, columns=columns)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _check_same_shape(self, other: 'Matrix', op: str):
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Cannot {op} matrices of shape {self.shape} and {other.shape}"
            )

    def transpose(self) -> 'Matrix':
        return Matrix._wrap(np.ascontiguousarray(self._data.T))

    @property
    def T(self) -> 'Matrix':
        return self.transpose()

    def multiply(self, other: 'Matrix') -> 'Matrix':
        """Matrix product self * other."""
        if self.columns != other.rows:
            raise DimensionMismatchError(
                f"Matrix inner dimensions must agree: {self.shape} @ {other.shape}"
            )
        return Matrix._wrap(self._data @ other._data)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'add')
        return Matrix._wrap(self._data + other._data)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'subtract')
        return Matrix._wrap(self._data - other._data)

    def __mul__(self, scalar):
        if isinstance(scalar, Matrix):
            return NotImplemented
        return Matrix._wrap(self._data * float(scalar))

    __rmul__ = __mul__

    def __neg__(self):
        return Matrix._wrap(-self._data)

    def norm_frobenius(self) -> float:
        """Frobenius norm (sqrt of the sum of squares)."""
        return float(np.linalg.norm(self._data, 'fro')) if self._data.size else 0.0

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def allclose(self, other: 'Matrix', rtol: float = 1e-9, atol: float = 1e-9) -> bool:
        """Elementwise comparison within tolerance (shapes must match)."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def __repr__(self):
        body = np.array2string(self._data, precision=6, suppress_small=True)
        return f"Matrix({self.rows}x{self.columns},\n{body})"
