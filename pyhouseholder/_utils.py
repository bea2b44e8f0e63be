"""
Utility functions.
"""

import numbers
import operator

import numpy as np

from .exceptions import MatrixIndexError


def check_array(X, name='X', dtype=np.float64):
    """Validate 2-D array input and return an independent float64 copy."""
    X = np.array(X, dtype=dtype, copy=True)
    if X.ndim == 1 and X.size == 0:
        X = X.reshape(0, 0)
    if X.ndim != 2:
        raise ValueError(f"{name} must be 2-dimensional, got {X.ndim} dimension(s)")
    return np.ascontiguousarray(X)


def check_finite(X, name='X'):
    """Reject arrays containing NaN or Inf."""
    if not np.all(np.isfinite(X)):
        raise ValueError(f"{name} contains NaN or Inf")
    return X


def check_dimension(value, name):
    """Validate a row/column count."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def check_index(index, size, name):
    """Validate a zero-based index (no negative wrap-around)."""
    if isinstance(index, (bool, np.bool_)):
        raise TypeError(f"{name} index must be an integer, got {type(index).__name__}")
    try:
        index = operator.index(index)
    except TypeError:
        raise TypeError(f"{name} index must be an integer, got {type(index).__name__}") from None
    if index < 0 or index >= size:
        raise MatrixIndexError(f"{name} index {index} out of range [0, {size - 1}]")
    return index


def check_range(start, end, size, name):
    """Validate an inclusive [start, end] index range."""
    start = check_index(start, size, name)
    end = check_index(end, size, name)
    if start > end:
        raise MatrixIndexError(f"{name} range start {start} exceeds end {end}")
    return start, end
