"""
Error types raised by pyhouseholder.

Each one derives from the exception a NumPy user would already catch.
"""

import numpy as np


class DimensionMismatchError(ValueError):
    """Operand shapes are incompatible (e.g. rhs rows != A rows)."""
    pass


class RankDeficientError(np.linalg.LinAlgError):
    """Operation requires a full-rank matrix."""
    pass


class MatrixIndexError(IndexError):
    """Row/column index or range lies outside the matrix."""
    pass
