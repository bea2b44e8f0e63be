"""
QR decomposition and least-squares solving.

This is the user-facing API.
"""

import warnings

import numpy as np
from typing import Optional, Union

from ._backends import get_backend, BackendBase
from ._core import householder_qr, solve_least_squares
from ._utils import check_finite
from .exceptions import DimensionMismatchError, RankDeficientError
from .matrix import Matrix


class QrDecomposition:
    """
    QR decomposition of a rectangular matrix via Householder reflections.

    For an m-by-n matrix A with m >= n, the QR decomposition is an m-by-n
    orthogonal matrix Q and an n-by-n upper triangular matrix R so that
    A = Q R. The decomposition always exists, even if A does not have full
    rank, so construction never fails for finite input. Its primary use is the least-squares
    solution of overdetermined systems.

    The factorization is computed once, on a private copy of A; the
    decomposition is read-only afterwards.

    Examples
    --------
    >>> A = Matrix([[8.1, 2.3, -1.5],
    ...             [0.5, -6.23, 0.87],
    ...             [2.5, 1.5, 10.2]])
    >>> b = Matrix([[6.1], [2.3], [1.8]])
    >>> qr = QrDecomposition(A)
    >>> qr.is_full_rank
    True
    >>> x = qr.solve(b)           # 3 x 1
    >>> R = qr.upper_triangular_factor
    >>> Q = qr.orthogonal_factor
    """

    def __init__(
        self,
        A: Union[Matrix, np.ndarray],
        backend: Union[str, BackendBase] = 'reference',
    ):
        """
        Factorize A.

        Parameters
        ----------
        A : Matrix or array-like, shape (m, n)
            Matrix to decompose. Never modified. Must not contain NaN or Inf.
        backend : str or BackendBase
            Computational backend: 'reference' (default) or 'cpu'
        """
        if not isinstance(A, Matrix):
            A = Matrix(A)

        m, n = A.shape
        if m < n:
            warnings.warn(
                f"QR decomposition of a {m}x{n} matrix with fewer rows than "
                f"columns: the matrix cannot be full rank and solve() will fail.",
                UserWarning,
                stacklevel=2,
            )

        values = check_finite(A.to_numpy(), name="A")
        self.backend = get_backend(backend)
        self._factors = householder_qr(values, backend=self.backend)

    @property
    def rows(self) -> int:
        return self._factors.qr.shape[0]

    @property
    def columns(self) -> int:
        return self._factors.qr.shape[1]

    @property
    def r_diagonal(self) -> np.ndarray:
        """Diagonal of R (copy)."""
        return self._factors.rdiag.copy()

    # ------------------------------------------------------------------
    # Rank
    # ------------------------------------------------------------------

    @property
    def is_full_rank(self) -> bool:
        """True if no diagonal entry of R is exactly zero."""
        for value in self._factors.rdiag:
            if value == 0:
                return False
        return True

    def _default_tol(self) -> float:
        rdiag = np.abs(self._factors.rdiag)
        if rdiag.size == 0:
            return 0.0
        eps = np.finfo(np.float64).eps
        return max(self.rows, self.columns) * eps * float(rdiag.max())

    def numerical_rank(self, tol: Optional[float] = None) -> int:
        """
        Number of diagonal entries of R larger than ``tol`` in magnitude.

        Parameters
        ----------
        tol : float, optional
            Threshold. Defaults to max(m, n) * eps * max|diag(R)|.

        Notes
        -----
        Unlike :attr:`is_full_rank`, this treats tiny diagonal entries as zero.
        Householder QR without pivoting is not rank revealing in general, so
        this is an estimate.
        """
        if tol is None:
            tol = self._default_tol()
        if tol < 0:
            raise ValueError(f"tol must be non-negative, got {tol}")
        return int(np.sum(np.abs(self._factors.rdiag) > tol))

    def is_numerically_full_rank(self, tol: Optional[float] = None) -> bool:
        """Tolerance-based variant of :attr:`is_full_rank`."""
        return self.numerical_rank(tol) == self.columns

    # ------------------------------------------------------------------
    # Factors
    # ------------------------------------------------------------------

    @property
    def upper_triangular_factor(self) -> Matrix:
        """The n x n upper triangular factor R."""
        qr = self._factors.qr
        m, n = qr.shape
        p = min(m, n)
        R = np.zeros((n, n), dtype=np.float64)
        R[:p, :] = np.triu(qr[:p, :], k=1)
        R[np.diag_indices(n)] = self._factors.rdiag
        return Matrix._wrap(R)

    @property
    def orthogonal_factor(self) -> Matrix:
        """The m x n factor Q with orthonormal columns."""
        return Matrix._wrap(self.backend.orthogonal_factor(self._factors.qr))

    @property
    def householder_vectors(self) -> Matrix:
        """
        The m x n lower trapezoidal matrix whose columns are the reflection
        vectors (zeros above the diagonal).
        """
        return Matrix._wrap(np.tril(self._factors.qr))

    # ------------------------------------------------------------------
    # Solve
    # ------------------------------------------------------------------

    def solve(self, rhs: Union[Matrix, np.ndarray]) -> Matrix:
        """
        Least-squares solution of A X = B.

        Parameters
        ----------
        rhs : Matrix or array-like, shape (m, k)
            Right-hand side with as many rows as A and any number of columns

        Returns
        -------
        Matrix, shape (n, k)
            X minimizing the two norm of Q R X - B

        Raises
        ------
        DimensionMismatchError
            If rhs does not have as many rows as A
        RankDeficientError
            If A is rank deficient
        ValueError
            If rhs contains NaN or Inf
        """
        if not isinstance(rhs, Matrix):
            rhs = Matrix(rhs)

        if rhs.rows != self.rows:
            raise DimensionMismatchError(
                f"Matrix row dimensions must agree: A has {self.rows} rows, "
                f"rhs has {rhs.rows}"
            )
        if not self.is_full_rank:
            raise RankDeficientError("Matrix is rank deficient.")

        values = check_finite(rhs.to_numpy(), name="rhs")
        X = solve_least_squares(self._factors, values, backend=self.backend)
        return Matrix._wrap(X)

    def __repr__(self):
        return (
            f"QrDecomposition({self.rows}x{self.columns}, "
            f"full_rank={self.is_full_rank}, backend={self.backend.name!r})"
        )


def lstsq(A, b, backend: Union[str, BackendBase] = 'reference') -> Matrix:
    """
    Least-squares solution of A X = b (convenience function).

    Parameters
    ----------
    A : Matrix or array-like, shape (m, n)
        Coefficient matrix, m >= n and full rank
    b : Matrix or array-like, shape (m, k)
        Right-hand side
    backend : str or BackendBase
        Computational backend

    Returns
    -------
    Matrix, shape (n, k)
        Least-squares solution

    Examples
    --------
    >>> # Fit y = c0 + c1 * t through four points
    >>> A = [[1, 0], [1, 1], [1, 2], [1, 3]]
    >>> b = [[1.0], [2.9], [5.1], [7.0]]
    >>> coef = lstsq(A, b)
    """
    return QrDecomposition(A, backend=backend).solve(b)
