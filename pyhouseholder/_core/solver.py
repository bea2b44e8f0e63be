"""
Least-squares solver.

Delegates to backend for actual computation.
"""

import numpy as np

from .qr import HouseholderFactors


def solve_least_squares(
    factors: HouseholderFactors,
    rhs: np.ndarray,
    backend=None,
) -> np.ndarray:
    """
    Solve min ||A X - rhs|| given the Householder factors of A.

    This is just a thin wrapper - backends do all the work. Callers are
    responsible for the shape and rank checks.

    Parameters
    ----------
    factors : HouseholderFactors
        Factorization of A, shape (m, n)
    rhs : ndarray, shape (m, k)
        Right-hand side (not modified)
    backend : Backend, optional
        Computational backend

    Returns
    -------
    X : ndarray, shape (n, k)
        Least-squares solution
    """
    if backend is None:
        from .._backends import get_backend
        backend = get_backend('reference')

    n = factors.qr.shape[1]
    X = np.array(rhs, dtype=np.float64, copy=True)
    backend.apply_qt(factors.qr, X)
    backend.back_substitute(factors.qr, factors.rdiag, X)
    return X[:n, :].copy()
