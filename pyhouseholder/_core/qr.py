"""
Householder QR factorization.

Backend-agnostic interface to the compressed factorization.
"""

import numpy as np
from dataclasses import dataclass


@dataclass(frozen=True)
class HouseholderFactors:
    """Compressed result of a Householder QR sweep."""
    qr: np.ndarray      # Householder vectors on/below diagonal, R strictly above
    rdiag: np.ndarray   # Diagonal of R


def householder_qr(A: np.ndarray, backend=None) -> HouseholderFactors:
    """
    Householder QR decomposition.

    Delegates to backend-specific implementation.

    Parameters
    ----------
    A : ndarray, shape (m, n)
        Matrix to decompose (not modified)
    backend : Backend, optional
        Computational backend

    Returns
    -------
    result : HouseholderFactors
        Compressed QR factors
    """
    if backend is None:
        from .._backends import get_backend
        backend = get_backend('reference')

    qr = np.array(A, dtype=np.float64, copy=True)
    rdiag = backend.factor(qr)
    return HouseholderFactors(qr=qr, rdiag=rdiag)
