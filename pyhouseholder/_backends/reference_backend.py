"""
Reference backend using scalar loops.

Accumulates every inner product one term at a time, in the same order as the
classic MatrixPack/Jama routines, so results reproduce those libraries
bit-for-bit.
"""

import numpy as np

from .base import BackendBase
from .._core.norms import column_norm


class ReferenceBackend(BackendBase):
    """
    Scalar-loop backend.

    Slow (pure Python inner loops) but deterministic down to the last bit.
    """

    def __init__(self):
        self.name = "reference"
        self.precision = "fp64"

    def factor(self, qr: np.ndarray) -> np.ndarray:
        m, n = qr.shape
        rdiag = np.zeros(n, dtype=np.float64)

        for k in range(n):
            nrm = column_norm(qr, k)

            if nrm != 0.0:
                # Form k-th Householder vector
                if qr[k, k] < 0:
                    nrm = -nrm
                for i in range(k, m):
                    qr[i, k] /= nrm
                qr[k, k] += 1.0

                # Apply transformation to remaining columns
                for j in range(k + 1, n):
                    self._reflect(qr, k, qr, j)

            rdiag[k] = -nrm

        return rdiag

    def apply_qt(self, qr: np.ndarray, X: np.ndarray) -> None:
        n = qr.shape[1]
        for k in range(n):
            for j in range(X.shape[1]):
                self._reflect(qr, k, X, j)

    def back_substitute(self, qr: np.ndarray, rdiag: np.ndarray, X: np.ndarray) -> None:
        n = qr.shape[1]
        count = X.shape[1]
        for k in range(n - 1, -1, -1):
            for j in range(count):
                X[k, j] /= rdiag[k]
            for i in range(k):
                for j in range(count):
                    X[i, j] -= X[k, j] * qr[i, k]

    def orthogonal_factor(self, qr: np.ndarray) -> np.ndarray:
        m, n = qr.shape
        Q = np.zeros((m, n), dtype=np.float64)
        for k in range(min(m, n) - 1, -1, -1):
            Q[k, k] = 1.0
            if qr[k, k] != 0:
                for j in range(k, n):
                    self._reflect(qr, k, Q, j)
        return Q

    @staticmethod
    def _reflect(qr: np.ndarray, k: int, X: np.ndarray, j: int) -> None:
        """Apply the k-th reflection to column j of X."""
        m = qr.shape[0]
        s = 0.0
        for i in range(k, m):
            s += qr[i, k] * X[i, j]
        s = -s / qr[k, k]
        for i in range(k, m):
            X[i, j] += s * qr[i, k]

    def get_device_info(self) -> dict:
        """Get backend information."""
        return {
            'backend': 'cpu',
            'precision': 'fp64',
            'library': f'NumPy {np.__version__} (scalar loops)',
        }
