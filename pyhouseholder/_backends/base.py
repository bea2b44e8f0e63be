"""
Abstract base classes for backends.

Defines the interface all backends must implement.
"""

from abc import ABC, abstractmethod
import numpy as np


class BackendBase(ABC):
    """
    Abstract base class for all backends.

    Every method works in place on float64 arrays owned by the caller. The
    compressed factor ``qr`` holds the Householder vectors on and below the
    diagonal and the strictly upper part of R above it; ``rdiag`` holds the
    diagonal of R.
    """

    name: str = "base"

    @abstractmethod
    def factor(self, qr: np.ndarray) -> np.ndarray:
        """
        Run the Householder sweep over ``qr`` in place.

        Parameters
        ----------
        qr : ndarray, shape (m, n)
            Working copy of A; overwritten with the compressed factors

        Returns
        -------
        rdiag : ndarray, shape (n,)
            Diagonal of R
        """
        pass

    @abstractmethod
    def apply_qt(self, qr: np.ndarray, X: np.ndarray) -> None:
        """Overwrite ``X`` (shape (m, k)) with Q^T X."""
        pass

    @abstractmethod
    def back_substitute(self, qr: np.ndarray, rdiag: np.ndarray, X: np.ndarray) -> None:
        """Overwrite ``X[:n]`` with the solution of R Z = X[:n]."""
        pass

    @abstractmethod
    def orthogonal_factor(self, qr: np.ndarray) -> np.ndarray:
        """Reconstruct Q, shape (m, n), from the stored reflections."""
        pass

    @abstractmethod
    def get_device_info(self) -> dict:
        """Get backend information."""
        pass

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"
