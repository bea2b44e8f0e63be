"""
PyHouseholder: dense real QR decomposition and least-squares solving.

Copyright (C) 2024 SGCX
Licensed under GPL-3.0
"""

__version__ = "1.0.0"

# Import main user-facing API
from .matrix import Matrix
from .qr import QrDecomposition, lstsq
from .exceptions import DimensionMismatchError, RankDeficientError, MatrixIndexError

# Import backend utilities (for advanced users)
from ._backends import get_backend, list_available_backends

__all__ = [
    'Matrix',
    'QrDecomposition',
    'lstsq',
    'DimensionMismatchError',
    'RankDeficientError',
    'MatrixIndexError',
    'get_backend',
    'list_available_backends',
]
