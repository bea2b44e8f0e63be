"""
Core algorithms (backend-agnostic).
"""

from .norms import hypotenuse, column_norm
from .qr import HouseholderFactors, householder_qr
from .solver import solve_least_squares

__all__ = [
    "hypotenuse",
    "column_norm",
    "HouseholderFactors",
    "householder_qr",
    "solve_least_squares",
]
