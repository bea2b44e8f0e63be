"""
Overflow-safe hypotenuse and column norm.

Both backends share these so that Rdiag is identical whichever backend runs
the sweep.
"""

import math

import numpy as np


def hypotenuse(a: float, b: float) -> float:
    """sqrt(a**2 + b**2) without under/overflow."""
    if abs(a) > abs(b):
        r = b / a
        return abs(a) * math.sqrt(1 + r * r)
    if b != 0:
        r = a / b
        return abs(b) * math.sqrt(1 + r * r)
    return 0.0


def column_norm(qr: np.ndarray, k: int) -> float:
    """2-norm of qr[k:, k], accumulated one element at a time."""
    nrm = 0.0
    for value in qr[k:, k].tolist():
        nrm = hypotenuse(nrm, value)
    return nrm
