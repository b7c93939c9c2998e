"""
Reusable NumPy buffer helpers.

The driver and the steppers keep their working arrays alive across
iterations. These helpers hand back storage of the requested shape, reusing
the previous allocation whenever it is large enough.
"""

from __future__ import annotations

from typing import Optional

import numpy as np


def resize_zero(x: Optional[np.ndarray], n: int) -> np.ndarray:
    """
    Return a zeroed float64 vector of length `n`.

    If `x` already has capacity for `n` elements, a zeroed leading view of
    `x` is returned; otherwise a new array is allocated.

    Parameters
    ----------
    x : np.ndarray or None
        Previous buffer, or None.
    n : int
        Required length.

    Returns
    -------
    np.ndarray
        A length-`n` vector of zeros.
    """
    if x is None or x.size < n:
        return np.zeros(n, dtype=np.float64)
    out = x[:n]
    out.fill(0.0)
    return out


def resize_matrix(x: Optional[np.ndarray], rows: int, cols: int) -> np.ndarray:
    """
    Return a C-contiguous float64 matrix of shape ``(rows, cols)``.

    The contents are unspecified; callers are expected to overwrite them.
    The previous buffer is reused only when its shape already matches, so
    rows handed to callbacks are always contiguous.
    """
    if x is None or x.shape != (rows, cols):
        return np.zeros((rows, cols), dtype=np.float64)
    return x
