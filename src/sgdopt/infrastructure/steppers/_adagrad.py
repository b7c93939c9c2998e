"""
Adagrad stepper.

Per-parameter step sizes shrink with the accumulated squared gradient:

    G_t = G_{t-1} + g ⊙ g
    step = -η * g / sqrt(G_t + ϵ)

where ⊙ is the element-wise product.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .._buffers import resize_zero
from ._base import (
    StepperRegistry,
    _check_dimension,
    _check_non_negative,
    _check_step_args,
    _or_default,
)


@StepperRegistry.register_stepper("adagrad")
class Adagrad:
    """
    Adagrad stepper.

    Parameters
    ----------
    size : float, optional
        Step size ``η``. ``0`` means the default, 0.01.
    smooth : float, optional
        Smoothing term ``ϵ`` added under the square root. ``0`` means the
        default, 1e-8.

    Notes
    -----
    The accumulator never decays, so the effective step size is monotonically
    decreasing; the iterates oscillate around the optimum rather than
    producing vanishing steps.
    """

    def __init__(self, *, size: float = 0.01, smooth: float = 1e-8) -> None:
        self.size = _check_non_negative("size", size)
        self.smooth = _check_non_negative("smooth", smooth)

        self._dim: Optional[int] = None
        self._size = 0.01
        self._smooth = 1e-8
        self._g: Optional[np.ndarray] = None

    def init(self, dimension: int) -> None:
        self._dim = _check_dimension(dimension)
        self._size = _or_default(self.size, 0.01)
        self._smooth = _or_default(self.smooth, 1e-8)
        self._g = resize_zero(self._g, self._dim)

    def step(self, out_step: np.ndarray, grad: np.ndarray) -> None:
        _check_step_args(self, self._dim, out_step, grad)
        grad = np.asarray(grad)

        self._g += grad * grad
        np.divide(grad, np.sqrt(self._g + self._smooth), out=out_step)
        out_step *= -self._size
