"""
RMSProp stepper.

    E[g²]_t = γ E[g²]_{t-1} + (1-γ) g ⊙ g
    step = -η / sqrt(E[g²]_t + ϵ) ⊙ g
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .._buffers import resize_zero
from ._base import (
    StepperRegistry,
    _check_decay,
    _check_dimension,
    _check_non_negative,
    _check_step_args,
    _or_default,
)


@StepperRegistry.register_stepper("rmsprop")
class RMSProp:
    """
    RMSProp stepper.

    Parameters
    ----------
    rate : float, optional
        Learning rate ``η``. ``0`` means the default, 1e-3.
    momentum : float, optional
        Decay ``γ`` of the squared-gradient average, in ``[0, 1)``. ``0``
        means the default, 0.9.
    smooth : float, optional
        Smoothing term ``ϵ``. ``0`` means the default, 1e-8.
    """

    def __init__(
        self, *, rate: float = 1e-3, momentum: float = 0.9, smooth: float = 1e-8
    ) -> None:
        self.rate = _check_non_negative("rate", rate)
        self.momentum = _check_decay("momentum", momentum)
        self.smooth = _check_non_negative("smooth", smooth)

        self._dim: Optional[int] = None
        self._rate = 1e-3
        self._momentum = 0.9
        self._smooth = 1e-8
        self._g: Optional[np.ndarray] = None

    def init(self, dimension: int) -> None:
        self._dim = _check_dimension(dimension)
        self._rate = _or_default(self.rate, 1e-3)
        self._momentum = _or_default(self.momentum, 0.9)
        self._smooth = _or_default(self.smooth, 1e-8)
        self._g = resize_zero(self._g, self._dim)

    def step(self, out_step: np.ndarray, grad: np.ndarray) -> None:
        _check_step_args(self, self._dim, out_step, grad)
        grad = np.asarray(grad)
        gamma = self._momentum

        self._g *= gamma
        self._g += (1.0 - gamma) * grad * grad

        np.divide(grad, np.sqrt(self._g + self._smooth), out=out_step)
        out_step *= -self._rate
