"""
Nesterov accelerated gradient stepper.

Uses the "look-ahead" form of Nesterov momentum with an increasing momentum
coefficient:

    μ_t = 1 - 3 / (t + 5)
    v_t = μ_t * v_{t-1} - β * g
    step = -μ_t * v_{t-1} + (1 + μ_t) * v_t

References
----------
- https://arxiv.org/pdf/1503.01243.pdf, eq. 1
- cs231n.github.io/neural-networks-3/#sgd
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


@StepperRegistry.register_stepper("nesterov")
class Nesterov:
    """
    Nesterov's accelerated gradient descent.

    Parameters
    ----------
    beta : float, optional
        Gradient scale ``β``. ``0`` means the default, 0.01.

    Notes
    -----
    The time counter starts at zero, so the first call uses ``μ = 0.4``.
    """

    def __init__(self, *, beta: float = 0.01) -> None:
        self.beta = _check_non_negative("beta", beta)

        self._dim: Optional[int] = None
        self._time = 0.0
        self._beta = 0.01
        self._v: Optional[np.ndarray] = None
        self._v_prev: Optional[np.ndarray] = None

    def init(self, dimension: int) -> None:
        self._dim = _check_dimension(dimension)
        self._time = 0.0
        self._beta = _or_default(self.beta, 0.01)
        self._v = resize_zero(self._v, self._dim)
        self._v_prev = resize_zero(self._v_prev, self._dim)

    def step(self, out_step: np.ndarray, grad: np.ndarray) -> None:
        _check_step_args(self, self._dim, out_step, grad)
        mu = 1.0 - 3.0 / (self._time + 5.0)

        self._v_prev[:] = self._v
        self._v *= mu
        self._v -= self._beta * np.asarray(grad)

        np.multiply(self._v_prev, -mu, out=out_step)
        out_step += (1.0 + mu) * self._v
        self._time += 1.0
