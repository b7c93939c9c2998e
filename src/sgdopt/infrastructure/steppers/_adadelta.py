"""
Adadelta stepper.

Adadelta adapts a per-parameter step size from running averages of both the
squared gradients and the squared steps, so no global learning rate is
needed:

    E[g²]_t = (1-γ) g ⊙ g + γ E[g²]_{t-1}
    step_t  = -sqrt(E[Δ²]_{t-1} + ϵ) / sqrt(E[g²]_t + ϵ) ⊙ g
    E[Δ²]_t = (1-γ) step_t ⊙ step_t + γ E[Δ²]_{t-1}
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


@StepperRegistry.register_stepper("adadelta")
class Adadelta:
    """
    Adadelta stepper.

    Parameters
    ----------
    momentum : float, optional
        Decay ``γ`` of both running averages, in ``[0, 1)``. ``0`` means the
        default, 0.9.
    smooth : float, optional
        Smoothing term ``ϵ``. ``0`` means the default, 1e-8.

    Notes
    -----
    - The first steps are of order ``sqrt(ϵ)``; Adadelta crawls toward the
      minimum with very small steps, so a run with the default step
      tolerance may stop early. Pass a negative tolerance and an iteration
      limit to let it run.
    - State (``E[g²]``, ``E[Δ²]``) is zeroed by `init`.
    """

    def __init__(self, *, momentum: float = 0.9, smooth: float = 1e-8) -> None:
        self.momentum = _check_decay("momentum", momentum)
        self.smooth = _check_non_negative("smooth", smooth)

        self._dim: Optional[int] = None
        self._momentum = 0.9
        self._smooth = 1e-8
        self._g: Optional[np.ndarray] = None
        self._s: Optional[np.ndarray] = None

    def init(self, dimension: int) -> None:
        """
        Prepare the stepper for a run over `dimension` parameters.

        Parameters
        ----------
        dimension : int
            Number of parameters. Must be positive.
        """
        self._dim = _check_dimension(dimension)
        self._momentum = _or_default(self.momentum, 0.9)
        self._smooth = _or_default(self.smooth, 1e-8)
        self._g = resize_zero(self._g, self._dim)
        self._s = resize_zero(self._s, self._dim)

    def step(self, out_step: np.ndarray, grad: np.ndarray) -> None:
        """
        Write the next Adadelta update into `out_step`.

        Parameters
        ----------
        out_step : np.ndarray
            Output vector of length `dimension`, overwritten in place.
        grad : np.ndarray
            Averaged gradient of length `dimension`.
        """
        _check_step_args(self, self._dim, out_step, grad)
        grad = np.asarray(grad)
        gamma = self._momentum
        eps = self._smooth

        self._g *= gamma
        self._g += (1.0 - gamma) * grad * grad

        np.divide(np.sqrt(self._s + eps), np.sqrt(self._g + eps), out=out_step)
        out_step *= -grad

        self._s *= gamma
        self._s += (1.0 - gamma) * out_step * out_step
