"""
Adam stepper.

This module provides the Adam update rule expressed as a stepper: it keeps
exponentially decaying averages of past gradients (first moment) and past
squared gradients (second moment), corrects both for their zero
initialization, and returns the resulting update instead of applying it.

For more information see https://arxiv.org/pdf/1412.6980.pdf .
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


@StepperRegistry.register_stepper("adam")
class Adam:
    """
    Adam stepper.

    Update rule
    -----------
    Let ``g_t`` be the averaged gradient at call ``t`` (starting at 1):

        m_t = γ1 * m_{t-1} + (1 - γ1) * g_t
        ν_t = γ2 * ν_{t-1} + (1 - γ2) * (g_t ⊙ g_t)

        m̂_t = m_t / (1 - γ1^t)
        ν̂_t = ν_t / (1 - γ2^t)

        step = -η * m̂_t / (sqrt(ν̂_t) + ϵ)

    Parameters
    ----------
    size : float, optional
        Step size ``η``. ``0`` means the default, 1e-3.
    mean_momentum : float, optional
        Decay ``γ1`` of the first moment, in ``[0, 1)``. ``0`` means the
        default, 0.9.
    var_momentum : float, optional
        Decay ``γ2`` of the second moment, in ``[0, 1)``. ``0`` means the
        default, 0.999.
    smooth : float, optional
        Numerical stability term ``ϵ`` added to the denominator. ``0`` means
        the default, 1e-8.

    Raises
    ------
    ValueError
        If any hyperparameter is outside its valid range.

    Notes
    -----
    - The time counter is incremented *before* the moments are updated, so
      bias correction never divides by zero.
    - A zero gradient on the first call yields a zero step.
    """

    def __init__(
        self,
        *,
        size: float = 1e-3,
        mean_momentum: float = 0.9,
        var_momentum: float = 0.999,
        smooth: float = 1e-8,
    ) -> None:
        self.size = _check_non_negative("size", size)
        self.mean_momentum = _check_decay("mean_momentum", mean_momentum)
        self.var_momentum = _check_decay("var_momentum", var_momentum)
        self.smooth = _check_non_negative("smooth", smooth)

        self._dim: Optional[int] = None
        self._time = 0.0
        self._size = 1e-3
        self._b1 = 0.9
        self._b2 = 0.999
        self._smooth = 1e-8
        self._m: Optional[np.ndarray] = None
        self._nu: Optional[np.ndarray] = None

    def init(self, dimension: int) -> None:
        """
        Prepare the stepper for a run over `dimension` parameters.

        Zeroes both moment estimates, resets the time counter, and resolves
        zero-valued hyperparameters to their defaults.
        """
        self._dim = _check_dimension(dimension)
        self._time = 0.0
        self._size = _or_default(self.size, 1e-3)
        self._b1 = _or_default(self.mean_momentum, 0.9)
        self._b2 = _or_default(self.var_momentum, 0.999)
        self._smooth = _or_default(self.smooth, 1e-8)
        self._m = resize_zero(self._m, self._dim)
        self._nu = resize_zero(self._nu, self._dim)

    def step(self, out_step: np.ndarray, grad: np.ndarray) -> None:
        """
        Write the next Adam update into `out_step`.

        Parameters
        ----------
        out_step : np.ndarray
            Output vector of length `dimension`, overwritten in place.
        grad : np.ndarray
            Averaged gradient of length `dimension`.
        """
        _check_step_args(self, self._dim, out_step, grad)
        grad = np.asarray(grad)
        b1, b2 = self._b1, self._b2

        self._time += 1.0
        t = self._time

        # m = b1*m + (1-b1)*g
        # v = b2*v + (1-b2)*(g*g)
        self._m *= b1
        self._m += (1.0 - b1) * grad
        self._nu *= b2
        self._nu += (1.0 - b2) * (grad * grad)

        # bias correction
        m_hat = self._m / (1.0 - b1**t)
        nu_hat = self._nu / (1.0 - b2**t)

        np.divide(m_hat, np.sqrt(nu_hat) + self._smooth, out=out_step)
        out_step *= -self._size
