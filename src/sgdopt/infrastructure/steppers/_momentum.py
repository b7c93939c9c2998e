"""
Momentum stepper.

Accumulates a velocity that is decayed by ``γ`` and pushed by the annealed
gradient:

    η_t = a / (b + t)
    v_t = γ * v_{t-1} - η_t * g
    step = v_t
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


@StepperRegistry.register_stepper("momentum")
class Momentum:
    """
    Stepper with a momentum-based step direction.

    Parameters
    ----------
    size : float, optional
        Initial scale ``a`` of the annealed step size. ``0`` means the
        default, 1.
    offset : float, optional
        Offset ``b`` of the step size denominator. ``0`` means the
        default, 1.
    momentum : float, optional
        Velocity decay ``γ`` in ``[0, 1)``. ``0`` means the default, 0.9.
    """

    def __init__(
        self, *, size: float = 1.0, offset: float = 1.0, momentum: float = 0.9
    ) -> None:
        self.size = _check_non_negative("size", size)
        self.offset = _check_non_negative("offset", offset)
        self.momentum = _check_decay("momentum", momentum)

        self._dim: Optional[int] = None
        self._time = 0.0
        self._size = 1.0
        self._offset = 1.0
        self._momentum = 0.9
        self._nu: Optional[np.ndarray] = None

    def init(self, dimension: int) -> None:
        """Zero the velocity and restart the annealing schedule."""
        self._dim = _check_dimension(dimension)
        self._time = 0.0
        self._size = _or_default(self.size, 1.0)
        self._offset = _or_default(self.offset, 1.0)
        self._momentum = _or_default(self.momentum, 0.9)
        self._nu = resize_zero(self._nu, self._dim)

    def step(self, out_step: np.ndarray, grad: np.ndarray) -> None:
        _check_step_args(self, self._dim, out_step, grad)
        eta = self._size / (self._offset + self._time)

        # v <- γ*v - η*g
        self._nu *= self._momentum
        self._nu -= eta * np.asarray(grad)

        out_step[:] = self._nu
        self._time += 1.0
