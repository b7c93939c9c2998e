"""
Annealed gradient descent stepper.

The step size decays harmonically with the number of calls:

    η_t = a / (b + t)
    step = -η_t * g
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ._base import (
    StepperRegistry,
    _check_dimension,
    _check_non_negative,
    _check_step_args,
    _or_default,
)


@StepperRegistry.register_stepper("anneal")
class Anneal:
    """
    Stepper whose step size is annealed over time.

    Parameters
    ----------
    size : float, optional
        Initial scale ``a`` of the step size. ``0`` means the default, 1.
    offset : float, optional
        Offset ``b`` of the step size denominator. ``0`` means the
        default, 1.

    Notes
    -----
    With the defaults the first three steps for a constant gradient ``g`` are
    ``-g``, ``-g/2`` and ``-g/3``.
    """

    def __init__(self, *, size: float = 1.0, offset: float = 1.0) -> None:
        self.size = _check_non_negative("size", size)
        self.offset = _check_non_negative("offset", offset)

        self._dim: Optional[int] = None
        self._time = 0.0
        self._size = 1.0
        self._offset = 1.0

    def init(self, dimension: int) -> None:
        self._dim = _check_dimension(dimension)
        self._time = 0.0
        self._size = _or_default(self.size, 1.0)
        self._offset = _or_default(self.offset, 1.0)

    def step(self, out_step: np.ndarray, grad: np.ndarray) -> None:
        _check_step_args(self, self._dim, out_step, grad)
        eta = self._size / (self._offset + self._time)
        np.multiply(grad, -eta, out=out_step)
        self._time += 1.0
