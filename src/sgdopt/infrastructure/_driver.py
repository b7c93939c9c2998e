"""
Minibatch stochastic gradient descent driver.

`run` optimizes a sum-decomposable `Problem`: every iteration it draws a
minibatch from the batcher, averages the per-sample gradients on that batch,
asks the stepper for an update, and adds the update to the parameters until
the update becomes negligible, diverges, or the iteration budget is spent.

Design notes
------------
- The convergence and divergence checks run on the *next* step before it is
  applied, so the returned parameters are never NaN-poisoned and a
  converged result is the pre-convergence state.
- Working buffers (per-sample gradients, losses, averaged gradient, step)
  are allocated once per batch length and reused across iterations.
- Diagnostics follow `Settings.verbose` / `Settings.record_history`; the
  loss callback is only evaluated when one of them needs it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from ..domain._batcher import IBatcher
from ..domain._errors import InvalidProblemError
from ..domain._problem import Problem
from ..domain._settings import Settings
from ..domain._status import Status
from ..domain._stepper import IStepper
from ._buffers import resize_matrix, resize_zero
from ._history import LOSS, STEP_NORM, History


@dataclass
class Result:
    """
    Outcome of an optimization run.

    Attributes
    ----------
    parameters : np.ndarray
        Final parameter vector of length `problem.dimension`.
    status : Status
        Why the loop stopped.
    iterations : int
        Number of updates that were applied to the parameters.
    history : History or None
        Per-iteration diagnostics when `Settings.record_history` is set.
    """

    parameters: np.ndarray
    status: Status
    iterations: int = 0
    history: Optional[History] = None

    @property
    def x(self) -> np.ndarray:
        """Alias of `parameters`."""
        return self.parameters


def _validate_problem(problem: Problem) -> None:
    for field_name in ("dimension", "size"):
        value = getattr(problem, field_name)
        if isinstance(value, bool) or int(value) != value or int(value) <= 0:
            raise InvalidProblemError(field_name, value)
    if not callable(problem.grad):
        raise TypeError("problem.grad must be callable")


def run(
    problem: Problem,
    batcher: IBatcher,
    stepper: IStepper,
    settings: Optional[Settings] = None,
) -> Result:
    """
    Minimize `problem` with minibatch stochastic gradient descent.

    Parameters
    ----------
    problem : Problem
        The objective. Its dimension and size must be positive.
    batcher : IBatcher
        Minibatch sampler; initialized here with `problem.size`.
    stepper : IStepper
        Update policy; initialized here with `problem.dimension`.
    settings : Settings, optional
        Loop configuration. Defaults to `Settings()`.

    Returns
    -------
    Result
        Final parameters, terminal status, applied iteration count and
        optional history.

    Raises
    ------
    InvalidProblemError
        If the problem dimension or size is not a positive integer. Raised
        before the batcher or stepper is touched.
    BatchSizeError
        If the batcher cannot draw batches from `problem.size` samples.

    Notes
    -----
    The parameters start at zero. Divergence (a NaN or infinite step) is
    reported as `Status.FAILURE` with the last finite parameters, not raised.
    """
    _validate_problem(problem)
    cfg = (settings if settings is not None else Settings()).resolved()

    dim = int(problem.dimension)
    size = int(problem.size)
    batcher.init(size)
    stepper.init(dim)

    want_loss = problem.func is not None and (cfg.verbose or cfg.record_history)
    hist = History() if cfg.record_history else None

    parameters = np.zeros(dim, dtype=np.float64)
    step = np.zeros(dim, dtype=np.float64)
    avg_grad = np.zeros(dim, dtype=np.float64)
    dst_grads: Optional[np.ndarray] = None
    dst_fun: Optional[np.ndarray] = None

    status = Status.NOT_TERMINATED
    iteration = 0
    while True:
        if cfg.max_iterations != 0 and iteration >= cfg.max_iterations:
            status = Status.ITERATION_LIMIT
            break

        batch = batcher.batch()
        n_data = len(batch)

        dst_grads = resize_matrix(dst_grads, n_data, dim)
        problem.grad(dst_grads, parameters, batch)

        loss: Optional[float] = None
        if want_loss:
            dst_fun = resize_zero(dst_fun, n_data)
            problem.func(dst_fun, parameters, batch)
            loss = float(dst_fun.mean())

        np.mean(dst_grads, axis=0, out=avg_grad)
        stepper.step(step, avg_grad)

        step_norm = float(np.linalg.norm(step))
        if math.isnan(step_norm) or math.isinf(step_norm):
            status = Status.FAILURE
            break
        if step_norm < cfg.step_tolerance:
            status = Status.STEP_CONVERGENCE
            break

        parameters += step

        logs: Dict[str, float] = {STEP_NORM: step_norm}
        if loss is not None:
            logs[LOSS] = loss
        if hist is not None:
            hist.append_iteration(iteration, logs)
        if cfg.verbose and iteration % cfg.verbose == 0:
            parts = [f"Iter {iteration}"]
            for k, v in logs.items():
                parts.append(f"{k}: {v:.6e}")
            print(" - ".join(parts))

        iteration += 1

    if cfg.verbose:
        print(f"Terminated: {status} - iterations: {iteration}")

    return Result(
        parameters=parameters,
        status=status,
        iterations=iteration,
        history=hist,
    )
