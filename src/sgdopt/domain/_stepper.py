"""
Domain-level stepper contract for sgdopt.

A stepper converts a raw (averaged) gradient into the update that is added
to the parameters. The calling loop updates

    θ += step

so the step already carries its sign, typically the negative of a scaled
gradient.

Notes
-----
- Steppers are stateful: `init(dimension)` allocates and zeroes their
  per-parameter buffers and resets time counters; each `step()` mutates that
  state for the next call.
- Any object that provides these two methods qualifies; concrete algorithms
  live in the infrastructure layer.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IStepper(Protocol):
    """
    Stepper interface contract.

    Required methods
    ----------------
    - `init(dimension)` prepares state for a new run.
    - `step(out_step, grad)` writes the next update into `out_step`.
    """

    def init(self, dimension: int) -> None:
        """
        Reset the stepper for a run over `dimension` parameters.

        Implementations must size every buffer to `dimension`, zero it, and
        reset counters. Re-using an instance for a new run without calling
        `init` again is not supported.
        """
        ...

    def step(self, out_step: Any, grad: Any) -> None:
        """
        Compute the next update.

        Parameters
        ----------
        out_step : array-like
            Output storage of length `dimension`; overwritten in place.
        grad : array-like
            Averaged gradient of length `dimension`. Not modified.
        """
        ...
