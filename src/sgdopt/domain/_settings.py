"""
Optimizer configuration.

`Settings` is the single configuration value accepted by the driver. Zero
values mean "use the default"; `resolved()` returns a copy with the defaults
filled in.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

DEFAULT_STEP_TOLERANCE = 1e-8


def _check_count(name: str, value) -> None:
    if isinstance(value, bool) or int(value) != value or int(value) < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


@dataclass
class Settings:
    """
    Driver loop configuration.

    Attributes
    ----------
    max_iterations : int
        Maximum number of parameter updates. ``0`` means unbounded.
    step_tolerance : float
        The run stops with `Status.STEP_CONVERGENCE` when the Euclidean norm
        of the next step is below this value. Exactly ``0`` resolves to
        ``1e-8``; a negative value disables the check.
    verbose : int
        If non-zero, prints a progress line every `verbose` iterations and a
        final summary line.
    record_history : bool
        If True, the returned `Result` carries a `History` with the step norm
        and mean batch loss of every applied iteration.

    Raises
    ------
    ValueError
        If `max_iterations` or `verbose` is negative or not integral, or
        `step_tolerance` is NaN.
    """

    max_iterations: int = 0
    step_tolerance: float = 0.0
    verbose: int = 0
    record_history: bool = False

    def __post_init__(self) -> None:
        _check_count("max_iterations", self.max_iterations)
        if math.isnan(float(self.step_tolerance)):
            raise ValueError("step_tolerance must not be NaN")
        _check_count("verbose", self.verbose)

    def resolved(self) -> Settings:
        """
        Return a copy of these settings with defaults applied.

        Returns
        -------
        Settings
            A new instance; `self` is left unchanged.
        """
        tol = float(self.step_tolerance)
        if tol == 0.0:
            tol = DEFAULT_STEP_TOLERANCE
        return replace(
            self,
            max_iterations=int(self.max_iterations),
            step_tolerance=tol,
            verbose=int(self.verbose),
        )
