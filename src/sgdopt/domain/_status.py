"""
Terminal status of an optimization run.

`Status` tells the caller why the driver loop stopped. Convergence and the
iteration limit are normal terminations that produced an answer; `FAILURE`
marks numerical divergence (a NaN or infinite step).
"""

from enum import Enum


class Status(Enum):
    """
    Enumeration of optimizer termination reasons.

    Attributes
    ----------
    NOT_TERMINATED : Status
        The loop has not stopped yet. Never returned by a finished run.
    ITERATION_LIMIT : Status
        The configured maximum number of iterations was reached.
    STEP_CONVERGENCE : Status
        The norm of the next step fell below the step tolerance.
    FAILURE : Status
        The next step was NaN or infinite; parameters were left untouched.
    """

    NOT_TERMINATED = "not_terminated"
    ITERATION_LIMIT = "iteration_limit"
    STEP_CONVERGENCE = "step_convergence"
    FAILURE = "failure"

    @property
    def is_success(self) -> bool:
        """Whether the run stopped normally and produced an answer."""
        return self in (Status.ITERATION_LIMIT, Status.STEP_CONVERGENCE)

    def __str__(self) -> str:
        return self.value
