"""
Backend-agnostic contracts of sgdopt: problem, stepper and batcher
interfaces, settings, termination status and errors.
"""

from ._batcher import IBatcher
from ._errors import BatchSizeError, InvalidProblemError, StepperNotInitializedError
from ._problem import Problem
from ._settings import DEFAULT_STEP_TOLERANCE, Settings
from ._status import Status
from ._stepper import IStepper

__all__ = [
    IBatcher.__name__,
    IStepper.__name__,
    Problem.__name__,
    Settings.__name__,
    Status.__name__,
    BatchSizeError.__name__,
    InvalidProblemError.__name__,
    StepperNotInitializedError.__name__,
    "DEFAULT_STEP_TOLERANCE",
]
