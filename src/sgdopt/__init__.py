"""
sgdopt: minibatch stochastic gradient descent.

Minimize an objective that is a sum over data samples by repeatedly drawing
a minibatch of sample indices, averaging their gradients, and applying the
update chosen by a pluggable stepper.

Example
-------
    import numpy as np
    from sgdopt import Adam, RandomBatch, Settings, run

    result = run(
        problem,
        RandomBatch(5, rng=np.random.default_rng(0)),
        Adam(),
        Settings(step_tolerance=1e-6),
    )
"""

from .domain import (
    DEFAULT_STEP_TOLERANCE,
    BatchSizeError,
    IBatcher,
    IStepper,
    InvalidProblemError,
    Problem,
    Settings,
    Status,
    StepperNotInitializedError,
)
from .infrastructure import (
    Adadelta,
    Adagrad,
    Adam,
    Anneal,
    EpochBatch,
    History,
    LeastSquares,
    Momentum,
    Nesterov,
    RandomBatch,
    Result,
    RMSProp,
    StepperRegistry,
    make_least_squares,
    run,
)

__version__ = "0.1.0"

__all__ = [
    "run",
    "make_least_squares",
    "DEFAULT_STEP_TOLERANCE",
    "BatchSizeError",
    "IBatcher",
    "IStepper",
    "InvalidProblemError",
    "Problem",
    "Settings",
    "Status",
    "StepperNotInitializedError",
    "Adadelta",
    "Adagrad",
    "Adam",
    "Anneal",
    "EpochBatch",
    "History",
    "LeastSquares",
    "Momentum",
    "Nesterov",
    "RandomBatch",
    "Result",
    "RMSProp",
    "StepperRegistry",
]
