"""
NumPy implementations of the sgdopt contracts: steppers, batchers, the
driver loop and reference problems.
"""

from ._driver import Result, run
from ._history import History
from .batching import EpochBatch, RandomBatch
from .problems import LeastSquares, make_least_squares
from .steppers import (
    Adadelta,
    Adagrad,
    Adam,
    Anneal,
    Momentum,
    Nesterov,
    RMSProp,
    StepperRegistry,
)

__all__ = [
    "run",
    "make_least_squares",
    Result.__name__,
    History.__name__,
    EpochBatch.__name__,
    RandomBatch.__name__,
    LeastSquares.__name__,
    Adadelta.__name__,
    Adagrad.__name__,
    Adam.__name__,
    Anneal.__name__,
    Momentum.__name__,
    Nesterov.__name__,
    RMSProp.__name__,
    StepperRegistry.__name__,
]
