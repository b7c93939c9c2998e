"""
Stepper implementations.

Importing this package registers every built-in stepper with
`StepperRegistry` under its lowercase name.
"""

from ._base import StepperRegistry
from ._adadelta import Adadelta
from ._adagrad import Adagrad
from ._adam import Adam
from ._anneal import Anneal
from ._momentum import Momentum
from ._nesterov import Nesterov
from ._rmsprop import RMSProp

__all__ = [
    StepperRegistry.__name__,
    Adadelta.__name__,
    Adagrad.__name__,
    Adam.__name__,
    Anneal.__name__,
    Momentum.__name__,
    Nesterov.__name__,
    RMSProp.__name__,
]
