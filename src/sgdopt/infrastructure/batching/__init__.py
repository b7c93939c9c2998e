"""Minibatch samplers."""

from ._epoch_batch import EpochBatch
from ._random_batch import RandomBatch

__all__ = [
    EpochBatch.__name__,
    RandomBatch.__name__,
]
