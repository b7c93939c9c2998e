"""
Epoch-based minibatch sampling.

`EpochBatch` sweeps the dataset in shuffled order: it draws a permutation of
all indices and hands it out in consecutive chunks, reshuffling once the
remaining indices cannot fill a whole batch. Every sample is therefore
visited at most once per epoch, as in a shuffled `Model.fit` style loop.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ...domain._errors import BatchSizeError
from ._random_batch import _check_batch_size, _check_dataset_size, _check_rng


class EpochBatch:
    """
    Shuffled epoch sampler.

    Parameters
    ----------
    size : int
        Number of indices per batch. Must be positive and no larger than the
        dataset size.
    rng : numpy.random.Generator
        Random source used to draw each epoch's permutation. Required.

    Notes
    -----
    - When ``dataset_size`` is not a multiple of ``size``, the trailing
      indices of each permutation are dropped so that every batch holds
      exactly ``size`` distinct indices.
    - `epoch` counts completed permutations (starting at 0).
    """

    def __init__(self, size: int, *, rng: np.random.Generator) -> None:
        self.size = _check_batch_size(size)
        self.rng = _check_rng(rng)

        self.epoch = 0
        self._perm: Optional[np.ndarray] = None
        self._pos = 0
        self._data: Optional[np.ndarray] = None
        self._view: Optional[np.ndarray] = None

    def init(self, dataset_size: int) -> None:
        n = _check_dataset_size(dataset_size)
        if self.size > n:
            raise BatchSizeError(self.size, n)

        self.epoch = 0
        self._perm = self.rng.permutation(n)
        self._pos = 0
        if self._data is None or self._data.shape != (self.size,):
            self._data = np.zeros(self.size, dtype=np.intp)
            self._view = self._data.view()
            self._view.flags.writeable = False

    def batch(self) -> np.ndarray:
        """Return a read-only view of the next `size` indices of the sweep."""
        if self._perm is None:
            raise RuntimeError("EpochBatch.batch() called before init().")

        if self._pos + self.size > self._perm.size:
            self.rng.shuffle(self._perm)
            self._pos = 0
            self.epoch += 1

        self._data[:] = self._perm[self._pos : self._pos + self.size]
        self._pos += self.size
        return self._view
