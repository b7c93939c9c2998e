"""
Random minibatch sampling.

`RandomBatch` draws the sample indices of each minibatch uniformly at random,
with or without replacement, from an explicitly injected NumPy random
generator.

Design notes
------------
- The index buffer is allocated once by `init` and overwritten in place by
  every `batch()` call. The same read-only view is returned each time, so a
  caller that needs to keep a batch must copy it.
- There is no process-wide random fallback; runs are reproducible given the
  generator's seed.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ...domain._errors import BatchSizeError


def _check_batch_size(size: int) -> int:
    if isinstance(size, bool) or int(size) != size or int(size) <= 0:
        raise ValueError(f"batch size must be a positive integer, got {size!r}")
    return int(size)


def _check_rng(rng: np.random.Generator) -> np.random.Generator:
    if not isinstance(rng, np.random.Generator):
        raise TypeError(
            f"rng must be a numpy.random.Generator, got {type(rng).__name__}"
        )
    return rng


def _check_dataset_size(dataset_size: int) -> int:
    n = int(dataset_size)
    if n <= 0:
        raise ValueError(f"dataset_size must be > 0, got {dataset_size}")
    return n


class RandomBatch:
    """
    Uniform random minibatch sampler.

    Parameters
    ----------
    size : int
        Number of indices per batch. Must be positive.
    replacement : bool, optional
        If True, each position is drawn independently, so a batch may contain
        duplicates. If False (default), every batch is a uniformly random
        subset of distinct indices. Consecutive batches are independent in
        both modes.
    rng : numpy.random.Generator
        Random source. Required.

    Raises
    ------
    ValueError
        If `size` is not a positive integer.
    TypeError
        If `rng` is not a `numpy.random.Generator`.

    Notes
    -----
    The indices are drawn by ``Generator.integers`` / ``Generator.choice``,
    which return a fresh temporary array on every call. What callers see never
    changes identity: the draw is copied into an index buffer allocated once
    in `init`, and `batch()` always returns the same read-only view of it.
    """

    def __init__(
        self,
        size: int,
        replacement: bool = False,
        *,
        rng: np.random.Generator,
    ) -> None:
        self.size = _check_batch_size(size)
        self.replacement = bool(replacement)
        self.rng = _check_rng(rng)

        self._dataset_size: Optional[int] = None
        self._data: Optional[np.ndarray] = None
        self._view: Optional[np.ndarray] = None

    def init(self, dataset_size: int) -> None:
        """
        Prepare the sampler for a dataset of `dataset_size` samples.

        Raises
        ------
        ValueError
            If `dataset_size` is not positive.
        BatchSizeError
            If sampling without replacement and `size > dataset_size`.
        """
        n = _check_dataset_size(dataset_size)
        if not self.replacement and self.size > n:
            raise BatchSizeError(self.size, n)

        self._dataset_size = n
        if self._data is None or self._data.shape != (self.size,):
            self._data = np.zeros(self.size, dtype=np.intp)
            self._view = self._data.view()
            self._view.flags.writeable = False

    def batch(self) -> np.ndarray:
        """
        Draw the next minibatch.

        Returns
        -------
        np.ndarray
            Read-only view of `size` indices in ``[0, dataset_size)``. The
            view is overwritten by the next call.

        Raises
        ------
        RuntimeError
            If called before `init`.
        """
        if self._dataset_size is None:
            raise RuntimeError("RandomBatch.batch() called before init().")

        n = self._dataset_size
        if self.replacement:
            self._data[:] = self.rng.integers(0, n, size=self.size)
        else:
            self._data[:] = self.rng.choice(n, size=self.size, replace=False)
        return self._view
