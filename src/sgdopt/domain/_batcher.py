"""
Domain-level batcher contract for sgdopt.

A batcher selects the sample indices that make up each minibatch.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IBatcher(Protocol):
    """
    Batcher interface contract.

    Required methods
    ----------------
    - `init(dataset_size)` prepares the batcher for a dataset of the given
      size and fails if the batch size cannot be honoured.
    - `batch()` returns the indices of the next minibatch, each in
      ``[0, dataset_size)``.

    Notes
    -----
    The returned sequence may be a view of an internal buffer that the next
    `batch()` call overwrites. Callers must not mutate it and must copy it if
    they need to keep it.
    """

    def init(self, dataset_size: int) -> None: ...

    def batch(self) -> Any: ...
