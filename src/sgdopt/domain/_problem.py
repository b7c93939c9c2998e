"""
Problem contract for sgdopt.

A `Problem` describes an objective that decomposes as a sum over `size`
data samples. The optimizer never sees the data itself; it only calls the
two evaluation callbacks with the current parameters and a batch of sample
indices.

Notes
-----
- Both callbacks write into caller-provided storage so the driver can reuse
  its buffers across iterations.
- Callbacks must be pure and deterministic for a fixed parameter vector and
  index set.
- Domain contracts are backend-agnostic; the concrete arrays handed to the
  callbacks by the driver are NumPy arrays.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

EvalFunc = Callable[[Any, Any, Any], None]


@dataclass(frozen=True)
class Problem:
    """
    Sum-decomposable objective.

    Attributes
    ----------
    dimension : int
        Number of optimization parameters.
    size : int
        Number of decomposable terms (samples) available to the batcher.
    grad : Callable[[dst, params, indices], None]
        Writes the gradient of sample ``indices[i]`` into row ``i`` of
        ``dst`` (shape ``(len(indices), dimension)``).
    func : Callable[[dst, params, indices], None], optional
        Writes the loss of sample ``indices[i]`` into ``dst[i]`` (shape
        ``(len(indices),)``). Only used for diagnostics.

    Notes
    -----
    The problem is not validated here; `run` rejects a non-positive
    dimension or size before touching any optimizer state.
    """

    dimension: int
    size: int
    grad: EvalFunc
    func: Optional[EvalFunc] = None
