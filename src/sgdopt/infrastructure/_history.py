"""
Optimization trace of a `run()` call.

`History` records, for every applied iteration, the Euclidean norm of the
step that was added to the parameters and (when a loss callback is
available) the mean loss of the minibatch the step was computed on. Beyond
plain storage it answers the questions usually asked of an SGD trace: how
far the iterate travelled, where the batch loss was lowest, and how the
loss behaved over the last few iterations.

Minibatch losses are noisy by construction, so every loss-based helper works
on the recorded per-batch means and never re-evaluates the objective.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple, Union

import numpy as np


Number = Union[int, float]

STEP_NORM = "step_norm"
LOSS = "loss"


@dataclass
class History:
    """
    Per-iteration diagnostics of an optimization run.

    Attributes
    ----------
    history : Dict[str, List[float]]
        Mapping from metric name (``"step_norm"``, ``"loss"``) to its values,
        ordered by iteration.
    iteration : List[int]
        Zero-based indices of the recorded iterations.

    Notes
    -----
    Only iterations whose step was applied are recorded. The terminating step
    (converged or divergent) never reaches the parameters and is not stored,
    so ``len(history)`` equals `Result.iterations` when every iteration was
    recorded.
    """

    history: Dict[str, List[float]] = field(default_factory=dict)
    iteration: List[int] = field(default_factory=list)

    def append_iteration(self, iteration_idx: int, logs: Mapping[str, Number]) -> None:
        """
        Append diagnostics for an applied iteration.

        Parameters
        ----------
        iteration_idx : int
            Zero-based index of the iteration. Must be greater than the last
            recorded index.
        logs : Mapping[str, Number]
            Mapping from metric name to value.

        Raises
        ------
        ValueError
            If `iteration_idx` does not increase.
        """
        idx = int(iteration_idx)
        if self.iteration and idx <= self.iteration[-1]:
            raise ValueError(
                f"iteration indices must increase, got {idx} after {self.iteration[-1]}"
            )
        self.iteration.append(idx)
        for k, v in logs.items():
            self.history.setdefault(k, []).append(float(v))

    def series(self, key: str) -> np.ndarray:
        """
        Return the values of metric `key` as a float64 array.

        Raises
        ------
        KeyError
            If `key` was never recorded.
        """
        if key not in self.history:
            raise KeyError(
                f"Metric {key!r} not recorded. Available: {sorted(self.history)}"
            )
        return np.asarray(self.history[key], dtype=np.float64)

    def path_length(self) -> float:
        """Total distance travelled by the parameters (sum of step norms)."""
        if STEP_NORM not in self.history:
            return 0.0
        return float(np.sum(self.series(STEP_NORM)))

    def best(self, key: str = LOSS) -> Tuple[int, float]:
        """
        Return ``(iteration, value)`` of the smallest recorded value of `key`.

        Ties resolve to the earliest iteration.

        Raises
        ------
        KeyError
            If `key` was never recorded or holds no values.
        """
        values = self.series(key)
        if values.size == 0:
            raise KeyError(f"Metric {key!r} has no values")
        # Metrics are recorded on every iteration once they appear.
        offset = len(self.iteration) - values.size
        pos = int(np.argmin(values))
        return self.iteration[offset + pos], float(values[pos])

    def smoothed(self, key: str = LOSS, window: int = 10) -> np.ndarray:
        """
        Trailing moving average of metric `key`.

        The first ``window - 1`` entries average over the values available so
        far, so the output has the same length as the series.

        Raises
        ------
        ValueError
            If `window` is not positive.
        """
        window = int(window)
        if window <= 0:
            raise ValueError(f"window must be > 0, got {window}")
        values = self.series(key)
        csum = np.cumsum(values)
        out = np.empty_like(values)
        head = min(window, values.size)
        out[:head] = csum[:head] / np.arange(1, head + 1)
        if values.size > window:
            out[window:] = (csum[window:] - csum[:-window]) / window
        return out

    def last(self) -> Dict[str, float]:
        """
        Return metrics from the most recent iteration.

        Metrics with no recorded values are omitted.
        """
        return {k: float(vs[-1]) for k, vs in self.history.items() if vs}

    def final(self, key: str) -> Optional[float]:
        """Most recent value of `key`, or None if it was never recorded."""
        vs = self.history.get(key)
        return float(vs[-1]) if vs else None

    def __len__(self) -> int:
        return len(self.iteration)
