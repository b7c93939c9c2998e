"""
Linear least-squares problem.

`LeastSquares` exposes the objective

    f(θ) = Σ_i (x_i · θ - y_i)²

as a sum-decomposable `Problem`, together with its closed-form minimizer.
It is the reference problem used to exercise the steppers end to end.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from ...domain._problem import Problem


@dataclass
class LeastSquares:
    """
    Least-squares fit of ``y ≈ X θ``.

    Attributes
    ----------
    x : np.ndarray
        Design matrix of shape ``(n_samples, dimension)``.
    y : np.ndarray
        Targets of shape ``(n_samples,)``.

    Raises
    ------
    ValueError
        If `x` is not 2-D or `y` does not have one entry per row of `x`.
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        self.x = np.ascontiguousarray(self.x, dtype=np.float64)
        self.y = np.asarray(self.y, dtype=np.float64)
        if self.x.ndim != 2:
            raise ValueError(f"x must be 2-D, got shape {self.x.shape}")
        if self.y.shape != (self.x.shape[0],):
            raise ValueError(
                f"y must have shape ({self.x.shape[0]},), got {self.y.shape}"
            )

    def problem(self) -> Problem:
        """Return the `Problem` view of this fit."""
        r, c = self.x.shape
        return Problem(dimension=c, size=r, grad=self.grad, func=self.func)

    def optimal(self) -> np.ndarray:
        """
        Return the exact least-squares solution.

        Raises
        ------
        np.linalg.LinAlgError
            If the solve fails to converge.
        """
        sol, *_ = np.linalg.lstsq(self.x, self.y, rcond=None)
        return sol

    def func(self, dst: np.ndarray, params: np.ndarray, batch: np.ndarray) -> None:
        diff = self.x[batch] @ params - self.y[batch]
        np.multiply(diff, diff, out=dst)

    def grad(self, dst: np.ndarray, params: np.ndarray, batch: np.ndarray) -> None:
        xb = self.x[batch]
        diff = xb @ params - self.y[batch]
        # d/dθ (x·θ - y)² = 2 (x·θ - y) x
        np.multiply(xb, 2.0 * diff[:, None], out=dst)


def make_least_squares(
    true_params: Sequence[float],
    noise: float,
    n_data: int,
    *,
    rng: np.random.Generator,
    offset: bool = False,
    noise_rng: Optional[np.random.Generator] = None,
) -> LeastSquares:
    """
    Generate a synthetic least-squares problem.

    Features are drawn from a standard normal distribution and targets are
    ``x · true_params + N(0, noise²)``.

    Parameters
    ----------
    true_params : Sequence[float]
        Parameters used to generate the targets.
    noise : float
        Standard deviation of the additive Gaussian noise. Must be >= 0.
    n_data : int
        Number of samples. Must be positive.
    rng : numpy.random.Generator
        Random source for the features.
    offset : bool, optional
        If True, the first feature is the constant 1 (an intercept term).
    noise_rng : numpy.random.Generator, optional
        Random source for the noise. Defaults to `rng`.

    Returns
    -------
    LeastSquares
        The generated problem.
    """
    if noise < 0:
        raise ValueError(f"noise must be >= 0, got {noise}")
    if n_data <= 0:
        raise ValueError(f"n_data must be > 0, got {n_data}")

    theta = np.asarray(true_params, dtype=np.float64)
    dim = theta.size
    xs = rng.standard_normal((n_data, dim))
    if offset:
        xs[:, 0] = 1.0

    noise_src = noise_rng if noise_rng is not None else rng
    ys = xs @ theta + noise_src.normal(0.0, noise, size=n_data)
    return LeastSquares(x=xs, y=ys)
