"""Reference problems."""

from ._least_squares import LeastSquares, make_least_squares

__all__ = [
    LeastSquares.__name__,
    make_least_squares.__name__,
]
