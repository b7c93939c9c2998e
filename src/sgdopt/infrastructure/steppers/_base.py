"""
Stepper registry and shared argument checks.

This module defines `StepperRegistry`, a name-keyed registry of stepper
classes, plus small validation helpers used by every stepper
implementation.

Usage example
-------------
Registering a stepper:

    @StepperRegistry.register_stepper("adam")
    class Adam:
        ...

Creating one by name:

    stepper = StepperRegistry.create("adam", size=1e-3)

Notes
-----
- Registration keys must be unique unless explicitly overwritten.
- Built-in steppers register themselves when `sgdopt.infrastructure.steppers`
  is imported.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Optional, TypeVar

import numpy as np

from ...domain._errors import StepperNotInitializedError

T = TypeVar("T", bound=type)


class StepperRegistry:
    """
    Registry-backed stepper factory.

    Usage
    -----
    Register:
        @StepperRegistry.register_stepper("anneal")
        class Anneal: ...

    Create:
        stepper = StepperRegistry.create("anneal", size=0.5)
    """

    STEPPERS: ClassVar[Dict[str, type]] = {}

    @classmethod
    def register_stepper(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator to register a stepper class under `name`.

        Parameters
        ----------
        name:
            Registry key used to retrieve the stepper later.
        overwrite:
            If False (default), raises if `name` is already registered.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Stepper name must be a non-empty string")

        def decorator(stepper_cls: T) -> T:
            if not overwrite and name in cls.STEPPERS:
                raise ValueError(f"Stepper already registered: {name!r}")
            cls.STEPPERS[name] = stepper_cls
            return stepper_cls

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return registered stepper names (sorted)."""
        return tuple(sorted(cls.STEPPERS))

    @classmethod
    def get(cls, name: str) -> type:
        """
        Return the stepper class registered under `name`.

        Raises
        ------
        ValueError
            If no stepper is registered under `name`.
        """
        try:
            return cls.STEPPERS[name]
        except KeyError as e:
            available = ", ".join(cls.available()) or "<none>"
            raise ValueError(
                f"Unsupported stepper name: {name!r}. Available: {available}"
            ) from e

    @classmethod
    def create(cls, name: str, **hyperparameters: Any) -> Any:
        """Instantiate the stepper registered under `name`."""
        return cls.get(name)(**hyperparameters)


def _check_non_negative(name: str, value: float) -> float:
    value = float(value)
    if not value >= 0.0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def _check_decay(name: str, value: float) -> float:
    value = float(value)
    if not 0.0 <= value < 1.0:
        raise ValueError(f"{name} must be in [0, 1), got {value}")
    return value


def _or_default(value: float, default: float) -> float:
    # Zero-valued hyperparameters fall back to the documented default.
    return default if value == 0.0 else value


def _check_step_args(
    owner: Any, dim: Optional[int], out_step: np.ndarray, grad: np.ndarray
) -> None:
    """
    Validate the arguments of a `step()` call.

    Raises
    ------
    StepperNotInitializedError
        If `init()` has not been called.
    ValueError
        If `out_step` or `grad` is not a vector of length `dim`.
    """
    if dim is None:
        raise StepperNotInitializedError(type(owner).__name__)
    if np.shape(grad) != (dim,):
        raise ValueError(f"grad must have shape ({dim},), got {np.shape(grad)}")
    if np.shape(out_step) != (dim,):
        raise ValueError(
            f"out_step must have shape ({dim},), got {np.shape(out_step)}"
        )


def _check_dimension(dimension: int) -> int:
    dim = int(dimension)
    if dim <= 0:
        raise ValueError(f"dimension must be > 0, got {dimension}")
    return dim
