"""
Precondition and lifecycle exceptions for sgdopt.

This module defines the custom errors raised when the optimization core is
driven with invalid inputs or in an invalid order. They signal programmer
errors (a problem with no parameters, a batch larger than the dataset, a
stepper used before `init`) and are raised before any optimizer state is
mutated.

Numerical divergence is *not* an exception: the driver reports it through
`Status.FAILURE` and returns the last finite parameters.
"""


class InvalidProblemError(ValueError):
    """
    Raised when a `Problem` cannot be optimized.

    This error is raised by the driver when the problem dimension or dataset
    size is not a positive integer.

    Attributes
    ----------
    field : str
        Name of the offending problem field (e.g., "dimension", "size").
    value : object
        The value that was supplied.
    """

    def __init__(self, field: str, value: object) -> None:
        """
        Initialize the InvalidProblemError.

        Parameters
        ----------
        field : str
            Name of the offending problem field.
        value : object
            The rejected value.
        """
        super().__init__(f"problem {field} must be a positive integer, got {value!r}")
        self.field = field
        self.value = value


class BatchSizeError(ValueError):
    """
    Raised when a batcher cannot draw batches of the requested size.

    Sampling without replacement requires the batch size to be no larger
    than the dataset size.

    Attributes
    ----------
    batch_size : int
        Requested number of indices per batch.
    dataset_size : int
        Number of samples available.
    """

    def __init__(self, batch_size: int, dataset_size: int) -> None:
        """
        Initialize the BatchSizeError.

        Parameters
        ----------
        batch_size : int
            Requested number of indices per batch.
        dataset_size : int
            Number of samples available.
        """
        super().__init__(
            f"batch size {batch_size} exceeds dataset size {dataset_size} "
            "when sampling without replacement."
        )
        self.batch_size = batch_size
        self.dataset_size = dataset_size


class StepperNotInitializedError(RuntimeError):
    """
    Raised when `step()` is called on a stepper that was never initialized.

    Attributes
    ----------
    stepper : str
        Class name of the stepper.
    """

    def __init__(self, stepper: str) -> None:
        super().__init__(f"{stepper}.step() called before {stepper}.init().")
        self.stepper = stepper
