"""Exceptions raised by the sign-gravity simulator."""


class SimulationInputError(ValueError):
    """Base class for invalid arguments passed to the simulator."""
    pass


class ShapeError(SimulationInputError):
    """Initial positions are not a non-empty one-dimensional sequence."""

    def __init__(self, message: str = "invalid input shape"):
        super().__init__(message)


class PositionValueError(SimulationInputError):
    """Initial positions contain non-numeric, non-finite or fractional values."""
    pass


class StepCountError(SimulationInputError, TypeError):
    """Step count is not a non-negative integer scalar.

    Subclasses both ValueError and TypeError so callers can catch it as
    either a bad value or a bad argument type.
    """

    def __init__(self, message: str = "invalid step count"):
        super().__init__(message)


class CycleNotFoundError(RuntimeError):
    """The initial state did not reappear within the allowed number of steps."""
    pass
