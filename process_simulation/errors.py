"""Exceptions raised by the process simulation."""


class SimulationError(Exception):
    """Base class for all simulation errors."""


class InvalidParameterError(SimulationError, ValueError):
    """A distribution mean, queue size or other parameter is out of range."""


class EmptySequenceError(SimulationError, ValueError):
    """A statistic was requested over zero values."""


class DegenerateRandomDrawError(SimulationError, ArithmeticError):
    """The uniform source kept producing values outside (0, 1)."""


class TimelineError(SimulationError):
    """A derived timeline breaks one of the FIFO timing invariants."""

    def __init__(self, index: int, message: str):
        super().__init__(f"process {index}: {message}")
        self.index = index
