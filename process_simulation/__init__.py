"""Single-server process wait simulation package."""

from .config import SimulationConfig
from .core import ProcessFactory, ProcessRecord, WaitStatistics
from .errors import (
    DegenerateRandomDrawError,
    EmptySequenceError,
    InvalidParameterError,
    SimulationError,
    TimelineError,
)
from .system import ProcessSimulation, SimulationResult, run_simulation

__all__ = [
    'SimulationConfig',
    'ProcessFactory',
    'ProcessRecord',
    'WaitStatistics',
    'DegenerateRandomDrawError',
    'EmptySequenceError',
    'InvalidParameterError',
    'SimulationError',
    'TimelineError',
    'ProcessSimulation',
    'SimulationResult',
    'run_simulation',
]
