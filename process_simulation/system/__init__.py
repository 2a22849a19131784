"""Simulation runner for the process queue."""

from .simulation import (
    ProcessSimulation,
    SimulationResult,
    convert_numpy_types,
    run_replications,
    run_simulation,
    save_results,
    theory_for,
)

__all__ = [
    'ProcessSimulation',
    'SimulationResult',
    'convert_numpy_types',
    'run_replications',
    'run_simulation',
    'save_results',
    'theory_for',
]
