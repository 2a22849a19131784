"""Closed-form steady-state figures for an M/M/1 queue."""

from dataclasses import asdict, dataclass
from typing import Dict

from ..errors import InvalidParameterError


@dataclass(frozen=True)
class MM1Theory:
    """Steady-state metrics for exponential service and arrivals."""
    rho: float  # Server utilization
    L: float    # Mean number in system
    Lq: float   # Mean number waiting
    W: float    # Mean time in system
    Wq: float   # Mean wait before service

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def mm1_theory(execution_mean: float, interval_mean: float) -> MM1Theory:
    """
    Compute M/M/1 metrics from the mean service time and mean interval.

    Raises:
        InvalidParameterError: for non-positive means or when the server is
            saturated (rho >= 1), where no steady state exists.
    """
    if execution_mean <= 0 or interval_mean <= 0:
        raise InvalidParameterError("means must be > 0")

    lam = 1.0 / interval_mean
    rho = execution_mean / interval_mean
    if rho >= 1.0:
        raise InvalidParameterError(f"unstable system: rho = {rho:.4f} >= 1")

    L = rho / (1.0 - rho)
    Lq = rho * rho / (1.0 - rho)
    return MM1Theory(rho=rho, L=L, Lq=Lq, W=L / lam, Wq=Lq / lam)


def relative_error(sim_value: float, reference_value: float) -> float:
    """Return |sim - ref| / |ref|, guarding a zero reference."""
    if reference_value == 0:
        return 0.0 if sim_value == 0 else float('inf')
    return abs(sim_value - reference_value) / abs(reference_value)
