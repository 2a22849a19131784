"""Summary statistics over wait times and line lengths."""

from dataclasses import asdict, dataclass
from typing import Dict, Iterable

import numpy as np

from .line import max_line_length
from ..errors import EmptySequenceError


def _as_array(values: Iterable[float], name: str) -> np.ndarray:
    data = np.asarray(list(values), dtype=float)
    if data.size == 0:
        raise EmptySequenceError(f"{name}() of an empty sequence")
    return data


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean."""
    return float(np.mean(_as_array(values, 'mean')))


def median(values: Iterable[float]) -> float:
    """Middle value; an even count averages the two middle values."""
    return float(np.median(_as_array(values, 'median')))


def standard_deviation(values: Iterable[float]) -> float:
    """Population standard deviation (divides by N, not N - 1)."""
    return float(np.std(_as_array(values, 'standard_deviation'), ddof=0))


@dataclass(frozen=True)
class WaitStatistics:
    """Summary of one run's wait times and line lengths."""
    count: int
    minimum: float
    maximum: float
    median: float
    mean: float
    standard_deviation: float
    max_line_length: int

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def summarize(wait_times: Iterable[float], trace: Iterable[int]) -> WaitStatistics:
    """Reduce a run to its summary statistics.

    Raises EmptySequenceError when there are no wait times.
    """
    waits = _as_array(wait_times, 'summarize')
    return WaitStatistics(
        count=int(waits.size),
        minimum=float(np.min(waits)),
        maximum=float(np.max(waits)),
        median=median(waits),
        mean=mean(waits),
        standard_deviation=standard_deviation(waits),
        max_line_length=int(max_line_length(trace)),
    )
