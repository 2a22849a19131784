"""Creation of raw process records with sampled service and interval times."""

from typing import Optional

from .base import ProcessRecord, Sequence
from ..config import SimulationConfig
from ..distributions.random_variables import UniformSource, exponential_distribution
from ..errors import InvalidParameterError


class ProcessFactory:
    """Builds processes whose times are exponential with the configured means."""

    def __init__(self,
                 execution_mean: float = 3.0,
                 interval_mean: float = 5.0,
                 uniform: Optional[UniformSource] = None):
        self.execution_mean = execution_mean
        self.interval_mean = interval_mean
        self.service_time_distribution = exponential_distribution(execution_mean, uniform)
        self.interval_distribution = exponential_distribution(interval_mean, uniform)

    @classmethod
    def from_config(cls, config: SimulationConfig,
                    uniform: Optional[UniformSource] = None) -> 'ProcessFactory':
        return cls(config.execution_mean, config.interval_mean, uniform)

    def create(self, process_id: int = 0) -> ProcessRecord:
        """Create one process; its derived times are left at zero."""
        # Service time is drawn before the interval, per record.
        service_time = self.service_time_distribution()
        interarrival_gap = self.interval_distribution()
        return ProcessRecord(
            process_id=process_id,
            service_time=service_time,
            interarrival_gap=interarrival_gap,
        )

    def create_batch(self, n: int) -> Sequence:
        """Create n independent processes in arrival order."""
        if n < 0:
            raise InvalidParameterError(f"n must be >= 0, got {n}")
        return [self.create(process_id=i) for i in range(n)]


def create_process(execution_mean: float, interval_mean: float,
                   uniform: Optional[UniformSource] = None) -> ProcessRecord:
    """Create a single process with the given means."""
    return ProcessFactory(execution_mean, interval_mean, uniform).create()


def create_batch(n: int, execution_mean: float, interval_mean: float,
                 uniform: Optional[UniformSource] = None) -> Sequence:
    """Create n processes with the given means."""
    return ProcessFactory(execution_mean, interval_mean, uniform).create_batch(n)
