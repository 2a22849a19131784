"""Simulation runner: sample, derive, analyze and summarize one queue."""

import json
import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

import numpy as np

from ..config import SimulationConfig
from ..core import (
    ProcessFactory,
    QueueLengthTrace,
    Sequence,
    WaitStatistics,
    check_timeline,
    derive_timeline,
    line_lengths,
    mm1_theory,
    summarize,
)
from ..distributions.random_variables import UniformSource
from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)


class SimulationResult:
    """Derived processes and line trace of one completed run."""

    def __init__(self, records: Sequence, trace: QueueLengthTrace,
                 config: Optional[SimulationConfig] = None):
        self.records = records
        self.trace = trace
        self.config = config

    def __len__(self) -> int:
        return len(self.records)

    @property
    def arrival_times(self) -> List[float]:
        return [r.arrival_time for r in self.records]

    @property
    def begin_times(self) -> List[float]:
        return [r.begin_time for r in self.records]

    @property
    def end_times(self) -> List[float]:
        return [r.end_time for r in self.records]

    @property
    def wait_times(self) -> List[float]:
        return [r.wait_time for r in self.records]

    @property
    def statistics(self) -> WaitStatistics:
        """Summary statistics; raises EmptySequenceError for an empty run."""
        return summarize(self.wait_times, self.trace)

    def utilization(self) -> float:
        """Fraction of the time from zero to the last departure the server was busy."""
        if not self.records:
            return 0.0
        makespan = self.records[-1].end_time
        if makespan <= 0:
            return 0.0
        busy_time = sum(r.service_time for r in self.records)
        return min(busy_time / makespan, 1.0)

    def get_metrics_summary(self) -> Dict[str, Any]:
        """Get a JSON-friendly summary of the run."""
        metrics: Dict[str, Any] = {
            'processes': len(self.records),
            'utilization': self.utilization(),
            'statistics': self.statistics.as_dict() if self.records else None,
        }
        if self.config is not None:
            metrics['config'] = self.config.to_dict()
        return metrics


class ProcessSimulation:
    """Runs the whole pipeline for one configuration in a single pass."""

    def __init__(self, config: SimulationConfig,
                 uniform: Optional[UniformSource] = None):
        self.config = config.validate()
        self.factory = ProcessFactory.from_config(config, uniform)

    def run(self) -> SimulationResult:
        raw = self.factory.create_batch(self.config.queue_size)
        logger.debug("Created %d processes", len(raw))

        records = derive_timeline(raw)
        if logger.isEnabledFor(logging.DEBUG):
            check_timeline(records)
            logger.debug("Timeline derived, last departure at %s",
                         records[-1].end_time if records else None)

        trace = line_lengths(records)
        return SimulationResult(records, trace, self.config)


def run_simulation(config: SimulationConfig,
                   uniform: Optional[UniformSource] = None) -> SimulationResult:
    """Run a single simulation, seeding numpy first when the config has a seed."""
    if uniform is None and config.seed is not None:
        np.random.seed(config.seed)
    return ProcessSimulation(config, uniform).run()


def run_replications(config: SimulationConfig,
                     num_replications: Optional[int] = None,
                     base_seed: Optional[int] = None) -> Dict[str, Any]:
    """Run independent replications and compute statistics across them."""
    if num_replications is None:
        num_replications = config.replications
    if num_replications < 1:
        raise InvalidParameterError(f"num_replications must be >= 1, got {num_replications}")
    if base_seed is None:
        base_seed = config.seed if config.seed is not None else 42

    results = []
    for i in range(num_replications):
        seed = base_seed + i
        logger.debug("Replication %d with seed %d", i + 1, seed)
        result = run_simulation(replace(config, seed=seed))
        results.append(result.get_metrics_summary())

    summary: Dict[str, Any] = {
        'replications': num_replications,
        'base_seed': base_seed,
        'config': config.to_dict(),
        'utilization': _describe([r['utilization'] for r in results]),
        'statistics': {},
    }

    if config.queue_size > 0:
        for key in results[0]['statistics']:
            values = [r['statistics'][key] for r in results]
            summary['statistics'][key] = _describe(values)

    return summary


def theory_for(config: SimulationConfig) -> Optional[Dict[str, float]]:
    """M/M/1 reference values for the config, or None when it is unstable."""
    try:
        return mm1_theory(config.execution_mean, config.interval_mean).as_dict()
    except InvalidParameterError:
        return None


def _describe(values: List[float]) -> Dict[str, float]:
    return {
        'mean': float(np.mean(values)),
        'std': float(np.std(values)),
        'min': float(np.min(values)),
        'max': float(np.max(values)),
    }


def convert_numpy_types(obj):
    """Convert numpy types to Python native types for JSON serialization."""
    if isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, dict):
        return {key: convert_numpy_types(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [convert_numpy_types(item) for item in obj]
    else:
        return obj


def save_results(results: Dict, output_path: str) -> None:
    """Save results to JSON file."""
    with open(output_path, 'w') as f:
        json.dump(convert_numpy_types(results), f, indent=2)
