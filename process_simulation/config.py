"""Run configuration for the process simulation."""

import json
import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import InvalidParameterError


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    return float(value)


def _as_int(name: str, value: Any) -> int:
    number = _as_float(name, value)
    if not number.is_integer():
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    return int(number)


@dataclass
class SimulationConfig:
    """Parameters of one simulation run.

    Means are in simulated time units. ``seed`` seeds numpy's global random
    source before sampling; ``None`` leaves the source as it is.
    """
    queue_size: int = 100
    execution_mean: float = 3.0
    interval_mean: float = 5.0
    seed: Optional[int] = None
    replications: int = 1

    def validate(self) -> 'SimulationConfig':
        """Check every field, returning self so calls can be chained."""
        if isinstance(self.queue_size, bool) or not isinstance(self.queue_size, int):
            raise InvalidParameterError(f"queue_size must be an integer, got {self.queue_size!r}")
        if self.queue_size < 0:
            raise InvalidParameterError(f"queue_size must be >= 0, got {self.queue_size}")
        for name in ('execution_mean', 'interval_mean'):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidParameterError(f"{name} must be > 0, got {value}")
        if self.replications < 1:
            raise InvalidParameterError(f"replications must be >= 1, got {self.replications}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationConfig':
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidParameterError(f"Unknown configuration keys: {', '.join(unknown)}")

        config = cls(**data)
        config.queue_size = _as_int('queue_size', config.queue_size)
        config.execution_mean = _as_float('execution_mean', config.execution_mean)
        config.interval_mean = _as_float('interval_mean', config.interval_mean)
        config.replications = _as_int('replications', config.replications)
        if config.seed is not None:
            config.seed = _as_int('seed', config.seed)
        return config.validate()

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'SimulationConfig':
        """Load a config from a JSON object file."""
        with open(path, 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise InvalidParameterError(f"{path}: configuration must be a JSON object")
        return cls.from_dict(data)
