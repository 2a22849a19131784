"""Random variable distributions for the process simulation."""

from .random_variables import (
    MAX_REDRAWS,
    UniformSource,
    exponential,
    exponential_distribution,
    sequence_source,
    uniform_draw,
)

__all__ = [
    'MAX_REDRAWS',
    'UniformSource',
    'exponential',
    'exponential_distribution',
    'sequence_source',
    'uniform_draw',
]
