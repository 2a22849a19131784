"""Core components of the process simulation."""

from .base import ProcessRecord, QueueLengthTrace, Sequence
from .factory import ProcessFactory, create_batch, create_process
from .timeline import check_timeline, derive_timeline
from .line import line_lengths, max_line_length
from .metrics import WaitStatistics, mean, median, standard_deviation, summarize
from .theory import MM1Theory, mm1_theory, relative_error

__all__ = [
    'ProcessRecord',
    'QueueLengthTrace',
    'Sequence',
    'ProcessFactory',
    'create_batch',
    'create_process',
    'check_timeline',
    'derive_timeline',
    'line_lengths',
    'max_line_length',
    'WaitStatistics',
    'mean',
    'median',
    'standard_deviation',
    'summarize',
    'MM1Theory',
    'mm1_theory',
    'relative_error',
]
