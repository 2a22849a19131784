"""Base records for the process simulation."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ProcessRecord:
    """
    One simulated unit of work.

    ``service_time`` and ``interarrival_gap`` are sampled when the record is
    created. The remaining times are filled in by the timeline pass, which
    returns new records rather than mutating these, so a record either has
    none of its derived times or all of them.
    """
    process_id: int
    service_time: float
    interarrival_gap: float  # Time since the previous arrival
    arrival_time: float = 0.0
    begin_time: float = 0.0
    end_time: float = 0.0
    wait_time: float = 0.0

    @property
    def turnaround_time(self) -> float:
        """Time from arrival until service completes."""
        return self.end_time - self.arrival_time


# Ordered by arrival, which is also generation order.
Sequence = List[ProcessRecord]

# Line length seen by each arrival, parallel-indexed to a Sequence.
QueueLengthTrace = List[int]
