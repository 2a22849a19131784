"""Line length seen by each arriving process."""

from typing import Iterable

from .base import QueueLengthTrace, Sequence
from ..errors import EmptySequenceError


def line_lengths(records: Sequence) -> QueueLengthTrace:
    """
    Count, for each arrival, the processes that have not yet begun service.

    For process p the scan walks backward from p itself and counts each
    process c with ``begin_time[c] > arrival_time[p]``, stopping at the
    first one that has already begun. Stopping early is only sound because
    a single FIFO server starts processes in arrival order, so begin times
    never decrease along the sequence: once c has begun, every process
    before c has begun too.

    The first process always sees 0, and entry p is at most p. The scan is
    linear when the line stays short and quadratic when it keeps growing.
    """
    trace: QueueLengthTrace = []

    for p, arriving in enumerate(records):
        line_count = 0
        for c in range(p, -1, -1):
            if records[c].begin_time > arriving.arrival_time:
                line_count += 1
            else:
                break
        trace.append(line_count)

    return trace


def max_line_length(trace: Iterable[int]) -> int:
    """Longest line observed in a trace."""
    values = list(trace)
    if not values:
        raise EmptySequenceError("max_line_length() of an empty trace")
    return max(values)
