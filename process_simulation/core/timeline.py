"""Derivation of arrival, begin, end and wait times for a FIFO server."""

from dataclasses import replace
from typing import Iterable

from .base import ProcessRecord, Sequence
from ..errors import TimelineError

# Absolute slack allowed when checking sums of floats.
TOLERANCE = 1e-9


def derive_timeline(records: Iterable[ProcessRecord]) -> Sequence:
    """
    Walk the records once in arrival order and fill in their times.

    Each record depends only on its predecessor:

        arrival = previous arrival + interarrival gap
        begin   = max(arrival, previous end)
        end     = begin + service time
        wait    = begin - arrival

    The first record arrives at its own gap and never waits. Returns new
    records; the inputs are left untouched. An empty input gives an empty
    result.
    """
    derived: Sequence = []
    previous = None

    for record in records:
        if previous is None:
            arrival_time = record.interarrival_gap
            begin_time = arrival_time
        else:
            arrival_time = previous.arrival_time + record.interarrival_gap
            begin_time = max(arrival_time, previous.end_time)

        end_time = begin_time + record.service_time
        previous = replace(
            record,
            arrival_time=arrival_time,
            begin_time=begin_time,
            end_time=end_time,
            wait_time=begin_time - arrival_time,
        )
        derived.append(previous)

    return derived


def check_timeline(records: Sequence, tolerance: float = TOLERANCE) -> None:
    """Raise TimelineError at the first record that breaks a timing invariant."""
    for i, record in enumerate(records):
        if record.wait_time < 0:
            raise TimelineError(i, f"negative wait time {record.wait_time}")
        if abs(record.wait_time - (record.begin_time - record.arrival_time)) > tolerance:
            raise TimelineError(i, "wait time is not begin - arrival")
        if abs(record.end_time - (record.begin_time + record.service_time)) > tolerance:
            raise TimelineError(i, "end time is not begin + service")

        if i == 0:
            expected_arrival = record.interarrival_gap
            if record.wait_time != 0:
                raise TimelineError(i, "first process must not wait")
        else:
            previous = records[i - 1]
            expected_arrival = previous.arrival_time + record.interarrival_gap
            if record.begin_time + tolerance < previous.end_time:
                raise TimelineError(i, "service begins before the previous process ends")

        if abs(record.arrival_time - expected_arrival) > tolerance:
            raise TimelineError(i, f"arrival time {record.arrival_time} != {expected_arrival}")
