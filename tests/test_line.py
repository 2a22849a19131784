import numpy as np
import pytest

from process_simulation.core import (
    ProcessFactory,
    ProcessRecord,
    derive_timeline,
    line_lengths,
    max_line_length,
)
from process_simulation.errors import EmptySequenceError


def _derived(gaps, services):
    return derive_timeline([
        ProcessRecord(process_id=i, service_time=s, interarrival_gap=g)
        for i, (g, s) in enumerate(zip(gaps, services))
    ])


def test_two_process_scenario():
    assert line_lengths(_derived([2.0, 1.0], [3.0, 1.0])) == [0, 1]


def test_line_grows_and_drains():
    records = _derived([1.0, 1.0, 1.0, 10.0], [5.0, 5.0, 5.0, 1.0])
    assert [r.wait_time for r in records] == [0.0, 4.0, 8.0, 3.0]
    assert line_lengths(records) == [0, 1, 2, 1]


def test_single_process():
    assert line_lengths(_derived([3.0], [1.0])) == [0]


def test_empty_sequence():
    assert line_lengths([]) == []


def test_scan_stops_at_first_started_process():
    # Not a FIFO timeline: process 0 begins after process 1 arrives, but the
    # scan stops at process 1, which began on arrival.
    records = [
        ProcessRecord(0, 1.0, 1.0, arrival_time=1.0, begin_time=10.0, end_time=11.0, wait_time=9.0),
        ProcessRecord(1, 1.0, 1.0, arrival_time=2.0, begin_time=2.0, end_time=3.0, wait_time=0.0),
    ]
    assert line_lengths(records) == [1, 0]


def test_trace_bounds_for_random_run():
    np.random.seed(7)
    records = derive_timeline(ProcessFactory(4.5, 5.0).create_batch(300))
    trace = line_lengths(records)
    assert len(trace) == len(records)
    assert trace[0] == 0
    for p, count in enumerate(trace):
        assert 0 <= count <= p


def test_max_line_length():
    assert max_line_length([0, 1, 3, 2]) == 3
    with pytest.raises(EmptySequenceError):
        max_line_length([])
