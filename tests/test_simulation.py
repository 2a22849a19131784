import json

import pytest

from process_simulation.config import SimulationConfig
from process_simulation.distributions.random_variables import sequence_source
from process_simulation.errors import EmptySequenceError, InvalidParameterError
from process_simulation.system import (
    ProcessSimulation,
    convert_numpy_types,
    run_replications,
    run_simulation,
    save_results,
    theory_for,
)

import numpy as np


def test_seeded_runs_are_reproducible():
    config = SimulationConfig(queue_size=50, seed=11)
    a = run_simulation(config)
    b = run_simulation(config)
    assert a.records == b.records
    assert a.trace == b.trace


def test_injected_source_run():
    # service 3*ln2 then gap 5*ln2 for both processes
    source = sequence_source([0.5, 0.5, 0.5, 0.5])
    result = ProcessSimulation(SimulationConfig(queue_size=2), source).run()
    s, g = 3.0 * np.log(2), 5.0 * np.log(2)
    assert result.arrival_times == pytest.approx([g, 2 * g])
    assert result.begin_times == pytest.approx([g, 2 * g])
    assert result.end_times == pytest.approx([g + s, 2 * g + s])
    assert result.wait_times == [0.0, 0.0]
    assert result.trace == [0, 0]


def test_single_process_run():
    result = run_simulation(SimulationConfig(queue_size=1, seed=3))
    assert result.wait_times == [0.0]
    assert result.trace == [0]
    assert result.statistics.count == 1


def test_result_lengths_match():
    result = run_simulation(SimulationConfig(queue_size=200, seed=1))
    assert len(result) == 200
    assert len(result.trace) == 200
    stats = result.statistics
    assert stats.count == 200
    assert stats.minimum == 0.0
    assert stats.minimum <= stats.median <= stats.maximum
    assert stats.max_line_length == max(result.trace)
    assert 0.0 < result.utilization() <= 1.0


def test_empty_run_reports_no_statistics():
    result = run_simulation(SimulationConfig(queue_size=0))
    assert len(result) == 0
    assert result.trace == []
    with pytest.raises(EmptySequenceError):
        result.statistics
    summary = result.get_metrics_summary()
    assert summary["processes"] == 0
    assert summary["statistics"] is None
    assert result.utilization() == 0.0


def test_invalid_config_fails_fast():
    with pytest.raises(InvalidParameterError):
        ProcessSimulation(SimulationConfig(execution_mean=-1.0))


def test_metrics_summary_includes_config():
    summary = run_simulation(SimulationConfig(queue_size=5, seed=9)).get_metrics_summary()
    assert summary["config"]["queue_size"] == 5
    assert set(summary["statistics"]) == {
        "count", "minimum", "maximum", "median", "mean",
        "standard_deviation", "max_line_length",
    }


def test_run_replications():
    results = run_replications(SimulationConfig(queue_size=20), num_replications=3, base_seed=100)
    assert results["replications"] == 3
    assert results["base_seed"] == 100
    mean_wait = results["statistics"]["mean"]
    assert mean_wait["min"] <= mean_wait["mean"] <= mean_wait["max"]
    assert results["statistics"]["count"]["std"] == 0.0


def test_run_replications_is_reproducible():
    config = SimulationConfig(queue_size=30, seed=5, replications=2)
    assert run_replications(config) == run_replications(config)


def test_run_replications_empty_queue():
    results = run_replications(SimulationConfig(queue_size=0), num_replications=2)
    assert results["statistics"] == {}


def test_run_replications_rejects_zero():
    with pytest.raises(InvalidParameterError):
        run_replications(SimulationConfig(), num_replications=0)


def test_theory_for():
    assert theory_for(SimulationConfig())["Wq"] == pytest.approx(4.5)
    assert theory_for(SimulationConfig(execution_mean=6.0)) is None


def test_save_results(tmp_path):
    path = tmp_path / "results.json"
    save_results({"value": np.float64(1.5), "counts": np.array([1, 2])}, str(path))
    assert json.loads(path.read_text()) == {"value": 1.5, "counts": [1, 2]}


def test_convert_numpy_types_nested():
    assert convert_numpy_types({"a": [np.int64(3), (np.float32(0.5),)]}) == {"a": [3, [0.5]]}
