import math

import numpy as np
import pytest

from process_simulation.distributions.random_variables import (
    MAX_REDRAWS,
    exponential,
    exponential_distribution,
    sequence_source,
    uniform_draw,
)
from process_simulation.errors import DegenerateRandomDrawError, InvalidParameterError


def test_exponential_requires_positive_mean():
    with pytest.raises(InvalidParameterError):
        exponential(0)
    with pytest.raises(InvalidParameterError):
        exponential(-3.0)
    with pytest.raises(ValueError):
        exponential_distribution(float("nan"))


def test_exponential_uses_inverse_cdf():
    value = exponential(3.0, sequence_source([0.5]))
    assert value == pytest.approx(-3.0 * math.log(0.5))
    assert value > 0


def test_zero_draw_is_redrawn():
    source = sequence_source([0.0, 0.25])
    assert exponential(5.0, source) == pytest.approx(-5.0 * math.log(0.25))


def test_one_draw_is_redrawn():
    assert uniform_draw(sequence_source([1.0, 0.0, 0.5])) == 0.5


def test_persistent_zero_draws_raise():
    with pytest.raises(DegenerateRandomDrawError):
        exponential(3.0, lambda: 0.0)


def test_redraw_limit_is_exact():
    draws = [0.0] * (MAX_REDRAWS - 1) + [0.5]
    assert uniform_draw(sequence_source(draws)) == 0.5


def test_exhausted_sequence_source():
    source = sequence_source([0.5])
    source()
    with pytest.raises(InvalidParameterError):
        source()


def test_exponential_deterministic_with_numpy_seed():
    np.random.seed(123)
    a = exponential(2.0)
    np.random.seed(123)
    b = exponential(2.0)
    assert a == b
    assert a > 0


def test_exponential_distribution_sample_mean():
    np.random.seed(0)
    dist = exponential_distribution(3.0)
    samples = [dist() for _ in range(20000)]
    assert min(samples) > 0
    assert np.mean(samples) == pytest.approx(3.0, rel=0.05)
