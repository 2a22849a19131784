"""
Random variable generators for the process simulation.

Samples are drawn with the inverse-CDF transform from a uniform source.
The default source is numpy's global generator, so ``np.random.seed``
makes a run reproducible; tests inject their own source instead.
"""

import logging
import math
from typing import Callable, Iterable, Optional

import numpy as np

from ..errors import DegenerateRandomDrawError, InvalidParameterError

logger = logging.getLogger(__name__)

UniformSource = Callable[[], float]

# Consecutive draws outside (0, 1) tolerated before giving up.
MAX_REDRAWS = 100


def _check_mean(mean: float) -> None:
    if not math.isfinite(mean) or mean <= 0:
        raise InvalidParameterError(f"mean must be > 0, got {mean}")


def uniform_draw(uniform: Optional[UniformSource] = None) -> float:
    """Draw u from the open interval (0, 1), redrawing degenerate values."""
    source = uniform if uniform is not None else np.random.random
    for _ in range(MAX_REDRAWS):
        u = float(source())
        if 0.0 < u < 1.0:
            return u
        logger.debug("Discarding degenerate uniform draw %r", u)
    raise DegenerateRandomDrawError(
        f"uniform source produced {MAX_REDRAWS} consecutive values outside (0, 1)"
    )


def exponential(mean: float, uniform: Optional[UniformSource] = None) -> float:
    """Generate exponential random variable with the given mean."""
    _check_mean(mean)
    return float(-mean * np.log(uniform_draw(uniform)))


def exponential_distribution(mean: float,
                             uniform: Optional[UniformSource] = None) -> Callable[[], float]:
    """Create an exponential distribution function."""
    _check_mean(mean)
    return lambda: exponential(mean, uniform)


def sequence_source(values: Iterable[float]) -> UniformSource:
    """
    Create a uniform source that replays a fixed list of draws.

    Useful for reproducing a run exactly or for pinning a test to known
    samples. Running past the end of the list is an error.
    """
    draws = iter(list(values))

    def source() -> float:
        try:
            return next(draws)
        except StopIteration:
            raise InvalidParameterError("uniform sequence exhausted") from None

    return source
