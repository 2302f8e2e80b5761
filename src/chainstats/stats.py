"""
Moment estimators for MCMC draws.

- mean: Arithmetic mean of a sequence of draws
- sample_variance: Unbiased sample variance (Bessel's correction)

Both work in float64 with plain summation; NaN/Inf propagate under IEEE-754.
"""

from typing import Sequence, Union

import numpy as np

from .errors import EmptyInputError

ArrayLike = Union[Sequence[float], np.ndarray]


def mean(values: ArrayLike) -> float:
    """
    Compute the arithmetic mean of a sequence of draws.

    Args:
        values: Non-empty sequence of floats

    Returns:
        Sum of the values divided by their count

    Raises:
        EmptyInputError: If values is empty
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise EmptyInputError("Can't take mean of empty array")
    return float(np.sum(arr) / arr.size)


def sample_variance(values: ArrayLike) -> float:
    """
    Compute the sample variance using Bessel's correction.

    Variance is sum((x - xbar)**2) / (n - 1). A single value divides by zero
    and yields NaN rather than raising.

    Args:
        values: Non-empty sequence of floats

    Returns:
        Unbiased sample variance

    Raises:
        EmptyInputError: If values is empty
    """
    arr = np.asarray(values, dtype=np.float64)
    xbar = mean(arr)
    sum_sq = np.sum((arr - xbar) ** 2)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(sum_sq) / np.float64(arr.size - 1))
