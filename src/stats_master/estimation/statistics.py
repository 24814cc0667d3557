"""
Descriptive statistics of a one-dimensional sample.

All helpers accept any array-like of numbers and raise
:class:`~stats_master.errors.InsufficientSampleError` when the sample is too
small for the statistic instead of returning a placeholder value.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections import Counter
from typing import TYPE_CHECKING, cast

import numpy as np

from stats_master.errors import InsufficientSampleError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from stats_master.types import NumericArray


def _as_sample(values: ArrayLike, minimum: int, statistic: str) -> NumericArray:
    arr = np.asarray(values, dtype=np.float64).ravel()
    if arr.size < minimum:
        raise InsufficientSampleError(
            f"{statistic} requires at least {minimum} observation(s), got {arr.size}"
        )
    return cast("NumericArray", arr)


def sample_mean(values: ArrayLike) -> float:
    """Arithmetic mean of the sample."""
    return float(_as_sample(values, 1, "Sample mean").mean())


def sample_variance(values: ArrayLike) -> float:
    """
    Biased sample variance ``sum((x - mean)^2) / n``.

    Raises
    ------
    InsufficientSampleError
        If the sample is empty.
    """
    return float(_as_sample(values, 1, "Sample variance").var())


def corrected_variance(values: ArrayLike) -> float:
    """
    Unbiased sample variance ``sum((x - mean)^2) / (n - 1)`` (Bessel's correction).

    Raises
    ------
    InsufficientSampleError
        If the sample holds fewer than two observations.
    """
    return float(_as_sample(values, 2, "Corrected variance").var(ddof=1))


def standard_deviation(values: ArrayLike) -> float:
    """Square root of the biased sample variance."""
    return math.sqrt(sample_variance(values))


def corrected_standard_deviation(values: ArrayLike) -> float:
    """Square root of the corrected sample variance."""
    return math.sqrt(corrected_variance(values))


def mode(values: ArrayLike) -> float:
    """
    Most frequent value; on ties the value encountered first wins.

    Raises
    ------
    InsufficientSampleError
        If the sample is empty.
    """
    arr = _as_sample(values, 1, "Mode")
    value, _ = Counter(arr.tolist()).most_common(1)[0]
    return float(value)


def median(values: ArrayLike) -> float:
    """Middle value, or the mean of the two middle values for even sizes."""
    return float(np.median(_as_sample(values, 1, "Median")))


def coefficient_of_variation(values: ArrayLike) -> float:
    """
    Biased standard deviation relative to the mean, in percent.

    Returns 0 when the mean is exactly zero.
    """
    arr = _as_sample(values, 1, "Coefficient of variation")
    mu = float(arr.mean())
    if mu == 0.0:
        return 0.0
    return float(arr.std()) / mu * 100


__all__ = [
    "sample_mean",
    "sample_variance",
    "corrected_variance",
    "standard_deviation",
    "corrected_standard_deviation",
    "mode",
    "median",
    "coefficient_of_variation",
]
