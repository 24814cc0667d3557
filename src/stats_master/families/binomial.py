"""
Binomial distribution family implementation.

Contains the binomial parameters and the exact probability tables used both
for sampling (inverse CDF over the cumulative table) and for density and
interval-probability calculations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from numbers import Integral
from typing import TYPE_CHECKING, cast, overload

import numpy as np

from stats_master.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from stats_master.types import FamilyName, Kind

if TYPE_CHECKING:
    from stats_master.types import IntArray, NumericArray

logger = logging.getLogger(__name__)

# Coefficients wider than this many bits are combined with p^m q^(n-m) in log space.
_DIRECT_PRODUCT_BITS = 900


@parametrization(family=FamilyName.BINOMIAL, kind=Kind.DISCRETE)
class BinomialParameters(Parametrization):
    """
    Parameters of the binomial distribution.

    Parameters
    ----------
    n : int
        Number of trials.
    p : float
        Success probability of a single trial.
    """

    n: int
    p: float

    @constraint(description="n is a non-negative integer")
    def check_n_non_negative_integer(self) -> bool:
        """Check that the number of trials is a non-negative integer."""
        return isinstance(self.n, Integral) and not isinstance(self.n, bool) and self.n >= 0

    @constraint(description="0 <= p <= 1")
    def check_p_is_probability(self) -> bool:
        """Check that the success probability lies in [0, 1]."""
        return 0.0 <= self.p <= 1.0

    @property
    def description(self) -> str:
        return f"Binomial: n={self.n}, p={self.p:.2f}"


def binomial_coefficient(n: int, m: int) -> int:
    """
    Binomial coefficient C(n, m).

    Uses the iterative multiplicative formula over exact integers with the
    symmetry ``C(n, m) = C(n, n - m)`` to bound the number of multiplications.

    Parameters
    ----------
    n : int
        Total number of elements.
    m : int
        Number of chosen elements.

    Returns
    -------
    int
        The coefficient, 0 when ``m`` is outside ``[0, n]``.
    """
    if m < 0 or m > n:
        return 0
    if m == 0 or m == n:
        return 1

    m = min(m, n - m)

    result = 1
    for i in range(1, m + 1):
        result = result * (n - i + 1) // i
    return result


def binomial_coefficients(n: int) -> list[int]:
    """
    Row ``[C(n, 0), ..., C(n, n)]`` of exact coefficients.

    Each coefficient follows from the previous one as
    ``C(n, m + 1) = C(n, m) (n - m) / (m + 1)``; only the first half of the row
    is computed and the rest is mirrored by ``C(n, m) = C(n, n - m)``.
    """
    half = [1]
    for m in range(n // 2):
        half.append(half[-1] * (n - m) // (m + 1))
    mirrored = half[: (n + 1) // 2][::-1]
    return half + mirrored


def _mass(coefficient: int, n: int, p: float, m: int) -> float:
    if p == 0.0:
        return 1.0 if m == 0 else 0.0
    if p == 1.0:
        return 1.0 if m == n else 0.0

    q = 1.0 - p
    if coefficient.bit_length() <= _DIRECT_PRODUCT_BITS:
        return float(coefficient) * p**m * q ** (n - m)
    return math.exp(math.log(coefficient) + m * math.log(p) + (n - m) * math.log(q))


def binomial_probability(n: int, p: float, m: int) -> float:
    """
    Exact probability ``P(X = m) = C(n, m) p^m (1 - p)^(n - m)``.

    Parameters
    ----------
    n : int
        Number of trials.
    p : float
        Success probability.
    m : int
        Number of successes.

    Returns
    -------
    float
        The probability, 0 when ``m`` is outside ``[0, n]``.
    """
    if m < 0 or m > n:
        return 0.0
    return _mass(binomial_coefficient(n, m), n, p, m)


def probability_masses(parameters: BinomialParameters) -> NumericArray:
    """
    Probability mass array ``P(X = m)`` for ``m = 0..n``, normalized to sum to 1.

    Parameters
    ----------
    parameters : BinomialParameters
        Distribution parameters.

    Returns
    -------
    NumericArray
        Array of length ``n + 1``.
    """
    n, p = int(parameters.n), float(parameters.p)
    masses = np.array(
        [_mass(c, n, p, m) for m, c in enumerate(binomial_coefficients(n))], dtype=np.float64
    )
    total = float(masses.sum())
    logger.debug("Binomial(n=%d, p=%g) raw mass total %.17g", n, p, total)
    return cast("NumericArray", masses / total)


def cumulative_probabilities(parameters: BinomialParameters) -> NumericArray:
    """
    Cumulative table ``cum[m] = P(X <= m)`` for ``m = 0..n``.

    The table is built by running sum over the normalized masses; it is
    nondecreasing and ``cum[n]`` equals 1.0 exactly.

    Parameters
    ----------
    parameters : BinomialParameters
        Distribution parameters.

    Returns
    -------
    NumericArray
        Array of length ``n + 1``.
    """
    cumulative = np.minimum(np.cumsum(probability_masses(parameters)), 1.0)
    cumulative[-1] = 1.0
    return cast("NumericArray", cumulative)


@overload
def find_value_in_cumulative(u: float, cumulative: NumericArray) -> int: ...
@overload
def find_value_in_cumulative(u: NumericArray, cumulative: NumericArray) -> IntArray: ...


def find_value_in_cumulative(
    u: float | NumericArray, cumulative: NumericArray
) -> int | IntArray:
    """
    Smallest index ``m`` with ``u <= cum[m]`` (lower-bound binary search).

    Parameters
    ----------
    u : float or NumericArray
        Uniform draw(s) from ``[0, 1]``.
    cumulative : NumericArray
        Nondecreasing cumulative table ending with 1.0.

    Returns
    -------
    int or IntArray
        Sampled outcome(s).
    """
    idx = np.searchsorted(cumulative, u, side="left")
    idx = np.minimum(idx, cumulative.size - 1)
    if np.ndim(idx) == 0:
        return int(idx)
    return cast("IntArray", idx.astype(np.int64))


def pmf(parameters: BinomialParameters, x: float) -> float:
    """
    Probability mass at ``x`` rounded half away from zero; 0 outside ``[0, n]``.

    Parameters
    ----------
    parameters : BinomialParameters
        Distribution parameters.
    x : float
        Point of evaluation, rounded to the nearest outcome.

    Returns
    -------
    float
        Probability of the nearest outcome.
    """
    if not math.isfinite(x):
        return 0.0
    nearest = int(math.copysign(math.floor(abs(x) + 0.5), x))
    return binomial_probability(int(parameters.n), float(parameters.p), nearest)


def mean(parameters: BinomialParameters) -> float:
    """Mean of binomial distribution."""
    return parameters.n * parameters.p


def variance(parameters: BinomialParameters) -> float:
    """Variance of binomial distribution."""
    return parameters.n * parameters.p * (1 - parameters.p)
