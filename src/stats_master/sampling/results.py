"""
Generation Results
==================

Immutable containers produced by the generators:

- :class:`GeneratedValue` — one sample outcome with the uniform draws used
  and a family-specific provenance record;
- :class:`Interval` / :class:`IntervalData` — the variation series;
- :class:`GenerationResult` — one generated batch.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, cast

import numpy as np

from stats_master.errors import InvalidParameterError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stats_master.families import DistributionParameters
    from stats_master.types import NumericArray


@dataclass(frozen=True, slots=True)
class BinomialValueInfo:
    """Provenance of a binomial outcome: the resolved cumulative-table index."""

    cumulative_index: int


@dataclass(frozen=True, slots=True)
class UniformValueInfo:
    """
    Provenance of a uniform outcome.

    Parameters
    ----------
    a, b : float
        Distribution bounds.
    interval_index : int
        Variation-series interval the value was assigned to.
    calculation : str
        The solved inverse-CDF equation, e.g. ``x = 0.0 + 0.25 * (2.0) = 0.5``.
    """

    a: float
    b: float
    interval_index: int
    calculation: str


@dataclass(frozen=True, slots=True)
class NormalValueInfo:
    """
    Provenance of a normal outcome.

    Parameters
    ----------
    m, sigma : float
        Distribution parameters.
    standard_value : float
        Pre-scaling standard variate (sum of uniforms minus the centering constant).
    interval_index : int
        Variation-series interval the sample value was assigned to.
    """

    m: float
    sigma: float
    standard_value: float
    interval_index: int


type ValueInfo = BinomialValueInfo | UniformValueInfo | NormalValueInfo


@dataclass(frozen=True, slots=True)
class GeneratedValue:
    """
    One sample outcome.

    Parameters
    ----------
    value : int or float
        Outcome (integer for binomial samples).
    random_draws : tuple[float, ...]
        Uniform draws that produced the outcome.
    info : ValueInfo
        Family-specific provenance record.
    """

    value: int | float
    random_draws: tuple[float, ...]
    info: ValueInfo

    @property
    def random_u(self) -> float | None:
        """The single uniform draw, or None when several were combined."""
        if len(self.random_draws) == 1:
            return self.random_draws[0]
        return None


@dataclass(frozen=True, slots=True)
class Interval:
    """
    Bucket ``[start, end]`` of a variation series.

    Parameters
    ----------
    index : int
        Position of the interval in the series.
    start, end : float
        Interval bounds.
    frequency : int
        Number of sample values assigned to the interval.
    """

    index: int
    start: float
    end: float
    frequency: int

    @property
    def midpoint(self) -> float:
        return (self.start + self.end) / 2

    def relative_frequency(self, sample_size: int) -> float:
        """Share of ``sample_size`` values that fell into this interval."""
        if sample_size <= 0:
            raise InvalidParameterError("Relative frequency requires a positive sample size")
        return self.frequency / sample_size


@dataclass(frozen=True, slots=True)
class IntervalData:
    """
    Variation series of a sample.

    Parameters
    ----------
    intervals : tuple[Interval, ...]
        Index-ordered contiguous intervals; empty for binomial samples where
        every integer outcome is its own bucket.
    frequency_dict : Mapping[int, int]
        Frequency per interval index (or per outcome for binomial samples).
    cumulative_probabilities : tuple[float, ...] or None
        Exact cumulative table, present only for binomial samples.
    number_of_intervals : int
        Bucket count (``n + 1`` for binomial samples).
    interval_width : float
        Bucket width (1 for binomial samples).

    Raises
    ------
    InvalidParameterError
        If the intervals are not index-ordered and contiguous, or their
        frequencies disagree with ``frequency_dict``.
    """

    intervals: tuple[Interval, ...]
    frequency_dict: Mapping[int, int]
    cumulative_probabilities: tuple[float, ...] | None
    number_of_intervals: int
    interval_width: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(self.intervals))
        object.__setattr__(self, "frequency_dict", MappingProxyType(dict(self.frequency_dict)))
        if self.cumulative_probabilities is not None:
            object.__setattr__(
                self, "cumulative_probabilities", tuple(self.cumulative_probabilities)
            )

        if any(f < 0 for f in self.frequency_dict.values()):
            raise InvalidParameterError("Frequencies must be non-negative")
        if not self.intervals:
            return

        if len(self.intervals) != self.number_of_intervals:
            raise InvalidParameterError(
                f"Expected {self.number_of_intervals} intervals, got {len(self.intervals)}"
            )
        for position, interval in enumerate(self.intervals):
            if interval.index != position:
                raise InvalidParameterError(
                    f"Interval at position {position} has index {interval.index}"
                )
            if position and interval.start != self.intervals[position - 1].end:
                raise InvalidParameterError(
                    f"Interval {position} does not start where {position - 1} ends"
                )
            if self.frequency_dict.get(position, 0) != interval.frequency:
                raise InvalidParameterError(
                    f"Frequency of interval {position} disagrees with frequency_dict"
                )

    @property
    def total_frequency(self) -> int:
        return sum(self.frequency_dict.values())

    def relative_frequencies(self) -> dict[int, float]:
        """Frequency of every bucket divided by the total frequency."""
        total = self.total_frequency
        if total == 0:
            raise InvalidParameterError("Relative frequencies of an empty series are undefined")
        return {key: freq / total for key, freq in self.frequency_dict.items()}

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """
    One generated sample batch.

    Parameters
    ----------
    values : tuple[GeneratedValue, ...]
        Generated values in draw order.
    parameters : DistributionParameters
        Parameters the batch was drawn from.
    sample_size : int
        Number of generated values.
    interval_data : IntervalData or None
        Variation series.

    Raises
    ------
    InvalidParameterError
        If ``values`` does not hold ``sample_size`` entries or the series
        frequencies do not sum to ``sample_size``.
    """

    values: tuple[GeneratedValue, ...]
    parameters: DistributionParameters
    sample_size: int
    interval_data: IntervalData | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        if isinstance(self.sample_size, bool) or not isinstance(self.sample_size, int):
            raise InvalidParameterError(f"sample_size must be an integer, got {self.sample_size!r}")
        if len(self.values) != self.sample_size:
            raise InvalidParameterError(
                f"Expected {self.sample_size} generated values, got {len(self.values)}"
            )
        if self.interval_data is not None and self.interval_data.total_frequency != self.sample_size:
            raise InvalidParameterError(
                f"Frequencies sum to {self.interval_data.total_frequency}, "
                f"expected sample size {self.sample_size}"
            )

    @property
    def frequency_dict(self) -> Mapping[int, int]:
        """
        Frequency by outcome (binomial) or by interval index (uniform, normal).

        Without interval data the values themselves are counted, which is
        only defined for integer outcomes.

        Raises
        ------
        InvalidParameterError
            If there is no interval data and some value is not an integer.
        """
        if self.interval_data is not None:
            return self.interval_data.frequency_dict
        outcomes = [v.value for v in self.values]
        if not all(float(x).is_integer() for x in outcomes):
            raise InvalidParameterError(
                "Frequencies of non-integer values require interval data"
            )
        return MappingProxyType(dict(Counter(int(x) for x in outcomes)))

    @property
    def cumulative_probabilities(self) -> tuple[float, ...] | None:
        if self.interval_data is None:
            return None
        return self.interval_data.cumulative_probabilities

    @property
    def sample(self) -> NumericArray:
        """Generated values as a float array."""
        return cast("NumericArray", np.array([v.value for v in self.values], dtype=np.float64))

    def __len__(self) -> int:
        return self.sample_size


__all__ = [
    "BinomialValueInfo",
    "UniformValueInfo",
    "NormalValueInfo",
    "ValueInfo",
    "GeneratedValue",
    "Interval",
    "IntervalData",
    "GenerationResult",
]
