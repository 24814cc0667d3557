"""
Interval Binning
================

Fixed-count equal-width partition of a domain into a variation series.

Notes
-----
- Edges are computed once, so consecutive intervals share their boundary
  exactly: the partition has no gaps and no overlaps.
- A value is assigned to the first interval ``[start, end]`` containing it
  (both ends inclusive, scanning start to end). A value contained in no
  interval goes to the last interval.
- Since intervals are sorted and contiguous, the first containing interval
  is found by binary search over the right edges.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from stats_master.errors import InvalidParameterError
from stats_master.sampling.results import Interval, IntervalData

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from stats_master.types import IntArray, NumericArray


class IntervalBinner:
    """
    Equal-width binner over ``[low, high]``.

    Parameters
    ----------
    low : float
        Left edge of the first interval.
    high : float
        Right edge of the last interval.
    count : int
        Number of intervals.

    Raises
    ------
    InvalidParameterError
        If the domain is empty or not finite, or ``count`` is not a positive integer.
    """

    def __init__(self, low: float, high: float, count: int) -> None:
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidParameterError(
                f"Interval count must be a positive integer, got {count!r}"
            )
        if not (math.isfinite(low) and math.isfinite(high)) or not low < high:
            raise InvalidParameterError(
                f"Binning domain must be finite with low < high: {(low, high)}"
            )

        self.low = float(low)
        self.high = float(high)
        self.count = count
        self.width = (self.high - self.low) / count

        edges = self.low + np.arange(count + 1, dtype=np.float64) * self.width
        edges[-1] = self.high
        self.edges: NumericArray = edges

    def assign(self, values: ArrayLike) -> IntArray:
        """
        Interval index of every value.

        Parameters
        ----------
        values : array_like
            Values to assign.

        Returns
        -------
        IntArray
            Indices in ``[0, count)``; every value receives exactly one index.
        """
        arr = np.asarray(values, dtype=np.float64)
        starts = self.edges[:-1]
        ends = self.edges[1:]

        idx = np.searchsorted(ends, arr, side="left")
        in_range = idx < self.count
        clipped = np.minimum(idx, self.count - 1)
        contained = in_range & (starts[clipped] <= arr)

        return cast("IntArray", np.where(contained, clipped, self.count - 1).astype(np.int64))

    def assign_one(self, value: float) -> int:
        """Interval index of a single value."""
        return int(self.assign(np.array([value]))[0])

    def tally(self, values: ArrayLike) -> tuple[IntArray, IntervalData]:
        """
        Assign values and build the variation series.

        Parameters
        ----------
        values : array_like
            Values to summarize.

        Returns
        -------
        tuple[IntArray, IntervalData]
            Per-value interval indices and the interval data with frequencies.
        """
        indices = self.assign(values)
        counts = np.bincount(indices, minlength=self.count)

        intervals = tuple(
            Interval(
                index=i,
                start=float(self.edges[i]),
                end=float(self.edges[i + 1]),
                frequency=int(counts[i]),
            )
            for i in range(self.count)
        )
        data = IntervalData(
            intervals=intervals,
            frequency_dict={i: int(counts[i]) for i in range(self.count)},
            cumulative_probabilities=None,
            number_of_intervals=self.count,
            interval_width=self.width,
        )
        return indices, data

    def __repr__(self) -> str:
        return f"IntervalBinner(low={self.low!r}, high={self.high!r}, count={self.count!r})"
