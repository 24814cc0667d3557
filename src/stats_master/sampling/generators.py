"""
Distribution Generators
=======================

This module defines the generator protocol and one generator per family:

- :class:`BinomialGenerator` — inverse CDF over the exact cumulative table,
  located by binary search.
- :class:`UniformGenerator` — closed-form inverse CDF ``x = a + u (b - a)``
  and a 10-interval variation series over ``[a, b]``.
- :class:`NormalGenerator` — Irwin–Hall approximation (12 uniforms minus 6)
  scaled by ``sigma`` and shifted by ``m``, binned over the standard range
  ``[-6, 6]`` in 13 intervals.

Notes
-----
- Generators are stateless; every call owns its draw sequence. Without an
  explicit random source each call creates a fresh unseeded one.
- :func:`generate` is the single entry point dispatching over the closed
  union of parameter families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from stats_master.config import get_settings
from stats_master.errors import InvalidParameterError, UnsupportedDistributionError
from stats_master.families import BinomialParameters, NormalParameters, UniformParameters
from stats_master.families.binomial import cumulative_probabilities, find_value_in_cumulative
from stats_master.sampling.binning import IntervalBinner
from stats_master.sampling.random_source import NumpyRandomSource, RandomSource, draw_uniforms
from stats_master.sampling.results import (
    BinomialValueInfo,
    GeneratedValue,
    GenerationResult,
    IntervalData,
    NormalValueInfo,
    UniformValueInfo,
)

if TYPE_CHECKING:
    from stats_master.families import DistributionParameters

logger = logging.getLogger(__name__)


class DistributionGenerator(Protocol):
    """Protocol for generators (return a :class:`GenerationResult`)."""

    def generate(
        self,
        parameters: Any,
        sample_size: int,
        random_source: RandomSource | None = None,
    ) -> GenerationResult: ...


def _check_sample_size(sample_size: int) -> None:
    if isinstance(sample_size, bool) or not isinstance(sample_size, int) or sample_size < 0:
        raise InvalidParameterError(
            f"sample_size must be a non-negative integer, got {sample_size!r}"
        )


def _check_interval_count(count: int | None) -> None:
    if count is not None and (isinstance(count, bool) or not isinstance(count, int) or count < 1):
        raise InvalidParameterError(f"number_of_intervals must be a positive integer, got {count!r}")


class BinomialGenerator:
    """
    Binomial sampler using inverse transform sampling over the cumulative table.

    Each draw ``u`` maps to the smallest outcome ``m`` with ``u <= cum[m]``.
    The result carries the cumulative table and an implicit one-bucket-per-
    outcome series (``n + 1`` buckets of width 1, no explicit intervals).
    """

    def generate(
        self,
        parameters: BinomialParameters,
        sample_size: int,
        random_source: RandomSource | None = None,
    ) -> GenerationResult:
        """
        Draw ``sample_size`` outcomes of Binomial(n, p).

        Parameters
        ----------
        parameters : BinomialParameters
            Distribution parameters.
        sample_size : int
            Number of outcomes, non-negative.
        random_source : RandomSource, optional
            Supplier of uniform draws.

        Returns
        -------
        GenerationResult
            Outcomes with frequencies and the cumulative table.

        Raises
        ------
        InvalidParameterError
            If ``sample_size`` is negative or not an integer.
        UnsupportedDistributionError
            If ``parameters`` are not binomial.
        """
        if not isinstance(parameters, BinomialParameters):
            raise UnsupportedDistributionError(parameters, "Binomial generation")
        _check_sample_size(sample_size)

        source = random_source if random_source is not None else NumpyRandomSource()
        n = int(parameters.n)
        cumulative = cumulative_probabilities(parameters)

        draws = draw_uniforms(source, sample_size)
        outcomes = find_value_in_cumulative(draws, cumulative)
        counts = np.bincount(outcomes, minlength=n + 1)

        values = tuple(
            GeneratedValue(value=m, random_draws=(u,), info=BinomialValueInfo(cumulative_index=m))
            for u, m in zip(draws.tolist(), outcomes.tolist(), strict=True)
        )
        interval_data = IntervalData(
            intervals=(),
            frequency_dict={m: int(counts[m]) for m in range(n + 1)},
            cumulative_probabilities=tuple(cumulative.tolist()),
            number_of_intervals=n + 1,
            interval_width=1.0,
        )
        logger.debug("Generated %d values of %s", sample_size, parameters)
        return GenerationResult(
            values=values,
            parameters=parameters,
            sample_size=sample_size,
            interval_data=interval_data,
        )


class UniformGenerator:
    """
    Uniform sampler with the closed-form inverse CDF ``x = a + u (b - a)``.

    Parameters
    ----------
    number_of_intervals : int, optional
        Interval count of the variation series; defaults to the
        ``uniform_intervals`` setting (10).
    """

    def __init__(self, number_of_intervals: int | None = None) -> None:
        _check_interval_count(number_of_intervals)
        self.number_of_intervals = number_of_intervals

    def generate(
        self,
        parameters: UniformParameters,
        sample_size: int,
        random_source: RandomSource | None = None,
    ) -> GenerationResult:
        """
        Draw ``sample_size`` values of Uniform(a, b) and bin them over ``[a, b]``.

        Raises
        ------
        InvalidParameterError
            If ``sample_size`` is negative or not an integer.
        UnsupportedDistributionError
            If ``parameters`` are not uniform.
        """
        if not isinstance(parameters, UniformParameters):
            raise UnsupportedDistributionError(parameters, "Uniform generation")
        _check_sample_size(sample_size)

        source = random_source if random_source is not None else NumpyRandomSource()
        a, b = float(parameters.a), float(parameters.b)
        count = self.number_of_intervals or get_settings().uniform_intervals

        draws = draw_uniforms(source, sample_size)
        xs = a + draws * (b - a)
        indices, interval_data = IntervalBinner(a, b, count).tally(xs)

        values = tuple(
            GeneratedValue(
                value=x,
                random_draws=(u,),
                info=UniformValueInfo(
                    a=a,
                    b=b,
                    interval_index=i,
                    calculation=f"x = {a} + {u} * ({b - a}) = {x}",
                ),
            )
            for u, x, i in zip(draws.tolist(), xs.tolist(), indices.tolist(), strict=True)
        )
        logger.debug("Generated %d values of %s in %d intervals", sample_size, parameters, count)
        return GenerationResult(
            values=values,
            parameters=parameters,
            sample_size=sample_size,
            interval_data=interval_data,
        )


class NormalGenerator:
    """
    Normal sampler based on the Irwin–Hall approximation.

    A standard variate is the sum of 12 uniform draws minus 6 (mean 0,
    variance 1); the sample value is ``standard * sigma + m``. The series
    partitions the fixed range ``[-6, 6]`` whatever ``m`` and ``sigma`` are,
    and sample values outside it fall into the last interval.

    Parameters
    ----------
    number_of_intervals : int, optional
        Interval count of the variation series; defaults to the
        ``normal_intervals`` setting (13).
    """

    def __init__(self, number_of_intervals: int | None = None) -> None:
        _check_interval_count(number_of_intervals)
        self.number_of_intervals = number_of_intervals

    def generate(
        self,
        parameters: NormalParameters,
        sample_size: int,
        random_source: RandomSource | None = None,
    ) -> GenerationResult:
        """
        Draw ``sample_size`` values of Normal(m, sigma).

        Raises
        ------
        InvalidParameterError
            If ``sample_size`` is negative or not an integer.
        UnsupportedDistributionError
            If ``parameters`` are not normal.
        """
        if not isinstance(parameters, NormalParameters):
            raise UnsupportedDistributionError(parameters, "Normal generation")
        _check_sample_size(sample_size)

        settings = get_settings()
        source = random_source if random_source is not None else NumpyRandomSource()
        m, sigma = float(parameters.m), float(parameters.sigma)
        terms = settings.irwin_hall_terms
        count = self.number_of_intervals or settings.normal_intervals

        draws = draw_uniforms(source, sample_size * terms).reshape(sample_size, terms)
        # Sum of k uniforms has mean k/2 and variance k/12.
        standard = (draws.sum(axis=1) - terms / 2) * math.sqrt(12 / terms)
        xs = standard * sigma + m
        indices, interval_data = IntervalBinner(*settings.normal_range, count).tally(xs)

        values = tuple(
            GeneratedValue(
                value=x,
                random_draws=tuple(row),
                info=NormalValueInfo(m=m, sigma=sigma, standard_value=z, interval_index=i),
            )
            for row, z, x, i in zip(
                draws.tolist(), standard.tolist(), xs.tolist(), indices.tolist(), strict=True
            )
        )
        logger.debug("Generated %d values of %s in %d intervals", sample_size, parameters, count)
        return GenerationResult(
            values=values,
            parameters=parameters,
            sample_size=sample_size,
            interval_data=interval_data,
        )


def generator_for(parameters: DistributionParameters) -> DistributionGenerator:
    """
    Select the generator of the parameters' family.

    Raises
    ------
    UnsupportedDistributionError
        If ``parameters`` belong to no supported family.
    """
    match parameters:
        case BinomialParameters():
            return BinomialGenerator()
        case UniformParameters():
            return UniformGenerator()
        case NormalParameters():
            return NormalGenerator()
        case _:
            raise UnsupportedDistributionError(parameters, "Generation")


def generate(
    parameters: DistributionParameters,
    sample_size: int,
    random_source: RandomSource | None = None,
) -> GenerationResult:
    """
    Generate one sample batch.

    Parameters
    ----------
    parameters : DistributionParameters
        Binomial, uniform or normal parameters.
    sample_size : int
        Number of values, non-negative.
    random_source : RandomSource, optional
        Supplier of uniform draws; a fresh unseeded source by default.

    Returns
    -------
    GenerationResult
        The generated batch.
    """
    return generator_for(parameters).generate(parameters, sample_size, random_source)


__all__ = [
    "DistributionGenerator",
    "BinomialGenerator",
    "UniformGenerator",
    "NormalGenerator",
    "generator_for",
    "generate",
]
