"""
Estimation Calculator
=====================

Point estimates of generated samples compared with the closed-form moments
of the distribution they were drawn from.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from stats_master.errors import InsufficientSampleError, UnsupportedDistributionError
from stats_master.estimation import statistics
from stats_master.estimation.estimates import (
    AllDistributionParameters,
    AllParameterEstimates,
    DistributionEstimate,
)
from stats_master.families import BinomialParameters, NormalParameters, UniformParameters
from stats_master.families import binomial, normal, uniform
from stats_master.sampling import generate

if TYPE_CHECKING:
    from stats_master.families import DistributionParameters
    from stats_master.sampling import GenerationResult, RandomSource

logger = logging.getLogger(__name__)


def theoretical_moments(parameters: DistributionParameters) -> tuple[float, float, float]:
    """
    Mean, variance and standard deviation of a distribution.

    Parameters
    ----------
    parameters : DistributionParameters
        Binomial, uniform or normal parameters.

    Returns
    -------
    tuple[float, float, float]
        ``(mean, variance, sigma)``.

    Raises
    ------
    UnsupportedDistributionError
        If ``parameters`` belong to no supported family.
    """
    match parameters:
        case BinomialParameters():
            var = binomial.variance(parameters)
            return float(binomial.mean(parameters)), float(var), math.sqrt(var)
        case UniformParameters():
            var = uniform.variance(parameters)
            return float(uniform.mean(parameters)), float(var), math.sqrt(var)
        case NormalParameters():
            return (
                float(normal.mean(parameters)),
                float(normal.variance(parameters)),
                float(parameters.sigma),
            )
        case _:
            raise UnsupportedDistributionError(parameters, "Theoretical moments")


def default_label(parameters: DistributionParameters) -> str:
    """Display name of the parameters' family, e.g. ``"Binomial"``."""
    return str(parameters.family).capitalize()


class EstimationCalculator:
    """
    Derives sample and theoretical moments of generated batches.

    The calculator is stateless; one instance may serve any number of
    results.
    """

    def estimate(self, result: GenerationResult, label: str | None = None) -> DistributionEstimate:
        """
        Estimate the moments of one generated batch.

        Parameters
        ----------
        result : GenerationResult
            Generated batch with its originating parameters.
        label : str, optional
            Display name; defaults to the family name.

        Returns
        -------
        DistributionEstimate
            Sample moments next to the theoretical ones.

        Raises
        ------
        InsufficientSampleError
            If the batch holds fewer than two values.
        """
        n = result.sample_size
        if n < 2:
            raise InsufficientSampleError(
                f"Corrected variance requires at least 2 values, got sample size {n}"
            )

        values = result.sample
        sample_mean = statistics.sample_mean(values)
        sample_variance = statistics.sample_variance(values)
        corrected = n / (n - 1) * sample_variance
        theoretical_mean, theoretical_variance, theoretical_sigma = theoretical_moments(
            result.parameters
        )

        estimate = DistributionEstimate(
            label=label if label is not None else default_label(result.parameters),
            sample_mean=sample_mean,
            theoretical_mean=theoretical_mean,
            sample_variance=sample_variance,
            corrected_sample_variance=corrected,
            theoretical_variance=theoretical_variance,
            sample_sigma=math.sqrt(sample_variance),
            theoretical_sigma=theoretical_sigma,
            sample_size=n,
        )
        logger.debug(
            "%s: mean %.6g (theory %.6g), variance %.6g (theory %.6g), n=%d",
            estimate.label,
            sample_mean,
            theoretical_mean,
            sample_variance,
            theoretical_variance,
            n,
        )
        return estimate

    def estimate_all(
        self,
        parameters: AllDistributionParameters | None = None,
        random_source: RandomSource | None = None,
    ) -> AllParameterEstimates:
        """
        Generate and estimate one batch of each supported family.

        Parameters
        ----------
        parameters : AllDistributionParameters, optional
            Distributions and sample sizes; the defaults when omitted.
        random_source : RandomSource, optional
            Shared supplier of uniform draws.

        Returns
        -------
        AllParameterEstimates
            The three estimates and their combined sample size.
        """
        params = parameters if parameters is not None else AllDistributionParameters()

        binomial_result = generate(params.binomial, params.binomial_sample_size, random_source)
        uniform_result = generate(params.uniform, params.uniform_sample_size, random_source)
        normal_result = generate(params.normal, params.normal_sample_size, random_source)

        return AllParameterEstimates(
            binomial=self.estimate(binomial_result, label="Binomial"),
            uniform=self.estimate(uniform_result, label="Uniform"),
            normal=self.estimate(normal_result, label="Normal"),
            total_sample_size=params.total_sample_size,
        )


__all__ = [
    "EstimationCalculator",
    "theoretical_moments",
    "default_label",
]
