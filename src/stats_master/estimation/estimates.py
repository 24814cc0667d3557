"""
Estimation value objects.

Contains the per-distribution point estimates, the inputs and outputs of the
multi-distribution comparison, and the confidence intervals of normal
samples.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field

from stats_master.errors import InvalidParameterError
from stats_master.families import BinomialParameters, NormalParameters, UniformParameters


@dataclass(frozen=True, slots=True)
class DistributionEstimate:
    """
    Sample moments of a generated batch next to the theoretical moments.

    Parameters
    ----------
    label : str
        Display name of the distribution.
    sample_mean : float
        Arithmetic mean of the sample.
    theoretical_mean : float
        Mean of the originating distribution.
    sample_variance : float
        Biased sample variance (divided by ``n``).
    corrected_sample_variance : float
        Unbiased sample variance (divided by ``n - 1``).
    theoretical_variance : float
        Variance of the originating distribution.
    sample_sigma : float
        Square root of the biased sample variance.
    theoretical_sigma : float
        Standard deviation of the originating distribution.
    sample_size : int
        Number of observations.
    """

    label: str
    sample_mean: float
    theoretical_mean: float
    sample_variance: float
    corrected_sample_variance: float
    theoretical_variance: float
    sample_sigma: float
    theoretical_sigma: float
    sample_size: int

    @property
    def mean_deviation(self) -> float:
        """Absolute difference between the sample and theoretical means."""
        return abs(self.sample_mean - self.theoretical_mean)

    @property
    def variance_deviation(self) -> float:
        """Absolute difference between the sample and theoretical variances."""
        return abs(self.sample_variance - self.theoretical_variance)


@dataclass(frozen=True, slots=True)
class AllDistributionParameters:
    """
    Inputs of the three-distribution comparison.

    Defaults to Binomial(10, 0.5), Uniform(0, 1) and Normal(0, 1) with
    200 observations each.
    """

    binomial: BinomialParameters = field(default_factory=lambda: BinomialParameters(n=10, p=0.5))
    uniform: UniformParameters = field(default_factory=lambda: UniformParameters(a=0.0, b=1.0))
    normal: NormalParameters = field(default_factory=lambda: NormalParameters(m=0.0, sigma=1.0))
    binomial_sample_size: int = 200
    uniform_sample_size: int = 200
    normal_sample_size: int = 200

    def __post_init__(self) -> None:
        for name in ("binomial_sample_size", "uniform_sample_size", "normal_sample_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidParameterError(f"{name} must be a non-negative integer, got {value!r}")

    @property
    def total_sample_size(self) -> int:
        return self.binomial_sample_size + self.uniform_sample_size + self.normal_sample_size


@dataclass(frozen=True, slots=True)
class AllParameterEstimates:
    """Estimates of the three-distribution comparison and their combined sample size."""

    binomial: DistributionEstimate
    uniform: DistributionEstimate
    normal: DistributionEstimate
    total_sample_size: int


@dataclass(frozen=True, slots=True)
class ConfidenceInterval:
    """
    Confidence interval ``[lower, upper]`` of one parameter.

    Parameters
    ----------
    lower, upper : float
        Interval bounds.
    confidence_level : float
        Coverage probability, in ``(0, 1)``.
    parameter_name : str
        Name of the estimated parameter.
    """

    lower: float
    upper: float
    confidence_level: float
    parameter_name: str

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def center(self) -> float:
        return (self.lower + self.upper) / 2

    def __contains__(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def __str__(self) -> str:
        return (
            f"{self.parameter_name}: [{self.lower}, {self.upper}] "
            f"(confidence {self.confidence_level:.0%})"
        )


@dataclass(frozen=True, slots=True)
class NormalIntervalEstimates:
    """
    Confidence intervals of a normal sample.

    Parameters
    ----------
    sigma_known : ConfidenceInterval
        Mean with known standard deviation.
    sigma_unknown : ConfidenceInterval
        Mean with the standard deviation estimated from the sample.
    variance : ConfidenceInterval
        Variance.
    sample_size : int
        Number of observations.
    sample_mean, sample_sigma : float
        Point estimates the intervals are built around.
    confidence_level : float
        Coverage probability.
    """

    sigma_known: ConfidenceInterval
    sigma_unknown: ConfidenceInterval
    variance: ConfidenceInterval
    sample_size: int
    sample_mean: float
    sample_sigma: float
    confidence_level: float


__all__ = [
    "DistributionEstimate",
    "AllDistributionParameters",
    "AllParameterEstimates",
    "ConfidenceInterval",
    "NormalIntervalEstimates",
]
