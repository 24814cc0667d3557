"""
Normal distribution family implementation.

Contains the normal parameters and the closed-form characteristics used by
the generators and calculators.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from stats_master.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from stats_master.types import FamilyName, Kind

_SQRT_2PI = math.sqrt(2 * math.pi)


@parametrization(family=FamilyName.NORMAL, kind=Kind.CONTINUOUS)
class NormalParameters(Parametrization):
    """
    Parameters of the normal (Gaussian) distribution.

    Parameters
    ----------
    m : float
        Mean of the distribution.
    sigma : float
        Standard deviation of the distribution.
    """

    m: float
    sigma: float

    @constraint(description="m is finite")
    def check_mean_finite(self) -> bool:
        """Check that the mean is a finite number."""
        return math.isfinite(self.m)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive and finite."""
        return math.isfinite(self.sigma) and self.sigma > 0

    @property
    def description(self) -> str:
        return f"Normal: m={self.m:.2f}, sigma={self.sigma:.2f}"


def pdf(parameters: NormalParameters, x: float) -> float:
    """
    Probability density function for normal distribution.

        f(x) = 1/(σ√(2π)) * exp(-(x-m)²/(2σ²))
    """
    z = (x - parameters.m) / parameters.sigma
    return math.exp(-0.5 * z * z) / (parameters.sigma * _SQRT_2PI)


def standardize(parameters: NormalParameters, x: float) -> float:
    """Map ``x`` to the standard normal scale, ``(x - m) / sigma``."""
    return (x - parameters.m) / parameters.sigma


def mean(parameters: NormalParameters) -> float:
    """Mean of normal distribution."""
    return parameters.m


def variance(parameters: NormalParameters) -> float:
    """Variance of normal distribution."""
    return parameters.sigma**2
