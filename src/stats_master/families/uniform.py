"""
Uniform distribution family implementation.

Contains the uniform parameters and the closed-form characteristics used by
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


@parametrization(family=FamilyName.UNIFORM, kind=Kind.CONTINUOUS)
class UniformParameters(Parametrization):
    """
    Parameters of the continuous uniform distribution on ``[a, b]``.

    Parameters
    ----------
    a : float
        Lower bound of the distribution.
    b : float
        Upper bound of the distribution.
    """

    a: float
    b: float

    @constraint(description="a and b are finite")
    def check_bounds_finite(self) -> bool:
        """Check that both bounds are finite numbers."""
        return math.isfinite(self.a) and math.isfinite(self.b)

    @constraint(description="a < b")
    def check_lower_less_than_upper(self) -> bool:
        """Check that lower bound is less than upper bound."""
        return self.a < self.b

    @property
    def width(self) -> float:
        return self.b - self.a

    @property
    def description(self) -> str:
        return f"Uniform: [{self.a:.2f}, {self.b:.2f}]"


def pdf(parameters: UniformParameters, x: float) -> float:
    """
    Probability density function for uniform distribution.
        - For x outside [a, b]: returns 0
        - Otherwise: returns 1 / (b - a)
    """
    return 1.0 / parameters.width if parameters.a <= x <= parameters.b else 0.0


def cdf(parameters: UniformParameters, x: float) -> float:
    """Cumulative distribution function for uniform distribution."""
    return min(max((x - parameters.a) / parameters.width, 0.0), 1.0)


def ppf(parameters: UniformParameters, u: float) -> float:
    """Inverse CDF: ``x = a + u * (b - a)``."""
    return parameters.a + u * parameters.width


def mean(parameters: UniformParameters) -> float:
    """Mean of uniform distribution."""
    return (parameters.a + parameters.b) / 2


def variance(parameters: UniformParameters) -> float:
    """Variance of uniform distribution."""
    return parameters.width**2 / 12
