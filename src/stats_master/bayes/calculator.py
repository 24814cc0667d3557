"""
Bayesian Calculator
===================

Pointwise densities and prior-weighted interval probabilities of the
supported families, used by the two-class Bayesian classifier.

Integration prefers a closed form per family:

- Normal — difference of the tabulated-Laplace CDF at the standardized bounds;
- Uniform — prior times the overlap of the query interval with ``[a, b]``
  divided by ``b - a``;
- Binomial — sum of exact masses over the integers in the query interval.

Any other object exposing a ``density(x)`` method is integrated with the
composite Simpson rule (:func:`scipy.integrate.simpson`) over a fixed even
number of steps.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np
from scipy import integrate

from stats_master.bayes.laplace import normal_cdf
from stats_master.config import get_settings
from stats_master.errors import InvalidParameterError, UnsupportedDistributionError
from stats_master.families import BinomialParameters, NormalParameters, UniformParameters
from stats_master.families import binomial, normal, uniform
from stats_master.types import Interval1D

if TYPE_CHECKING:
    from stats_master.types import ScalarFunc

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsDensity(Protocol):
    """Distribution outside the built-in families that can evaluate its density."""

    def density(self, x: float) -> float: ...


class BayesianCalculator:
    """
    Densities and interval probabilities of distribution parameters.

    Parameters
    ----------
    simpson_steps : int, optional
        Even step count of the numeric fallback; defaults to the
        ``simpson_steps`` setting (100).
    """

    def __init__(self, simpson_steps: int | None = None) -> None:
        if simpson_steps is not None and (
            isinstance(simpson_steps, bool)
            or not isinstance(simpson_steps, int)
            or simpson_steps < 2
            or simpson_steps % 2
        ):
            raise InvalidParameterError(
                f"simpson_steps must be a positive even integer, got {simpson_steps!r}"
            )
        self.simpson_steps = simpson_steps

    def density(self, parameters: Any, x: float) -> float:
        """
        Density (or probability mass) of ``parameters`` at ``x``.

        Binomial masses are taken at ``x`` rounded to the nearest integer.

        Raises
        ------
        UnsupportedDistributionError
            If ``parameters`` are neither a supported family nor expose
            ``density(x)``.
        """
        match parameters:
            case BinomialParameters():
                return binomial.pmf(parameters, x)
            case UniformParameters():
                return uniform.pdf(parameters, x)
            case NormalParameters():
                return normal.pdf(parameters, x)
            case SupportsDensity():
                return float(parameters.density(x))
            case _:
                raise UnsupportedDistributionError(parameters, "Density")

    def integrate(
        self,
        parameters: Any,
        lower_bound: float,
        upper_bound: float,
        prior_probability: float,
    ) -> float:
        """
        Prior-weighted probability of ``[lower_bound, upper_bound]``.

        Parameters
        ----------
        parameters : DistributionParameters or SupportsDensity
            Distribution to integrate.
        lower_bound, upper_bound : float
            Interval bounds; infinite bounds are accepted by the closed forms.
        prior_probability : float
            Class weight in ``[0, 1]``.

        Returns
        -------
        float
            Value in ``[0, prior_probability]``.

        Raises
        ------
        InvalidParameterError
            If ``lower_bound > upper_bound``, a bound is NaN, or the prior is
            outside ``[0, 1]``.
        UnsupportedDistributionError
            If ``parameters`` can be neither integrated in closed form nor
            evaluated pointwise.
        """
        if math.isnan(lower_bound) or math.isnan(upper_bound):
            raise InvalidParameterError("Integration bounds must not be NaN")
        if lower_bound > upper_bound:
            raise InvalidParameterError(
                f"Lower bound {lower_bound} exceeds upper bound {upper_bound}"
            )
        if not 0.0 <= prior_probability <= 1.0:
            raise InvalidParameterError(
                f"Prior probability must lie in [0, 1], got {prior_probability}"
            )

        match parameters:
            case NormalParameters():
                value = self._integrate_normal(parameters, lower_bound, upper_bound)
            case UniformParameters():
                value = self._integrate_uniform(parameters, lower_bound, upper_bound)
            case BinomialParameters():
                value = self._integrate_binomial(parameters, lower_bound, upper_bound)
            case _:
                logger.debug("No closed form for %r, using Simpson's rule", parameters)
                return self.simpson(
                    lambda x: self.density(parameters, x) * prior_probability,
                    lower_bound,
                    upper_bound,
                )
        return prior_probability * value

    @staticmethod
    def _integrate_normal(parameters: NormalParameters, a: float, b: float) -> float:
        m, sigma = parameters.m, parameters.sigma
        return normal_cdf(b, m, sigma) - normal_cdf(a, m, sigma)

    @staticmethod
    def _integrate_uniform(parameters: UniformParameters, a: float, b: float) -> float:
        start = max(a, parameters.a)
        end = min(b, parameters.b)
        if start >= end:
            return 0.0
        return (end - start) / parameters.width

    @staticmethod
    def _integrate_binomial(parameters: BinomialParameters, a: float, b: float) -> float:
        n = int(parameters.n)
        start = max(0, math.ceil(min(max(a, -1), n + 1)))
        end = min(n, math.floor(max(min(b, n + 1), -1)))
        masses = binomial.probability_masses(parameters)
        return math.fsum(masses[start : end + 1].tolist())

    def simpson(self, func: ScalarFunc, lower_bound: float, upper_bound: float) -> float:
        """
        Composite Simpson rule with a fixed even step count.

        The integrand is sampled at ``a + i h`` for ``i = 0..N`` with
        ``h = (b - a) / N``.

        Raises
        ------
        InvalidParameterError
            If a bound is infinite.
        """
        if not (math.isfinite(lower_bound) and math.isfinite(upper_bound)):
            raise InvalidParameterError("Numeric integration requires finite bounds")
        if lower_bound == upper_bound:
            return 0.0
        steps = self.simpson_steps or get_settings().simpson_steps
        xs = np.linspace(lower_bound, upper_bound, steps + 1, dtype=np.float64)
        ys = np.array([func(float(x)) for x in xs], dtype=np.float64)
        return float(integrate.simpson(ys, x=xs))

    def domain_bounds(self, parameters: Any) -> Interval1D:
        """
        Practical analysis window of a distribution.

        ``m ± 3σ`` for normal (the multiple is the ``sigma_window`` setting),
        ``[a, b]`` for uniform and ``[0, n]`` for binomial distributions.

        Raises
        ------
        UnsupportedDistributionError
            If ``parameters`` belong to no supported family.
        """
        match parameters:
            case NormalParameters():
                half_width = get_settings().sigma_window * parameters.sigma
                return Interval1D(parameters.m - half_width, parameters.m + half_width)
            case UniformParameters():
                return Interval1D(float(parameters.a), float(parameters.b))
            case BinomialParameters():
                return Interval1D(0.0, float(parameters.n))
            case _:
                raise UnsupportedDistributionError(parameters, "Domain bounds")


__all__ = [
    "SupportsDensity",
    "BayesianCalculator",
]
