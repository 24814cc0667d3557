"""
Interval estimation of normal samples.

Confidence intervals for the mean (standard deviation known or estimated)
and for the variance. Critical points come from :mod:`scipy.stats`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from scipy import stats

from stats_master.config import get_settings
from stats_master.errors import InsufficientSampleError, InvalidParameterError
from stats_master.estimation.estimates import ConfidenceInterval, NormalIntervalEstimates

if TYPE_CHECKING:
    from stats_master.estimation.estimates import DistributionEstimate

logger = logging.getLogger(__name__)


class IntervalEstimationCalculator:
    """Confidence intervals of the mean and variance of a normal sample."""

    def calculate_normal_intervals(
        self,
        sample_mean: float,
        sample_sigma: float,
        sample_size: int,
        theoretical_sigma: float | None = None,
        confidence_level: float | None = None,
    ) -> NormalIntervalEstimates:
        """
        Build the three confidence intervals of a normal sample.

        With ``gamma`` the confidence level and ``q = (1 + gamma) / 2``:

        - mean, sigma known: ``x̄ ± u_q σ / √n``;
        - mean, sigma unknown: ``x̄ ± t_{q, n-1} s / √n``;
        - variance: ``[(n-1) s² / χ²_{q, n-1}, (n-1) s² / χ²_{1-q, n-1}]``.

        Parameters
        ----------
        sample_mean : float
            Sample mean ``x̄``.
        sample_sigma : float
            Sample standard deviation ``s``.
        sample_size : int
            Number of observations ``n``.
        theoretical_sigma : float, optional
            Known standard deviation; ``sample_sigma`` is used when omitted.
        confidence_level : float, optional
            Coverage probability in ``(0, 1)``; defaults to the
            ``confidence_level`` setting (0.95).

        Returns
        -------
        NormalIntervalEstimates
            The intervals with the point estimates they surround.

        Raises
        ------
        InsufficientSampleError
            If ``sample_size < 2``.
        InvalidParameterError
            If the confidence level is outside ``(0, 1)`` or a sigma is negative.
        """
        gamma = confidence_level if confidence_level is not None else get_settings().confidence_level
        if not 0.0 < gamma < 1.0:
            raise InvalidParameterError(f"confidence_level must lie in (0, 1), got {gamma}")
        if isinstance(sample_size, bool) or not isinstance(sample_size, int):
            raise InvalidParameterError(f"sample_size must be an integer, got {sample_size!r}")
        if sample_size < 2:
            raise InsufficientSampleError(
                f"Interval estimation requires at least 2 observations, got {sample_size}"
            )
        if not sample_sigma >= 0.0:
            raise InvalidParameterError(f"sample_sigma must be non-negative, got {sample_sigma}")
        sigma = sample_sigma if theoretical_sigma is None else theoretical_sigma
        if not sigma >= 0.0:
            raise InvalidParameterError(f"theoretical_sigma must be non-negative, got {sigma}")

        n = sample_size
        dof = n - 1
        q = (1 + gamma) / 2
        root_n = math.sqrt(n)

        u = float(stats.norm.ppf(q))
        t = float(stats.t.ppf(q, dof))
        chi2_upper = float(stats.chi2.ppf(q, dof))
        chi2_lower = float(stats.chi2.ppf(1 - q, dof))

        known_margin = u * sigma / root_n
        unknown_margin = t * sample_sigma / root_n
        scaled_variance = dof * sample_sigma**2

        estimates = NormalIntervalEstimates(
            sigma_known=ConfidenceInterval(
                lower=sample_mean - known_margin,
                upper=sample_mean + known_margin,
                confidence_level=gamma,
                parameter_name="M (sigma known)",
            ),
            sigma_unknown=ConfidenceInterval(
                lower=sample_mean - unknown_margin,
                upper=sample_mean + unknown_margin,
                confidence_level=gamma,
                parameter_name="M (sigma unknown)",
            ),
            variance=ConfidenceInterval(
                lower=scaled_variance / chi2_upper,
                upper=scaled_variance / chi2_lower,
                confidence_level=gamma,
                parameter_name="sigma^2",
            ),
            sample_size=n,
            sample_mean=sample_mean,
            sample_sigma=sample_sigma,
            confidence_level=gamma,
        )
        logger.debug("Interval estimates at %.3g with u=%.6g, t=%.6g, n=%d", gamma, u, t, n)
        return estimates

    def from_estimate(
        self,
        estimate: DistributionEstimate,
        confidence_level: float | None = None,
        known_sigma: bool = True,
    ) -> NormalIntervalEstimates:
        """
        Confidence intervals around a :class:`DistributionEstimate`.

        The corrected sample standard deviation is the estimate of ``s``;
        the theoretical one is used as the known sigma when ``known_sigma``.
        """
        return self.calculate_normal_intervals(
            sample_mean=estimate.sample_mean,
            sample_sigma=math.sqrt(estimate.corrected_sample_variance),
            sample_size=estimate.sample_size,
            theoretical_sigma=estimate.theoretical_sigma if known_sigma else None,
            confidence_level=confidence_level,
        )


__all__ = ["IntervalEstimationCalculator"]
