"""
Tests for the confidence intervals of normal samples.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.stats import chi2, norm, t

from stats_master.config import configure_settings
from stats_master.errors import InsufficientSampleError, InvalidParameterError
from stats_master.estimation import (
    ConfidenceInterval,
    EstimationCalculator,
    IntervalEstimationCalculator,
)
from stats_master.families import NormalParameters
from stats_master.sampling import NumpyRandomSource, generate


class TestNormalIntervals:
    def setup_method(self):
        self.calculator = IntervalEstimationCalculator()

    def test_reference_example(self):
        estimates = self.calculator.calculate_normal_intervals(
            sample_mean=10.0,
            sample_sigma=2.0,
            sample_size=25,
            theoretical_sigma=2.0,
            confidence_level=0.95,
        )

        u = norm.ppf(0.975)
        t_q = t.ppf(0.975, 24)
        assert estimates.sigma_known.lower == pytest.approx(10.0 - u * 0.4)
        assert estimates.sigma_known.upper == pytest.approx(10.0 + u * 0.4)
        assert estimates.sigma_known.lower == pytest.approx(9.216, abs=1e-3)
        assert estimates.sigma_unknown.lower == pytest.approx(10.0 - t_q * 0.4)
        assert estimates.sigma_unknown.upper == pytest.approx(10.0 + t_q * 0.4)
        assert estimates.variance.lower == pytest.approx(96.0 / chi2.ppf(0.975, 24))
        assert estimates.variance.upper == pytest.approx(96.0 / chi2.ppf(0.025, 24))
        assert estimates.variance.lower == pytest.approx(2.4388, abs=1e-3)
        assert estimates.variance.upper == pytest.approx(7.7413, abs=1e-3)

        assert estimates.sample_size == 25
        assert estimates.confidence_level == 0.95
        assert estimates.sigma_known.parameter_name == "M (sigma known)"
        assert estimates.sigma_unknown.parameter_name == "M (sigma unknown)"
        assert estimates.variance.parameter_name == "sigma^2"

    def test_t_interval_is_wider_than_z_interval(self):
        estimates = self.calculator.calculate_normal_intervals(0.0, 1.0, 10, 1.0, 0.9)

        assert estimates.sigma_unknown.width > estimates.sigma_known.width
        assert estimates.sigma_known.center == pytest.approx(0.0)
        assert estimates.sigma_unknown.center == pytest.approx(0.0)

    def test_sample_sigma_stands_in_for_unknown_theory(self):
        estimates = self.calculator.calculate_normal_intervals(5.0, 3.0, 16)
        margin = norm.ppf(0.975) * 3.0 / 4.0

        assert estimates.sigma_known.lower == pytest.approx(5.0 - margin)

    def test_confidence_level_comes_from_settings(self):
        configure_settings(confidence_level=0.99)

        estimates = self.calculator.calculate_normal_intervals(0.0, 1.0, 50)

        assert estimates.confidence_level == 0.99
        assert estimates.sigma_known.upper == pytest.approx(norm.ppf(0.995) / math.sqrt(50))

    def test_higher_confidence_widens_intervals(self):
        low = self.calculator.calculate_normal_intervals(0.0, 1.0, 20, confidence_level=0.8)
        high = self.calculator.calculate_normal_intervals(0.0, 1.0, 20, confidence_level=0.99)

        assert high.sigma_known.width > low.sigma_known.width
        assert high.sigma_unknown.width > low.sigma_unknown.width
        assert high.variance.width > low.variance.width

    def test_zero_sigma_collapses_mean_intervals(self):
        estimates = self.calculator.calculate_normal_intervals(2.0, 0.0, 5, 0.0)

        assert estimates.sigma_known.width == 0.0
        assert estimates.sigma_unknown.width == 0.0
        assert estimates.variance.upper == 0.0

    @pytest.mark.parametrize("gamma", [0.0, 1.0, -0.5, 1.5])
    def test_invalid_confidence_level_raises(self, gamma):
        with pytest.raises(InvalidParameterError, match="confidence_level"):
            self.calculator.calculate_normal_intervals(0.0, 1.0, 10, confidence_level=gamma)

    @pytest.mark.parametrize("n", [0, 1])
    def test_too_small_sample_raises(self, n):
        with pytest.raises(InsufficientSampleError):
            self.calculator.calculate_normal_intervals(0.0, 1.0, n)

    def test_negative_sigma_raises(self):
        with pytest.raises(InvalidParameterError, match="sample_sigma"):
            self.calculator.calculate_normal_intervals(0.0, -1.0, 10)
        with pytest.raises(InvalidParameterError, match="theoretical_sigma"):
            self.calculator.calculate_normal_intervals(0.0, 1.0, 10, theoretical_sigma=-2.0)


class TestFromEstimate:
    def test_intervals_cover_true_mean(self):
        params = NormalParameters(m=4.0, sigma=2.0)
        result = generate(params, 400, NumpyRandomSource(31))
        estimate = EstimationCalculator().estimate(result)

        estimates = IntervalEstimationCalculator().from_estimate(estimate, confidence_level=0.999)

        assert estimates.sample_size == 400
        assert estimates.sample_sigma == pytest.approx(math.sqrt(estimate.corrected_sample_variance))
        assert 4.0 in estimates.sigma_known
        assert 4.0 in estimates.sigma_unknown
        assert 4.0 in estimates.variance

    def test_unknown_sigma_uses_sample_estimate(self):
        result = generate(NormalParameters(m=0.0, sigma=1.0), 100, NumpyRandomSource(2))
        estimate = EstimationCalculator().estimate(result)

        estimates = IntervalEstimationCalculator().from_estimate(estimate, known_sigma=False)

        assert estimates.sigma_known.width == pytest.approx(
            2 * norm.ppf(0.975) * estimates.sample_sigma / 10.0
        )


class TestConfidenceInterval:
    def test_properties(self):
        ci = ConfidenceInterval(lower=1.0, upper=3.0, confidence_level=0.95, parameter_name="M")

        assert ci.width == 2.0
        assert ci.center == 2.0
        assert 1.0 in ci
        assert 3.0 in ci
        assert 3.5 not in ci
        assert str(ci) == "M: [1.0, 3.0] (confidence 95%)"
