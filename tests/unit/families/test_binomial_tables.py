"""
Tests for the exact binomial probability tables and the cumulative lookup.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import binom

from stats_master.families import BinomialParameters
from stats_master.families.binomial import (
    binomial_coefficient,
    binomial_coefficients,
    binomial_probability,
    cumulative_probabilities,
    find_value_in_cumulative,
    mean,
    pmf,
    probability_masses,
    variance,
)


def linear_scan(u: float, cumulative: np.ndarray) -> int:
    for m, c in enumerate(cumulative):
        if u <= c:
            return m
    return len(cumulative) - 1


class TestBinomialCoefficient:
    @pytest.mark.parametrize("n, m", [(0, 0), (1, 1), (10, 3), (10, 7), (52, 5), (200, 100)])
    def test_matches_math_comb(self, n, m):
        assert binomial_coefficient(n, m) == math.comb(n, m)

    def test_symmetry(self):
        assert binomial_coefficient(30, 4) == binomial_coefficient(30, 26)

    @pytest.mark.parametrize("m", [-1, 11])
    def test_outside_range_is_zero(self, m):
        assert binomial_coefficient(10, m) == 0

    @pytest.mark.parametrize("n", [0, 1, 2, 7, 10, 63])
    def test_row_matches_math_comb(self, n):
        assert binomial_coefficients(n) == [math.comb(n, m) for m in range(n + 1)]

    def test_large_row_is_symmetric(self):
        row = binomial_coefficients(3001)

        assert len(row) == 3002
        assert row == row[::-1]
        assert row[1500] == math.comb(3001, 1500)


class TestBinomialProbability:
    @pytest.mark.parametrize("n, p", [(10, 0.5), (15, 0.37), (40, 0.9), (2000, 0.3)])
    def test_matches_scipy(self, n, p):
        for m in range(0, n + 1, max(1, n // 20)):
            expected = binom.pmf(m, n, p)
            assert binomial_probability(n, p, m) == pytest.approx(expected, rel=1e-9, abs=1e-300)

    def test_degenerate_probabilities(self):
        assert binomial_probability(5, 0.0, 0) == 1.0
        assert binomial_probability(5, 0.0, 1) == 0.0
        assert binomial_probability(5, 1.0, 5) == 1.0
        assert binomial_probability(5, 1.0, 4) == 0.0

    @pytest.mark.parametrize("m", [-1, 6])
    def test_outside_range_is_zero(self, m):
        assert binomial_probability(5, 0.5, m) == 0.0


class TestCumulativeTable:
    @pytest.mark.parametrize("n, p", [(0, 0.4), (1, 0.5), (10, 0.5), (25, 0.13), (300, 0.71)])
    def test_table_invariants(self, n, p):
        params = BinomialParameters(n=n, p=p)
        masses = probability_masses(params)
        cumulative = cumulative_probabilities(params)

        assert cumulative.size == n + 1
        assert np.all(np.diff(cumulative) >= 0)
        assert cumulative[-1] == 1.0
        assert masses.sum() == pytest.approx(1.0, abs=1e-12)

        for m in range(n + 1):
            expected = math.comb(n, m) * p**m * (1 - p) ** (n - m)
            assert masses[m] == pytest.approx(expected, abs=1e-9)

    def test_large_table_matches_scipy(self):
        masses = probability_masses(BinomialParameters(n=3000, p=0.4))

        assert masses.size == 3001
        np.testing.assert_allclose(masses, binom.pmf(np.arange(3001), 3000, 0.4), atol=1e-12)

    def test_binary_search_agrees_with_linear_scan(self):
        cumulative = cumulative_probabilities(BinomialParameters(n=15, p=0.37))
        grid = np.linspace(0.0, 1.0, 2001)

        found = find_value_in_cumulative(grid, cumulative)

        assert found.tolist() == [linear_scan(u, cumulative) for u in grid]

    def test_scalar_lookup(self):
        cumulative = cumulative_probabilities(BinomialParameters(n=2, p=0.5))

        assert cumulative.tolist() == [0.25, 0.75, 1.0]
        assert find_value_in_cumulative(0.0, cumulative) == 0
        assert find_value_in_cumulative(0.25, cumulative) == 0
        assert find_value_in_cumulative(0.2500001, cumulative) == 1
        assert find_value_in_cumulative(1.0, cumulative) == 2
        assert isinstance(find_value_in_cumulative(0.5, cumulative), int)


class TestBinomialCharacteristics:
    def test_moments(self):
        params = BinomialParameters(n=20, p=0.25)

        assert mean(params) == 5.0
        assert variance(params) == pytest.approx(3.75)

    @pytest.mark.parametrize(
        "x, outcome",
        [(2.0, 2), (2.4, 2), (2.5, 3), (2.6, 3), (-0.4, 0), (9.5, 10)],
    )
    def test_pmf_rounds_to_nearest_outcome(self, x, outcome):
        params = BinomialParameters(n=10, p=0.5)
        assert pmf(params, x) == binomial_probability(10, 0.5, outcome)

    @pytest.mark.parametrize("x", [-0.6, 10.5, math.inf, math.nan])
    def test_pmf_outside_support_is_zero(self, x):
        assert pmf(BinomialParameters(n=10, p=0.5), x) == 0.0
