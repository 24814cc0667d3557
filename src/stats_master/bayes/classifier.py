"""
Bayesian Classifier
===================

Two-class Bayesian decision rule over one-dimensional distributions.

An observation ``x`` is assigned to the first class iff
``p1 f1(x) >= p2 f2(x)``. Decision boundaries are located numerically on
an analysis window; the theoretical (Bayes) error integrates the losing
class between consecutive boundaries, and the empirical error is measured
on labelled samples drawn with the library generators.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from stats_master.bayes.calculator import BayesianCalculator
from stats_master.bayes.laplace import normal_cdf
from stats_master.bayes.models import (
    ClassificationResult,
    ClassifiedSample,
    DetailedClassifiedSample,
    ErrorCalculationDetails,
    TestSample,
    TheoreticalErrorInfo,
)
from stats_master.config import get_settings
from stats_master.errors import (
    InsufficientSampleError,
    InvalidParameterError,
    UnsupportedDistributionError,
)
from stats_master.families import BinomialParameters, NormalParameters, UniformParameters
from stats_master.families.binomial import probability_masses
from stats_master.sampling import NumpyRandomSource, draw_uniforms, generate
from stats_master.types import Interval1D

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stats_master.families import DistributionParameters
    from stats_master.sampling import RandomSource

logger = logging.getLogger(__name__)

PRIOR_TOLERANCE = 1e-9
"""Allowed deviation of ``p1 + p2`` from 1."""

BISECTION_TOLERANCE = 1e-10
"""Weighted-density difference treated as an exact boundary."""


@dataclass(frozen=True, slots=True)
class BayesianClassifier:
    """
    Two-class Bayesian classifier.

    Parameters
    ----------
    class1, class2 : DistributionParameters
        Class-conditional distributions.
    p1, p2 : float
        Class priors; each in ``[0, 1]`` and summing to 1.
    class1_name, class2_name : str
        Display names of the classes.
    calculator : BayesianCalculator
        Density and integration backend.

    Raises
    ------
    InvalidParameterError
        If the priors are invalid.
    UnsupportedDistributionError
        If a class distribution belongs to no supported family.
    """

    class1: DistributionParameters
    class2: DistributionParameters
    p1: float = 0.5
    p2: float = 0.5
    class1_name: str = "Class 1"
    class2_name: str = "Class 2"
    calculator: BayesianCalculator = field(
        default_factory=BayesianCalculator, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        for name in ("class1", "class2"):
            params = getattr(self, name)
            if not isinstance(params, BinomialParameters | UniformParameters | NormalParameters):
                raise UnsupportedDistributionError(params, "Bayesian classification")
        for name in ("p1", "p2"):
            prior = getattr(self, name)
            if not 0.0 <= prior <= 1.0:
                raise InvalidParameterError(f"{name} must lie in [0, 1], got {prior}")
        if abs(self.p1 + self.p2 - 1.0) > PRIOR_TOLERANCE:
            raise InvalidParameterError(f"Priors must sum to 1, got {self.p1} + {self.p2}")

    @classmethod
    def default(cls) -> BayesianClassifier:
        """Uniform(3, 5) against Normal(5, 1) with equal priors."""
        return cls(
            class1=UniformParameters(a=3.0, b=5.0),
            class2=NormalParameters(m=5.0, sigma=1.0),
            p1=0.5,
            p2=0.5,
            class1_name="Uniform class",
            class2_name="Normal class",
        )

    def weighted_densities(self, x: float) -> tuple[float, float]:
        """Prior-weighted densities ``(p1 f1(x), p2 f2(x))``."""
        return (
            self.calculator.density(self.class1, x) * self.p1,
            self.calculator.density(self.class2, x) * self.p2,
        )

    def _difference(self, x: float) -> float:
        d1, d2 = self.weighted_densities(x)
        return d1 - d2

    def classify(self, x: float) -> bool:
        """True if ``x`` is assigned to the first class."""
        d1, d2 = self.weighted_densities(x)
        return d1 >= d2

    def classify_with_details(self, x: float, true_class: bool) -> DetailedClassifiedSample:
        """Classify ``x`` and keep the weighted densities behind the decision."""
        d1, d2 = self.weighted_densities(x)
        predicted = d1 >= d2
        return DetailedClassifiedSample(
            value=x,
            true_class=true_class,
            predicted_class=predicted,
            is_correct=predicted == true_class,
            density1=d1,
            density2=d2,
            decision_boundary=d1 - d2,
        )

    def analysis_window(self) -> Interval1D:
        """
        Range scanned for decision boundaries.

        The union of both domain bounds widened by 1 on each side, with the
        lower edge clamped to ``[-10, 0]`` and the upper edge to ``[0, 20]``.
        """
        settings = get_settings()
        bounds1 = self.calculator.domain_bounds(self.class1)
        bounds2 = self.calculator.domain_bounds(self.class2)

        lower_lo, lower_hi = settings.window_lower_clamp
        upper_lo, upper_hi = settings.window_upper_clamp
        lower = min(max(min(bounds1.left, bounds2.left) - 1, lower_lo), lower_hi)
        upper = min(max(max(bounds1.right, bounds2.right) + 1, upper_lo), upper_hi)
        return Interval1D(lower, upper)

    def find_intersection_points(self) -> tuple[float, ...]:
        """
        Decision boundaries inside the analysis window.

        The window is scanned on a uniform grid, skipping points where
        ``p1 f1 - p2 f2`` is exactly zero. Whenever the sign differs from
        that of the last non-zero grid point, the bracket between the two is
        refined by bisection. Boundaries closer than one grid step to the
        previous one are dropped.

        Returns
        -------
        tuple[float, ...]
            Boundaries in increasing order.
        """
        settings = get_settings()
        window = self.analysis_window()
        steps = settings.boundary_search_steps
        step = window.width / steps

        points: list[float] = []
        anchor_x = window.left
        anchor_diff = self._difference(anchor_x)
        for i in range(1, steps + 1):
            x = window.left + window.width * i / steps
            diff = self._difference(x)
            # ties, including both densities zero, carry no sign
            if diff == 0.0:
                continue
            if anchor_diff != 0.0 and (anchor_diff < 0) != (diff < 0):
                point = self._refine_intersection(anchor_x, x, settings.bisection_iterations)
                if not points or point - points[-1] > step:
                    points.append(point)
            anchor_x, anchor_diff = x, diff

        logger.debug("Decision boundaries on %s: %s", window, points)
        return tuple(points)

    def _refine_intersection(self, x1: float, x2: float, iterations: int) -> float:
        diff1 = self._difference(x1)
        for _ in range(iterations):
            mid = (x1 + x2) / 2
            diff = self._difference(mid)
            if abs(diff) < BISECTION_TOLERANCE:
                return mid
            if (diff1 < 0) != (diff < 0):
                x2 = mid
            else:
                x1, diff1 = mid, diff
        return (x1 + x2) / 2

    def theoretical_error(self) -> TheoreticalErrorInfo:
        """
        Bayes error split into misclassification regions.

        The analysis window is cut at the decision boundaries. In every
        region the class with the smaller weighted density at the midpoint
        loses (on a tie, the one with the smaller weighted mass over the
        region), and its prior-weighted mass over the region is an error
        contribution. The outermost regions extend to infinity so that the
        tails outside the window are counted as well.

        Returns
        -------
        TheoreticalErrorInfo
            Total error, probability of a correct decision and the regions.
        """
        window = self.analysis_window()
        cuts = [p for p in self.find_intersection_points() if window.left < p < window.right]
        edges = [window.left, *cuts, window.right]

        details: list[ErrorCalculationDetails] = []
        last = len(edges) - 2
        for position, (start, end) in enumerate(zip(edges[:-1], edges[1:], strict=True)):
            if end <= start:
                continue
            lower = -math.inf if position == 0 else start
            upper = math.inf if position == last else end
            d1, d2 = self.weighted_densities((start + end) / 2)
            if d1 == d2:
                # tie at the midpoint, e.g. a gap between two supports
                d1 = self.calculator.integrate(self.class1, lower, upper, self.p1)
                d2 = self.calculator.integrate(self.class2, lower, upper, self.p2)
            if d1 >= d2:
                loser, prior, name = self.class2, self.p2, self.class2_name
            else:
                loser, prior, name = self.class1, self.p1, self.class1_name

            value = self.calculator.integrate(loser, lower, upper, prior)
            details.append(
                ErrorCalculationDetails(
                    start=lower,
                    end=upper,
                    losing_class=name,
                    distribution=loser,
                    probability=prior,
                    error_value=value,
                    calculation_formula=(
                        f"{prior:g} * integral of f({name}) over [{lower:.4f}, {upper:.4f}]"
                    ),
                    calculation_steps=_derivation_steps(loser, lower, upper, prior, value),
                )
            )

        total = math.fsum(d.error_value for d in details)
        logger.debug("Theoretical error %.6g over %d regions", total, len(details))
        return TheoreticalErrorInfo(
            total_error=total,
            correct_probability=1.0 - total,
            intervals=tuple(details),
        )

    def generate_test_data(
        self,
        samples_per_class: int = 1000,
        random_source: RandomSource | None = None,
    ) -> tuple[TestSample, ...]:
        """
        Labelled observations drawn from both classes, shuffled.

        Parameters
        ----------
        samples_per_class : int, default 1000
            Observations drawn from each class distribution.
        random_source : RandomSource, optional
            Supplier of the uniform draws used for sampling and shuffling.

        Returns
        -------
        tuple[TestSample, ...]
            ``2 * samples_per_class`` observations in random order.
        """
        source = random_source if random_source is not None else NumpyRandomSource()
        first = generate(self.class1, samples_per_class, source)
        second = generate(self.class2, samples_per_class, source)

        samples = [TestSample(value=float(v), true_class=True) for v in first.sample]
        samples += [TestSample(value=float(v), true_class=False) for v in second.sample]

        order = np.argsort(draw_uniforms(source, len(samples)), kind="stable")
        return tuple(samples[i] for i in order.tolist())

    def calculate_error_rate(self, samples: Sequence[TestSample]) -> ClassificationResult:
        """
        Empirical error of the decision rule on labelled observations.

        Raises
        ------
        InsufficientSampleError
            If ``samples`` is empty.
        """
        classified = []
        for sample in samples:
            predicted = self.classify(sample.value)
            classified.append(
                ClassifiedSample(
                    value=sample.value,
                    true_class=sample.true_class,
                    predicted_class=predicted,
                    is_correct=predicted == sample.true_class,
                )
            )
        return self._summarize(classified)

    def calculate_detailed_error_rate(
        self, samples: Sequence[TestSample]
    ) -> ClassificationResult:
        """
        Same as :meth:`calculate_error_rate`, keeping the weighted densities
        of every observation.
        """
        return self._summarize(
            [self.classify_with_details(s.value, s.true_class) for s in samples]
        )

    def estimate_error_rate(
        self,
        samples_per_class: int = 1000,
        random_source: RandomSource | None = None,
        detailed: bool = False,
    ) -> ClassificationResult:
        """Draw test data with :meth:`generate_test_data` and measure the error on it."""
        samples = self.generate_test_data(samples_per_class, random_source)
        if detailed:
            return self.calculate_detailed_error_rate(samples)
        return self.calculate_error_rate(samples)

    def _summarize(self, classified: Sequence[ClassifiedSample]) -> ClassificationResult:
        total = len(classified)
        if total == 0:
            raise InsufficientSampleError("Error rate of an empty sample is undefined")
        correct = sum(1 for s in classified if s.is_correct)
        result = ClassificationResult(
            error_rate=(total - correct) / total,
            correct_classifications=correct,
            total_samples=total,
            classified_samples=tuple(classified),
            intersection_points=self.find_intersection_points(),
        )
        logger.debug("Error rate %.4f on %d samples", result.error_rate, total)
        return result


def _derivation_steps(
    parameters: DistributionParameters,
    lower: float,
    upper: float,
    prior: float,
    value: float,
) -> tuple[str, ...]:
    match parameters:
        case NormalParameters(m=m, sigma=sigma):
            z1 = (lower - m) / sigma
            z2 = (upper - m) / sigma
            cdf1 = normal_cdf(lower, m, sigma)
            cdf2 = normal_cdf(upper, m, sigma)
            return (
                f"z1 = ({lower:.4f} - {m:g}) / {sigma:g} = {z1:.4f}",
                f"z2 = ({upper:.4f} - {m:g}) / {sigma:g} = {z2:.4f}",
                f"F(z2) - F(z1) = {cdf2:.4f} - {cdf1:.4f} = {cdf2 - cdf1:.4f}",
                f"{prior:g} * {cdf2 - cdf1:.4f} = {value:.6f}",
            )
        case UniformParameters(a=a, b=b):
            start, end = max(lower, a), min(upper, b)
            overlap = max(end - start, 0.0)
            return (
                f"overlap of [{lower:.4f}, {upper:.4f}] with [{a:g}, {b:g}] = {overlap:.4f}",
                f"{prior:g} * {overlap:.4f} / ({b:g} - {a:g}) = {value:.6f}",
            )
        case BinomialParameters(n=n):
            start = max(0, math.ceil(min(max(lower, -1), n + 1)))
            end = min(n, math.floor(max(min(upper, n + 1), -1)))
            mass = math.fsum(probability_masses(parameters)[start : end + 1].tolist())
            return (
                f"P({start} <= X <= {end}) = {mass:.4f}",
                f"{prior:g} * {mass:.4f} = {value:.6f}",
            )
        case _:
            return (f"result = {value:.6f}",)


__all__ = ["BayesianClassifier"]
