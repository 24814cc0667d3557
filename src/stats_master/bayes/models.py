"""
Classification value objects.

Class membership is encoded as a boolean: ``True`` for the first class,
``False`` for the second.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stats_master.families import DistributionParameters


@dataclass(frozen=True, slots=True)
class TestSample:
    """Labelled observation used to measure the classification error."""

    __test__ = False

    value: float
    true_class: bool


@dataclass(frozen=True, slots=True)
class ClassifiedSample:
    """Observation with its true and predicted class."""

    value: float
    true_class: bool
    predicted_class: bool
    is_correct: bool


@dataclass(frozen=True, slots=True)
class DetailedClassifiedSample(ClassifiedSample):
    """
    Classified observation with the weighted densities behind the decision.

    Parameters
    ----------
    density1, density2 : float
        Prior-weighted densities of the first and second class at ``value``.
    decision_boundary : float
        ``density1 - density2``; non-negative means the first class wins.
    """

    density1: float
    density2: float
    decision_boundary: float


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """
    Empirical classification error over a set of labelled observations.

    Parameters
    ----------
    error_rate : float
        Share of misclassified observations.
    correct_classifications : int
        Number of correctly classified observations.
    total_samples : int
        Number of observations.
    classified_samples : tuple[ClassifiedSample, ...]
        Per-observation outcomes in input order.
    intersection_points : tuple[float, ...]
        Decision boundaries of the classifier.
    """

    error_rate: float
    correct_classifications: int
    total_samples: int
    classified_samples: tuple[ClassifiedSample, ...]
    intersection_points: tuple[float, ...]

    @property
    def incorrect_classifications(self) -> int:
        return self.total_samples - self.correct_classifications

    @property
    def accuracy(self) -> float:
        return 1.0 - self.error_rate


@dataclass(frozen=True, slots=True)
class ErrorCalculationDetails:
    """
    Contribution of one misclassification region to the theoretical error.

    Parameters
    ----------
    start, end : float
        Region bounds (possibly infinite for the outermost regions).
    losing_class : str
        Name of the class misclassified in the region.
    distribution : DistributionParameters
        Distribution of the losing class.
    probability : float
        Prior of the losing class.
    error_value : float
        Prior-weighted probability mass of the losing class in the region.
    calculation_formula : str
        The integral being evaluated.
    calculation_steps : tuple[str, ...]
        Human-readable derivation of ``error_value``.
    """

    start: float
    end: float
    losing_class: str
    distribution: DistributionParameters
    probability: float
    error_value: float
    calculation_formula: str
    calculation_steps: tuple[str, ...]

    def error_percentage(self, total_error: float) -> float:
        """Share of ``total_error`` contributed by this region, in percent."""
        if total_error == 0:
            return 0.0
        return self.error_value / total_error * 100


@dataclass(frozen=True, slots=True)
class TheoreticalErrorInfo:
    """Bayes error of a classifier split into its misclassification regions."""

    total_error: float
    correct_probability: float
    intervals: tuple[ErrorCalculationDetails, ...]


__all__ = [
    "TestSample",
    "ClassifiedSample",
    "DetailedClassifiedSample",
    "ClassificationResult",
    "ErrorCalculationDetails",
    "TheoreticalErrorInfo",
]
