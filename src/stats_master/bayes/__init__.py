"""
Bayes subpackage

Density and integration calculator of the supported families
(:mod:`.calculator`) with its tabulated Laplace function (:mod:`.laplace`),
and the two-class Bayesian classifier (:mod:`.classifier`, :mod:`.models`).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .calculator import BayesianCalculator, SupportsDensity
from .classifier import BayesianClassifier
from .laplace import laplace_function, normal_cdf
from .models import (
    ClassificationResult,
    ClassifiedSample,
    DetailedClassifiedSample,
    ErrorCalculationDetails,
    TestSample,
    TheoreticalErrorInfo,
)

__all__ = [
    # calculator
    "BayesianCalculator",
    "SupportsDensity",
    "laplace_function",
    "normal_cdf",
    # classifier
    "BayesianClassifier",
    "TestSample",
    "ClassifiedSample",
    "DetailedClassifiedSample",
    "ClassificationResult",
    "ErrorCalculationDetails",
    "TheoreticalErrorInfo",
]
