"""
Estimation subpackage

Point and interval estimates of generated samples:

- descriptive statistics (:mod:`.statistics`);
- estimate value objects (:mod:`.estimates`);
- sample vs theoretical moments (:mod:`.calculator`);
- confidence intervals of normal samples (:mod:`.intervals`).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from . import statistics
from .calculator import EstimationCalculator, default_label, theoretical_moments
from .estimates import (
    AllDistributionParameters,
    AllParameterEstimates,
    ConfidenceInterval,
    DistributionEstimate,
    NormalIntervalEstimates,
)
from .intervals import IntervalEstimationCalculator

__all__ = [
    "statistics",
    "EstimationCalculator",
    "IntervalEstimationCalculator",
    "theoretical_moments",
    "default_label",
    "DistributionEstimate",
    "AllDistributionParameters",
    "AllParameterEstimates",
    "ConfidenceInterval",
    "NormalIntervalEstimates",
]
