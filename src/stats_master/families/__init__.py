"""
Distribution families supported by the engine.

The supported families form a closed set; consumers dispatch over
:data:`DistributionParameters` with exhaustive ``match`` statements.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .binomial import BinomialParameters
from .normal import NormalParameters
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .uniform import UniformParameters

DistributionParameters = BinomialParameters | UniformParameters | NormalParameters
"""Closed union of the supported parameter families."""

__all__ = [
    "BinomialParameters",
    "UniformParameters",
    "NormalParameters",
    "DistributionParameters",
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
