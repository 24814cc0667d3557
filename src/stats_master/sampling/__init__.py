"""
Sampling subpackage

Generation of sample batches for the supported families:

- random sources (:mod:`.random_source`);
- equal-width interval binning (:mod:`.binning`);
- generated values and variation series (:mod:`.results`);
- per-family generators and the :func:`generate` entry point (:mod:`.generators`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .binning import IntervalBinner
from .generators import (
    BinomialGenerator,
    DistributionGenerator,
    NormalGenerator,
    UniformGenerator,
    generate,
    generator_for,
)
from .random_source import NumpyRandomSource, RandomSource, draw_uniforms
from .results import (
    BinomialValueInfo,
    GeneratedValue,
    GenerationResult,
    Interval,
    IntervalData,
    NormalValueInfo,
    UniformValueInfo,
    ValueInfo,
)

__all__ = [
    # random sources
    "RandomSource",
    "NumpyRandomSource",
    "draw_uniforms",
    # binning
    "IntervalBinner",
    # results
    "BinomialValueInfo",
    "UniformValueInfo",
    "NormalValueInfo",
    "ValueInfo",
    "GeneratedValue",
    "Interval",
    "IntervalData",
    "GenerationResult",
    # generators
    "DistributionGenerator",
    "BinomialGenerator",
    "UniformGenerator",
    "NormalGenerator",
    "generator_for",
    "generate",
]
