"""
Shared Types
============

Enumerations, array aliases and the closed interval used across the
stats-master engine.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from math import inf, isnan

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Whether a family takes integer outcomes or real values."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class FamilyName(StrEnum):
    """
    Supported distribution families.

    The values double as the ``type`` tag of the serialized parameters.
    """

    BINOMIAL = "binomial"
    UNIFORM = "uniform"
    NORMAL = "normal"


NumericArray = NDArray[np.float64]
"""Float sample or table."""

IntArray = NDArray[np.int64]
"""Outcome or interval indices."""

ScalarFunc = Callable[[float], float]
"""Integrand of the numeric integration fallback."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Closed range ``[left, right]`` on the real line.

    Used for domain bounds of distributions and for the analysis window of
    the classifier. Either end may be infinite.

    Raises
    ------
    ValueError
        If an end is NaN or ``left > right``.
    """

    left: float = -inf
    right: float = inf

    def __post_init__(self) -> None:
        if isnan(self.left) or isnan(self.right):
            raise ValueError("Interval ends must not be NaN")
        if self.left > self.right:
            raise ValueError(f"Interval left end {self.left} exceeds right end {self.right}")

    @property
    def width(self) -> float:
        return self.right - self.left


__all__ = [
    "Kind",
    "FamilyName",
    "NumericArray",
    "IntArray",
    "ScalarFunc",
    "Interval1D",
]
