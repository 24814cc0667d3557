"""
Tabulated Laplace function.

The Laplace function ``Φ₀(z) = Φ(z) - 0.5`` is stored as a static sorted grid
from 0.00 to 4.00 in steps of 0.05 with four-decimal values. Between grid
nodes it is interpolated linearly; beyond the clamp it equals 0.5.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Final

import numpy as np

from stats_master.config import get_settings

LAPLACE_STEP: Final = 0.05

LAPLACE_VALUES: Final = np.array(
    [
        0.0000, 0.0199, 0.0398, 0.0596, 0.0793, 0.0987, 0.1179, 0.1368, 0.1554, 0.1736,
        0.1915, 0.2088, 0.2257, 0.2422, 0.2580, 0.2734, 0.2881, 0.3023, 0.3159, 0.3289,
        0.3413, 0.3531, 0.3643, 0.3749, 0.3849, 0.3944, 0.4032, 0.4115, 0.4192, 0.4265,
        0.4332, 0.4394, 0.4452, 0.4505, 0.4554, 0.4599, 0.4641, 0.4678, 0.4713, 0.4744,
        0.4772, 0.4798, 0.4821, 0.4842, 0.4861, 0.4878, 0.4893, 0.4906, 0.4918, 0.4929,
        0.4938, 0.4946, 0.4953, 0.4960, 0.4965, 0.4970, 0.4974, 0.4978, 0.4981, 0.4984,
        0.4987, 0.4989, 0.4990, 0.4992, 0.4993, 0.4994, 0.4995, 0.4996, 0.4997, 0.4997,
        0.4998, 0.4998, 0.4998, 0.4999, 0.4999, 0.4999, 0.4999, 0.4999, 0.5000, 0.5000,
        0.5000,
    ],
    dtype=np.float64,
)
"""Values of Φ₀ at the grid nodes."""

LAPLACE_GRID: Final = np.round(np.arange(LAPLACE_VALUES.size) * LAPLACE_STEP, 2)
"""Grid nodes 0.00, 0.05, ..., 4.00."""

LAPLACE_GRID.flags.writeable = False
LAPLACE_VALUES.flags.writeable = False


def laplace_function(z: float) -> float:
    """
    Interpolated Laplace function of ``|z|``.

    Parameters
    ----------
    z : float
        Standardized argument; the sign is ignored.

    Returns
    -------
    float
        Value in ``[0, 0.5]``; exactly 0.5 for ``|z|`` at or beyond the clamp.
    """
    x = abs(z)
    if math.isnan(x):
        return math.nan
    if x >= get_settings().laplace_clamp:
        return 0.5
    # np.interp locates the bracketing nodes by binary search.
    return float(np.interp(x, LAPLACE_GRID, LAPLACE_VALUES))


def normal_cdf(x: float, m: float = 0.0, sigma: float = 1.0) -> float:
    """
    Normal CDF from the tabulated Laplace function.

    ``F(x) = 0.5 + Φ₀(z)`` for ``z >= 0`` and ``0.5 - Φ₀(-z)`` otherwise,
    with ``z = (x - m) / sigma``.
    """
    z = (x - m) / sigma
    if z >= 0:
        return 0.5 + laplace_function(z)
    return 0.5 - laplace_function(-z)


__all__ = [
    "LAPLACE_STEP",
    "LAPLACE_GRID",
    "LAPLACE_VALUES",
    "laplace_function",
    "normal_cdf",
]
