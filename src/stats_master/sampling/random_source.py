"""
Random Sources
==============

This module defines the protocol for uniform(0, 1) draw suppliers and the
NumPy-backed default implementation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, cast, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from stats_master.types import NumericArray


@runtime_checkable
class RandomSource(Protocol):
    """
    Protocol for suppliers of independent uniform(0, 1) draws.

    Methods
    -------
    random(size)
        Return a 1D float array of ``size`` draws.
    """

    def random(self, size: int) -> NumericArray: ...


class NumpyRandomSource:
    """
    Random source backed by :func:`numpy.random.default_rng`.

    Parameters
    ----------
    seed : int or None, default None
        Seed of the underlying generator; ``None`` draws fresh OS entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def random(self, size: int) -> NumericArray:
        """Return ``size`` i.i.d. draws from ``[0, 1)``."""
        return cast("NumericArray", self._rng.random(size))

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed!r})"


def draw_uniforms(source: RandomSource, size: int) -> NumericArray:
    """
    Draw ``size`` uniforms from ``source`` and check the result shape.

    Raises
    ------
    ValueError
        If the source returns an array of the wrong shape or values outside ``[0, 1]``.
    """
    draws = np.asarray(source.random(size), dtype=np.float64)
    if draws.shape != (size,):
        raise ValueError(f"Random source returned shape {draws.shape}, expected ({size},)")
    if size and (draws.min() < 0.0 or draws.max() > 1.0):
        raise ValueError("Random source returned draws outside [0, 1]")
    return cast("NumericArray", draws)
