"""
Engine Configuration
====================

Numerical constants shared by the generators and calculators.

- :class:`EngineSettings` — immutable bundle of the constants.
- :func:`get_settings` — the active settings.
- :func:`configure_settings` / :func:`reset_settings` — replace or restore them.
- :func:`override_settings` — replace them for the duration of a ``with`` block.

Notes
-----
- Generators and calculators read the active settings at call time unless
  explicit values were passed to their constructors.
- The interval counts are fixed; they are not derived from the sample size.
- The active settings are process-wide. Changing them is meant for tests and
  numerical diagnostics, not for per-request tuning: prefer
  :func:`override_settings`, which restores the previous settings on exit,
  or the explicit constructor arguments of the generators.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING

from stats_master.errors import InvalidParameterError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """
    Numerical constants of the engine.

    Parameters
    ----------
    uniform_intervals : int, default 10
        Number of equal-width intervals of the uniform variation series.
    normal_intervals : int, default 13
        Number of equal-width intervals of the normal variation series.
    normal_range : tuple[float, float], default (-6.0, 6.0)
        Pre-scaling domain binned for normal samples.
    irwin_hall_terms : int, default 12
        Uniform draws summed per standard normal variate.
    simpson_steps : int, default 100
        Even step count of the composite Simpson fallback.
    laplace_clamp : float, default 4.0
        Argument beyond which the Laplace function is taken as 0.5.
    sigma_window : float, default 3.0
        Half-width, in sigmas, of the normal analysis window.
    boundary_search_steps : int, default 1000
        Grid steps used to bracket classification boundaries.
    bisection_iterations : int, default 10
        Bisection refinements per bracketed boundary.
    confidence_level : float, default 0.95
        Default confidence level of interval estimates.
    window_lower_clamp : tuple[float, float], default (-10.0, 0.0)
        Clamp range of the classifier analysis window lower edge.
    window_upper_clamp : tuple[float, float], default (0.0, 20.0)
        Clamp range of the classifier analysis window upper edge.
    """

    uniform_intervals: int = 10
    normal_intervals: int = 13
    normal_range: tuple[float, float] = (-6.0, 6.0)
    irwin_hall_terms: int = 12
    simpson_steps: int = 100
    laplace_clamp: float = 4.0
    sigma_window: float = 3.0
    boundary_search_steps: int = 1000
    bisection_iterations: int = 10
    confidence_level: float = 0.95
    window_lower_clamp: tuple[float, float] = (-10.0, 0.0)
    window_upper_clamp: tuple[float, float] = (0.0, 20.0)

    def __post_init__(self) -> None:
        for name in (
            "uniform_intervals",
            "normal_intervals",
            "irwin_hall_terms",
            "simpson_steps",
            "boundary_search_steps",
            "bisection_iterations",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidParameterError(f"{name} must be a positive integer, got {value!r}")
        if self.simpson_steps % 2 != 0:
            raise InvalidParameterError("simpson_steps must be even")
        for name in ("normal_range", "window_lower_clamp", "window_upper_clamp"):
            lo, hi = getattr(self, name)
            if not lo < hi:
                raise InvalidParameterError(f"{name} must satisfy low < high, got {(lo, hi)}")
        if self.laplace_clamp <= 0 or self.sigma_window <= 0:
            raise InvalidParameterError("laplace_clamp and sigma_window must be positive")
        if not 0.0 < self.confidence_level < 1.0:
            raise InvalidParameterError("confidence_level must lie in (0, 1)")


_DEFAULT_SETTINGS = EngineSettings()
_active_settings = _DEFAULT_SETTINGS


def get_settings() -> EngineSettings:
    """
    Return the active engine settings.

    Returns
    -------
    EngineSettings
        Settings currently used by generators and calculators.
    """
    return _active_settings


def configure_settings(**overrides: Any) -> EngineSettings:
    """
    Replace selected engine constants.

    Parameters
    ----------
    **overrides
        Field values of :class:`EngineSettings` to change.

    Returns
    -------
    EngineSettings
        The new active settings.

    Raises
    ------
    InvalidParameterError
        If an unknown field is given or a value violates its constraint.
    """
    global _active_settings

    known = {f.name for f in fields(EngineSettings)}
    unknown = set(overrides) - known
    if unknown:
        raise InvalidParameterError(f"Unknown settings: {', '.join(sorted(unknown))}")

    _active_settings = replace(_active_settings, **overrides)
    return _active_settings


def reset_settings() -> None:
    """Restore the default engine settings."""
    global _active_settings
    _active_settings = _DEFAULT_SETTINGS


@contextmanager
def override_settings(**overrides: Any) -> Iterator[EngineSettings]:
    """
    Apply ``overrides`` inside a ``with`` block only.

    The settings active before the block are restored on exit, also when
    the block raises.

    Yields
    ------
    EngineSettings
        The temporary settings.
    """
    global _active_settings

    previous = _active_settings
    try:
        yield configure_settings(**overrides)
    finally:
        _active_settings = previous


__all__ = [
    "EngineSettings",
    "get_settings",
    "configure_settings",
    "reset_settings",
    "override_settings",
]
