"""
Error taxonomy of the engine.

All failures are reported synchronously to the immediate caller; nothing is
retried because generation and calculation are deterministic given their
inputs and a random source.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class StatsMasterError(Exception):
    """Base class for all engine errors."""


class InvalidParameterError(StatsMasterError, ValueError):
    """Malformed distribution parameters or out-of-range call arguments."""


class InsufficientSampleError(StatsMasterError, ValueError):
    """Sample is too small for the requested statistic."""


class UnsupportedDistributionError(StatsMasterError, TypeError):
    """A dispatch site received a parameters object outside the supported families."""

    def __init__(self, parameters: object, operation: str) -> None:
        super().__init__(
            f"{operation} is not supported for parameters of type {type(parameters).__name__}"
        )
        self.parameters = parameters
        self.operation = operation


__all__ = [
    "StatsMasterError",
    "InvalidParameterError",
    "InsufficientSampleError",
    "UnsupportedDistributionError",
]
