"""
Stats Master
============

Statistical distribution and estimation engine: sample generation for the
binomial, uniform and normal families, variation series, point and interval
estimates, and a two-class Bayesian density/integration calculator.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .bayes import *
from .bayes import __all__ as _bayes_all
from .config import *
from .config import __all__ as _config_all
from .errors import *
from .errors import __all__ as _errors_all
from .estimation import *
from .estimation import __all__ as _estimation_all
from .families import *
from .families import __all__ as _family_all
from .sampling import *
from .sampling import __all__ as _sampling_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("stats-master")
__all__ = [
    "__version__",
    *_bayes_all,
    *_config_all,
    *_errors_all,
    *_estimation_all,
    *_family_all,
    *_sampling_all,
    *_types_all,
]

del _bayes_all
del _config_all
del _errors_all
del _estimation_all
del _family_all
del _sampling_all
del _types_all
