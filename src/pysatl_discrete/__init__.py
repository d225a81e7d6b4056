"""
PySATL Discrete
===============

Exact discrete probability distributions for PySATL: weighted-value
representation, monadic algebra, cumulative tables and sampling, repeated
draws and reductions over their sequences, plus a register of named dice.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .dice import *
from .dice import __all__ as _dice_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-discrete")
__all__ = [
    "__version__",
    *_dice_all,
    *_distr_all,
    *_errors_all,
    *_types_all,
]

del _dice_all
del _distr_all
del _errors_all
del _types_all
