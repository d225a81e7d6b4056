"""
Error Types
===========

Exceptions raised by distribution operations. All of them signal a violated
precondition to the direct caller; nothing is retried or recovered
internally.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DistributionError(Exception):
    """Base class for errors raised by PySATL Discrete."""


class EmptyDistributionError(DistributionError, ValueError):
    """
    Raised when a distribution would carry no probability mass.

    This covers construction from an empty collection, normalization with a
    zero total weight and filtering that rejects every value.
    """


class InvalidWeightError(DistributionError, ValueError):
    """Raised when a weighted constructor receives a negative weight."""


class IndexOutOfRangeError(DistributionError, IndexError):
    """Raised when an index or count does not fit the sequences it addresses."""


__all__ = [
    "DistributionError",
    "EmptyDistributionError",
    "InvalidWeightError",
    "IndexOutOfRangeError",
]
