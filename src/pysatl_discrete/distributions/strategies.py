"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its default
implementation:

- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`DefaultSamplingStrategy` — inverse transform sampling over the
  cumulative table with i.i.d. uniform variates.

Notes
-----
- Strategies are stateless. The random source is either supplied by the
  caller through the ``rng`` option or created per call, so a distribution
  never owns or sequences it.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_discrete.errors import EmptyDistributionError

from .sampling import ValueSample
from .statistics import cumulative_weighted_values

if TYPE_CHECKING:
    from .distribution import Distribution

logger = logging.getLogger(__name__)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`ValueSample`)."""

    def sample(self, n: int, distr: "Distribution[Any]", **options: Any) -> ValueSample[Any]: ...


class DefaultSamplingStrategy(SamplingStrategy):
    """
    Default sampler using inverse transform sampling.

    For every uniform ``U ~ U[0, 1)`` the strategy returns the first value,
    in storage order, whose cumulative probability is ``>= U``. When rounding
    leaves ``U`` above the final cumulative probability the last value is
    returned. Entries with zero weight never take part in the table, so a
    drawn value always has positive probability.

    Options
    -------
    rng : numpy.random.Generator, optional
        Source of uniform variates. A fresh ``default_rng()`` is used when
        absent.

    Returns
    -------
    ValueSample
        ``n`` values in draw order.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    EmptyDistributionError
        If the distribution has no value with positive weight.
    """

    def sample(self, n: int, distr: "Distribution[Any]", **options: Any) -> ValueSample[Any]:
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}.")

        positive = distr.without_null_weights()
        table = cumulative_weighted_values(positive)
        if not table:
            raise EmptyDistributionError("Cannot sample a distribution without probability mass.")

        rng = options.get("rng")
        if rng is None:
            rng = np.random.default_rng()

        logger.debug("Drawing %d values from a table of %d entries", n, len(table))

        cumulative = np.fromiter((p for _, p in table), dtype=np.float64, count=len(table))
        U = rng.random(n)
        idx = np.searchsorted(cumulative, U, side="left")
        idx = np.minimum(idx, len(table) - 1)
        return ValueSample(table[i][0] for i in idx)
