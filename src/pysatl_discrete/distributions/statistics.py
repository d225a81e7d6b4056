"""
Cumulative Tables and Histogram Data
====================================

Functions deriving ordered tables from a distribution:

- ``cumulative_weighted_values`` — running prefix sums of the weights;
- ``inverse_cumulative_weighted_values`` — ``1 - cumulative``;
- ``hist_data`` — read-only ``(value, weight)`` view for external renderers.

Notes
-----
- Without an ordering the tables follow the storage order of the
  distribution, which is the order entries were produced in.
- With an ordering the entries are sorted by value first; the sort is
  stable, so ties keep their storage order.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_discrete.distributions.distribution import Distribution
    from pysatl_discrete.types import Ordering, WeightedValue


def order_weighted_values[A](
    weighted_values: Iterable[WeightedValue[A]], ordering: Ordering[A] | None = None
) -> tuple[WeightedValue[A], ...]:
    """
    Sort ``(value, weight)`` pairs by value.

    Parameters
    ----------
    weighted_values : Iterable[tuple]
        Pairs to order.
    ordering : Ordering or None, default None
        Order on the values; ``None`` keeps the given order.

    Returns
    -------
    tuple[tuple]
        The ordered pairs.
    """
    if ordering is None:
        return tuple(weighted_values)
    key = ordering.key
    if key is None:
        return tuple(sorted(weighted_values, key=lambda wv: wv[0], reverse=ordering.reverse))
    return tuple(sorted(weighted_values, key=lambda wv: key(wv[0]), reverse=ordering.reverse))


def cumulative_weighted_values[A](
    distribution: Distribution[A], ordering: Ordering[A] | None = None
) -> tuple[WeightedValue[A], ...]:
    """
    Compute ``(value, cumulative probability)`` pairs.

    Parameters
    ----------
    distribution : Distribution
        Source distribution.
    ordering : Ordering or None, default None
        Order in which the prefix sums are accumulated.

    Returns
    -------
    tuple[tuple]
        Pairs with non-decreasing cumulative probabilities; the last one is
        the total weight (1.0 for a normalized distribution).
    """
    wvs = order_weighted_values(distribution.weighted_values, ordering)
    if not wvs:
        return ()
    weights = np.fromiter((w for _, w in wvs), dtype=np.float64, count=len(wvs))
    cumulative = np.cumsum(weights)
    return tuple((v, float(c)) for (v, _), c in zip(wvs, cumulative, strict=True))


def inverse_cumulative_weighted_values[A](
    distribution: Distribution[A], ordering: Ordering[A] | None = None
) -> tuple[WeightedValue[A], ...]:
    """
    Compute ``(value, 1 - cumulative probability)`` pairs.

    The second component is the probability of drawing a value that comes
    strictly after ``value`` in the chosen order.
    """
    return tuple((v, 1.0 - p) for v, p in cumulative_weighted_values(distribution, ordering))


def hist_data[A](
    distribution: Distribution[A], ordering: Ordering[A] | None = None
) -> tuple[WeightedValue[A], ...]:
    """Return the ``(value, probability)`` pairs a histogram renderer consumes."""
    return order_weighted_values(distribution.weighted_values, ordering)


__all__ = [
    "order_weighted_values",
    "cumulative_weighted_values",
    "inverse_cumulative_weighted_values",
    "hist_data",
]
