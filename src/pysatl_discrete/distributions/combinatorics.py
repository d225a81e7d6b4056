"""
Combinatorial Composition
=========================

Operations building distributions of repeated draws on top of
``Distribution.flat_map``:

- ``repeat`` — ordered tuples of ``n`` independent draws;
- ``repeat_unordered`` — sorted tuples of ``n`` draws, accumulated as
  multisets so permutations share one state;
- ``reroll_where`` — a single reroll pass for values matching a predicate;
- ``markov`` — ``n`` steps of a transition function.

Notes
-----
- All accumulations are loops; the number of repetitions does not affect
  recursion depth.
- ``repeat`` never merges permutations of the same multiset. Positional
  information is what ``SequenceOps.nth`` and ``SequenceOps.keep`` work on
  after sorting, and per-position analyses need it before sorting.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

from scipy.special import comb

from pysatl_discrete.distributions.sequences import SequenceOps
from pysatl_discrete.errors import IndexOutOfRangeError
from pysatl_discrete.types import NATURAL

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_discrete.distributions.distribution import Distribution
    from pysatl_discrete.types import Ordering, Predicate

    type Multiset[A] = frozenset[tuple[A, int]]

logger = logging.getLogger(__name__)


def count_multisets(domain_size: int, n: int) -> int:
    """
    Number of multisets of size ``n`` over a domain of ``domain_size`` values.

    Equals ``C(domain_size + n - 1, n)``, the upper bound on the number of
    states ``repeat_unordered`` keeps alive after ``n`` draws.
    """
    if domain_size < 0 or n < 0:
        raise ValueError("domain_size and n must be non-negative.")
    if n == 0:
        return 1
    return int(comb(domain_size + n - 1, n, exact=True))


def _check_repetitions(n: int) -> None:
    if n <= 0:
        raise IndexOutOfRangeError(f"Number of repetitions must be positive, got {n}.")


def repeat[A](distribution: Distribution[A], n: int) -> Distribution[tuple[A, ...]]:
    """
    Distribution of ordered tuples of ``n`` independent draws.

    Parameters
    ----------
    distribution : Distribution
        Distribution each draw is taken from.
    n : int
        Number of draws, at least 1.

    Returns
    -------
    Distribution[tuple]
        Entries are merged only when two tuples are equal position by
        position, so up to ``m ** n`` entries survive for ``m`` distinct
        values.

    Raises
    ------
    IndexOutOfRangeError
        If ``n`` is not positive.
    """
    _check_repetitions(n)

    def append(seq: tuple[A, ...]) -> Distribution[tuple[A, ...]]:
        return distribution.map(lambda v: (*seq, v))

    acc = distribution.map(lambda v: (v,))
    for i in range(1, n):
        acc = acc.flat_map(append)
        logger.debug("repeat: %d ordered states after %d draws", len(acc), i + 1)
    return acc


def _add_draw[A](state: Multiset[A], value: A) -> Multiset[A]:
    counts = dict(state)
    counts[value] = counts.get(value, 0) + 1
    return frozenset(counts.items())


def repeat_unordered[A](
    distribution: Distribution[A], n: int, ordering: Ordering[A] = NATURAL
) -> Distribution[tuple[A, ...]]:
    """
    Distribution of sorted tuples of ``n`` independent draws.

    Draws are accumulated as multisets (value -> count), so at most
    ``count_multisets(m, k)`` states exist after ``k`` draws instead of
    ``m ** k``. Each final multiset is expanded into its sorted tuple.

    Parameters
    ----------
    distribution : Distribution
        Distribution each draw is taken from.
    n : int
        Number of draws, at least 1.
    ordering : Ordering, default NATURAL
        Order used to sort the resulting tuples.

    Raises
    ------
    IndexOutOfRangeError
        If ``n`` is not positive.
    """
    _check_repetitions(n)

    def append(state: Multiset[A]) -> Distribution[Multiset[A]]:
        return distribution.map(lambda v: _add_draw(state, v))

    debug = logger.isEnabledFor(logging.DEBUG)
    domain_size = len(distribution.collapse()) if debug else 0
    acc: Distribution[Multiset[A]] = distribution.map(lambda v: frozenset({(v, 1)}))
    for i in range(1, n):
        acc = acc.flat_map(append)
        if debug:
            logger.debug(
                "repeat_unordered: %d multiset states after %d draws (bound %d)",
                len(acc),
                i + 1,
                count_multisets(domain_size, i + 1),
            )

    expanded = acc.map(
        lambda state: tuple(ordering.sorted(v for v, count in state for _ in range(count)))
    )
    return SequenceOps(expanded).sorted(ordering).distribution


def reroll_where[A](distribution: Distribution[A], pred: Predicate[A]) -> Distribution[A]:
    """
    Reroll, once, every value for which ``pred`` holds.

    A matching value is replaced by a fresh draw from ``distribution``;
    other values keep their mass. The fresh draw is not checked again.
    """
    return distribution.flat_map(lambda v: distribution if pred(v) else distribution.fixed(v))


def markov[A](
    distribution: Distribution[A], f: Callable[[A], Distribution[A]], n: int
) -> Distribution[A]:
    """
    Apply the transition ``f`` ``n`` times.

    Parameters
    ----------
    distribution : Distribution
        Initial state distribution.
    f : Callable[[A], Distribution]
        Transition from a state to the distribution of next states.
    n : int
        Number of steps; ``0`` returns ``distribution`` unchanged.

    Raises
    ------
    IndexOutOfRangeError
        If ``n`` is negative.
    """
    if n < 0:
        raise IndexOutOfRangeError(f"Number of steps must be non-negative, got {n}.")
    acc = distribution
    for i in range(n):
        acc = acc.flat_map(f)
        logger.debug("markov: %d states after %d steps", len(acc), i + 1)
    return acc


__all__ = [
    "count_multisets",
    "repeat",
    "repeat_unordered",
    "reroll_where",
    "markov",
]
