"""
Sequence Reducer
================

Operations for distributions whose values are tuples, typically produced by
``Distribution.repeat`` or ``Distribution.repeat_unordered``.

They live on an explicit wrapper, :class:`SequenceOps`, instead of on
:class:`~pysatl_discrete.distributions.distribution.Distribution` itself,
because they only make sense for one kind of value.

Examples
--------
>>> from pysatl_discrete import Distribution, SequenceOps
>>> d6 = Distribution.die(6)
>>> best_three = SequenceOps(d6.repeat(4)).keep(3)
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_discrete.errors import IndexOutOfRangeError
from pysatl_discrete.types import NATURAL, REAL

if TYPE_CHECKING:
    from pysatl_discrete.distributions.distribution import Distribution
    from pysatl_discrete.types import Numeric, Ordering


@dataclass(frozen=True, slots=True)
class SequenceOps[A]:
    """
    Reductions over a distribution of tuples.

    Parameters
    ----------
    distribution : Distribution[tuple]
        Distribution whose values are tuples of ``A``.
    """

    distribution: Distribution[tuple[A, ...]]

    def _shortest(self) -> int:
        return min((len(seq) for seq in self.distribution.values), default=0)

    def _check_index(self, k: int) -> None:
        shortest = self._shortest()
        if not 0 <= k < shortest:
            raise IndexOutOfRangeError(
                f"Index {k} is out of range for sequences of length {shortest}."
            )

    def _check_count(self, k: int) -> None:
        shortest = self._shortest()
        if not 0 <= k <= shortest:
            raise IndexOutOfRangeError(
                f"Cannot keep {k} values from sequences of length {shortest}."
            )

    def sum(self, numeric: Numeric[A] = REAL) -> Distribution[A]:
        """Distribution of the sum of each tuple."""
        return self.distribution.map(numeric.total)

    def sorted(self, ordering: Ordering[A] = NATURAL) -> SequenceOps[A]:
        """Sort every tuple by ``ordering``."""
        return SequenceOps(self.distribution.map(lambda seq: tuple(ordering.sorted(seq))))

    def reverse(self) -> SequenceOps[A]:
        """Reverse every tuple."""
        return SequenceOps(self.distribution.map(lambda seq: tuple(reversed(seq))))

    def nth(self, k: int, ordering: Ordering[A] = NATURAL) -> Distribution[A]:
        """
        Distribution of the ``k``-th smallest element (0-based).

        Parameters
        ----------
        k : int
            Position in the sorted tuple.
        ordering : Ordering, default NATURAL
            Order used to sort each tuple.

        Raises
        ------
        IndexOutOfRangeError
            If ``k`` is outside ``[0, length)`` for any tuple.
        """
        self._check_index(k)
        return self.sorted(ordering).distribution.map(lambda seq: seq[k])

    def keep(
        self, k: int, numeric: Numeric[A] = REAL, ordering: Ordering[A] = NATURAL
    ) -> Distribution[A]:
        """
        Distribution of the sum of the ``k`` highest elements of each tuple.

        Raises
        ------
        IndexOutOfRangeError
            If ``k`` is negative or exceeds the length of any tuple.
        """
        self._check_count(k)
        highest_first = self.sorted(ordering.reversed()).distribution
        return highest_first.map(lambda seq: numeric.total(seq[:k]))

    def keep_lowest(
        self, k: int, numeric: Numeric[A] = REAL, ordering: Ordering[A] = NATURAL
    ) -> Distribution[A]:
        """
        Distribution of the sum of the ``k`` lowest elements of each tuple.

        Raises
        ------
        IndexOutOfRangeError
            If ``k`` is negative or exceeds the length of any tuple.
        """
        self._check_count(k)
        return self.sorted(ordering).distribution.map(lambda seq: numeric.total(seq[:k]))


__all__ = ["SequenceOps"]
