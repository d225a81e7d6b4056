"""
Core Type Definitions
=====================

Fundamental types and capability objects used throughout PySATL Discrete.

Operations that need arithmetic or ordering on distribution values receive
them explicitly as :class:`Numeric` and :class:`Ordering` instances rather
than resolving them from the value type.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any

type Weight = float
"""Type alias for the probability mass attached to a value."""

type WeightedValue[A] = tuple[A, Weight]
"""Type alias for a ``(value, weight)`` pair."""

type Predicate[A] = Callable[[A], bool]
"""Type alias for value predicates used by ``filter``, ``pr`` and rerolls."""

type Comparator[A] = Callable[[A, A], int]
"""Type alias for three-way comparators (negative, zero or positive)."""

TOLERANCE: float = 1e-9
"""Absolute tolerance used when comparing weights and weight sums."""


@dataclass(frozen=True, slots=True)
class Numeric[A]:
    """
    Numeric capability for values of type ``A``.

    Parameters
    ----------
    plus : Callable[[A, A], A]
        Addition of two values.
    minus : Callable[[A, A], A]
        Subtraction of two values.
    to_float : Callable[[A], float]
        Conversion to ``float`` used by expectations.
    zero : A
        Additive identity, the start value of sums.
    """

    plus: Callable[[A, A], A]
    minus: Callable[[A, A], A]
    to_float: Callable[[A], float]
    zero: A

    def total(self, values: Iterable[A]) -> A:
        """Fold ``values`` with :attr:`plus` starting from :attr:`zero`."""
        acc = self.zero
        for v in values:
            acc = self.plus(acc, v)
        return acc


@dataclass(frozen=True, slots=True)
class Ordering[A]:
    """
    Total order capability for values of type ``A``.

    Parameters
    ----------
    key : Callable[[A], Any] or None, default None
        Sort key; ``None`` means the values' natural order.
    reverse : bool, default False
        Whether the order is descending.
    """

    key: Callable[[A], Any] | None = None
    reverse: bool = False

    @classmethod
    def from_comparator(cls, cmp: Comparator[A], reverse: bool = False) -> "Ordering[A]":
        """Build an ordering from a three-way comparator."""
        return cls(key=cmp_to_key(cmp), reverse=reverse)

    def reversed(self) -> "Ordering[A]":
        """Return the same ordering in the opposite direction."""
        return Ordering(key=self.key, reverse=not self.reverse)

    def sorted(self, values: Iterable[A]) -> list[A]:
        """Return ``values`` sorted by this ordering."""
        return sorted(values, key=self.key, reverse=self.reverse)  # type: ignore[arg-type]


REAL: Numeric[Any] = Numeric(plus=operator.add, minus=operator.sub, to_float=float, zero=0)
"""Numeric capability for Python numbers (``int``, ``float``, NumPy scalars)."""

NATURAL: Ordering[Any] = Ordering()
"""Natural ascending order of the values."""


__all__ = [
    "Weight",
    "WeightedValue",
    "Predicate",
    "Comparator",
    "TOLERANCE",
    "Numeric",
    "Ordering",
    "REAL",
    "NATURAL",
]
