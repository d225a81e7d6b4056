"""
Exact Discrete Distributions
============================

This module defines :class:`Distribution`, an immutable sequence of
``(value, weight)`` pairs together with its algebra:

- constructors — :meth:`Distribution.uniform`, :meth:`Distribution.fixed`,
  :meth:`Distribution.weighted`, :meth:`Distribution.die`;
- transformations — ``map``, ``flat_map``, ``filter``, ``zip``,
  ``zip_with``, ``plus``/``minus`` (``+``/``-``), ``collapse``,
  ``normalize``;
- queries — ``ev``, ``pr``, cumulative tables and sampling;
- combinatorial composition — ``repeat``, ``repeat_unordered``,
  ``reroll_where``, ``markov``.

Notes
-----
- Values must be hashable: ``collapse`` groups them with a dictionary.
  Sequences are represented as tuples.
- Every operation returns a new instance; nothing is mutated in place.
- Sampling is delegated to the distribution's
  :class:`~pysatl_discrete.distributions.strategies.SamplingStrategy`,
  cumulative tables to :mod:`~pysatl_discrete.distributions.statistics` and
  repetition to :mod:`~pysatl_discrete.distributions.combinatorics`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, overload

import numpy as np

from pysatl_discrete.distributions import combinatorics, statistics
from pysatl_discrete.distributions.strategies import DefaultSamplingStrategy
from pysatl_discrete.errors import EmptyDistributionError, InvalidWeightError
from pysatl_discrete.types import NATURAL, REAL, TOLERANCE

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from pysatl_discrete.distributions.sampling import ValueSample
    from pysatl_discrete.distributions.strategies import SamplingStrategy
    from pysatl_discrete.types import Numeric, Ordering, Predicate, WeightedValue


def _total(weights: Iterable[float]) -> float:
    return float(np.sum(np.fromiter(weights, dtype=np.float64)))


@dataclass(frozen=True, slots=True)
class Distribution[A]:
    """
    Discrete distribution given by explicit ``(value, weight)`` pairs.

    Parameters
    ----------
    weighted_values : Iterable[tuple[A, float]]
        Pairs stored as given, in order. The raw constructor neither
        normalizes nor collapses; use :meth:`weighted` or :meth:`uniform`
        to build a probability distribution from arbitrary input.
    _sampling_strategy : SamplingStrategy or None
        Strategy used by :meth:`sample`; ``None`` selects
        :class:`DefaultSamplingStrategy`. Derived distributions inherit it.

    Examples
    --------
    >>> d6 = Distribution.die(6)
    >>> (d6 + d6).pr(lambda v: v == 7)  # doctest: +ELLIPSIS
    0.1666...
    """

    weighted_values: tuple[WeightedValue[A], ...]
    _sampling_strategy: SamplingStrategy | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """
        Store the pairs as an immutable tuple with ``float`` weights.

        Raises
        ------
        InvalidWeightError
            If any weight is negative, infinite or NaN.
        """
        pairs = tuple((v, float(w)) for v, w in self.weighted_values)
        for v, w in pairs:
            if not (w >= 0.0 and math.isfinite(w)):
                raise InvalidWeightError(
                    f"Weight of {v!r} must be finite and non-negative, got {w!r}."
                )
        object.__setattr__(self, "weighted_values", pairs)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def uniform(cls, values: Iterable[A]) -> Distribution[A]:
        """
        Equal weight for every given value; duplicates merge.

        Raises
        ------
        EmptyDistributionError
            If ``values`` is empty.
        """
        xs = list(values)
        if not xs:
            raise EmptyDistributionError("Cannot build a uniform distribution over no values.")
        w = 1.0 / len(xs)
        return cls(tuple((v, w) for v in xs)).collapse()

    @classmethod
    def fixed(cls, value: A) -> Distribution[A]:
        """Distribution putting all mass on ``value``."""
        return cls(((value, 1.0),))

    @classmethod
    def weighted(cls, pairs: Iterable[tuple[A, float]] | Mapping[A, float]) -> Distribution[A]:
        """
        Build a distribution from arbitrary non-negative weights.

        Parameters
        ----------
        pairs : Iterable[tuple[A, float]] or Mapping[A, float]
            ``(value, weight)`` pairs or a value -> weight mapping. Weights
            need not sum to one.

        Returns
        -------
        Distribution
            Normalized distribution.

        Raises
        ------
        InvalidWeightError
            If any weight is negative, infinite or NaN.
        EmptyDistributionError
            If there are no pairs or the total weight is zero.
        """
        items = list(pairs.items() if isinstance(pairs, Mapping) else pairs)
        if not items:
            raise EmptyDistributionError("Cannot build a distribution from no weighted values.")
        return cls(tuple(items)).normalize()

    @classmethod
    def die(cls, sides: int) -> Distribution[int]:
        """Fair die with faces ``1..sides``."""
        if sides < 1:
            raise ValueError(f"A die needs at least one side, got {sides}.")
        return cls.uniform(range(1, sides + 1))

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.weighted_values)

    def __iter__(self) -> Iterator[WeightedValue[A]]:
        return iter(self.weighted_values)

    def __contains__(self, value: object) -> bool:
        return any(v == value and w > 0.0 for v, w in self.weighted_values)

    def __getitem__(self, value: A) -> float:
        """Total weight of ``value`` (``0.0`` when absent)."""
        return _total(w for v, w in self.weighted_values if v == value)

    @property
    def values(self) -> tuple[A, ...]:
        """Values in storage order."""
        return tuple(v for v, _ in self.weighted_values)

    @property
    def weights(self) -> tuple[float, ...]:
        """Weights in storage order."""
        return tuple(w for _, w in self.weighted_values)

    @property
    def support(self) -> tuple[A, ...]:
        """Distinct values carrying positive weight, in storage order."""
        return self.without_null_weights().collapse().values

    @property
    def total_weight(self) -> float:
        """Sum of all weights."""
        return _total(self.weights)

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Strategy used by :meth:`sample`."""
        if self._sampling_strategy is None:
            return DefaultSamplingStrategy()
        return self._sampling_strategy

    def with_sampling_strategy(self, strategy: SamplingStrategy) -> Distribution[A]:
        """Return a copy drawing its samples with ``strategy``."""
        return replace(self, _sampling_strategy=strategy)

    def is_close(self, other: Distribution[A], tol: float = TOLERANCE) -> bool:
        """
        Compare collapsed weighted-value sets within ``tol``.

        Values missing on one side count as weight zero; storage order is
        ignored.
        """
        mine = dict(self.collapse().weighted_values)
        theirs = dict(other.collapse().weighted_values)
        return all(
            abs(mine.get(v, 0.0) - theirs.get(v, 0.0)) <= tol for v in mine.keys() | theirs.keys()
        )

    # ------------------------------------------------------------------
    # Core algebra
    # ------------------------------------------------------------------

    def _derive[B](self, weighted_values: Iterable[WeightedValue[B]]) -> Distribution[B]:
        return Distribution(tuple(weighted_values), self._sampling_strategy)

    def collapse(self) -> Distribution[A]:
        """
        Merge entries with equal values, summing their weights.

        Groups keep the position of their first occurrence.
        """
        grouped: dict[A, float] = {}
        for v, w in self.weighted_values:
            grouped[v] = grouped.get(v, 0.0) + w
        return self._derive(grouped.items())

    def normalize(self) -> Distribution[A]:
        """
        Rescale the weights to sum to one.

        Raises
        ------
        EmptyDistributionError
            If the total weight is zero.
        """
        total = self.total_weight
        if total <= 0.0:
            raise EmptyDistributionError("Cannot normalize a distribution with zero total weight.")
        if total < TOLERANCE:
            warnings.warn(
                f"Normalizing a total weight of {total!r}; the result may be inaccurate.",
                RuntimeWarning,
                stacklevel=2,
            )
        return self._derive((v, w / total) for v, w in self.weighted_values)

    def without_null_weights(self) -> Distribution[A]:
        """Drop entries whose weight is zero."""
        return self._derive((v, w) for v, w in self.weighted_values if w > 0.0)

    def map[B](self, f: Callable[[A], B]) -> Distribution[B]:
        """Apply ``f`` to every value; values ``f`` sends together merge."""
        return self._derive((f(v), w) for v, w in self.weighted_values).collapse()

    def flat_map[B](self, f: Callable[[A], Distribution[B]]) -> Distribution[B]:
        """
        Monadic bind.

        Every ``(v1, w1)`` is replaced by the entries ``(v2, w1 * w2)`` of
        ``f(v1)``; the result is collapsed.
        """
        return self._derive(
            (v2, w1 * w2) for v1, w1 in self.weighted_values for v2, w2 in f(v1).weighted_values
        ).collapse()

    def filter(self, pred: Predicate[A]) -> Distribution[A]:
        """
        Keep values satisfying ``pred`` and renormalize.

        Raises
        ------
        EmptyDistributionError
            If no value satisfies ``pred`` or the kept values weigh nothing.
        """
        kept = self._derive((v, w) for v, w in self.weighted_values if pred(v))
        if not kept.weighted_values:
            raise EmptyDistributionError("No value of the distribution satisfies the predicate.")
        return kept.normalize()

    def zip[B](self, other: Distribution[B]) -> Distribution[tuple[A, B]]:
        """Joint distribution of independent draws, as ``(a, b)`` pairs."""
        if not isinstance(other, Distribution):
            raise TypeError(f"Expected a Distribution, got {type(other).__name__}.")
        return self._derive(
            ((v1, v2), w1 * w2)
            for v1, w1 in self.weighted_values
            for v2, w2 in other.weighted_values
        ).collapse()

    def zip_with[B, C](self, other: Distribution[B], f: Callable[[A, B], C]) -> Distribution[C]:
        """``zip`` followed by combining each pair with ``f``."""
        return self.zip(other).map(lambda ab: f(ab[0], ab[1]))

    def _combine(
        self, other: Distribution[A] | A, op: Callable[[A, A], A]
    ) -> Distribution[A]:
        if isinstance(other, Distribution):
            return self._derive(
                (op(v1, v2), w1 * w2)
                for v1, w1 in self.weighted_values
                for v2, w2 in other.weighted_values
            ).collapse()
        return self.map(lambda v: op(v, other))

    def plus(self, other: Distribution[A] | A, numeric: Numeric[A] = REAL) -> Distribution[A]:
        """
        Add another distribution (independently) or a constant.

        Parameters
        ----------
        other : Distribution or value
            Distribution combined over the cross product, or a scalar added
            to every value.
        numeric : Numeric, default REAL
            Arithmetic on the values.
        """
        return self._combine(other, numeric.plus)

    def minus(self, other: Distribution[A] | A, numeric: Numeric[A] = REAL) -> Distribution[A]:
        """Subtract another distribution (independently) or a constant."""
        return self._combine(other, numeric.minus)

    def __add__(self, other: Distribution[A] | A) -> Distribution[A]:
        return self.plus(other)

    def __radd__(self, other: A) -> Distribution[A]:
        return self.map(lambda v: REAL.plus(other, v))

    def __sub__(self, other: Distribution[A] | A) -> Distribution[A]:
        return self.minus(other)

    def __rsub__(self, other: A) -> Distribution[A]:
        return self.map(lambda v: REAL.minus(other, v))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def ev(self, numeric: Numeric[A] = REAL) -> float:
        """Expected value, ``sum(weight * value)``."""
        if not self.weighted_values:
            return 0.0
        values = np.fromiter(
            (numeric.to_float(v) for v in self.values), dtype=np.float64, count=len(self)
        )
        weights = np.fromiter(self.weights, dtype=np.float64, count=len(self))
        return float(np.dot(weights, values))

    def pr(self, pred: Predicate[A]) -> float:
        """Probability mass of the values satisfying ``pred``."""
        return _total(w for v, w in self.weighted_values if pred(v))

    def cumulative_weighted_values(
        self, ordering: Ordering[A] | None = None
    ) -> tuple[WeightedValue[A], ...]:
        """See :func:`~pysatl_discrete.distributions.statistics.cumulative_weighted_values`."""
        return statistics.cumulative_weighted_values(self, ordering)

    def inverse_cumulative_weighted_values(
        self, ordering: Ordering[A] | None = None
    ) -> tuple[WeightedValue[A], ...]:
        """Inverse cumulative table; see :mod:`~pysatl_discrete.distributions.statistics`."""
        return statistics.inverse_cumulative_weighted_values(self, ordering)

    def hist_data(self, ordering: Ordering[A] | None = None) -> tuple[WeightedValue[A], ...]:
        """``(value, probability)`` pairs for an external histogram renderer."""
        return statistics.hist_data(self, ordering)

    @overload
    def sample(self, n: None = None, **options: Any) -> A: ...
    @overload
    def sample(self, n: int, **options: Any) -> ValueSample[A]: ...

    def sample(self, n: int | None = None, **options: Any) -> A | ValueSample[A]:
        """
        Draw random values.

        Parameters
        ----------
        n : int or None, default None
            ``None`` draws a single value; an integer draws that many values
            and returns them in draw order.
        **options
            Passed to the sampling strategy (e.g. ``rng``, a NumPy
            ``Generator``).

        Returns
        -------
        value or ValueSample
        """
        if n is None:
            return self.sampling_strategy.sample(1, distr=self, **options)[0]
        return self.sampling_strategy.sample(n, distr=self, **options)

    def resample(self, n: int, **options: Any) -> Distribution[A]:
        """
        Empirical distribution of ``n`` draws.

        Raises
        ------
        EmptyDistributionError
            If ``n`` is not positive.
        """
        if n <= 0:
            raise EmptyDistributionError(f"Cannot resample from {n} draws.")
        counts = self.sample(n, **options).counts()
        return self._derive(counts.items()).normalize()

    # ------------------------------------------------------------------
    # Combinatorial composition
    # ------------------------------------------------------------------

    def repeat(self, n: int) -> Distribution[tuple[A, ...]]:
        """See :func:`~pysatl_discrete.distributions.combinatorics.repeat`."""
        return combinatorics.repeat(self, n)

    def repeat_unordered(
        self, n: int, ordering: Ordering[A] = NATURAL
    ) -> Distribution[tuple[A, ...]]:
        """See :func:`~pysatl_discrete.distributions.combinatorics.repeat_unordered`."""
        return combinatorics.repeat_unordered(self, n, ordering)

    def reroll_where(self, pred: Predicate[A]) -> Distribution[A]:
        """See :func:`~pysatl_discrete.distributions.combinatorics.reroll_where`."""
        return combinatorics.reroll_where(self, pred)

    def markov(self, f: Callable[[A], Distribution[A]], n: int) -> Distribution[A]:
        """See :func:`~pysatl_discrete.distributions.combinatorics.markov`."""
        return combinatorics.markov(self, f, n)
