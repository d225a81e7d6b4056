"""
Sampling Interfaces
===================

This module defines the protocol and the default container for samples drawn
from discrete distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import Counter
from typing import TYPE_CHECKING, Protocol, overload

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    import numpy.typing as npt


class Sample[A](Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    values : tuple
        Drawn values in draw order.
    shape : tuple[int, ...]
        Shape of the sample, ``(n,)``.
    """

    def __len__(self) -> int: ...
    @property
    def values(self) -> tuple[A, ...]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ValueSample[A]:
    """
    Tuple-backed sample container.

    Values are kept in draw order; they are arbitrary hashable objects, not
    necessarily numbers.

    Parameters
    ----------
    values : Iterable
        Drawn values, in draw order.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[A]) -> None:
        self._values: tuple[A, ...] = tuple(values)

    def __len__(self) -> int:
        """Return the number of drawn values."""
        return len(self._values)

    def __iter__(self) -> Iterator[A]:
        """Iterate over the values in draw order."""
        return iter(self._values)

    @overload
    def __getitem__(self, index: int) -> A: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[A, ...]: ...

    def __getitem__(self, index: int | slice) -> A | tuple[A, ...]:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValueSample):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"ValueSample({list(self._values)!r})"

    @property
    def values(self) -> tuple[A, ...]:
        """Return the drawn values."""
        return self._values

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample, ``(n,)``."""
        return (len(self._values),)

    @property
    def array(self) -> npt.NDArray[np.object_]:
        """
        Return the values as a one-dimensional object array.

        Values are stored element by element so that tuple values are not
        unpacked into extra dimensions.
        """
        arr = np.empty(len(self._values), dtype=object)
        for i, v in enumerate(self._values):
            arr[i] = v
        return arr

    def counts(self) -> dict[A, int]:
        """
        Count occurrences of each distinct value.

        Returns
        -------
        dict
            Mapping from value to its number of occurrences, in order of
            first appearance.
        """
        return dict(Counter(self._values))
