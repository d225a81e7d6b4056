"""
Dice Register Configuration
===========================

Global register of named dice and its default configuration:

- :class:`DiceRegister` — singleton mapping a name to a distribution factory.
- :func:`configure_dice_register` — seeds the standard polyhedral dice
  (``d2``, ``d4``, ``d6``, ``d8``, ``d10``, ``d12``, ``d20``, ``d100``) and the
  Fudge die ``dF``.
- :func:`reset_dice_register` — drops the cached configuration.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache, partial
from typing import TYPE_CHECKING

from pysatl_discrete.distributions.distribution import Distribution

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    type DiceFactory = Callable[[], Distribution[Any]]

STANDARD_DICE = (2, 4, 6, 8, 10, 12, 20, 100)
"""Side counts of the dice registered by :func:`configure_dice_register`."""

FUDGE = "dF"
"""Name of the Fudge die (faces -1, 0, +1)."""


class DiceRegister:
    """
    Singleton registry of named dice.

    Maintains a global mapping from dice names to factories returning their
    distributions.
    """

    _instance: ClassVar[DiceRegister | None] = None
    _registered_dice: dict[str, DiceFactory]

    def __new__(cls) -> DiceRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_dice = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> Distribution[Any]:
        """
        Build the distribution of the die registered as ``name``.

        Raises
        ------
        ValueError
            If no die with the given name exists.
        """
        self = cls()
        if name not in self._registered_dice:
            raise ValueError(f"No die {name} found in register")
        return self._registered_dice[name]()

    @classmethod
    def register(cls, name: str, factory: DiceFactory) -> None:
        """
        Register a new die.

        Parameters
        ----------
        name : str
            Name to register the die under.
        factory : Callable[[], Distribution]
            Zero-argument callable building the die's distribution.

        Raises
        ------
        ValueError
            If a die with the same name is already registered.
        """
        self = cls()
        if name in self._registered_dice:
            raise ValueError(f"Die {name} already found in register")
        self._registered_dice[name] = factory

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Names of the registered dice, in registration order."""
        return tuple(cls()._registered_dice)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


def _fudge_die() -> Distribution[int]:
    return Distribution.uniform((-1, 0, 1))


@lru_cache(maxsize=1)
def configure_dice_register() -> DiceRegister:
    """
    Configure and register the standard dice in the global registry.

    Returns
    -------
    DiceRegister
        The global registry of dice.
    """
    for sides in STANDARD_DICE:
        DiceRegister.register(f"d{sides}", partial(Distribution.die, sides))
    DiceRegister.register(FUDGE, _fudge_die)
    return DiceRegister()


def reset_dice_register() -> None:
    """
    Reset the cached dice registry.
    """
    configure_dice_register.cache_clear()
    DiceRegister._reset()


__all__ = [
    "DiceRegister",
    "configure_dice_register",
    "reset_dice_register",
    "STANDARD_DICE",
    "FUDGE",
]
