from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_discrete.dice import (
    FUDGE,
    STANDARD_DICE,
    DiceRegister,
    configure_dice_register,
    reset_dice_register,
)
from pysatl_discrete.distributions import Distribution


class TestDiceRegister:
    def setup_method(self) -> None:
        self.registry = configure_dice_register()

    def test_standard_dice_are_registered(self) -> None:
        expected = [f"d{sides}" for sides in STANDARD_DICE] + [FUDGE]

        assert list(self.registry.names()) == expected

    @pytest.mark.parametrize("sides", STANDARD_DICE)
    def test_standard_die_is_uniform(self, sides: int) -> None:
        die = self.registry.get(f"d{sides}")

        assert die.values == tuple(range(1, sides + 1))
        assert die.ev() == pytest.approx((sides + 1) / 2)

    def test_fudge_die(self) -> None:
        fudge = DiceRegister.get(FUDGE)

        assert fudge.values == (-1, 0, 1)
        assert fudge.ev() == pytest.approx(0.0)

    def test_configuration_is_cached(self) -> None:
        assert configure_dice_register() is self.registry
        assert DiceRegister() is self.registry

    def test_unknown_die_raises(self) -> None:
        with pytest.raises(ValueError):
            DiceRegister.get("d7")

    def test_register_custom_die(self) -> None:
        DiceRegister.register("d3", lambda: Distribution.die(3))

        assert DiceRegister.get("d3").ev() == pytest.approx(2.0)

    def test_duplicate_registration_raises(self) -> None:
        with pytest.raises(ValueError):
            DiceRegister.register("d6", lambda: Distribution.die(6))

    def test_reset_clears_registry(self) -> None:
        reset_dice_register()

        assert DiceRegister.names() == ()
        assert "d20" in configure_dice_register().names()
