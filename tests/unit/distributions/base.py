"""
Common helpers for distribution tests.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Mapping
from typing import Any

import numpy as np
import pytest

from pysatl_discrete.distributions import Distribution


class DistributionTestBase:
    """Base class for distribution tests."""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-9

    @staticmethod
    def d6() -> Distribution[int]:
        return Distribution.die(6)

    @staticmethod
    def coin() -> Distribution[str]:
        return Distribution.uniform(["H", "T"])

    @staticmethod
    def rng(seed: int = 12345) -> np.random.Generator:
        return np.random.default_rng(seed)

    @staticmethod
    def assert_masses(
        distr: Distribution[Any], expected: Mapping[Any, float], precision: float | None = None
    ) -> None:
        """Assert that ``distr`` carries exactly the ``expected`` masses."""
        if precision is None:
            precision = DistributionTestBase.CALCULATION_PRECISION

        actual = dict(distr.collapse().weighted_values)
        assert set(actual) == set(expected)
        for value, mass in expected.items():
            assert actual[value] == pytest.approx(mass, abs=precision), value

    @staticmethod
    def assert_normalized(distr: Distribution[Any]) -> None:
        precision = DistributionTestBase.CALCULATION_PRECISION
        assert sum(distr.weights) == pytest.approx(1.0, abs=precision)
