from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import operator
import warnings

import pytest

from pysatl_discrete.distributions import Distribution
from pysatl_discrete.errors import EmptyDistributionError
from pysatl_discrete.types import Numeric
from tests.unit.distributions.base import DistributionTestBase


class TestMonadLaws(DistributionTestBase):
    @staticmethod
    def step(v: int) -> Distribution[int]:
        return Distribution.weighted({v - 1: 1, v + 1: 3})

    @pytest.mark.parametrize("value", [0, 3, -5])
    def test_left_identity(self, value: int) -> None:
        assert Distribution.fixed(value).flat_map(self.step).is_close(self.step(value))

    def test_right_identity(self) -> None:
        distr = Distribution.weighted({1: 1, 2: 2, 3: 3})

        assert distr.flat_map(Distribution.fixed).is_close(distr)

    def test_associativity(self) -> None:
        distr = self.d6()

        def g(v: int) -> Distribution[int]:
            return Distribution.uniform([v, 2 * v])

        left = distr.flat_map(self.step).flat_map(g)
        right = distr.flat_map(lambda v: self.step(v).flat_map(g))
        assert left.is_close(right)


class TestCollapseAndNormalize(DistributionTestBase):
    def test_collapse_sums_weights_of_equal_values(self) -> None:
        distr = Distribution([(1, 0.2), (2, 0.5), (1, 0.3)])

        collapsed = distr.collapse()

        assert collapsed.values == (1, 2)
        assert collapsed[1] == pytest.approx(0.5)
        assert collapsed.total_weight == pytest.approx(distr.total_weight)

    def test_collapse_is_idempotent(self) -> None:
        distr = Distribution([(1, 0.2), (2, 0.5), (1, 0.3), (3, 0.0)])

        once = distr.collapse()
        assert once.collapse() == once

    def test_normalize_sums_to_one(self) -> None:
        distr = Distribution([(1, 3.0), (2, 7.0), (3, 11.5)])

        normalized = distr.normalize()

        self.assert_normalized(normalized)
        assert normalized[1] == pytest.approx(3.0 / 21.5)

    def test_normalize_zero_total_raises(self) -> None:
        with pytest.raises(EmptyDistributionError):
            Distribution([(1, 0.0), (2, 0.0)]).normalize()

    def test_normalize_tiny_total_warns(self) -> None:
        with pytest.warns(RuntimeWarning):
            normalized = Distribution([(1, 1e-12), (2, 1e-12)]).normalize()
        assert normalized[1] == pytest.approx(0.5)

    def test_normalize_regular_total_does_not_warn(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Distribution([(1, 2.0)]).normalize()

    def test_operations_do_not_mutate_source(self) -> None:
        distr = Distribution([(1, 2.0), (1, 2.0)])
        before = distr.weighted_values

        distr.collapse()
        distr.normalize()
        distr.map(str)

        assert distr.weighted_values == before


class TestTransformations(DistributionTestBase):
    def test_map_merges_non_injective_images(self) -> None:
        parity = self.d6().map(lambda v: v % 2)

        self.assert_masses(parity, {0: 0.5, 1: 0.5})

    def test_flat_map_multiplies_weights(self) -> None:
        distr = Distribution.weighted({"a": 1, "b": 3})

        result = distr.flat_map(
            lambda v: Distribution.fixed(v) if v == "a" else Distribution.uniform(["a", "c"])
        )

        self.assert_masses(result, {"a": 0.25 + 0.375, "c": 0.375})

    def test_filter_renormalizes(self) -> None:
        even = self.d6().filter(lambda v: v % 2 == 0)

        self.assert_masses(even, {2: 1 / 3, 4: 1 / 3, 6: 1 / 3})

    def test_filter_rejecting_everything_raises(self) -> None:
        with pytest.raises(EmptyDistributionError):
            self.d6().filter(lambda v: False)

    def test_filter_keeping_only_null_weights_raises(self) -> None:
        distr = Distribution.weighted({1: 0, 2: 1})

        with pytest.raises(EmptyDistributionError):
            distr.filter(lambda v: v == 1)

    def test_zip_builds_cross_product(self) -> None:
        joint = self.coin().zip(Distribution.weighted({0: 1, 1: 3}))

        self.assert_masses(
            joint,
            {("H", 0): 0.125, ("H", 1): 0.375, ("T", 0): 0.125, ("T", 1): 0.375},
        )

    def test_zip_requires_a_distribution(self) -> None:
        with pytest.raises(TypeError):
            self.coin().zip([1, 2])  # type: ignore[arg-type]

    def test_zip_with_combines_pairs(self) -> None:
        product = self.d6().zip_with(Distribution.uniform([0, 1]), operator.mul)

        assert product[0] == pytest.approx(0.5)
        assert product[6] == pytest.approx(1 / 12)


class TestArithmetic(DistributionTestBase):
    def test_sum_of_two_dice(self) -> None:
        two_d6 = self.d6() + self.d6()

        assert two_d6.values == tuple(range(2, 13))
        assert two_d6[2] == pytest.approx(1 / 36)
        assert two_d6[7] == pytest.approx(6 / 36)
        assert two_d6[12] == pytest.approx(1 / 36)
        self.assert_normalized(two_d6)

    def test_difference_of_two_dice(self) -> None:
        diff = self.d6() - self.d6()

        assert diff.ev() == pytest.approx(0.0)
        assert diff[0] == pytest.approx(1 / 6)
        assert diff[-5] == pytest.approx(1 / 36)

    @pytest.mark.parametrize(
        "expr, expected_values",
        [
            (lambda d: d + 1, (2, 3, 4, 5, 6, 7)),
            (lambda d: d - 1, (0, 1, 2, 3, 4, 5)),
            (lambda d: 10 + d, (11, 12, 13, 14, 15, 16)),
            (lambda d: 10 - d, (9, 8, 7, 6, 5, 4)),
        ],
        ids=["add_scalar", "subtract_scalar", "radd_scalar", "rsub_scalar"],
    )
    def test_scalar_arithmetic_shifts_values(self, expr, expected_values) -> None:
        shifted = expr(self.d6())

        assert shifted.values == expected_values
        assert all(w == pytest.approx(1 / 6) for w in shifted.weights)

    def test_builtin_sum_of_distributions(self) -> None:
        three_d6 = sum([self.d6(), self.d6(), self.d6()])

        assert three_d6.is_close(self.d6() + self.d6() + self.d6())
        assert three_d6.ev() == pytest.approx(10.5)

    def test_custom_numeric_capability(self) -> None:
        concat = Numeric(plus=operator.add, minus=operator.sub, to_float=len, zero="")
        letters = Distribution.uniform(["a", "bb"])

        words = letters.plus(letters, numeric=concat)

        self.assert_masses(words, {"aa": 0.25, "abb": 0.25, "bba": 0.25, "bbbb": 0.25})
        assert words.ev(numeric=concat) == pytest.approx(3.0)

    def test_minus_with_scalar_and_numeric(self) -> None:
        shifted = self.d6().minus(0.5, numeric=Numeric(operator.add, operator.sub, float, 0.0))

        assert shifted.values == (0.5, 1.5, 2.5, 3.5, 4.5, 5.5)


class TestQueries(DistributionTestBase):
    def test_ev_of_d6(self) -> None:
        assert self.d6().ev() == pytest.approx(3.5)

    def test_ev_of_sum_matches_sum_of_ev(self) -> None:
        assert (self.d6() + self.d6()).ev() == pytest.approx(7.0)

    def test_ev_of_empty_raw_distribution_is_zero(self) -> None:
        assert Distribution(()).ev() == 0.0

    def test_pr_of_constant_predicates(self) -> None:
        d6 = self.d6()

        assert d6.pr(lambda v: True) == pytest.approx(1.0)
        assert d6.pr(lambda v: False) == 0.0

    def test_pr_of_event(self) -> None:
        assert (self.d6() + self.d6()).pr(lambda v: v >= 10) == pytest.approx(6 / 36)
