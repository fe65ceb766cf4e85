"""
Tests for the alternative implementations.

Every variant runs the full conformance suite through the pytest mixin,
plus variant-specific properties.
"""

import math
import sys

import pytest

from superfunc.harness.tolerance import is_equal_with_tolerance
from superfunc.reference import reference_superfunc
from superfunc.testing import SuperFuncConformance
from superfunc.variants import (
    VARIANTS,
    closed_form_superfunc,
    fibonacci,
    iterative_superfunc,
    memoized_superfunc,
)


class TestReferenceConformance(SuperFuncConformance):
    impl = reference_superfunc
    seed = 1


class TestMemoizedConformance(SuperFuncConformance):
    impl = memoized_superfunc
    seed = 2


class TestIterativeConformance(SuperFuncConformance):
    impl = iterative_superfunc


class TestClosedFormConformance(SuperFuncConformance):
    impl = closed_form_superfunc
    seed = 3


SAMPLES = [(0.5, 0.25), (0.9137, 1.0421), (1.5, -0.75), (2.0, 3.0)]


class TestBitIdenticalVariants:
    @pytest.mark.parametrize("impl", [memoized_superfunc, iterative_superfunc])
    def test_matches_reference_exactly(self, impl):
        for x1, x2 in SAMPLES:
            for n in range(0, 20):
                assert impl(x1, x2, n) == reference_superfunc(x1, x2, n)

    @pytest.mark.parametrize("impl", [memoized_superfunc, iterative_superfunc])
    def test_handles_max_order(self, impl):
        assert math.isfinite(impl(1.0, 1.0, 255))

    @pytest.mark.parametrize("impl", [memoized_superfunc, iterative_superfunc, closed_form_superfunc])
    def test_rejects_bad_order(self, impl):
        with pytest.raises(ValueError):
            impl(1.0, 2.0, -1)
        with pytest.raises(TypeError):
            impl(1.0, 2.0, 1.5)


class TestClosedForm:
    def test_exact_literals(self):
        assert closed_form_superfunc(1, 2, 3) == 4.0
        assert closed_form_superfunc(2.0, 3.0, 5) == 62208.0

    def test_within_tolerance_of_reference(self):
        checked = 0
        for x1, x2 in SAMPLES:
            for n in range(0, 24):
                expected = reference_superfunc(x1, x2, n)
                # overflow and subnormal results round differently
                if not math.isfinite(expected) or abs(expected) < sys.float_info.min:
                    continue
                actual = closed_form_superfunc(x1, x2, n)
                assert is_equal_with_tolerance(expected, actual, 1e-9)
                checked += 1
        assert checked > 40

    def test_overflow_is_infinite(self):
        assert closed_form_superfunc(10.0, 10.0, 20) == math.inf
        assert closed_form_superfunc(-10.0, 1.0, 21) == -math.inf
        assert closed_form_superfunc(-10.0, 1.0, 21) == reference_superfunc(-10.0, 1.0, 21)

    @pytest.mark.parametrize("x1,x2,n", [(2.0, 0.5, 17), (0.5, 2.0, 16), (10.0, 0.0, 20)])
    def test_saturated_power_matches_reference(self, x1, x2, n):
        # one power overflows or underflows while the true product is finite
        expected = reference_superfunc(x1, x2, n)
        actual = closed_form_superfunc(x1, x2, n)
        assert math.isfinite(actual)
        assert actual == expected

    def test_no_nan_across_orders(self):
        for n in range(0, 40):
            assert not math.isnan(closed_form_superfunc(2.0, 0.5, n))


class TestFibonacci:
    def test_values(self):
        assert [fibonacci(k) for k in range(10)] == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
        assert fibonacci(31) == 1346269

    def test_negative(self):
        with pytest.raises(ValueError):
            fibonacci(-1)


def test_variant_registry():
    assert set(VARIANTS) == {'reference', 'memoized', 'iterative', 'closed_form'}
    assert VARIANTS['reference'] is reference_superfunc
