"""
Tests for the tolerance comparator.
"""

import math

import pytest

from superfunc.harness.config import DEFAULT_TOLERANCE
from superfunc.harness.tolerance import is_equal_with_tolerance, relative_error


class TestIsEqualWithTolerance:
    @pytest.mark.parametrize("r", [0.0, 1.0, -3.5, 1e-300, 4.917359272354959e+65])
    @pytest.mark.parametrize("t", [0.0, 0.001, 0.5])
    def test_reflexive(self, r, t):
        assert is_equal_with_tolerance(r, r, t)

    def test_default_tolerance(self):
        assert DEFAULT_TOLERANCE == 0.001
        assert is_equal_with_tolerance(1000.0, 1000.9)
        assert not is_equal_with_tolerance(1000.0, 1001.1)

    def test_within_bound(self):
        assert is_equal_with_tolerance(100.0, 100.05, 0.001)
        assert is_equal_with_tolerance(-100.0, -99.95, 0.001)

    def test_outside_bound(self):
        assert not is_equal_with_tolerance(100.0, 100.2, 0.001)
        assert not is_equal_with_tolerance(-100.0, 100.0, 0.5)

    def test_zero_tolerance_is_exact(self):
        assert is_equal_with_tolerance(0.1 + 0.2, 0.1 + 0.2, 0.0)
        assert not is_equal_with_tolerance(0.3, 0.1 + 0.2, 0.0)

    def test_zero_reference_allows_no_deviation(self):
        assert is_equal_with_tolerance(0.0, 0.0, 0.5)
        assert not is_equal_with_tolerance(0.0, 1e-300, 0.5)

    def test_infinities_are_mismatches(self):
        assert not is_equal_with_tolerance(math.inf, math.inf, 0.001)
        assert not is_equal_with_tolerance(math.inf, 1.0, 0.001)
        assert not is_equal_with_tolerance(1.0, math.inf, 0.001)
        assert not is_equal_with_tolerance(-math.inf, -math.inf, 0.001)

    def test_nan_is_mismatch(self):
        assert not is_equal_with_tolerance(math.nan, math.nan, 0.001)
        assert not is_equal_with_tolerance(1.0, math.nan, 0.001)

    def test_negative_tolerance(self):
        with pytest.raises(ValueError):
            is_equal_with_tolerance(1.0, 1.0, -0.1)


class TestRelativeError:
    def test_relative_error(self):
        assert relative_error(200.0, 201.0) == pytest.approx(0.005)
        assert relative_error(-4.0, -2.0) == pytest.approx(0.5)

    def test_zero_reference(self):
        assert relative_error(0.0, 0.0) == 0.0
        assert relative_error(0.0, 1e-9) == math.inf
