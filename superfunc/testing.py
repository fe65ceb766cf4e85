"""
pytest integration for the conformance suite.

Subclass SuperFuncConformance in a test module and point ``impl`` at the
implementation under test; every standard check becomes its own test:

    from superfunc.testing import SuperFuncConformance

    class TestMySuperFunc(SuperFuncConformance):
        impl = my_superfunc

The base class name does not start with "Test", so pytest only collects
the subclasses.
"""

import pytest

from .harness.config import DEFAULT_TOLERANCE
from .harness.conformance import ConformanceSuite


class SuperFuncConformance:
    impl = None
    tolerance = DEFAULT_TOLERANCE
    seed = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # a plain function assigned as a class attribute would bind as a method
        impl = cls.__dict__.get('impl')
        if impl is not None and not isinstance(impl, staticmethod):
            cls.impl = staticmethod(impl)

    def _run(self, name: str):
        if self.impl is None:
            pytest.fail(f"{type(self).__name__} does not set 'impl'")
        suite = ConformanceSuite(tolerance=self.tolerance, seed=self.seed)
        result = suite.run_check(name, self.impl)
        if result.skipped:
            pytest.skip(result.describe())
        if result.error is not None:
            raise result.error
        assert result.passed, result.describe()

    def test_order_zero_returns_x1(self):
        self._run('base_order_zero')

    def test_order_one_returns_product(self):
        self._run('base_order_one')

    def test_literal_small_order(self):
        self._run('literal_small')

    def test_literal_medium_order(self):
        self._run('literal_medium')

    def test_literal_large_order_within_tolerance(self):
        self._run('literal_large')

    def test_matches_reference(self):
        self._run('differential')
