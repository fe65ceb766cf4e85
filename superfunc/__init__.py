"""
superfunc: a binary-recurrence super function and its conformance harness
==========================================================================

    f(x1, x2, 0) = x1
    f(x1, x2, 1) = x1 * x2
    f(x1, x2, n) = f(x1, x2, n - 2) * f(x1, x2, n - 1)

Core Components:
    - reference: the canonical recursive definition (the oracle)
    - harness:   tolerance comparator, case generation, conformance suite,
                 benchmark driver
    - variants:  memoized, iterative and closed-form implementations
    - testing:   pytest mixin that runs the conformance suite

Usage:
    >>> from superfunc import assert_conforms, CasePool, run_benchmark
    >>> assert_conforms(my_superfunc)
    >>> pool = CasePool()
    >>> run_benchmark(my_superfunc, 10_000, pool)
"""

__version__ = "1.0.0"

from superfunc.reference import (
    SuperFunc,
    MAX_ORDER,
    check_order,
    is_reference,
    mark_reference,
    reference_superfunc,
)
from superfunc.variants import (
    VARIANTS,
    closed_form_superfunc,
    iterative_superfunc,
    memoized_superfunc,
)
from superfunc.harness import (
    DEFAULT_TOLERANCE,
    DEFAULT_BENCHMARK_ORDER,
    DEFAULT_POOL_SIZE,
    DEFAULT_SEED,
    is_equal_with_tolerance,
    SuperFuncCase,
    CasePool,
    generate_cases,
    ConformanceSuite,
    ConformanceError,
    SuiteReport,
    run_standard_suite,
    assert_conforms,
    assert_valid_superfunc,
    BenchmarkResult,
    run_benchmark,
    run_fixed_buffer_benchmark,
    compare_implementations,
)
