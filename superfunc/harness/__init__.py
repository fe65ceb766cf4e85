"""
Conformance harness
===================

  - tolerance:   relative-error equality for float results
  - cases:       seeded case generation and the reusable CasePool
  - conformance: the standard checks every implementation must pass
  - benchmark:   throughput driver over a shared CasePool
"""

from superfunc.harness.config import (
    DEFAULT_TOLERANCE,
    DEFAULT_BENCHMARK_ORDER,
    DEFAULT_POOL_SIZE,
    DEFAULT_SEED,
)
from superfunc.harness.tolerance import is_equal_with_tolerance, relative_error
from superfunc.harness.cases import (
    SuperFuncCase,
    CasePool,
    generate_cases,
    generate_fixed_buffer,
)
from superfunc.harness.conformance import (
    ConformanceSuite,
    ConformanceError,
    CheckResult,
    Mismatch,
    MismatchError,
    compare_result,
    assert_valid_superfunc,
    SuiteReport,
    run_standard_suite,
    assert_conforms,
)
from superfunc.harness.benchmark import (
    BenchmarkResult,
    run_benchmark,
    run_fixed_buffer_benchmark,
    compare_implementations,
)

__all__ = [
    'DEFAULT_TOLERANCE',
    'DEFAULT_BENCHMARK_ORDER',
    'DEFAULT_POOL_SIZE',
    'DEFAULT_SEED',
    'is_equal_with_tolerance',
    'relative_error',
    'SuperFuncCase',
    'CasePool',
    'generate_cases',
    'generate_fixed_buffer',
    'ConformanceSuite',
    'ConformanceError',
    'CheckResult',
    'Mismatch',
    'MismatchError',
    'compare_result',
    'assert_valid_superfunc',
    'SuiteReport',
    'run_standard_suite',
    'assert_conforms',
    'BenchmarkResult',
    'run_benchmark',
    'run_fixed_buffer_benchmark',
    'compare_implementations',
]
