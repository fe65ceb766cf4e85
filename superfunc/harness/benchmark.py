"""
Benchmark Driver
================

Throughput measurement for super function implementations.

The driver feeds pre-generated cases from a CasePool into the
implementation under test, one call per iteration, cycling through the pool
(case index = iteration % pool size). Results are discarded: correctness is
the conformance suite's job, this module only measures time.

Only the call loop is timed. Case generation and unpacking happen before
the timer starts, and garbage collection is paused inside it.

Two workloads exist:
  - run_benchmark: seeded CasePool with the mixed order distribution
  - run_fixed_buffer_benchmark: legacy 512 random pairs at one fixed
    order (kept for comparison with historical numbers)
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..reference import SuperFunc, check_order
from ..utils.helpers import Timer, format_ns, format_speedup
from .cases import CasePool, generate_fixed_buffer
from .config import DEFAULT_BENCHMARK_ORDER, FIXED_BUFFER_PAIRS

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Timing of one implementation over one workload."""
    name: str
    iterations: int
    elapsed_ns: int
    workload: str = "case-pool"

    @property
    def ns_per_call(self) -> float:
        if self.iterations == 0:
            return 0.0
        return self.elapsed_ns / self.iterations

    @property
    def calls_per_second(self) -> float:
        if self.elapsed_ns <= 0:
            return float('inf')
        return self.iterations * 1_000_000_000 / self.elapsed_ns

    def speedup_over(self, baseline: 'BenchmarkResult') -> float:
        """Per-call speedup of this result relative to ``baseline``."""
        if self.ns_per_call <= 0:
            return float('inf')
        return baseline.ns_per_call / self.ns_per_call

    def __str__(self):
        return (
            f"{self.name}: {self.iterations} calls in {format_ns(self.elapsed_ns)} "
            f"({format_ns(self.ns_per_call)}/call)"
        )


def _check_iterations(iterations: int):
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")


def _impl_label(impl: SuperFunc) -> str:
    return getattr(impl, '__name__', None) or repr(impl)


def run_benchmark(
    impl: SuperFunc,
    iterations: int,
    pool: CasePool,
    name: Optional[str] = None,
) -> BenchmarkResult:
    """
    Call ``impl`` ``iterations`` times on cases drawn cyclically from ``pool``.
    """
    _check_iterations(iterations)
    size = len(pool)
    x1s = [c.x1 for c in pool.cases]
    x2s = [c.x2 for c in pool.cases]
    orders = [c.n for c in pool.cases]

    with Timer() as t:
        for i in range(iterations):
            k = i % size
            impl(x1s[k], x2s[k], orders[k])

    result = BenchmarkResult(
        name=name or _impl_label(impl),
        iterations=iterations,
        elapsed_ns=t.elapsed_ns,
    )
    logger.debug(f"Benchmark {result}")
    return result


def run_fixed_buffer_benchmark(
    impl: SuperFunc,
    iterations: int,
    order: int = DEFAULT_BENCHMARK_ORDER,
    seed: Optional[int] = None,
    name: Optional[str] = None,
) -> BenchmarkResult:
    """
    Legacy workload: 512 random pairs reused cyclically at a fixed order.

    Superseded by run_benchmark, whose pool exercises a representative
    spread of orders.
    """
    _check_iterations(iterations)
    order = check_order(order)
    buffer = generate_fixed_buffer(FIXED_BUFFER_PAIRS, seed)
    size = len(buffer)

    with Timer() as t:
        for i in range(iterations):
            x1, x2 = buffer[i % size]
            impl(x1, x2, order)

    result = BenchmarkResult(
        name=name or _impl_label(impl),
        iterations=iterations,
        elapsed_ns=t.elapsed_ns,
        workload=f"fixed-buffer(n={order})",
    )
    logger.debug(f"Benchmark {result}")
    return result


def compare_implementations(
    impls: Dict[str, SuperFunc],
    iterations: int,
    pool: CasePool,
) -> List[BenchmarkResult]:
    """
    Benchmark several implementations on the same pool.

    Results come back in the order of ``impls``. The first entry is used as
    the baseline for the logged speedups.
    """
    _check_iterations(iterations)
    results = [
        run_benchmark(impl, iterations, pool, name=name)
        for name, impl in impls.items()
    ]
    if results:
        baseline = results[0]
        for r in results[1:]:
            logger.debug(f"{r.name} vs {baseline.name}: {format_speedup(r.speedup_over(baseline))}")
    return results
