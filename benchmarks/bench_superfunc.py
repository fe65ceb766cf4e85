"""
Super Function Benchmark
========================

Compares every known implementation on one shared CasePool, after first
confirming each passes the conformance suite.

Usage:
    python -m benchmarks.bench_superfunc [iterations] [pool_size]
"""

import logging
import sys
from pathlib import Path
from typing import List

sys.path.insert(0, str(Path(__file__).parent.parent))

from superfunc.harness import (
    CasePool,
    BenchmarkResult,
    DEFAULT_POOL_SIZE,
    DEFAULT_SEED,
    compare_implementations,
    run_standard_suite,
)
from superfunc.utils.helpers import format_ns, format_speedup
from superfunc.variants import VARIANTS

ITERATIONS = 2048


def run_comparison(
    iterations: int = ITERATIONS,
    pool_size: int = DEFAULT_POOL_SIZE,
    seed: int = DEFAULT_SEED,
    include_reference: bool = False,
) -> List[BenchmarkResult]:
    """Check conformance, then benchmark all variants on one pool."""
    impls = {
        name: impl for name, impl in VARIANTS.items()
        if include_reference or name != 'reference'
    }

    print("=" * 72)
    print("  SUPER FUNCTION BENCHMARK")
    print("=" * 72)

    print(f"\n  {'Implementation':<16} {'Conformance':>12}")
    print(f"  {'─' * 16} {'─' * 12}")
    for name, impl in impls.items():
        report = run_standard_suite(impl, seed=seed)
        print(f"  {name:<16} {'PASS' if report.passed else 'FAIL':>12}")

    pool = CasePool(size=pool_size, seed=seed)
    results = compare_implementations(impls, iterations, pool)

    print(f"\n  Pool: {len(pool)} cases, seed={seed}, {iterations} calls each")
    print(f"\n  {'Implementation':<16} {'Total':>12} {'Per call':>12} {'vs first':>16}")
    print(f"  {'─' * 16} {'─' * 12} {'─' * 12} {'─' * 16}")
    baseline = results[0] if results else None
    for r in results:
        print(
            f"  {r.name:<16} {format_ns(r.elapsed_ns):>12} "
            f"{format_ns(r.ns_per_call):>12} "
            f"{format_speedup(r.speedup_over(baseline)):>16}"
        )
    print()
    return results


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    args = [int(a) for a in sys.argv[1:3]]
    run_comparison(*args)
