"""
Case Generator
==============

Deterministic benchmark workloads.

Every implementation compared in one run must see the identical sequence
of inputs, otherwise throughput numbers are not comparable. Cases are
drawn once from a seeded numpy Generator and then reused.

Order distribution
------------------
  - 80%: n uniform in [20, 30]  (deep, expensive recursion)
  - 20%: n uniform in [2, 19]   (shallow cases)
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .config import (
    DEFAULT_POOL_SIZE,
    DEFAULT_SEED,
    DEEP_ORDER_PROBABILITY,
    DEEP_ORDER_RANGE,
    SHALLOW_ORDER_RANGE,
    FIXED_BUFFER_PAIRS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuperFuncCase:
    """One benchmark input triple."""
    x1: float
    x2: float
    n: int

    def __iter__(self):
        yield self.x1
        yield self.x2
        yield self.n


def generate_cases(count: int, seed: Optional[int] = DEFAULT_SEED) -> Tuple[SuperFuncCase, ...]:
    """Generate ``count`` cases from a generator seeded with ``seed``."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    rng = np.random.default_rng(seed)
    x1 = rng.random(count)
    x2 = rng.random(count)
    deep = rng.random(count) < DEEP_ORDER_PROBABILITY
    deep_orders = rng.integers(DEEP_ORDER_RANGE[0], DEEP_ORDER_RANGE[1] + 1, size=count)
    shallow_orders = rng.integers(SHALLOW_ORDER_RANGE[0], SHALLOW_ORDER_RANGE[1] + 1, size=count)
    orders = np.where(deep, deep_orders, shallow_orders)

    return tuple(
        SuperFuncCase(a, b, n)
        for a, b, n in zip(x1.tolist(), x2.tolist(), orders.tolist())
    )


def generate_fixed_buffer(
    pairs: int = FIXED_BUFFER_PAIRS,
    seed: Optional[int] = None,
) -> List[Tuple[float, float]]:
    """
    Legacy workload: ``pairs`` random (x1, x2) pairs in [0, 1).

    Used only by the fixed-order benchmark variant.
    """
    if pairs <= 0:
        raise ValueError(f"pairs must be positive, got {pairs}")
    rng = np.random.default_rng(seed)
    values = rng.random((pairs, 2))
    return [(a, b) for a, b in values.tolist()]


class CasePool:
    """
    Fixed-size, read-only pool of benchmark cases.

    Build one pool per benchmark run and pass it to every implementation
    being compared. Indexing wraps around, so ``pool[i]`` is always valid
    for non-negative ``i``.

    Usage:
        >>> pool = CasePool(size=2048, seed=7)
        >>> run_benchmark(my_impl, 10_000, pool)
    """

    def __init__(self, size: int = DEFAULT_POOL_SIZE, seed: Optional[int] = DEFAULT_SEED):
        if size <= 0:
            raise ValueError(f"pool size must be positive, got {size}")
        self._seed = seed
        self._cases = generate_cases(size, seed)
        logger.debug(f"Generated case pool: size={size}, seed={seed}")

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    @property
    def cases(self) -> Tuple[SuperFuncCase, ...]:
        return self._cases

    def __len__(self) -> int:
        return len(self._cases)

    def __getitem__(self, index: int) -> SuperFuncCase:
        return self._cases[index % len(self._cases)]

    def __iter__(self) -> Iterator[SuperFuncCase]:
        return iter(self._cases)

    def order_histogram(self) -> dict:
        """Count of cases per order, ascending by order."""
        counts: dict = {}
        for case in self._cases:
            counts[case.n] = counts.get(case.n, 0) + 1
        return dict(sorted(counts.items()))

    def __repr__(self) -> str:
        return f"CasePool(size={len(self)}, seed={self._seed})"
