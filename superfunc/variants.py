"""
Alternative Implementations
===========================

Faster evaluations of the super function, validated against the reference
by the conformance suite.

Writing f(n) = x1**a(n) * x2**b(n) gives a(n) = F(n + 1) and b(n) = F(n),
with F the Fibonacci numbers, because exponents add under multiplication
and the recurrence adds the exponents of the two previous terms.

  - memoized_superfunc:    recursion with a memo table, O(n)
  - iterative_superfunc:   bottom-up loop, O(n), O(1) memory
  - closed_form_superfunc: two powers with Fibonacci exponents

The memoized and iterative variants multiply the same operands in the same
order as the reference and are bit-identical to it. The closed form rounds
differently and only agrees within tolerance. When either power saturates
to 0, a subnormal or inf, it falls back to the iterative loop.
"""

import math
import sys
from typing import Dict

from .reference import SuperFunc, check_order, reference_superfunc


def memoized_superfunc(x1: float, x2: float, n: int) -> float:
    n = check_order(n)
    x1, x2 = float(x1), float(x2)
    memo = {0: x1, 1: x1 * x2}

    def solve(k: int) -> float:
        if k in memo:
            return memo[k]
        value = solve(k - 2) * solve(k - 1)
        memo[k] = value
        return value

    return solve(n)


def iterative_superfunc(x1: float, x2: float, n: int) -> float:
    n = check_order(n)
    x1, x2 = float(x1), float(x2)
    if n == 0:
        return x1
    prev, cur = x1, x1 * x2
    for _ in range(n - 1):
        prev, cur = cur, prev * cur
    return cur


def fibonacci(k: int) -> int:
    """Exact k-th Fibonacci number, F(0) = 0, F(1) = 1."""
    if k < 0:
        raise ValueError(f"fibonacci index must be non-negative, got {k}")
    a, b = 0, 1
    for _ in range(k):
        a, b = b, a + b
    return a


def _power(base: float, exponent: int) -> float:
    # float ** int raises OverflowError instead of returning inf
    try:
        return base ** exponent
    except OverflowError:
        negative = base < 0 and exponent % 2 == 1
        return -math.inf if negative else math.inf


def _is_normal(value: float) -> bool:
    return math.isfinite(value) and abs(value) >= sys.float_info.min


def closed_form_superfunc(x1: float, x2: float, n: int) -> float:
    n = check_order(n)
    x1, x2 = float(x1), float(x2)
    if n == 0:
        return x1
    a = _power(x1, fibonacci(n + 1))
    b = _power(x2, fibonacci(n))
    # a saturated factor (0, subnormal or inf) loses the other factor's magnitude,
    # e.g. inf * 0.0 is nan while the true product is finite
    if not (_is_normal(a) and _is_normal(b)):
        return iterative_superfunc(x1, x2, n)
    return a * b


VARIANTS: Dict[str, SuperFunc] = {
    'reference': reference_superfunc,
    'memoized': memoized_superfunc,
    'iterative': iterative_superfunc,
    'closed_form': closed_form_superfunc,
}
