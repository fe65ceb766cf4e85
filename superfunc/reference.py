"""
Reference Super Function
========================

The canonical, deliberately naive definition of the super function:

    f(x1, x2, 0) = x1
    f(x1, x2, 1) = x1 * x2
    f(x1, x2, n) = f(x1, x2, n - 2) * f(x1, x2, n - 1)    (n > 1)

Evaluation is plain recursion, so the call tree grows like the Fibonacci
numbers. That is intentional: this function is the correctness oracle that
faster variants (memoized, iterative, closed-form) are validated against,
not a fast path.
"""

import numbers
from typing import Callable

# (x1, x2, order) -> value
SuperFunc = Callable[[float, float, int], float]

MAX_ORDER = 255
REFERENCE_MARKER = '__superfunc_reference__'


def check_order(n) -> int:
    """
    Validate the order argument and return it as a plain int.

    Raises TypeError for non-integers (including bool) and ValueError
    for orders outside [0, MAX_ORDER].
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"order must be an integer, got {type(n).__name__}")
    n = int(n)
    if n < 0 or n > MAX_ORDER:
        raise ValueError(f"order {n} out of range [0, {MAX_ORDER}]")
    return n


def mark_reference(func: Callable) -> Callable:
    """Tag a callable as the reference oracle."""
    setattr(func, REFERENCE_MARKER, True)
    return func


def is_reference(impl: Callable) -> bool:
    """
    True if ``impl`` carries the reference marker itself.

    Wrappers built with functools.wraps copy the marker through __dict__,
    but they also set __wrapped__, so they are not treated as the reference.
    """
    if getattr(impl, REFERENCE_MARKER, False) is not True:
        return False
    return not hasattr(impl, '__wrapped__')


@mark_reference
def reference_superfunc(x1: float, x2: float, n: int) -> float:
    """Compute f(x1, x2, n) by naive recursion."""
    return _recurse(float(x1), float(x2), check_order(n))


def _recurse(x1: float, x2: float, n: int) -> float:
    if n == 0:
        return x1
    if n == 1:
        return x1 * x2
    return _recurse(x1, x2, n - 2) * _recurse(x1, x2, n - 1)
