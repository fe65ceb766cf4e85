"""
Tolerance Comparator
====================

Relative-error equality for floating-point results.

Optimized variants may multiply in a different order than the recursive
reference, and the rounding error grows with the order. Comparisons against
a *computed* reference therefore use a relative bound:

    |reference - actual| <= |reference| * tolerance

A zero reference allows zero deviation. Infinite and NaN operands never
compare equal, so overflow shows up as a mismatch.
"""

import math

from .config import DEFAULT_TOLERANCE


def is_equal_with_tolerance(
    reference: float,
    actual: float,
    tolerance: float = DEFAULT_TOLERANCE,
) -> bool:
    """
    Check ``actual`` against ``reference`` with a relative tolerance.

    Example: 1% tolerance is ``is_equal_with_tolerance(ref, x, 0.01)``.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    # inf reference would otherwise accept any finite actual (inf <= inf)
    if not (math.isfinite(reference) and math.isfinite(actual)):
        return False
    return abs(reference - actual) <= abs(reference) * tolerance


def relative_error(reference: float, actual: float) -> float:
    """Relative deviation of ``actual`` from ``reference``, for reporting."""
    delta = abs(reference - actual)
    if reference == 0:
        return 0.0 if delta == 0 else math.inf
    return delta / abs(reference)
