"""
Harness defaults.

Process-wide values shared by the comparator, the case generator and the
benchmark driver. They are never mutated at runtime; override them per
call through keyword arguments, or per suite through ConformanceSuite
class constants.
"""

# Maximum relative deviation from a computed reference (0.1%)
DEFAULT_TOLERANCE = 0.001

# Order used by the legacy fixed-buffer benchmark
DEFAULT_BENCHMARK_ORDER = 30

DEFAULT_POOL_SIZE = 2048
DEFAULT_SEED = 1

# Case pool order distribution
DEEP_ORDER_PROBABILITY = 0.8
DEEP_ORDER_RANGE = (20, 30)       # inclusive
SHALLOW_ORDER_RANGE = (2, 19)     # inclusive

# Conformance sampling
RANDOM_SAMPLE_SIZE = 10
DIFFERENTIAL_ORDER_LIMIT = 30     # exclusive

FIXED_BUFFER_PAIRS = 512
