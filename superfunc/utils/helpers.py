"""Timing and formatting helpers for the benchmark driver."""

import gc
import time


class Timer:
    """
    High-resolution timer for the measured region of a benchmark.

    Garbage collection is paused while the timer runs (and restored to its
    previous state afterwards) so collector pauses do not land in the
    measurement.
    """

    def __init__(self, disable_gc: bool = True):
        self.disable_gc = disable_gc
        self.start_ns = 0
        self.end_ns = 0
        self._gc_was_enabled = False

    def __enter__(self):
        self._gc_was_enabled = gc.isenabled()
        if self.disable_gc:
            gc.disable()
        self.start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, *exc):
        self.end_ns = time.perf_counter_ns()
        if self._gc_was_enabled:
            gc.enable()

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000.0


def format_ns(ns: float) -> str:
    """Format nanoseconds into a human-readable string."""
    if ns < 1_000:
        return f"{ns:.0f} ns"
    elif ns < 1_000_000:
        return f"{ns / 1_000:.1f} µs"
    elif ns < 1_000_000_000:
        return f"{ns / 1_000_000:.2f} ms"
    else:
        return f"{ns / 1_000_000_000:.3f} s"


def format_speedup(ratio: float) -> str:
    """Format a speedup ratio (baseline time / candidate time)."""
    if ratio == float('inf'):
        return "∞x"
    if ratio >= 1:
        return f"{ratio:.2f}x faster"
    if ratio <= 0:
        return "n/a"
    return f"{1 / ratio:.2f}x slower"
