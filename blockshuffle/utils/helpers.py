"""Utility helpers for blockshuffle."""

import math
import time
from typing import Dict, Optional

# Counts at or above this are shown in scientific notation.
EXACT_COUNT_LIMIT = 10 ** 15


class Timer:
    """
    High-resolution phase timer.

    When given a ``sink`` dict, the elapsed nanoseconds are stored under
    ``label`` on exit, which is how the pipeline fills TreeStats.timings_ns.

    Usage:
        >>> timings = {}
        >>> with Timer('expand', timings):
        ...     pass
        >>> 'expand' in timings
        True
    """

    def __init__(self, label: str = '', sink: Optional[Dict[str, int]] = None):
        self.label = label
        self.sink = sink
        self.start_ns = 0
        self.end_ns = 0

    def __enter__(self):
        self.start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, *exc):
        self.end_ns = time.perf_counter_ns()
        if self.sink is not None:
            self.sink[self.label] = self.elapsed_ns

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns


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


def format_count(n: int) -> str:
    """
    Format a possibly astronomical integer without stringifying all its digits.

    Usage:
        >>> format_count(1935410)
        '1935410'
        >>> format_count(10 ** 5000)
        '1e5000'
    """
    if abs(n) < EXACT_COUNT_LIMIT:
        return str(n)
    exponent = int(math.log10(abs(n)))
    mantissa = n / 10 ** exponent
    # log10 rounding can be off by one in either direction for huge ints
    if abs(mantissa) >= 10:
        exponent += 1
    elif abs(mantissa) < 1:
        exponent -= 1
    mantissa = n / 10 ** exponent
    return f"{mantissa:.3g}e{exponent}"


def format_bytes(nbytes: int) -> str:
    """Format a byte count with binary units, up to GiB."""
    if abs(nbytes) >= 1024 ** 4:
        return f"{format_count(nbytes // 1024 ** 3)} GiB"
    for unit in ('B', 'KiB', 'MiB'):
        if abs(nbytes) < 1024:
            return f"{nbytes:.0f} {unit}" if unit == 'B' else f"{nbytes:.2f} {unit}"
        nbytes /= 1024
    return f"{nbytes:.3f} GiB"
