"""Timing utilities for performance measurement."""

import time
from typing import Optional

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000

def _format_fraction(value: int, precision: int) -> str:
    """Render ``value / 10**precision`` without trailing fractional zeros."""
    scale = 10 ** precision
    whole, frac = divmod(value, scale)
    digits = f"{frac:0{precision}d}".rstrip('0')
    return f"{whole}.{digits}" if digits else str(whole)

def format_duration(nanoseconds: int) -> str:
    """Format a nanosecond count like Go's ``time.Duration.String``.

    Examples: ``0s``, ``583ns``, ``19.722µs``, ``1.5ms``, ``2m3.25s``,
    ``1h0m0s``.

    Args:
        nanoseconds: Elapsed time in nanoseconds (may be negative)

    Returns:
        Human-readable duration text
    """
    nanoseconds = int(nanoseconds)
    sign = '-' if nanoseconds < 0 else ''
    u = abs(nanoseconds)

    if u == 0:
        return '0s'

    if u < _NS_PER_S:
        if u < _NS_PER_US:
            text = f"{u}ns"
        elif u < _NS_PER_MS:
            text = _format_fraction(u, 3) + 'µs'
        else:
            text = _format_fraction(u, 6) + 'ms'
        return sign + text

    whole_seconds, frac = divmod(u, _NS_PER_S)
    text = _format_fraction((whole_seconds % 60) * _NS_PER_S + frac, 9) + 's'

    minutes = whole_seconds // 60
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"

    return sign + text

class Timer:
    """Context manager for timing code execution.

    Measures with the monotonic ``perf_counter_ns`` clock. The measurement
    is recorded even when the block raises; reporting it is up to the caller.
    """

    def __init__(self):
        self.start_ns = None
        self.end_ns = None
        self.elapsed_ns = None

    def __enter__(self):
        self.start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_ns = time.perf_counter_ns()
        self.elapsed_ns = self.end_ns - self.start_ns
        return False

    @property
    def elapsed(self) -> Optional[str]:
        """Get elapsed time as Go-style duration text."""
        if self.elapsed_ns is not None:
            return format_duration(self.elapsed_ns)
        return None
