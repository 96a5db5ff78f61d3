"""Elapsed-time helpers for timing metrics.

Instants are ``time.perf_counter()`` readings. Durations are truncated
toward zero, never rounded.
"""

import time


def elapsed_microseconds(start: float) -> int:
    """Whole microseconds elapsed since ``start``."""
    return int((time.perf_counter() - start) * 1_000_000)


def elapsed_milliseconds(start: float) -> int:
    """Whole milliseconds elapsed since ``start``."""
    return int((time.perf_counter() - start) * 1_000)
