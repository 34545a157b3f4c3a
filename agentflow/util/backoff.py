"""Exponential back-off delays."""

from __future__ import annotations

from typing import Callable

_MIN_BASE = 0.001


def exponential(base: float, factor: float, maximum: float) -> Callable[[int], float]:
    """Return a function mapping an attempt number to a delay in seconds.

    A non-positive ``base`` becomes one millisecond, a ``factor`` below one
    becomes one, and a positive ``maximum`` caps the delay.
    """
    if base <= 0:
        base = _MIN_BASE
    if factor < 1:
        factor = 1.0

    def delay(attempt: int) -> float:
        attempt = max(attempt, 1)
        value = base * factor ** (attempt - 1)
        if maximum > 0 and value > maximum:
            return maximum
        return value

    return delay