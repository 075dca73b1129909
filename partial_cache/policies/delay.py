# partial_cache/policies/delay.py
"""
Delay / benefit model.

residual delay = what the user still waits for after the local prefix
has been streamed out at `bandwidth` chunks/s while the origin works.
Benefits weight 1/residual^2 by popularity; the square drops the sign,
so an over-served prefix (negative residual) still scores high.
"""
import math


def residual_delay(source_delay: float, prefix_size: int,
                   bandwidth: float) -> float:
    if prefix_size < 0:
        raise ValueError(f"prefix_size must be non-negative, got {prefix_size}")
    return source_delay - prefix_size / bandwidth


def _benefit(source_delay, prefix_size, bandwidth, frequency) -> float:
    residual = residual_delay(source_delay, prefix_size, bandwidth)
    if residual == 0:
        return math.inf
    return 1.0 / residual ** 2 * frequency


def insertion_benefit(prefix, source_delay: float, bandwidth: float) -> float:
    """Gain from growing `prefix` by one chunk."""
    return _benefit(source_delay, prefix.size + 1, bandwidth, prefix.frequency)


def eviction_benefit(prefix, source_delay: float, bandwidth: float) -> float:
    """Gain lost by dropping the tail chunk of `prefix`."""
    return _benefit(source_delay, prefix.size - 1, bandwidth, prefix.frequency)
