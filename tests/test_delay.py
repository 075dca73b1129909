"""
Tests for the delay / benefit model.

Run with: pytest tests/test_delay.py -v
"""

import math

import pytest

from partial_cache.policies.delay import (
    eviction_benefit,
    insertion_benefit,
    residual_delay,
)
from partial_cache.policies.prefix_store import Chunk, Prefix


def make_prefix(size, frequency=1, key=7):
    prefix = Prefix(key, frequency=frequency)
    for _ in range(size):
        prefix.chunks.append(Chunk(prefix))
    return prefix


class TestResidualDelay:
    """Tests for residual_delay."""

    def test_local_chunks_mask_origin_delay(self):
        """Each local chunk hides 1/bandwidth seconds."""
        assert residual_delay(0.5, 0, 8) == 0.5
        assert residual_delay(0.5, 2, 8) == 0.25

    def test_can_go_negative(self):
        """An over-sized prefix yields a negative residual."""
        assert residual_delay(0.25, 4, 8) == -0.25

    def test_negative_prefix_size_rejected(self):
        with pytest.raises(ValueError):
            residual_delay(0.5, -1, 8)


class TestBenefits:
    """Tests for insertion_benefit and eviction_benefit."""

    def test_insertion_uses_next_size(self):
        """Growing a 1-chunk prefix is scored at size 2."""
        prefix = make_prefix(1, frequency=3)

        # residual(0.5, 2) = 0.25 -> 1 / 0.0625 * 3
        assert insertion_benefit(prefix, 0.5, 8) == 48.0

    def test_eviction_uses_previous_size(self):
        """Dropping the tail of a 1-chunk prefix is scored at size 0."""
        prefix = make_prefix(1, frequency=3)

        # residual(0.5, 0) = 0.5 -> 1 / 0.25 * 3
        assert eviction_benefit(prefix, 0.5, 8) == 12.0

    def test_scales_with_frequency(self):
        cold = make_prefix(2, frequency=1)
        hot = make_prefix(2, frequency=4)

        assert eviction_benefit(hot, 0.5, 8) == 4 * eviction_benefit(cold, 0.5, 8)

    def test_zero_residual_is_unbounded(self):
        """Exactly hiding the delay gives an infinite score, not an error."""
        prefix = make_prefix(3)

        assert insertion_benefit(prefix, 0.5, 8) == math.inf

    def test_eviction_of_empty_prefix_is_an_error(self):
        with pytest.raises(ValueError):
            eviction_benefit(make_prefix(0), 0.5, 8)

    def test_over_served_prefix_still_scores_high(self):
        """
        Known edge case: the square drops the sign of the residual, so a
        prefix already longer than needed scores like one that is short
        by the same margin.
        """
        over_served = make_prefix(5)   # residual(0.25, 4) = -0.25
        under_served = make_prefix(1)  # residual(0.25, 0) = +0.25

        assert eviction_benefit(over_served, 0.25, 8) > 0
        assert eviction_benefit(over_served, 0.25, 8) == eviction_benefit(under_served, 0.25, 8)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
