# partial_cache/policies/non_binary.py
import logging
import math

from .base import AccessEvent, BasePolicy
from .delay import eviction_benefit, insertion_benefit, residual_delay
from .metrics import PolicyStats
from .prefix_store import Prefix, PrefixStore
from .sampler import LatencySampler

logger = logging.getLogger(__name__)

BANDWIDTH               = 1250   # chunks / second
AVERAGE_CHUNKS_PER_ITEM = 250    # assumed typical item length


class NonBinaryPolicy(BasePolicy):
    """
    Partial-object cache: every item is a run of fixed-size chunks and
    the cache may hold any prefix of it.

    On each access the policy samples an origin delay, works out how
    many chunks would hide that delay (the ideal size) and grows the
    item's prefix towards it. Spare capacity is used for free; once the
    cache is full a chunk is only admitted by evicting the least
    valuable tail chunk of another prefix whose eviction benefit does
    not exceed the new chunk's insertion benefit. Otherwise the rest of
    the shortfall is rejected.
    """
    name = "NonBinary"

    def __init__(self, maximum_items: int, seed=None, *,
                 bandwidth: float = BANDWIDTH,
                 average_chunks_per_item: int = AVERAGE_CHUNKS_PER_ITEM,
                 sampler=None):
        if maximum_items < 0:
            raise ValueError(f"maximum_items must be non-negative, got {maximum_items}")
        if bandwidth <= 0:
            raise ValueError(f"bandwidth must be positive, got {bandwidth}")
        if average_chunks_per_item <= 0:
            raise ValueError("average_chunks_per_item must be positive, "
                             f"got {average_chunks_per_item}")
        super().__init__(maximum_items)
        self.bandwidth = bandwidth
        self.chunks_per_item = average_chunks_per_item
        self.store   = PrefixStore(maximum_items * average_chunks_per_item)
        self.sampler = sampler if sampler is not None else LatencySampler(seed)
        self._stats  = PolicyStats()

    @property
    def maximum_size(self) -> int:
        return self.store.maximum_size

    @property
    def current_size(self) -> int:
        return self.store.current_size

    # ----------------------------------------------------------
    def record(self, event: AccessEvent) -> None:
        stats = self._stats
        stats.requests += 1
        stats.operations += 1
        prefix = self.store.get_or_create(event.key)
        prefix.frequency += 1

        size = prefix.size
        source_delay = self.sampler.sample()
        ideal = residual_delay(source_delay, size, self.bandwidth) * self.bandwidth
        ideal_size = max(0, math.floor(ideal))

        stats.hits += size
        if ideal_size > size:
            stats.misses += ideal_size - size
            self._insert_chunks(prefix, ideal_size)

    def _insert_chunks(self, prefix: Prefix, ideal_size: int) -> None:
        stats = self._stats
        store = self.store
        while prefix.size < ideal_size:
            if not store.is_full:
                store.push_chunk(prefix)
                stats.operations += 1
                stats.admissions += 1
                continue

            victim = self._find_victim(prefix)
            if victim is None:
                missing = ideal_size - prefix.size
                stats.rejections += missing
                logger.debug("rejected %d chunks of item %s", missing, prefix.item_key)
                return

            store.pop_chunk(victim)
            store.push_chunk(prefix)
            stats.operations += 2
            stats.evictions += 1
            stats.admissions += 1
            logger.debug("evicted tail of item %s for item %s",
                         victim.item_key, prefix.item_key)

    def _find_victim(self, prefix: Prefix):
        """Least valuable other tail worth giving up for `prefix`, or None."""
        source_delay = self.sampler.sample()
        gain = insertion_benefit(prefix, source_delay, self.bandwidth)

        victim, lowest = None, math.inf
        for chunk in list(self.store.tail_chunks()):
            self._stats.operations += 1
            owner = chunk.prefix
            if owner is prefix:
                continue
            loss = eviction_benefit(owner, source_delay, self.bandwidth)
            if loss <= gain and (victim is None or loss < lowest):
                victim, lowest = owner, loss
        return victim

    # ----------------------------------------------------------
    def resize(self, new_cap: int):
        if new_cap < 0:
            raise ValueError(f"maximum_items must be non-negative, got {new_cap}")
        super().resize(new_cap)
        store = self.store
        store.maximum_size = new_cap * self.chunks_per_item
        if store.current_size <= store.maximum_size:
            return

        source_delay = self.sampler.sample()
        logger.debug("shrinking to %d chunks from %d",
                     store.maximum_size, store.current_size)
        while store.current_size > store.maximum_size:
            victim = min(store.data.values(),
                         key=lambda p: eviction_benefit(p, source_delay, self.bandwidth))
            store.pop_chunk(victim)
            self._stats.operations += 1
            self._stats.evictions += 1

    def finished(self) -> None:
        logger.debug("finished: %s", self._stats)

    def stats(self) -> PolicyStats:
        return self._stats
