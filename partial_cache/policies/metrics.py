# partial_cache/policies/metrics.py
from dataclasses import asdict, dataclass


@dataclass
class PolicyStats:
    """Running counters reported by a policy. Hits/misses are per chunk."""
    operations: int = 0
    requests:   int = 0
    hits:       int = 0
    misses:     int = 0
    admissions: int = 0
    evictions:  int = 0
    rejections: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0

    def to_dict(self) -> dict:
        return asdict(self)


def replay_with_metrics(df, policy_ctor, cap_items, key_col="key") -> dict:
    from ..simulator import CacheSim

    stats = CacheSim(cap_items, policy_ctor).replay(df, key_col=key_col)
    out = stats.to_dict()
    out["hit_rate"] = stats.hit_rate
    out["rejection_rate"] = stats.rejections / stats.requests if stats.requests else 0.0
    return out
