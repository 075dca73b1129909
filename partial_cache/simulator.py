import logging
from typing import Callable

import pandas as pd

from .policies.base import AccessEvent

logger = logging.getLogger(__name__)


class CacheSim:
    """
    Replays an access trace through a policy object that implements:
      record(event), finished(), stats()
      resize(new_cap)  (optional, used in dynamic mode)
    Capacity is given in items; the policy decides what that means in chunks.
    """
    def __init__(self, capacity_items: int, policy_ctor: Callable):
        self.cap_items = capacity_items
        self.policy    = policy_ctor(capacity_items)

    # ----------------------------------------------------------
    def replay(self, df: pd.DataFrame, key_col: str = "key"):
        if key_col not in df.columns:
            raise ValueError(f"trace has no {key_col!r} column")
        for row in df.itertuples(index=False):
            key = getattr(row, key_col)
            self.policy.record(AccessEvent(int(key)))
        self.policy.finished()

        stats = self.policy.stats()
        logger.info("%s @ %d items: %d requests, hit rate %.4f",
                    self.policy.name, self.cap_items, len(df), stats.hit_rate)
        return stats

    def resize(self, new_cap_items):
        self.cap_items = new_cap_items
        self.policy.resize(new_cap_items)
