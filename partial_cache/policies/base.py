# partial_cache/policies/base.py
from dataclasses import dataclass


@dataclass(frozen=True)
class AccessEvent:
    key: int


class BasePolicy:
    name = "Base"

    def __init__(self, capacity_items: int):
        self.cap = capacity_items
    def record(self, event: AccessEvent) -> None: ...
    def finished(self) -> None: ...
    def stats(self): ...
    def resize(self, new_cap: int):
        self.cap = new_cap
