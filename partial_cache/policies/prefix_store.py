# partial_cache/policies/prefix_store.py
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass(eq=False)
class Chunk:
    """One fixed-size unit of an item; knows only which prefix owns it."""
    prefix: "Prefix"


@dataclass(eq=False)
class Prefix:
    """
    Resident run [0, k) of one item's chunks.
    `chunks` is used strictly as a stack: append / pop at the tail.
    """
    item_key: int
    frequency: int = 0
    chunks: List[Chunk] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.chunks)

    @property
    def tail(self) -> Optional[Chunk]:
        return self.chunks[-1] if self.chunks else None

    def __repr__(self) -> str:
        return (f"Prefix(key={self.item_key}, size={self.size}, "
                f"frequency={self.frequency})")


class PrefixStore:
    """
    item_key -> Prefix, plus a running chunk count.
    A prefix is in `data` iff it holds at least one chunk.
    """
    def __init__(self, maximum_size: int):
        self.maximum_size = maximum_size
        self.data: Dict[int, Prefix] = {}
        self.current_size = 0

    # ----------------------------------------------------------
    def get(self, item_key: int) -> Optional[Prefix]:
        return self.data.get(item_key)

    def get_or_create(self, item_key: int) -> Prefix:
        """Resident prefix, or a fresh detached one (frequency 0)."""
        prefix = self.data.get(item_key)
        if prefix is None:
            prefix = Prefix(item_key)
        return prefix

    def __contains__(self, item_key) -> bool:
        return item_key in self.data

    def __len__(self) -> int:
        return len(self.data)

    @property
    def is_full(self) -> bool:
        return self.current_size >= self.maximum_size

    # ----------------------------------------------------------
    def push_chunk(self, prefix: Prefix) -> Chunk:
        owner = self.data.setdefault(prefix.item_key, prefix)
        if owner is not prefix:
            raise ValueError(f"item {prefix.item_key} already has a resident prefix")
        chunk = Chunk(prefix)
        prefix.chunks.append(chunk)
        self.current_size += 1
        return chunk

    def pop_chunk(self, prefix: Prefix) -> Chunk:
        if not prefix.chunks or self.data.get(prefix.item_key) is not prefix:
            raise ValueError(f"{prefix!r} is not resident")
        chunk = prefix.chunks.pop()
        self.current_size -= 1
        if not prefix.chunks:
            del self.data[prefix.item_key]
        return chunk

    def tail_chunks(self) -> Iterator[Chunk]:
        """Every evictable chunk: the last one of each resident prefix."""
        for prefix in self.data.values():
            yield prefix.chunks[-1]

    def snapshot(self) -> Dict[int, tuple]:
        return {k: (p.size, p.frequency) for k, p in self.data.items()}
