"""Identity-keyed cache of built declaration indexes.

The editor works on one file at a time, so the default capacity is a single
slot: a request for another file replaces the entry and a later request for
the first file rebuilds. Capacity is a constructor parameter; above one slot
the least recently used entry is evicted.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass

from cobolassist.completion.index import DeclarationIndex
from cobolassist.core.logging import get_logger

log = get_logger("completion.cache")


@dataclass(frozen=True, slots=True)
class CacheEntry:
    owner_identity: str
    index: DeclarationIndex
    expanded: bool = False


class SingleSlotCache:
    """Declaration index cache owned by the completion service.

    Lookups match the owner identity by exact string equality; any other
    identity is a miss.
    """

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, identity: str) -> CacheEntry | None:
        entry = self._entries.get(identity)
        if entry is None:
            log.debug("cache_miss", identity=identity)
            return None
        self._entries.move_to_end(identity)
        log.debug("cache_hit", identity=identity, declarations=len(entry.index))
        return entry

    def put(self, identity: str, index: DeclarationIndex, *, expanded: bool = False) -> CacheEntry:
        """Store a fully built index, evicting the oldest entry when full.

        ``expanded`` marks an index built over the copy-expanded source.
        """
        entry = CacheEntry(owner_identity=identity, index=index, expanded=expanded)
        self._entries.pop(identity, None)
        while len(self._entries) >= self._capacity:
            evicted, _ = self._entries.popitem(last=False)
            log.debug("cache_evict", identity=evicted)
        self._entries[identity] = entry
        return entry

    def discard(self, identity: str) -> bool:
        """Drop the entry owned by ``identity``; True when one was removed."""
        return self._entries.pop(identity, None) is not None

    def clear(self) -> None:
        self._entries.clear()
        log.debug("cache_cleared")
