"""Bounded in-memory cache for rewrite results."""

import hashlib
from collections import OrderedDict
from typing import Optional

KEY_PREVIEW_CHARS = 200


class RewriteCache:
    """FIFO cache of polished posts keyed by draft preview and tone."""

    def __init__(self, capacity: int = 100) -> None:
        """Initialize cache.

        Args:
            capacity: Maximum number of entries kept; the oldest entry is
                evicted first
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: "OrderedDict[str, str]" = OrderedDict()

        # Stats
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def _generate_key(self, draft: str, tone: str) -> str:
        """Generate cache key from the draft preview and tone.

        Args:
            draft: Draft post text
            tone: Tone name

        Returns:
            Cache key
        """
        hash_obj = hashlib.sha256(draft[:KEY_PREVIEW_CHARS].encode())
        hash_obj.update(tone.encode())
        return hash_obj.hexdigest()

    def get(self, draft: str, tone: str) -> Optional[str]:
        """Get a cached rewrite.

        Args:
            draft: Draft post text
            tone: Tone name

        Returns:
            Cached rewrite or None
        """
        key = self._generate_key(draft, tone)
        if key in self._entries:
            self.hits += 1
            return self._entries[key]

        self.misses += 1
        return None

    def set(self, draft: str, tone: str, rewrite: str) -> None:
        """Cache a rewrite, evicting the oldest entry when full."""
        key = self._generate_key(draft, tone)
        if key in self._entries:
            self._entries[key] = rewrite
            return

        while len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
            self.evictions += 1
        self._entries[key] = rewrite

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Drop all entries and reset stats."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with cache stats
        """
        total_requests = self.hits + self.misses
        hit_rate = (self.hits / total_requests * 100) if total_requests > 0 else 0.0

        return {
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": f"{hit_rate:.1f}%",
            "evictions": self.evictions,
            "size": len(self._entries),
            "capacity": self.capacity,
        }
