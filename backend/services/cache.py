"""Single-slot in-memory TTL cache. No Redis needed for one resource.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
the rating may be fetched twice (once per worker). Concurrent misses in
the same worker may also each hit upstream; the last successful fetch wins.

Unlike a plain TTL cache, an expired value is kept around so the caller
can still serve it when a refresh fails.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class CacheSlot:
    data: Any | None = None
    expires_at: float = 0.0


class RatingCache:
    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._slot = CacheSlot()

    @property
    def slot(self) -> CacheSlot:
        return self._slot

    def get_fresh(self) -> Any | None:
        """Return the cached value only while it is within its TTL."""
        slot = self._slot
        if slot.data is not None and self._clock() < slot.expires_at:
            return slot.data
        return None

    def get_stale(self) -> Any | None:
        """Return the last stored value regardless of age."""
        return self._slot.data

    def set(self, value: Any) -> None:
        # Whole-slot replacement, never mutated in place
        self._slot = CacheSlot(data=value, expires_at=self._clock() + self.ttl_seconds)
