"""
Content Caches

In-process caches implementing the ContentCache protocol. Writes only ever
replace a whole slot, so no locking is needed.
"""

import time
from typing import Any, Callable, Dict, Optional, Tuple


class InMemoryContentCache:
    """Process-lifetime cache. Entries live until clear() is called."""

    def __init__(self):
        self._slots: Dict[str, Any] = {}

    def get(self, key: str) -> Optional[Any]:
        return self._slots.get(key)

    def set(self, key: str, value: Any) -> None:
        self._slots[key] = value

    def clear(self) -> None:
        self._slots = {}

    def __contains__(self, key: str) -> bool:
        return key in self._slots

    def __len__(self) -> int:
        return len(self._slots)


class TTLContentCache:
    """
    Cache whose entries expire after a fixed number of seconds.

    Used for content API responses, where the TTL is the freshness window
    of the endpoint rather than a correctness guarantee.

    Args:
        ttl_seconds: Default lifetime of an entry.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(self, ttl_seconds: float = 300, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._slots: Dict[str, Tuple[float, Any]] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._slots.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            self._slots.pop(key, None)
            return None
        return value

    def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        self._slots[key] = (self._clock() + ttl, value)

    def clear(self) -> None:
        self._slots = {}

    def __len__(self) -> int:
        return len(self._slots)
