"""
In-process response cache with time-based expiry.

Entries expire a fixed number of seconds after they are stored.
Expiry is checked lazily on lookup, so no background sweeper is
needed; expired entries are also purged whenever the size bound is
exceeded.  The cache is shared by concurrent handlers and guards its
map with a lock.  Two requests racing on the same missing key may
both compute the value; the last write wins.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote


@dataclass
class _Entry:
    value: Any
    expires_at: float


class TTLCache:
    def __init__(
        self,
        ttl_seconds: float = 600,
        max_entries: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl = float(ttl_seconds)
        self.max_entries = int(max_entries)
        self._clock = clock
        self._data: Dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._data[key]
                return None
            return entry.value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            now = self._clock()
            self._data[key] = _Entry(value=value, expires_at=now + self.ttl)
            if self.max_entries and len(self._data) > self.max_entries:
                self._trim(now)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def _trim(self, now: float) -> None:
        # Caller holds the lock.
        for key in [k for k, e in self._data.items() if e.expires_at <= now]:
            del self._data[key]
        excess = len(self._data) - self.max_entries
        if excess <= 0:
            return
        oldest = sorted(self._data.items(), key=lambda kv: kv[1].expires_at)[:excess]
        for key, _ in oldest:
            del self._data[key]


def make_cache_key(tag: str, *parts: Any) -> str:
    """Build a cache key from an endpoint tag and the query parameters.

    Parts are URL-quoted so a ``:`` inside a user supplied value can
    never make two different queries share a key.
    """
    return ":".join([tag] + [quote(str(part), safe="") for part in parts])
