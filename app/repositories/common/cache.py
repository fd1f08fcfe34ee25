"""In-memory TTL caches - page tier and result tier."""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from loguru import logger

Clock = Callable[[], float]


@dataclass
class CacheEntry:
    """Cached value with absolute expiry (clock seconds)."""

    key: str
    data: Any
    expires_at: float


class TTLCache:
    """Keyed TTL cache with lazy expiry.

    Expired entries are dropped on lookup, and all of them on every write, so
    keys from windows that are never requested again do not accumulate.
    """

    def __init__(self, ttl: float, clock: Clock = time.time, name: str = "cache"):
        self._ttl = ttl
        self._clock = clock
        self._name = name
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Return cached data, or None when missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() >= entry.expires_at:
                del self._entries[key]
                logger.debug("{} expired: {}", self._name, key)
                return None
            logger.debug("{} hit: {}", self._name, key)
            return entry.data

    def set(self, key: str, data: Any) -> None:
        """Store data until now + ttl, purging expired entries."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if now >= e.expires_at]
            for k in expired:
                del self._entries[k]
            if expired:
                logger.debug("{} purged {} expired entries", self._name, len(expired))
            self._entries[key] = CacheEntry(key, data, now + self._ttl)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.info("{} cleared", self._name)

    def __len__(self) -> int:
        return len(self._entries)


class ResultSlot:
    """Single-entry TTL cache: a new key evicts the previous value."""

    def __init__(self, ttl: float, clock: Clock = time.time, name: str = "result cache"):
        self._ttl = ttl
        self._clock = clock
        self._name = name
        self._entry: CacheEntry | None = None
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Return the slot value if it holds this key and has not expired."""
        with self._lock:
            entry = self._entry
            if entry is None:
                return None
            if self._clock() >= entry.expires_at:
                self._entry = None
                logger.debug("{} expired: {}", self._name, entry.key)
                return None
            if entry.key != key:
                return None
            logger.debug("{} hit: {}", self._name, key)
            return entry.data

    def set(self, key: str, data: Any) -> None:
        with self._lock:
            self._entry = CacheEntry(key, data, self._clock() + self._ttl)
