"""Common repositories - in-memory caches."""

from app.repositories.common.cache import CacheEntry, ResultSlot, TTLCache

__all__ = [
    "CacheEntry",
    "ResultSlot",
    "TTLCache",
]
