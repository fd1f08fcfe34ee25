"""Repositories package - in-memory storage layer."""

from app.repositories.common import CacheEntry, ResultSlot, TTLCache

__all__ = [
    # Common
    "CacheEntry",
    "ResultSlot",
    "TTLCache",
]
