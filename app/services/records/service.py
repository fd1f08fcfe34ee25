"""Aggregation pipeline - fetch, group by date, cache."""

import asyncio
from collections import defaultdict
from collections.abc import Callable, Iterable
from datetime import datetime

from loguru import logger

from app.models.records import AggregateResult, DateGroup, DateWindow, NormalizedRecord
from app.repositories.common import ResultSlot
from app.services.records.fetchers import RecordFetcher
from app.services.records.window import compute_window, utcnow
from settings import LOOKBACK_DAYS


def group_by_date(records: Iterable[NormalizedRecord]) -> tuple[DateGroup, ...]:
    """Group dated records, newest date first; undated records are dropped."""
    by_date: dict[str, list[NormalizedRecord]] = defaultdict(list)
    dropped = 0
    for record in records:
        if record.date is None:
            dropped += 1
            continue
        by_date[record.date].append(record)

    if dropped:
        logger.debug("Dropped {} records without a date", dropped)

    # ISO dates sort correctly as strings
    return tuple(DateGroup(date=d, records=tuple(by_date[d])) for d in sorted(by_date, reverse=True))


def build_aggregate(window: DateWindow, records: Iterable[NormalizedRecord]) -> AggregateResult:
    return AggregateResult(date_range=window, dates=group_by_date(records))


class RecordsService:
    """Recent personal records for one country, with result-tier caching."""

    def __init__(
        self,
        fetcher: RecordFetcher,
        result_cache: ResultSlot,
        lookback_days: int = LOOKBACK_DAYS,
        now: Callable[[], datetime] = utcnow,
    ):
        self._fetcher = fetcher
        self._results = result_cache
        self._lookback_days = lookback_days
        self._now = now
        self._lock = asyncio.Lock()
        logger.debug("RecordsService initialized: {}", fetcher.__class__.__name__)

    @property
    def strategy(self) -> str:
        return self._fetcher.__class__.__name__

    def window(self) -> DateWindow:
        return compute_window(self._now(), self._lookback_days)

    async def aggregate(self) -> AggregateResult:
        """Current window's records grouped by date. Upstream errors propagate."""
        window = self.window()
        cached = self._results.get(window.key)
        if cached is not None:
            return cached

        # Concurrent misses wait for the first crawl instead of repeating it
        async with self._lock:
            cached = self._results.get(window.key)
            if cached is not None:
                return cached

            records = await self._fetcher.fetch(window)
            result = build_aggregate(window, records)
            self._results.set(window.key, result)

        logger.info(
            "Aggregated {}: {} records on {} dates",
            window.key,
            result.record_count,
            len(result.dates),
        )
        return result
