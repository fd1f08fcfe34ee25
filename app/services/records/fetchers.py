"""Upstream fetch strategies - paginated query API and static mirror."""

import asyncio
from abc import ABC, abstractmethod
from enum import StrEnum

from loguru import logger

from app.models.records import DateWindow, NormalizedRecord
from app.repositories.common import TTLCache
from app.services.records.classifier import is_personal_record
from app.services.records.normalizer import country_of, normalize
from wca_client import (
    CompetitionSchema,
    MirrorClient,
    ResultsClient,
    UpstreamNotFound,
    parse_competitions,
)


class FetchStrategy(StrEnum):
    """Configured upstream strategy."""

    QUERY = "query"
    MIRROR = "mirror"


class RecordFetcher(ABC):
    """Fetches classified, normalized records for a window."""

    @abstractmethod
    async def fetch(self, window: DateWindow) -> list[NormalizedRecord]:
        """Raises UpstreamUnavailable on rate limits/refusals/network failure."""


class PaginatedQueryFetcher(RecordFetcher):
    """Crawls the filtered results endpoint page by page.

    Stops at the first page shorter than page_size; the upstream has no
    reliable "has more" flag. A not-found page also ends the crawl.
    """

    def __init__(
        self,
        client: ResultsClient,
        page_cache: TTLCache,
        country_iso2: str,
        page_size: int = 100,
    ):
        self._client = client
        self._cache = page_cache
        self._country = country_iso2
        self._page_size = page_size

    async def fetch(self, window: DateWindow) -> list[NormalizedRecord]:
        records: list[NormalizedRecord] = []
        page = 1
        async with self._client:
            while True:
                items = await self._page(window, page)
                records.extend(normalize(raw) for raw in items if is_personal_record(raw))
                if len(items) < self._page_size:
                    break
                page += 1

        logger.info("Query crawl {}: {} pages, {} records", window.key, page, len(records))
        return records

    async def _page(self, window: DateWindow, page: int) -> tuple[dict, ...]:
        key = f"{window.key}:{page}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            items = await self._client.results_page(
                country_iso2=self._country,
                date_from=window.start,
                date_to=window.end,
                page=page,
                per_page=self._page_size,
            )
        except UpstreamNotFound:
            logger.debug("Results page {} not found - end of data", page)
            return ()

        items = tuple(items)
        self._cache.set(key, items)
        return items


class StaticMirrorFetcher(RecordFetcher):
    """Crawls the competitions index, then each in-window competition's results.

    Results carry no date of their own, so every record takes its
    competition's start date. A missing results file skips the competition;
    any other failure aborts the whole crawl.
    """

    def __init__(
        self,
        client: MirrorClient,
        page_cache: TTLCache,
        country_iso2: str,
        country_name: str | None = None,
        page_size: int = 1000,
        batch_size: int = 10,
    ):
        self._client = client
        self._cache = page_cache
        self._countries = {c.upper() for c in (country_iso2, country_name) if c}
        self._page_size = page_size
        self._batch_size = max(1, batch_size)

    async def fetch(self, window: DateWindow) -> list[NormalizedRecord]:
        records: list[NormalizedRecord] = []
        async with self._client:
            competitions = await self._competitions(window)
            logger.info("Mirror crawl {}: {} competitions in window", window.key, len(competitions))

            for i in range(0, len(competitions), self._batch_size):
                batch = competitions[i : i + self._batch_size]
                results = await asyncio.gather(
                    *[self._competition_records(window, c) for c in batch],
                    return_exceptions=True,
                )
                for outcome in results:
                    if isinstance(outcome, BaseException):
                        raise outcome
                    records.extend(outcome)

        logger.info("Mirror crawl {}: {} records", window.key, len(records))
        return records

    async def _competitions(self, window: DateWindow) -> list[CompetitionSchema]:
        selected: list[CompetitionSchema] = []
        page = 1
        while True:
            items = await self._index_page(window, page)
            selected.extend(
                c for c in parse_competitions(items) if c.start_date and window.contains(c.start_date)
            )
            if len(items) < self._page_size:
                break
            page += 1
        return selected

    async def _index_page(self, window: DateWindow, page: int) -> tuple[dict, ...]:
        key = f"{window.key}:competitions:{page}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            items = tuple(await self._client.competitions_page(page))
        except UpstreamNotFound:
            logger.debug("Competitions page {} not found - end of index", page)
            return ()

        self._cache.set(key, items)
        return items

    async def _competition_records(self, window: DateWindow, competition: CompetitionSchema) -> list[NormalizedRecord]:
        key = f"{window.key}:results:{competition.id}"
        items = self._cache.get(key)
        if items is None:
            try:
                items = tuple(await self._client.competition_results(competition.id))
            except UpstreamNotFound:
                logger.info("No results file for {} - skipped", competition.id)
                return []
            self._cache.set(key, items)

        return [
            normalize(raw, competition.start_date)
            for raw in items
            if country_of(raw) in self._countries and is_personal_record(raw)
        ]
