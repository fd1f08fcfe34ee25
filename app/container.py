"""Dependency Injection container - initialized at app startup."""

import time

import httpx
from loguru import logger

import settings
from app.repositories.common import ResultSlot, TTLCache
from app.repositories.common.cache import Clock
from app.services.records import (
    FetchStrategy,
    PaginatedQueryFetcher,
    RecordFetcher,
    RecordsService,
    StaticMirrorFetcher,
)
from wca_client import MirrorClient, ResultsClient


def build_fetcher(
    strategy: str,
    page_cache: TTLCache,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RecordFetcher:
    """Fetcher for the configured strategy."""
    strategy = FetchStrategy(strategy)
    client_kwargs = {
        "headers": settings.upstream_headers(),
        "timeout": settings.API_TIMEOUT,
        "max_concurrent": settings.MAX_CONCURRENT,
        "retries": settings.API_RETRIES,
        "request_delay": settings.REQUEST_DELAY,
        "transport": transport,
    }

    if strategy is FetchStrategy.QUERY:
        return PaginatedQueryFetcher(
            client=ResultsClient(base_url or settings.QUERY_BASE_URL, **client_kwargs),
            page_cache=page_cache,
            country_iso2=settings.COUNTRY_ISO2,
            page_size=settings.PAGE_SIZE,
        )

    return StaticMirrorFetcher(
        client=MirrorClient(base_url or settings.MIRROR_BASE_URL, **client_kwargs),
        page_cache=page_cache,
        country_iso2=settings.COUNTRY_ISO2,
        country_name=settings.COUNTRY_NAME,
        page_size=settings.MIRROR_PAGE_SIZE,
        batch_size=settings.MAX_CONCURRENT,
    )


class Container:
    """Application DI container - holds the per-process instances."""

    def __init__(self):
        self._initialized = False
        self.records: RecordsService | None = None

    def init(
        self,
        strategy: str = settings.UPSTREAM_STRATEGY,
        base_url: str | None = settings.UPSTREAM_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Clock = time.time,
    ) -> "Container":
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return self

        # Caches (one per process)
        self._page_cache = TTLCache(settings.PAGE_CACHE_TTL, clock=clock, name="page cache")
        self._result_cache = ResultSlot(settings.RESULT_CACHE_TTL, clock=clock)

        # Services (with injected fetcher + cache)
        self.records = RecordsService(
            fetcher=build_fetcher(strategy, self._page_cache, base_url, transport),
            result_cache=self._result_cache,
            lookback_days=settings.LOOKBACK_DAYS,
        )

        logger.info("Container initialized: strategy={}", strategy)
        self._initialized = True
        return self
