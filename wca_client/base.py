"""Base HTTP client with retry logic and upstream error mapping."""

import asyncio
from typing import Any

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from wca_client.errors import UpstreamNotFound, UpstreamUnavailable

# Statuses meaning "back off" rather than "broken"
UNAVAILABLE_STATUSES = frozenset({403, 429})

# Keys under which upstreams wrap their result collections
WRAPPER_KEYS = ("items", "results", "data", "competitions")


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (5xx server errors only)."""
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


def unwrap_items(payload: Any) -> list[dict]:
    """Return the collection from a bare list or an object wrapping one."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in WRAPPER_KEYS:
            items = payload.get(key)
            if isinstance(items, list):
                return items
    return []


class BaseClient:
    """Base async HTTP client with rate limiting and exponential backoff."""

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 30,
        max_concurrent: int = 10,
        retries: int = 3,
        request_delay: float = 0.05,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._headers = headers or {}
        self._timeout = timeout
        self._retries = max(1, retries)
        self._request_delay = request_delay
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self.request_count = 0
        logger.info("{}: base_url={}, max_concurrent={}", self.__class__.__name__, self._base_url, max_concurrent)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            headers=self._headers,
            timeout=self._timeout,
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.debug("{}: total API requests: {}", self.__class__.__name__, self.request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, params: dict | None = None) -> Any:
        """GET request with retry logic. Raises UpstreamNotFound / UpstreamUnavailable."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._retries),
            wait=wait_exponential(multiplier=1, min=1, max=30),
            retry=retry_if_exception(_is_retryable_error),
            reraise=True,
        ):
            with attempt:
                return await self._request(path, params)

    async def _request(self, path: str, params: dict | None) -> Any:
        url = f"{self._base_url}/{path}"
        async with self._sem:
            if self._request_delay:
                await asyncio.sleep(self._request_delay)
            self.request_count += 1
            try:
                resp = await self._client.get(url, params=params)
            except httpx.TransportError as e:
                logger.warning("Upstream unreachable: {} ({})", url, e)
                raise UpstreamUnavailable(f"Upstream unreachable: {e}") from e

        if resp.status_code == 404:
            raise UpstreamNotFound(f"Not found: {url}")
        if resp.status_code in UNAVAILABLE_STATUSES:
            logger.warning("Upstream refused {}: HTTP {}", url, resp.status_code)
            raise UpstreamUnavailable(
                f"Upstream unavailable: HTTP {resp.status_code}",
                status_code=resp.status_code,
            )
        resp.raise_for_status()
        return resp.json()
