"""Test doubles - stub upstream, fake clock, fake fetcher."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import httpx

from app.models.records import DateWindow, NormalizedRecord
from app.services.records import RecordFetcher

BASE_URL = "https://upstream.test"


class StubUpstream:
    """httpx transport serving canned JSON by path. Unknown paths are 404."""

    def __init__(self, routes: dict[str, Any] | None = None):
        self.routes: dict[str, Any] = routes or {}
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if callable(route):
            return route(request)
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


class FakeClock:
    """Manually advanced clock (seconds)."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher(RecordFetcher):
    """Returns canned records (or raises) and counts calls."""

    def __init__(self, records: list[NormalizedRecord] | None = None, error: Exception | None = None):
        self.records = records or []
        self.error = error
        self.windows: list[DateWindow] = []

    @property
    def calls(self) -> int:
        return len(self.windows)

    async def fetch(self, window: DateWindow) -> list[NormalizedRecord]:
        self.windows.append(window)
        if self.error:
            raise self.error
        return list(self.records)


def fixed_now(*args: int) -> Callable[[], datetime]:
    moment = datetime(*args, tzinfo=timezone.utc)
    return lambda: moment


def page_of(size: int, **fields: Any) -> list[dict]:
    """size PR results, all sharing fields."""
    return [{"name": f"Competitor {i}", "wca_id": f"2020TEST{i:02d}", "isPersonalRecord": True, **fields} for i in range(size)]


