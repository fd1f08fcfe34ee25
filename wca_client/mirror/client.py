"""Static JSON mirror client - competitions index and per-competition results."""

from wca_client.base import BaseClient, unwrap_items


class MirrorClient(BaseClient):
    """Client for the static file mirror."""

    async def competitions_page(self, page: int) -> list[dict]:
        """GET /competitions-page-{page}.json - one page of the competitions index."""
        return unwrap_items(await self._get(f"competitions-page-{page}.json"))

    async def competition_results(self, competition_id: str) -> list[dict]:
        """GET /results/{competition_id}.json - all results of one competition."""
        return unwrap_items(await self._get(f"results/{competition_id}.json"))
