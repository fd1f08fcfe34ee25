"""Results query API client."""

from datetime import date

from wca_client.base import BaseClient, unwrap_items


class ResultsClient(BaseClient):
    """Client for the filtered, paginated results endpoint."""

    async def results_page(
        self,
        country_iso2: str,
        date_from: date,
        date_to: date,
        page: int,
        per_page: int,
    ) -> list[dict]:
        """GET /results - one page of personal-record results, newest first."""
        payload = await self._get(
            "results",
            params={
                "country_iso2": country_iso2,
                "page": page,
                "per_page": per_page,
                "date_from": date_from.isoformat(),
                "date_to": date_to.isoformat(),
                "personal_record": "true",
                "sort": "-date",
            },
        )
        return unwrap_items(payload)
