"""Records API views - thin layer over services."""

from app.models.records import AggregateResult
from app.services.records import RecordsService

from .schemas import DateGroupItem, DateRangeItem, HealthResponse, RecordItem, SwissPrsResponse


def to_response(result: AggregateResult) -> SwissPrsResponse:
    """Convert an aggregate into its JSON schema."""
    dates = [
        DateGroupItem(
            date=group.date,
            records=[RecordItem(**r.to_dict()) for r in group.records],
        )
        for group in result.dates
    ]

    return SwissPrsResponse(
        date_range=DateRangeItem(
            start=result.date_range.start.isoformat(),
            end=result.date_range.end.isoformat(),
        ),
        dates=dates,
    )


async def get_swiss_prs(service: RecordsService) -> SwissPrsResponse:
    """Get recent personal records grouped by date."""
    return to_response(await service.aggregate())


def get_health(service: RecordsService) -> HealthResponse:
    """Liveness and configured strategy."""
    return HealthResponse(status="ok", strategy=service.strategy)
