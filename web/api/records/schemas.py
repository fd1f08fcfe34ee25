"""Records API response schemas."""

from pydantic import BaseModel, Field


class RecordItem(BaseModel):
    """One personal record."""

    name: str
    wca_id: str = Field(alias="wcaId")
    event_id: str = Field(alias="eventId")
    event_name: str = Field(alias="eventName")
    single: str | None = None
    average: str | None = None
    date: str

    class Config:
        populate_by_name = True


class DateRangeItem(BaseModel):
    """Inclusive lookback window."""

    start: str
    end: str


class DateGroupItem(BaseModel):
    """Records set on one date."""

    date: str
    records: list[RecordItem]


class SwissPrsResponse(BaseModel):
    """Recent personal records grouped by date, newest first."""

    date_range: DateRangeItem = Field(alias="dateRange")
    dates: list[DateGroupItem]

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    """Liveness probe."""

    status: str
    strategy: str
