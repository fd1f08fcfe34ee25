"""Records domain entities - windows, normalized records, aggregates."""

from dataclasses import dataclass
from datetime import date

from app.models.common import BaseEntity

UNKNOWN_NAME = "Unknown competitor"
UNKNOWN_WCA_ID = "Unknown WCA ID"
UNKNOWN_EVENT_ID = "Unknown event"
UNKNOWN_EVENT_NAME = "Unknown event"


@dataclass(frozen=True)
class DateWindow(BaseEntity):
    """Inclusive calendar-date lookback window."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    @property
    def key(self) -> str:
        """Cache key material."""
        return f"{self.start.isoformat()}:{self.end.isoformat()}"


@dataclass(frozen=True)
class NormalizedRecord(BaseEntity):
    """Canonical personal record, independent of upstream shape."""

    name: str = UNKNOWN_NAME
    wca_id: str = UNKNOWN_WCA_ID
    event_id: str = UNKNOWN_EVENT_ID
    event_name: str = UNKNOWN_EVENT_NAME
    single: str | None = None
    average: str | None = None
    date: str | None = None


@dataclass(frozen=True)
class DateGroup(BaseEntity):
    """All records set on one date, in fetch order."""

    date: str
    records: tuple[NormalizedRecord, ...]


@dataclass(frozen=True)
class AggregateResult(BaseEntity):
    """Records in the window grouped by date, newest date first."""

    date_range: DateWindow
    dates: tuple[DateGroup, ...]

    @property
    def record_count(self) -> int:
        return sum(len(g.records) for g in self.dates)
