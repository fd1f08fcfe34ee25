"""Records domain models."""

from app.models.records.entities import (
    UNKNOWN_EVENT_ID,
    UNKNOWN_EVENT_NAME,
    UNKNOWN_NAME,
    UNKNOWN_WCA_ID,
    AggregateResult,
    DateGroup,
    DateWindow,
    NormalizedRecord,
)

__all__ = [
    "AggregateResult",
    "DateGroup",
    "DateWindow",
    "NormalizedRecord",
    "UNKNOWN_NAME",
    "UNKNOWN_WCA_ID",
    "UNKNOWN_EVENT_ID",
    "UNKNOWN_EVENT_NAME",
]
