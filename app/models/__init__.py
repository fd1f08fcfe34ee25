"""Models package - entities for all domains."""

from app.models.common import BaseEntity
from app.models.records import (
    AggregateResult,
    DateGroup,
    DateWindow,
    NormalizedRecord,
)

__all__ = [
    # Common
    "BaseEntity",
    # Records
    "AggregateResult",
    "DateGroup",
    "DateWindow",
    "NormalizedRecord",
]
