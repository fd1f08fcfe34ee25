"""Records services - window, classification, normalization, fetch, aggregation."""

from app.services.records.classifier import is_personal_record
from app.services.records.fetchers import (
    FetchStrategy,
    PaginatedQueryFetcher,
    RecordFetcher,
    StaticMirrorFetcher,
)
from app.services.records.normalizer import normalize
from app.services.records.service import RecordsService, build_aggregate, group_by_date
from app.services.records.window import compute_window

__all__ = [
    "compute_window",
    "is_personal_record",
    "normalize",
    "FetchStrategy",
    "RecordFetcher",
    "PaginatedQueryFetcher",
    "StaticMirrorFetcher",
    "RecordsService",
    "build_aggregate",
    "group_by_date",
]
