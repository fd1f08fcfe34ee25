"""WCA results API client package."""

from wca_client.base import BaseClient, unwrap_items
from wca_client.errors import (
    ErrorKind,
    UpstreamError,
    UpstreamNotFound,
    UpstreamUnavailable,
    classify_error,
)
from wca_client.mirror import CompetitionSchema, MirrorClient, parse_competitions
from wca_client.query import ResultsClient

__all__ = [
    # Base
    "BaseClient",
    "unwrap_items",
    # Errors
    "ErrorKind",
    "UpstreamError",
    "UpstreamNotFound",
    "UpstreamUnavailable",
    "classify_error",
    # Clients
    "ResultsClient",
    "MirrorClient",
    "CompetitionSchema",
    "parse_competitions",
]
